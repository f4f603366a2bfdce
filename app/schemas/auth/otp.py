# app/schemas/auth/otp.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OtpDeliveryStatus(str, Enum):
    SENT_VIA_PUSH = "SENT_VIA_PUSH"
    SMS_REQUIRED = "SMS_REQUIRED"


class IssueOtpRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mobile_number: Optional[str] = Field(None, alias="mobileNumber")
    fcm_token: Optional[str] = Field(None, alias="fcmToken", description="Device token for push delivery")


class IssueOtpResponse(BaseModel):
    """verificationId is only present when the code went out by push"""
    model_config = ConfigDict(populate_by_name=True)

    status: OtpDeliveryStatus
    verification_id: Optional[str] = Field(None, alias="verificationId")
