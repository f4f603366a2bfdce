# app/db/models/auth/otp.py
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class OtpSession(BaseModel):
    """One-time code document stored at temp_otp/{verificationId}"""
    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(..., min_length=6, max_length=6, description="6-digit code sent to the user")
    mobile: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    expires_at: Optional[datetime] = Field(default=None, alias="expiresAt")

    def with_server_time(self, created_at: datetime, ttl: timedelta) -> "OtpSession":
        """Stamp creation and expiry from the server-assigned write time"""
        return self.model_copy(update={"created_at": created_at, "expires_at": created_at + ttl})

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
