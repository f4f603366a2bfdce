# app/schemas/clients/client.py
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class VerifyClientRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    patient_id: Optional[str] = Field(None, alias="patientId")
    mobile: Optional[str] = None


class VerifiedClient(BaseModel):
    """Safe projection of a client record; no contact details"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    # Flags are returned as stored
    has_password_set: Optional[Any] = Field(None, alias="hasPasswordSet")
    status: Optional[Any] = None
    is_archived: Optional[Any] = Field(None, alias="isArchived")
    is_soft_deleted: Optional[Any] = Field(None, alias="isSoftDeleted")


class VerifyClientResponse(BaseModel):
    found: bool
    client: Optional[VerifiedClient] = None


class ClientLookupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Any JSON value is passed through to the queries unchanged
    login_id: Optional[Any] = Field(None, alias="loginId")
