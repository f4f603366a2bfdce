# app/schemas/auth/credentials.py
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

MIN_PASSWORD_LENGTH = 6


class ProvisionCredentialRequest(BaseModel):
    """Request to create or update the login credential of a client"""
    model_config = ConfigDict(populate_by_name=True)

    client_id: Optional[str] = Field(None, alias="clientId", description="Client document id, used as the auth uid")
    mobile_number: Optional[str] = Field(None, alias="mobileNumber")
    password: Optional[str] = None
    update_data: Optional[Dict[str, Any]] = Field(
        None,
        alias="updateData",
        description="Fields merged into the client document",
    )


class ProvisionCredentialResponse(BaseModel):
    success: bool
    message: str
