# app/db/models/clients/client.py
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClientProfile(BaseModel):
    """
    Client document in the clients collection.

    Documents are written by the app, so stored values are taken as they are
    and not coerced. Any other profile field is kept as an extra.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    mobile: Optional[Any] = None
    login_id: Optional[Any] = Field(default=None, alias="loginId")
    patient_id: Optional[Any] = Field(default=None, alias="patientId")
    has_password_set: Optional[Any] = Field(default=None, alias="hasPasswordSet")
    status: Optional[Any] = None
    is_archived: Optional[Any] = Field(default=None, alias="isArchived")
    is_soft_deleted: Optional[Any] = Field(default=None, alias="isSoftDeleted")
    updated_at: Optional[Any] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_snapshot(cls, snapshot) -> "ClientProfile":
        data = snapshot.to_dict() or {}
        return cls.model_validate({**data, "id": snapshot.id})
