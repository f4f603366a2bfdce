# app/services/clients/client_service.py
from typing import Any, Dict, List, Optional
import logging

from google.cloud.firestore import FieldFilter

from app.core.config import settings
from app.core.errors import CallableError, ErrorKind, invalid_argument
from app.db.models.clients.client import ClientProfile
from app.schemas.callable import encode_firestore_value
from app.schemas.clients.client import (
    ClientLookupRequest,
    VerifiedClient,
    VerifyClientRequest,
    VerifyClientResponse,
)

logger = logging.getLogger(__name__)


class ClientService:
    """Server-side reads of client documents; security rules do not apply here"""

    def __init__(self, db: Any, collection: Optional[str] = None):
        self.db = db
        self.collection = collection or settings.CLIENTS_COLLECTION

    def find_first(self, **equals: Any):
        """First document matching every field == value pair, or None"""
        query = self.db.collection(self.collection)
        for field, value in equals.items():
            query = query.where(filter=FieldFilter(field, "==", value))
        docs: List[Any] = list(query.limit(1).get())
        return docs[0] if docs else None

    def verify(self, payload: VerifyClientRequest) -> VerifyClientResponse:
        if not payload.patient_id or not payload.mobile:
            raise invalid_argument("Patient ID and mobile number are required.")

        try:
            doc = self.find_first(patientId=payload.patient_id, mobile=payload.mobile)
            if doc is None:
                return VerifyClientResponse(found=False)

            client = ClientProfile.from_snapshot(doc)

            # An existing credential means the client must log in, not register
            if client.has_password_set:
                raise CallableError(ErrorKind.FAILED_PRECONDITION, "Account exists.")

            return VerifyClientResponse(
                found=True,
                client=VerifiedClient(
                    id=client.id,
                    has_password_set=encode_firestore_value(client.has_password_set),
                    status=encode_firestore_value(client.status),
                    is_archived=encode_firestore_value(client.is_archived),
                    is_soft_deleted=encode_firestore_value(client.is_soft_deleted),
                ),
            )
        except CallableError:
            raise
        except Exception as e:
            logger.error(f"Error verifying client data securely: {e}", exc_info=True)
            raise CallableError(ErrorKind.INTERNAL, "Server error")

    def lookup(self, payload: ClientLookupRequest) -> Dict[str, Any]:
        """Client by login id, then by mobile number; {} when neither matches"""
        login_id = payload.login_id
        if login_id is None or login_id == "":
            # Querying for None would match documents whose field is null
            return {}

        doc = self.find_first(loginId=login_id)
        if doc is None:
            logger.debug("No client with that login id, trying mobile number")
            doc = self.find_first(mobile=login_id)

        if doc is None:
            return {}

        return encode_firestore_value({**(doc.to_dict() or {}), "id": doc.id})
