# app/services/auth/credential_service.py
from typing import Any, Optional
import logging

from firebase_admin import auth
from google.cloud.firestore import SERVER_TIMESTAMP

from app.core.config import settings
from app.core.errors import CallableError, ErrorKind, invalid_argument
from app.schemas.auth.credentials import (
    MIN_PASSWORD_LENGTH,
    ProvisionCredentialRequest,
    ProvisionCredentialResponse,
)

logger = logging.getLogger(__name__)


class CredentialService:
    """
    Creates or updates the Firebase Auth credential of a client.

    The auth uid is the client's document id, so a second call for the same
    client overwrites the password instead of failing.
    """

    def __init__(
        self,
        firebase_app: Any,
        db: Any,
        email_domain: Optional[str] = None,
        clients_collection: Optional[str] = None,
    ):
        self._app = firebase_app
        self.db = db
        self.email_domain = email_domain or settings.AUTH_EMAIL_DOMAIN
        self.clients_collection = clients_collection or settings.CLIENTS_COLLECTION

    def auth_email(self, mobile_number: str) -> str:
        return f"{mobile_number}@{self.email_domain}"

    def get_existing_user(self, client_id: str):
        """Auth record for the client, or None if there is none yet"""
        try:
            return auth.get_user(client_id, app=self._app)
        except auth.UserNotFoundError:
            return None

    def update_profile(self, client_id: str, update_data: dict) -> None:
        self.db.collection(self.clients_collection).document(client_id).update(
            {**update_data, "updatedAt": SERVER_TIMESTAMP}
        )
        logger.info(f"Client {client_id} profile updated: {sorted(update_data)}")

    def provision(self, payload: ProvisionCredentialRequest) -> ProvisionCredentialResponse:
        client_id = payload.client_id
        mobile_number = payload.mobile_number
        password = payload.password

        if not client_id or not mobile_number or not password or len(password) < MIN_PASSWORD_LENGTH:
            raise invalid_argument("Client ID, mobile number, and password are required.")

        try:
            user = self.get_existing_user(client_id)

            if payload.update_data:
                self.update_profile(client_id, payload.update_data)

            if user:
                auth.update_user(
                    client_id,
                    password=password,
                    email_verified=True,
                    app=self._app,
                )
                logger.info(f"Credential for client {client_id} updated")
                return ProvisionCredentialResponse(success=True, message="updated")

            auth.create_user(
                uid=client_id,
                email=self.auth_email(mobile_number),
                password=password,
                display_name=mobile_number,
                email_verified=True,
                app=self._app,
            )
            logger.info(f"Credential for client {client_id} created")
            return ProvisionCredentialResponse(success=True, message="created")

        except Exception as e:
            logger.error(f"Credential provisioning failed for client {client_id}: {e}", exc_info=True)
            raise CallableError(
                ErrorKind.INTERNAL,
                "Authentication process failed on the server. Please check logs.",
                details=str(e),
            )
