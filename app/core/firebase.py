# app/core/firebase.py
import logging
from typing import Any, Optional

from fastapi import Request
import firebase_admin
from firebase_admin import credentials, firestore

from app.core.config import Settings

logger = logging.getLogger(__name__)


def build_credential(settings: Settings):
    """Resolve Firebase credentials: inline service account, JSON file, or ADC"""
    if settings.FIREBASE_CLIENT_EMAIL and settings.FIREBASE_PRIVATE_KEY and settings.FIREBASE_PROJECT_ID:
        return credentials.Certificate({
            "type": "service_account",
            "project_id": settings.FIREBASE_PROJECT_ID,
            # .env files usually carry the key with escaped newlines
            "private_key": settings.FIREBASE_PRIVATE_KEY.replace("\\n", "\n"),
            "client_email": settings.FIREBASE_CLIENT_EMAIL,
            "token_uri": "https://oauth2.googleapis.com/token",
        })

    if settings.FIREBASE_CREDENTIALS_PATH:
        return credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)

    logger.warning("Firebase service account not configured; using application default credentials")
    return credentials.ApplicationDefault()


class FirebaseClients:
    """
    The Firebase app and the clients bound to it.

    Built once per process by the FastAPI lifespan and handed to services
    through dependencies. Auth and messaging calls take ``app=clients.app``.
    """

    def __init__(self, app: Any, db: Any):
        self.app = app
        self.db = db

    @classmethod
    def from_settings(cls, settings: Settings) -> "FirebaseClients":
        options = {}
        if settings.FIREBASE_PROJECT_ID:
            options["projectId"] = settings.FIREBASE_PROJECT_ID

        app = firebase_admin.initialize_app(
            build_credential(settings),
            options,
            name=settings.FIREBASE_APP_NAME,
        )
        logger.info(f"Firebase app '{app.name}' initialized for project {app.project_id}")
        return cls(app=app, db=firestore.client(app))

    def close(self) -> None:
        close_db: Optional[Any] = getattr(self.db, "close", None)
        if close_db is not None:
            close_db()
        firebase_admin.delete_app(self.app)
        logger.info("Firebase app deleted")


def get_firebase(request: Request) -> FirebaseClients:
    """Dependency returning the clients built in the app lifespan"""
    return request.app.state.firebase
