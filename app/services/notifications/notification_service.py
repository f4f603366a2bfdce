# app/services/notifications/notification_service.py
import logging
from typing import Any, Dict, Optional

from firebase_admin import messaging

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for sending Firebase push notifications to a single device"""

    def __init__(self, firebase_app: Any):
        self._app = firebase_app

    def send_to_token(
        self,
        token: str,
        title: str,
        body: str,
        data: Optional[Dict[str, str]] = None
    ) -> bool:
        """
        Send one notification to a device token.

        Returns True when FCM accepted the message. Failures are logged and
        reported as False; nothing is retried.
        """
        try:
            message = messaging.Message(
                token=token,
                notification=messaging.Notification(
                    title=title,
                    body=body
                ),
                data=data or {}
            )

            response = messaging.send(message, app=self._app)
            logger.info(f"Push notification sent: {response}")
            return True

        except Exception as e:
            logger.error(f"Failed to send push notification: {e}", exc_info=True)
            return False
