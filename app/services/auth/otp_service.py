# app/services/auth/otp_service.py
from datetime import timedelta
from typing import Any, Optional
import logging
import secrets

from google.cloud.firestore import SERVER_TIMESTAMP

from app.core.config import settings
from app.core.errors import invalid_argument
from app.db.models.auth.otp import OtpSession
from app.schemas.auth.otp import IssueOtpRequest, IssueOtpResponse, OtpDeliveryStatus
from app.services.notifications.notification_service import NotificationService

logger = logging.getLogger(__name__)


class OTPService:
    """
    Issues one-time codes.

    The code is stored in the OTP collection and, when the caller supplied a
    device token, pushed to that device. If push is not possible the caller
    is told to run its own SMS verification instead. Verifying codes is not
    done here.
    """

    def __init__(
        self,
        db: Any,
        notifications: NotificationService,
        collection: Optional[str] = None,
        expiry_minutes: Optional[int] = None,
        push_title: Optional[str] = None,
    ):
        self.db = db
        self.notifications = notifications
        self.collection = collection or settings.OTP_COLLECTION
        self.expiry_minutes = settings.OTP_EXPIRY_MINUTES if expiry_minutes is None else expiry_minutes
        self.push_title = push_title or settings.OTP_PUSH_TITLE

    def generate_otp(self) -> str:
        """Uniform 6-digit code in [100000, 999999]"""
        return str(100000 + secrets.randbelow(900000))

    def store_otp(self, mobile_number: str, code: str) -> str:
        """Persist the code under a new auto-id and return that id"""
        ref = self.db.collection(self.collection).document()
        session = OtpSession(code=code, mobile=mobile_number)

        write = ref.set({**session.to_document(), "createdAt": SERVER_TIMESTAMP})

        # createdAt resolves to the commit time, so expiry is derived from it
        session = session.with_server_time(write.update_time, timedelta(minutes=self.expiry_minutes))
        ref.update({"expiresAt": session.expires_at})

        logger.info(f"OTP session {ref.id} stored, expires at {session.expires_at.isoformat()}")
        return ref.id

    def send_push(self, fcm_token: str, code: str, verification_id: str) -> bool:
        return self.notifications.send_to_token(
            fcm_token,
            title=self.push_title,
            body=f"Your verification code is: {code}. It expires in {self.expiry_minutes} minutes.",
            data={
                "otp_code": code,
                "session_id": verification_id,
            },
        )

    def issue(self, payload: IssueOtpRequest) -> IssueOtpResponse:
        if not payload.mobile_number:
            raise invalid_argument("Mobile number is required.")

        code = self.generate_otp()
        verification_id = self.store_otp(payload.mobile_number, code)

        if payload.fcm_token:
            if self.send_push(payload.fcm_token, code, verification_id):
                return IssueOtpResponse(
                    status=OtpDeliveryStatus.SENT_VIA_PUSH,
                    verification_id=verification_id,
                )
            logger.warning(f"Push delivery failed for OTP session {verification_id}, falling back to SMS")

        return IssueOtpResponse(status=OtpDeliveryStatus.SMS_REQUIRED)
