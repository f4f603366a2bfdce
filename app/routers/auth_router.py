# app/routers/auth_router.py
from fastapi import APIRouter, Depends

from app.core.firebase import FirebaseClients, get_firebase
from app.schemas import (
    CallableRequest,
    IssueOtpRequest,
    ProvisionCredentialRequest,
    callable_result,
    parse_callable,
)
from app.services.auth.credential_service import CredentialService
from app.services.auth.otp_service import OTPService
from app.services.notifications.notification_service import NotificationService

router = APIRouter(tags=["Authentication"])


def get_credential_service(firebase: FirebaseClients = Depends(get_firebase)) -> CredentialService:
    """Dependency to get credential service"""
    return CredentialService(firebase.app, firebase.db)


def get_otp_service(firebase: FirebaseClients = Depends(get_firebase)) -> OTPService:
    """Dependency to get OTP service"""
    return OTPService(firebase.db, NotificationService(firebase.app))


@router.post("/provisionCredential")
# Backward-compatible alias for app builds calling the original function name
@router.post("/adminSetClientPassword", include_in_schema=False)
def provision_credential(
    envelope: CallableRequest,
    credential_service: CredentialService = Depends(get_credential_service)
):
    """
    Create or update the login credential of a client

    The credential email is {mobileNumber}@<auth domain> and the auth uid is
    the client document id. Optional updateData is merged into the client
    document first.
    """
    payload = parse_callable(ProvisionCredentialRequest, envelope)
    return callable_result(credential_service.provision(payload))


@router.post("/issueOtp")
@router.post("/generateAndSendOtp", include_in_schema=False)
def issue_otp(
    envelope: CallableRequest,
    otp_service: OTPService = Depends(get_otp_service)
):
    """
    Generate a one-time code and try to push it to the device

    Returns SENT_VIA_PUSH with the verificationId, or SMS_REQUIRED when the
    app has to start SMS verification itself.
    """
    payload = parse_callable(IssueOtpRequest, envelope)
    return callable_result(otp_service.issue(payload))
