from .callable import CallableRequest, parse_callable, callable_result
from .auth.credentials import ProvisionCredentialRequest, ProvisionCredentialResponse
from .auth.otp import IssueOtpRequest, IssueOtpResponse, OtpDeliveryStatus
from .clients.client import (
    VerifyClientRequest,
    VerifyClientResponse,
    VerifiedClient,
    ClientLookupRequest,
)

__all__ = [
    "CallableRequest",
    "parse_callable",
    "callable_result",
    "ProvisionCredentialRequest",
    "ProvisionCredentialResponse",
    "IssueOtpRequest",
    "IssueOtpResponse",
    "OtpDeliveryStatus",
    "VerifyClientRequest",
    "VerifyClientResponse",
    "VerifiedClient",
    "ClientLookupRequest",
]
