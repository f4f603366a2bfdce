from .auth.otp import OtpSession
from .clients.client import ClientProfile

__all__ = [
    "OtpSession",
    "ClientProfile",
]
