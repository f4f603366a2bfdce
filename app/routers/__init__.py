# Routers package
from . import auth_router
from . import clients_router

__all__ = [
    "auth_router",
    "clients_router"
]
