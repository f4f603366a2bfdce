# app/routers/clients_router.py
from fastapi import APIRouter, Depends

from app.core.firebase import FirebaseClients, get_firebase
from app.schemas import (
    CallableRequest,
    ClientLookupRequest,
    VerifyClientRequest,
    callable_result,
    parse_callable,
)
from app.services.clients.client_service import ClientService

router = APIRouter(tags=["Clients"])


def get_client_service(firebase: FirebaseClients = Depends(get_firebase)) -> ClientService:
    return ClientService(firebase.db)


@router.post("/verifyClientRecord")
@router.post("/verifyClientData", include_in_schema=False)
def verify_client_record(
    envelope: CallableRequest,
    client_service: ClientService = Depends(get_client_service)
):
    """
    Check that a patient id and mobile number belong to a client who has not
    registered yet. Only status flags are returned.
    """
    payload = parse_callable(VerifyClientRequest, envelope)
    return callable_result(client_service.verify(payload))


@router.post("/lookupClientByLoginOrMobile")
@router.post("/fetchClientByLoginId", include_in_schema=False)
def lookup_client(
    envelope: CallableRequest,
    client_service: ClientService = Depends(get_client_service)
):
    """Full client document by login id or mobile number, {} if not found"""
    payload = parse_callable(ClientLookupRequest, envelope)
    return {"result": client_service.lookup(payload)}
