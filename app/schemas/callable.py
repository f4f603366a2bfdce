# app/schemas/callable.py
from datetime import datetime
from typing import Any, Dict, Optional, Type, TypeVar
import base64

from google.cloud.firestore import DocumentReference, GeoPoint
from pydantic import BaseModel, ValidationError

from app.core.errors import invalid_argument

T = TypeVar("T", bound=BaseModel)


class CallableRequest(BaseModel):
    """Envelope of every callable request: {"data": {...}}"""
    data: Optional[Dict[str, Any]] = None


def parse_callable(model: Type[T], envelope: CallableRequest) -> T:
    """Validate the envelope payload against ``model``; type errors are invalid-argument"""
    try:
        return model.model_validate(envelope.data or {})
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise invalid_argument(f"Invalid request fields: {fields}")


def encode_firestore_value(value: Any) -> Any:
    """
    Convert a stored Firestore value into plain JSON data.

    References become their document path, geo points a latitude/longitude
    mapping, timestamps ISO strings and bytes base64 text.
    """
    if isinstance(value, dict):
        return {k: encode_firestore_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_firestore_value(v) for v in value]
    if isinstance(value, DocumentReference):
        return value.path
    if isinstance(value, GeoPoint):
        return {"latitude": value.latitude, "longitude": value.longitude}
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    return value


def callable_result(response: BaseModel) -> Dict[str, Any]:
    """Wrap a response model in the {"result": ...} envelope using wire names"""
    return {"result": response.model_dump(mode="json", by_alias=True, exclude_unset=True)}
