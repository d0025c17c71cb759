from .resize_request import ResizeRequest
from .response_envelope import ResponseEnvelope
from .stored_object import StoredObject

__all__ = [
    "ResizeRequest",
    "ResponseEnvelope",
    "StoredObject",
]
