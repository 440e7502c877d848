from pydantic import BaseModel
from typing import Optional, Any


class ErrorResponse(BaseModel):
    """
    Standard error response structure. Dumped with exclude_none so a
    missing `details` is omitted from the body.
    """
    error: str
    details: Optional[Any] = None


class MessageResponse(BaseModel):
    message: str
