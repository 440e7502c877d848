from pydantic import BaseModel, Field
from typing import Any, Dict, List


class LocationListResponse(BaseModel):
    """Response of GET /locations. `data` is always a list."""

    message: str
    data: List[Dict[str, Any]] = Field(default_factory=list)
