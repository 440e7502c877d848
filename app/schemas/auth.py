from pydantic import BaseModel, Field
from typing import Optional


class RegisterRequest(BaseModel):
    """
    Body of POST /register. Nothing is required; fields go to the store as sent.
    """

    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Email address")
    phone: Optional[str] = Field(default=None, description="Phone number in E.164 format")
