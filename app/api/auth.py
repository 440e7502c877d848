"""
app/api/auth.py

Purpose: Account endpoints (mounted under /api/auth)

- POST /register  insert a user row from the body as-is
"""

from fastapi import APIRouter, Depends
from postgrest import AsyncPostgrestClient
from typing import Any, Dict, List, Optional

from app.core.exceptions import BagDropError, InternalServerError
from app.core.logging import get_logger
from app.db.supabase import get_gateway
from app.schemas.auth import RegisterRequest
from app.services import user_service

logger = get_logger(__name__)
router = APIRouter()


@router.post("/register", response_model=List[Dict[str, Any]])
async def register(
    request: Optional[RegisterRequest] = None,
    client: AsyncPostgrestClient = Depends(get_gateway),
) -> List[Dict[str, Any]]:
    """
    Registers a user. No field is validated; the store decides what is acceptable.
    Returns the inserted row(s).
    """
    try:
        request = request or RegisterRequest()
        return await user_service.register_user(client, request.model_dump())
    except BagDropError:
        raise
    except Exception as e:
        logger.exception(f"Server error registering user: {str(e)}")
        raise InternalServerError(details=str(e)) from e
