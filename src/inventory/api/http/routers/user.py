"""Identity endpoint for bearer-token callers. Not used by the product flow."""

from fastapi import APIRouter, Depends

from src.inventory.api.http.deps import get_current_user
from src.inventory.core.models.claims import CurrentUser

router = APIRouter(tags=["user"])


@router.get("/user", response_model=CurrentUser)
def read_current_user(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Return the identity carried by the caller's bearer token."""
    return user
