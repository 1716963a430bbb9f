import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from popcornpick.core.auth import get_current_user
from popcornpick.core.exceptions import UserNotFoundException, handle_exception
from popcornpick.schemas.movie import SuccessResponse
from popcornpick.services.account_service import AccountService
from popcornpick.services.dependencies import get_account_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/watchlist", tags=["watchlist"])

@router.post("/{movie_id}", response_model=SuccessResponse)
def add_to_watchlist(
    movie_id: str,
    current_user_id: int = Depends(get_current_user),
    account_service: AccountService = Depends(get_account_service),
):
    try:
        account_service.add_to_watchlist(current_user_id, movie_id)
        return {"success": True}
    except Exception as e:
        raise handle_exception(e, "Server error")

@router.get("")
def get_watchlist(
    current_user_id: int = Depends(get_current_user),
    account_service: AccountService = Depends(get_account_service),
):
    """TMDB ids saved by the current user.

    Failures keep the list shape: a vanished account answers 404 with ``[]``
    and anything unexpected answers 500 with ``[]``.
    """
    try:
        return account_service.get_watchlist(current_user_id)
    except UserNotFoundException:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=[])
    except Exception:
        logger.exception(f"Watchlist fetch failed for user {current_user_id}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=[])
