from fastapi import APIRouter, Depends
from popcornpick.schemas.user import SignupRequest, LoginRequest, AuthResponse, UserResponse
from popcornpick.services.account_service import AccountService
from popcornpick.services.dependencies import get_account_service
from popcornpick.core.auth import TokenService, get_current_user, get_token_service
from popcornpick.core.exceptions import handle_exception

router = APIRouter(prefix="/auth", tags=["authentication"])

@router.post("/signup", response_model=AuthResponse)
def signup(
    user_data: SignupRequest,
    account_service: AccountService = Depends(get_account_service),
    token_service: TokenService = Depends(get_token_service),
):
    """Register a new user and return a token"""
    try:
        user = account_service.create(user_data.name, user_data.email, user_data.password)
        return {"token": token_service.issue(user.id), "user": user}
    except Exception as e:
        raise handle_exception(e, "Signup failed")

@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    account_service: AccountService = Depends(get_account_service),
    token_service: TokenService = Depends(get_token_service),
):
    """Login user and return access token"""
    try:
        user = account_service.authenticate(credentials.email, credentials.password)
        return {"token": token_service.issue(user.id), "user": user}
    except Exception as e:
        raise handle_exception(e, "Login failed")

@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    current_user_id: int = Depends(get_current_user),
    account_service: AccountService = Depends(get_account_service),
):
    """Get current user information"""
    try:
        return account_service.get_user(current_user_id)
    except Exception as e:
        raise handle_exception(e)
