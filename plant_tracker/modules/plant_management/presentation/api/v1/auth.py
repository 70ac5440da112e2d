# 📄 File: plant_tracker/modules/plant_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# Sign up, sign in, sign out and "am I signed in?" - a simple switch, not real account security.
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints flipping the placeholder AuthState flag consulted by the plant routes.
# 🔗 Dependencies:
# FastAPI, auth schemas, presentation dependencies
# 🔄 Connected Modules / Calls From:
# plant management presentation router

from fastapi import APIRouter, Depends

from plant_tracker.shared.core.security import AuthState

from ...dependencies import get_auth_state
from ..schemas.auth_schemas import AuthStatusResponse, LoginRequest, RegisterRequest

auth_router = APIRouter()


@auth_router.get("/status", response_model=AuthStatusResponse, summary="Authentication flag")
async def auth_status(auth_state: AuthState = Depends(get_auth_state)) -> AuthStatusResponse:
    return AuthStatusResponse(authenticated=auth_state.is_authenticated())


@auth_router.post("/login", response_model=AuthStatusResponse, summary="Sign in")
async def login(
    payload: LoginRequest,
    auth_state: AuthState = Depends(get_auth_state),
) -> AuthStatusResponse:
    """
    Set the authentication flag.

    Credentials are accepted as long as both are non-blank; there is no
    account store behind this.
    """
    auth_state.set_authenticated(True)
    return AuthStatusResponse(authenticated=True)


@auth_router.post("/logout", response_model=AuthStatusResponse, summary="Sign out")
async def logout(auth_state: AuthState = Depends(get_auth_state)) -> AuthStatusResponse:
    auth_state.set_authenticated(False)
    return AuthStatusResponse(authenticated=False)


@auth_router.post("/register", response_model=AuthStatusResponse, summary="Sign up")
async def register(
    payload: RegisterRequest,
    auth_state: AuthState = Depends(get_auth_state),
) -> AuthStatusResponse:
    """Create-account form; no account is stored, the flag is set as on sign-in."""
    auth_state.set_authenticated(True)
    return AuthStatusResponse(authenticated=True)
