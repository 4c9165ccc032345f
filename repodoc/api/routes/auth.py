"""
Auth Endpoints - GitHub account linking.
"""

from fastapi import APIRouter, Depends, Query

from repodoc.core.dependencies import get_account_service
from repodoc.core.exceptions import InputError
from repodoc.models.responses import AuthResponse, ErrorResponse, LinkedUser
from repodoc.services.account_service import AccountService


router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get(
    "/github",
    response_model=AuthResponse,
    summary="GitHub OAuth Callback",
    description="Exchange an OAuth code, link the GitHub account and issue a session token",
    responses={
        400: {"model": ErrorResponse, "description": "Missing code or no token issued"}
    }
)
async def github_callback(
    code: str = Query(default="", description="OAuth authorization code"),
    accounts: AccountService = Depends(get_account_service)
) -> AuthResponse:
    if not code:
        raise InputError("Code is required")

    linked = await accounts.link_github(code)
    user = linked.user
    return AuthResponse(
        token=linked.session_token,
        user=LinkedUser(
            id=user.id,
            email=user.email,
            github_username=user.github_username,
        ),
    )
