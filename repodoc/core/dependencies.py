"""
Dependencies - Explicit application context and FastAPI dependencies.

The ``AppContext`` is built once by the application factory and stored on
``app.state``; every dependency reads it from the incoming request.
"""

from dataclasses import dataclass
from typing import AsyncIterator, Optional

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from repodoc.agents.orchestrator import Orchestrator
from repodoc.core.config import Settings
from repodoc.core.exceptions import AuthError
from repodoc.models.schemas import UserRecord
from repodoc.services.account_service import AccountService
from repodoc.services.completion import CompletionClient, GeminiCompletionClient
from repodoc.services.credentials import CredentialResolver
from repodoc.services.github_client import GitHubClient
from repodoc.services.user_store import UserStore, UserStoreConfig


@dataclass
class AppContext:
    """Everything a request needs, constructed once per application."""
    settings: Settings
    user_store: UserStore
    llm_client: CompletionClient
    github_transport: Optional[httpx.AsyncBaseTransport] = None

    def github_client(self, token: Optional[str]) -> GitHubClient:
        return GitHubClient(
            token,
            base_url=self.settings.github_api_url,
            timeout=self.settings.github_timeout_seconds,
            transport=self.github_transport,
        )

    def orchestrator(self) -> Orchestrator:
        return Orchestrator.from_settings(self.llm_client, self.settings)

    def credential_resolver(self) -> CredentialResolver:
        return CredentialResolver(
            self.user_store,
            secret=self.settings.jwt_secret,
            algorithm=self.settings.jwt_algorithm,
        )


def build_context(settings: Settings) -> AppContext:
    """Create the production context from settings."""
    user_store = UserStore(
        UserStoreConfig(
            backend=settings.user_store_backend,
            path=settings.user_store_path,
        )
    )
    llm_client = GeminiCompletionClient(
        api_key=settings.google_ai_api_key,
        model=settings.gemini_model,
    )
    return AppContext(settings=settings, user_store=user_store, llm_client=llm_client)


_bearer_scheme = HTTPBearer(auto_error=False)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_orchestrator(context: AppContext = Depends(get_context)) -> Orchestrator:
    return context.orchestrator()


def get_account_service(context: AppContext = Depends(get_context)) -> AccountService:
    return AccountService(
        context.settings,
        context.user_store,
        transport=context.github_transport,
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    context: AppContext = Depends(get_context),
) -> UserRecord:
    """Require a valid session bearer token and a linked GitHub account."""
    if credentials is None:
        raise AuthError("Unauthorized")
    return context.credential_resolver().resolve(credentials.credentials)


async def get_github_client(
    user: UserRecord = Depends(get_current_user),
    context: AppContext = Depends(get_context),
) -> AsyncIterator[GitHubClient]:
    """GitHub client authenticated as the current user, closed after the request."""
    async with context.github_client(user.github_access_token) as github:
        yield github
