"""
Account Service - Links a GitHub account to a local user.

Exchanges an OAuth code for an access token, reads the GitHub profile, writes
the user record and issues a session token.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from repodoc.core.config import Settings
from repodoc.core.exceptions import AuthError
from repodoc.core.security import create_session_token
from repodoc.models.schemas import UserRecord
from repodoc.services.github_client import GitHubClient, exchange_oauth_code
from repodoc.services.user_store import UserStore

logger = logging.getLogger(__name__)


@dataclass
class LinkedAccount:
    user: UserRecord
    session_token: str


class AccountService:

    def __init__(
        self,
        settings: Settings,
        user_store: UserStore,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.user_store = user_store
        self.transport = transport

    async def link_github(self, code: str) -> LinkedAccount:
        """
        Complete the GitHub connect flow for an authorization ``code``.

        Raises:
            AuthError: GitHub did not issue an access token (400).
            UpstreamError: GitHub could not be reached or answered with an error.
        """
        access_token = await exchange_oauth_code(
            code,
            client_id=self.settings.github_client_id,
            client_secret=self.settings.github_client_secret,
            token_url=self.settings.github_oauth_url,
            timeout=self.settings.github_timeout_seconds,
            transport=self.transport,
        )
        if not access_token:
            raise AuthError("Failed to get access token from GitHub", status_code=400)

        async with GitHubClient(
            access_token,
            base_url=self.settings.github_api_url,
            timeout=self.settings.github_timeout_seconds,
            transport=self.transport,
        ) as github:
            profile = await github.get_authenticated_user()
            email = profile.get("email")
            if not email:
                email = self._primary_email(await github.get_user_emails())

        user = self.user_store.upsert_github_user(
            github_id=str(profile["id"]),
            github_username=profile.get("login", ""),
            access_token=access_token,
            email=email or "",
        )
        logger.info(f"Linked GitHub account {user.github_username} to user {user.id}")

        token = create_session_token(
            user.id,
            user.email,
            secret=self.settings.jwt_secret,
            algorithm=self.settings.jwt_algorithm,
            expires_hours=self.settings.session_ttl_hours,
        )
        return LinkedAccount(user=user, session_token=token)

    @staticmethod
    def _primary_email(emails: list) -> Optional[str]:
        for entry in emails:
            if entry.get("primary") and entry.get("verified"):
                return entry.get("email")
        return None
