"""
Credential Resolver - Turns a session bearer token into a GitHub access token.
"""

from typing import Optional

from repodoc.core.exceptions import AuthError, GitHubNotConnectedError
from repodoc.core.security import decode_session_token
from repodoc.models.schemas import UserRecord
from repodoc.services.user_store import UserStore


class CredentialResolver:
    """Resolves session tokens against the user store."""

    def __init__(self, user_store: UserStore, secret: str, algorithm: str = "HS256"):
        self.user_store = user_store
        self.secret = secret
        self.algorithm = algorithm

    def resolve(self, session_token: Optional[str]) -> UserRecord:
        """
        Look up the user behind ``session_token``.

        Raises:
            AuthError: No token, or the token does not verify.
            GitHubNotConnectedError: The user is unknown or has no GitHub token.
        """
        if not session_token:
            raise AuthError("Unauthorized")

        claims = decode_session_token(session_token, self.secret, self.algorithm)
        if claims is None:
            raise AuthError("Invalid token")

        user = self.user_store.get(claims.user_id)
        if user is None or not user.github_access_token:
            raise GitHubNotConnectedError(claims.user_id)

        return user
