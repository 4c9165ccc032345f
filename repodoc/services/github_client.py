"""
GitHub Client - Thin async wrapper over the GitHub REST API.

One client is opened per request with the caller's access token and closed
when the request finishes. Non-2xx answers are translated into the
application's exception taxonomy; nothing is retried.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from repodoc.core.exceptions import AuthError, RepositoryNotFoundError, UpstreamError

logger = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github+json"


class GitHubClient:
    """
    Async client for the GitHub endpoints the pipeline needs.

    Usage:
        async with GitHubClient(token) as github:
            repo = await github.get_repository("owner", "name")
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        headers = {"Accept": GITHUB_ACCEPT}
        if token:
            headers["Authorization"] = f"token {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET ``url`` (relative to the API root, or absolute) and decode JSON.

        Raises:
            AuthError: GitHub rejected the credential (401, or 403 on bad credentials).
            UpstreamError: Transport failure, other non-2xx status or a non-JSON body.
                ``details["upstream_status"]`` holds the status so call sites
                can map a 404 themselves.
        """
        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"GitHub request failed: GET {url}: {e}")
            raise UpstreamError(f"GitHub request failed: {e}") from e

        self._raise_for_status(response)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError("GitHub returned a non-JSON response") from e

    def _raise_for_status(self, response: httpx.Response) -> None:
        status = response.status_code
        if status < 300:
            return
        if status == 401 or (status == 403 and "bad credentials" in response.text.lower()):
            raise AuthError("GitHub credential rejected")
        logger.warning(f"GitHub answered {status} for {response.request.url}")
        raise UpstreamError(f"GitHub API error ({status})", upstream_status=status)

    # ── repositories ────────────────────────────────────────────────────────

    async def get_repository(self, owner: str, repo: str) -> Dict[str, Any]:
        """Repository metadata. A 404 becomes RepositoryNotFoundError."""
        try:
            return await self.get_json(f"/repos/{owner}/{repo}")
        except UpstreamError as e:
            if e.details.get("upstream_status") == 404:
                raise RepositoryNotFoundError(owner, repo) from e
            raise

    async def list_contents(self, owner: str, repo: str, ref: str) -> List[Dict[str, Any]]:
        """
        Root directory listing at ``ref``.

        GitHub answers 404 for an empty repository; that is an empty listing.
        """
        try:
            data = await self.get_json(
                f"/repos/{owner}/{repo}/contents",
                params={"ref": ref},
            )
        except UpstreamError as e:
            if e.details.get("upstream_status") == 404:
                return []
            raise
        return data if isinstance(data, list) else []

    async def get_file(self, url: str) -> Dict[str, Any]:
        """Fetch a contents-API file object by its ``url`` locator."""
        return await self.get_json(url)

    async def list_user_repositories(self, per_page: int = 100) -> List[Dict[str, Any]]:
        """Repositories of the authenticated user, most recently updated first."""
        data = await self.get_json(
            "/user/repos",
            params={"sort": "updated", "per_page": per_page},
        )
        return data if isinstance(data, list) else []

    # ── users ───────────────────────────────────────────────────────────────

    async def get_authenticated_user(self) -> Dict[str, Any]:
        return await self.get_json("/user")

    async def get_user_emails(self) -> List[Dict[str, Any]]:
        data = await self.get_json("/user/emails")
        return data if isinstance(data, list) else []


async def exchange_oauth_code(
    code: str,
    client_id: str,
    client_secret: str,
    token_url: str = "https://github.com/login/oauth/access_token",
    timeout: float = 30.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[str]:
    """
    Exchange an OAuth authorization code for an access token.

    Returns None when GitHub does not hand out a token (bad or expired code).
    """
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        try:
            response = await client.post(
                token_url,
                json={
                    "client_id": client_id,
                    "client_secret": client_secret,
                    "code": code,
                },
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            raise UpstreamError(f"OAuth token exchange failed: {e}") from e

    if response.status_code >= 300:
        raise UpstreamError(
            f"OAuth token exchange failed ({response.status_code})",
            upstream_status=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError:
        return None
    return payload.get("access_token") or None
