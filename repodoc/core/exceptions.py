"""
Application exceptions.

Each exception carries the HTTP status and error code it maps to at the API
boundary. Services raise them; the handlers in
``repodoc.api.middleware.error_handler`` render them.
"""


class AppException(Exception):
    """Base exception for application errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: dict = None
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class InputError(AppException):
    """Raised when a request is missing fields or is malformed."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(
            message=message,
            error_code="INVALID_INPUT",
            status_code=400,
            details=details
        )


class AuthError(AppException):
    """Raised when a credential is missing, invalid or rejected."""

    def __init__(self, message: str = "Unauthorized", status_code: int = 401):
        super().__init__(
            message=message,
            error_code="UNAUTHORIZED",
            status_code=status_code
        )


class GitHubNotConnectedError(AppException):
    """Raised when the user has no linked GitHub account."""

    def __init__(self, user_id: str = None):
        super().__init__(
            message="GitHub not connected",
            error_code="GITHUB_NOT_CONNECTED",
            status_code=400,
            details={"user_id": user_id} if user_id else {}
        )


class RepositoryNotFoundError(AppException):
    """Raised when GitHub reports the repository as missing."""

    def __init__(self, owner: str, repo: str):
        super().__init__(
            message="Repository not found",
            error_code="REPO_NOT_FOUND",
            status_code=404,
            details={"owner": owner, "repo": repo}
        )


class UpstreamError(AppException):
    """Raised on any other failure talking to GitHub."""

    def __init__(self, message: str, upstream_status: int = None):
        super().__init__(
            message=message,
            error_code="UPSTREAM_ERROR",
            status_code=500,
            details={"upstream_status": upstream_status} if upstream_status else {}
        )


class CompletionError(AppException):
    """Raised when the completion service fails. Always degraded internally."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="COMPLETION_ERROR",
            status_code=500
        )
