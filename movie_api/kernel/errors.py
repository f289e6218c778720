"""
Domain errors raised by the kernel services.

Each error carries the HTTP status it is rendered with; the application
installs a single handler for ``MovieApiError`` in ``movie_api.main``.
"""

from typing import Optional


class MovieApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = 500
    default_detail: str = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    @property
    def headers(self) -> Optional[dict]:
        return None


class UsernameTaken(MovieApiError):
    status_code = 400
    default_detail = "Username already exists"

    def __init__(self, username: str):
        super().__init__(f"{username} already exists")
        self.username = username


class InvalidCredentials(MovieApiError):
    """Login failed. Unknown user and wrong password are indistinguishable."""

    status_code = 401
    default_detail = "Incorrect username or password"


class Unauthenticated(MovieApiError):
    """Missing, malformed, expired or unresolvable bearer token."""

    status_code = 401
    default_detail = "Not authenticated"

    @property
    def headers(self) -> Optional[dict]:
        return {"WWW-Authenticate": "Bearer"}


class PermissionDenied(MovieApiError):
    # 400 rather than 403; existing clients depend on it
    status_code = 400
    default_detail = "Permission denied"


class NotFound(MovieApiError):
    status_code = 404
    default_detail = "Not found"


class UserNotFound(NotFound):
    default_detail = "User not found"


class MovieNotFound(NotFound):
    default_detail = "Movie not found"
