from __future__ import annotations

from typing import Optional


class GitHubError(Exception):
    """Base class for failures talking to the GitHub REST API."""


class TransportError(GitHubError):
    """The request could not be built or sent."""


class StatusError(TransportError):
    """GitHub answered with a status other than 200."""

    def __init__(self, url: str, status_code: int, detail: Optional[str] = None) -> None:
        self.url = url
        self.status_code = status_code
        self.detail = detail
        msg = f"request to {url} failed with status code: {status_code}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class DecodeError(GitHubError):
    """The response body is not the JSON we expect."""


class NotFoundError(GitHubError):
    """No repository with the requested name."""
