"""GitHub REST client used to show a rider's latest repositories on their profile."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from motohub.config import get_settings
from motohub.errors import DependencyFailure, NotFound

logger = structlog.get_logger()


class GitHubClient:
    """Thin async wrapper over ``GET /users/{username}/repos``.

    ``transport`` lets tests plug in ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "user-agent": "motohub-api",
            "Accept": "application/vnd.github+json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def list_repos(self, username: str, limit: int = 5) -> list[dict[str, Any]]:
        """Return the user's ``limit`` oldest-created public repos.

        Raises:
            NotFound: GitHub answered with anything but 200.
            DependencyFailure: GitHub could not be reached.
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.get(
                    f"/users/{username}/repos",
                    params={"per_page": limit, "sort": "created:asc"},
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            logger.warning("github_request_failed", username=username, error=str(e))
            raise DependencyFailure from e

        if response.status_code != 200:
            logger.info("github_profile_missing", username=username, status=response.status_code)
            msg = "No Github profile found"
            raise NotFound(msg)

        return response.json()


def get_github_client() -> GitHubClient:
    """FastAPI dependency built from settings."""
    settings = get_settings()
    return GitHubClient(
        settings.github_api_url,
        token=settings.github_token,
        timeout=settings.github_timeout_seconds,
    )
