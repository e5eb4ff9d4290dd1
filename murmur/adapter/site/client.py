"""HTTP client checking that thread paths exist on the blog."""

import httpx
import logfire

from murmur.domain.service.thread_service import SiteClient


class HttpSiteClient(SiteClient):
    """Site client that requests the page from the blog host."""

    def __init__(
        self,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize site client.

        Args:
            timeout: Request timeout in seconds
            transport: Transport override, used by tests
        """
        self.timeout = timeout
        self.transport = transport

    async def path_exists(self, url: str) -> bool:
        """Check that a URL answers with a 2xx status.

        Redirects are followed. Network errors count as a missing page.

        Args:
            url: Absolute URL of the page

        Returns:
            True if the page exists
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logfire.warn("Path check request failed", url=url, error=str(e))
            return False

        logfire.info("Path checked", url=url, status=response.status_code)
        return response.is_success


class MockSiteClient(SiteClient):
    """Site client for testing.

    Every path exists unless listed in ``missing``.
    """

    def __init__(self, missing: set[str] | None = None) -> None:
        self.missing = missing or set()
        self.checked: list[str] = []

    async def path_exists(self, url: str) -> bool:
        """Report whether a URL exists without making a request."""
        self.checked.append(url)
        return url not in self.missing
