"""Mock site providers for testing."""

from dishka import Scope, provide

from murmur.adapter.site import MockSiteClient
from murmur.domain.service import SiteClient
from murmur.util.di.infrastructure.site import SiteProvider


class MockSiteProvider(SiteProvider):
    """Mock site provider; every page exists unless marked missing."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_site_client(self) -> MockSiteClient:
        """Provide mock site client."""
        return MockSiteClient()

    @provide(scope=Scope.APP)
    def get_site_client(self, client: MockSiteClient) -> SiteClient:
        """Provide mock site client as the SiteClient."""
        return client
