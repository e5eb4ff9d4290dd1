"""Blog site infrastructure providers."""

from dishka import Scope, provide

from murmur.adapter.site import HttpSiteClient
from murmur.domain.service import SiteClient
from murmur.util.di.base import ProviderBase


class SiteProvider(ProviderBase):
    """Site component base."""

    __mock_component__ = "site"


class ProdSiteProvider(SiteProvider):
    """Production site provider checking pages over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_site_client(self) -> SiteClient:
        """Provide HTTP site client."""
        return HttpSiteClient()
