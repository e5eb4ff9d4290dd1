"""Infrastructure providers."""

# Import bases
from .mail import MailProvider
from .persistence import PersistenceProvider
from .site import SiteProvider

# Import implementations (needed for __subclasses__())
from .mail import ProdMailProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .site import ProdSiteProvider  # noqa: F401

__all__ = [
    "MailProvider",
    "PersistenceProvider",
    "ProdMailProvider",
    "ProdPersistenceProvider",
    "ProdSiteProvider",
    "SiteProvider",
]
