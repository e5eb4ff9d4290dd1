"""Blog site adapter."""

from .client import HttpSiteClient, MockSiteClient

__all__ = ["HttpSiteClient", "MockSiteClient"]
