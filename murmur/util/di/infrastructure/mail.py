"""Mail infrastructure providers."""

from dishka import Scope, provide

from murmur.adapter.mail import SmtpNotifier
from murmur.domain.service import Notifier
from murmur.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider sending over SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self) -> Notifier:
        """Provide SMTP notifier."""
        return SmtpNotifier()
