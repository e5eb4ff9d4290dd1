"""Widget initialisation use case."""

from pydantic import BaseModel

from murmur.config import Settings
from murmur.domain.service import identity_hash


class InitialiseRequest(BaseModel):
    """Initialise request."""

    remote_ip: str | None = None


class InitialiseResponse(BaseModel):
    """Hashes the widget needs before the first comment is written.

    ``user_ip`` matches the hash of an anonymous comment from this address;
    ``blog_author`` matches comments written with the configured author
    profile, so the frontend can badge them.
    """

    user_ip: str
    blog_author: str


class InitialiseUseCase:
    """Use case for the widget's first request on page load."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    async def execute(self, request: InitialiseRequest) -> InitialiseResponse:
        author = self.settings.author
        return InitialiseResponse(
            user_ip=identity_hash(None, None, None, request.remote_ip),
            blog_author=identity_hash(author.name, author.email, author.url),
        )
