"""Request helpers."""

from fastapi import Request


def remote_addr(request: Request) -> str | None:
    """Address of the client that sent the request.

    Behind a reverse proxy this relies on uvicorn's ``--proxy-headers``
    handling of X-Forwarded-For.
    """
    return request.client.host if request.client else None
