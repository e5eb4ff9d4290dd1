"""Session use cases."""

from .initialise import InitialiseRequest, InitialiseResponse, InitialiseUseCase

__all__ = [
    "InitialiseRequest",
    "InitialiseResponse",
    "InitialiseUseCase",
]
