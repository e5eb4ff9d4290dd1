"""Widget initialisation route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from murmur.application.usecase.session import (
    InitialiseRequest,
    InitialiseResponse,
    InitialiseUseCase,
)
from murmur.interface.api.remote import remote_addr

router = APIRouter(tags=["session"], route_class=DishkaRoute)


@router.get("/init", response_model=InitialiseResponse)
async def initialise(
    request: Request,
    initialise_use_case: FromDishka[InitialiseUseCase],
) -> InitialiseResponse:
    """Hashes the widget uses to recognise the reader and the blog author."""
    return await initialise_use_case.execute(
        InitialiseRequest(remote_ip=remote_addr(request))
    )
