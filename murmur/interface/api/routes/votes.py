"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status

from murmur.application.usecase.vote import VoteCommentRequest, VoteCommentUseCase
from murmur.domain.error import DomainError
from murmur.domain.value import VoteDirection
from murmur.interface.api.remote import remote_addr
from murmur.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["votes"], route_class=DishkaRoute)


async def _vote(
    use_case: VoteCommentUseCase,
    comment_id: int,
    request: Request,
    direction: VoteDirection,
) -> None:
    ip = remote_addr(request)
    if ip is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot vote without a client address",
        )

    try:
        await use_case.execute(
            VoteCommentRequest(comment_id=comment_id, direction=direction, remote_ip=ip)
        )
    except DomainError as e:
        raise to_http_exception(e, "Vote") from e


@router.post("/{comment_id}/like", status_code=status.HTTP_204_NO_CONTENT)
async def like_comment(
    comment_id: int,
    request: Request,
    vote_use_case: FromDishka[VoteCommentUseCase],
) -> None:
    """Like a comment.

    Each address may vote once per comment.

    Raises:
        HTTPException: 404 if the comment does not exist, 409 if already voted
    """
    await _vote(vote_use_case, comment_id, request, VoteDirection.UP)


@router.post("/{comment_id}/dislike", status_code=status.HTTP_204_NO_CONTENT)
async def dislike_comment(
    comment_id: int,
    request: Request,
    vote_use_case: FromDishka[VoteCommentUseCase],
) -> None:
    """Dislike a comment.

    Raises:
        HTTPException: 404 if the comment does not exist, 409 if already voted
    """
    await _vote(vote_use_case, comment_id, request, VoteDirection.DOWN)
