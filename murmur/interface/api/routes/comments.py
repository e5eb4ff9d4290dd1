"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, Header, HTTPException, Query, Request, status
from pydantic import BaseModel, Field

from murmur.application.usecase.comment import (
    CountCommentsRequest,
    CountCommentsUseCase,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from murmur.domain.error import DomainError
from murmur.interface.api.remote import remote_addr
from murmur.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)

MAX_TEXT_LENGTH = 65535


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    path: str = Form(min_length=1),
    comment: str = Form(min_length=1, max_length=MAX_TEXT_LENGTH),
    title: str | None = Form(default=None),
    name: str | None = Form(default=None),
    email: str | None = Form(default=None),
    url: str | None = Form(default=None),
    parent: int | None = Form(default=None),
) -> CreateCommentResponse:
    """Post a comment on a blog page, or reply to a comment.

    The page's thread is created on its first comment, provided the page
    exists on the blog.

    Returns:
        Id, effective parent and display name of the new comment

    Raises:
        HTTPException: 403 if the page does not exist, 404 if the parent is
            not a comment on the page, 500 on storage failure
    """
    try:
        use_case_request = CreateCommentRequest(
            path=path,
            title=title,
            text=comment,
            author=name,
            email=email,
            website=url,
            parent=parent,
            remote_ip=remote_addr(request),
        )
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e, "Comment creation") from e


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    url: str = Query(min_length=1),
) -> GetCommentsResponse:
    """Get the reply tree of a blog page.

    Returns:
        Root comments with nested replies, ordered by id
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(thread_uri=url))
    except DomainError as e:
        raise to_http_exception(e, "Comment listing") from e


@router.get("/count", response_model=int)
async def count_comments(
    count_comments_use_case: FromDishka[CountCommentsUseCase],
    url: str = Query(min_length=1),
) -> int:
    """Count the comments shown on a blog page."""
    try:
        response = await count_comments_use_case.execute(
            CountCommentsRequest(thread_uri=url)
        )
        return response.count
    except DomainError as e:
        raise to_http_exception(e, "Comment count") from e


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    text: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)
    author: str | None = None
    email: str | None = None
    website: str | None = None


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: int,
    body: UpdateCommentAPIRequest,
    request: Request,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    identity_hash: str = Header(alias="X-Identity-Hash"),
) -> UpdateCommentResponse:
    """Edit a comment.

    Only allowed with the comment's identity hash and while the edit
    window is open.

    Raises:
        HTTPException: 404 if the comment does not exist, 403 if not allowed
    """
    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            identity_hash=identity_hash,
            text=body.text,
            author=body.author,
            email=body.email,
            website=body.website,
            remote_ip=remote_addr(request),
        )
        return await update_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e, "Comment update") from e


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    identity_hash: str = Header(alias="X-Identity-Hash"),
) -> None:
    """Delete a comment, leaving a tombstone if it has replies.

    Raises:
        HTTPException: 404 if the comment does not exist, 403 if not allowed
    """
    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, identity_hash=identity_hash)
        )
    except DomainError as e:
        raise to_http_exception(e, "Comment deletion") from e
