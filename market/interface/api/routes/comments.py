"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, Request, status
from pydantic import BaseModel

from market.adapter.error import ProviderError
from market.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    ReplyToCommentRequest,
    ReplyToCommentResponse,
    ReplyToCommentUseCase,
)
from market.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from market.domain.service import JWTService
from market.domain.value.types import Handle
from market.util.jwt import TokenPayload

router = APIRouter(prefix="/files", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a top-level comment."""

    body: str = ""
    captcha_token: str | None = None


class ReplyAPIRequest(BaseModel):
    """API request for replying to a comment."""

    reply_body: str = ""
    captcha_token: str | None = None


def _require_viewer(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> TokenPayload:
    viewer = jwt_service.get_viewer(auth_token)
    if viewer is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return viewer


def _validation_failed(e: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"field": e.field, "message": e.message},
    )


def _client_ip(request: Request) -> str | None:
    return request.client.host if request.client else None


@router.get("/{file_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    file_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    page: int = Query(default=1, ge=1),
) -> GetCommentsResponse:
    """Get a page of top-level comments on a file, newest first.

    Args:
        file_id: File ID
        get_comments_use_case: Get comments use case from DI
        page: Page number (1-based)

    Returns:
        Page of top-level comments with their reply counts
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(file_id=file_id, page=page)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post(
    "/{file_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    file_id: int,
    payload: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Post a top-level comment on a file.

    Requires authentication and a passing captcha.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the file is not
            visible, 422 if the body or captcha is rejected, 503 if the
            captcha provider is unreachable
    """
    viewer = _require_viewer(jwt_service, auth_token, "post comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                file_id=file_id,
                body=payload.body,
                captcha_token=payload.captcha_token,
                author_id=viewer.user_id,
                author_handle=Handle(viewer.handle),
                remote_ip=_client_ip(request),
            )
        )
    except ValidationError as e:
        logfire.info("Comment rejected", field=e.field, reason=e.message)
        raise _validation_failed(e)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ProviderError as e:
        logfire.error("Captcha provider unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Captcha verification is unavailable, try again later",
        )


@router.post(
    "/{file_id}/comments/{comment_id}/replies",
    response_model=ReplyToCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    file_id: int,
    comment_id: int,
    payload: ReplyAPIRequest,
    request: Request,
    reply_use_case: FromDishka[ReplyToCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReplyToCommentResponse:
    """Reply to a comment on a file.

    Requires authentication. No captcha unless replies are configured to
    need one.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the file or parent
            comment is missing, 422 if the reply body is rejected
    """
    viewer = _require_viewer(jwt_service, auth_token, "reply to comments")

    try:
        return await reply_use_case.execute(
            ReplyToCommentRequest(
                file_id=file_id,
                parent_id=comment_id,
                reply_body=payload.reply_body,
                captcha_token=payload.captcha_token,
                author_id=viewer.user_id,
                author_handle=Handle(viewer.handle),
                remote_ip=_client_ip(request),
            )
        )
    except ValidationError as e:
        logfire.info("Reply rejected", field=e.field, reason=e.message)
        raise _validation_failed(e)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ProviderError as e:
        logfire.error("Captcha provider unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Captcha verification is unavailable, try again later",
        )


@router.delete("/{file_id}/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    file_id: int,
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment together with all of its replies.

    Only the comment author or the owner of the file may delete. Deleting a
    comment that does not exist on the file succeeds with nothing deleted.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not allowed
    """
    viewer = _require_viewer(jwt_service, auth_token, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                comment_id=comment_id,
                file_id=file_id,
                user_id=viewer.user_id,
            )
        )
    except NotAuthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
