"""File catalogue routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from market.application.usecase.file import (
    GetFileRequest,
    GetFileResponse,
    GetFileUseCase,
    ListFilesRequest,
    ListFilesResponse,
    ListFilesUseCase,
)
from market.domain.error import NotFoundError
from market.domain.service import JWTService

router = APIRouter(prefix="/files", tags=["files"], route_class=DishkaRoute)


@router.get("", response_model=ListFilesResponse)
async def list_files(
    list_files_use_case: FromDishka[ListFilesUseCase],
    page: int = Query(default=1, ge=1),
) -> ListFilesResponse:
    """List files that are live and approved, newest first.

    Args:
        list_files_use_case: List files use case from DI
        page: Page number (1-based)

    Returns:
        One page of files with their approved uploads
    """
    return await list_files_use_case.execute(ListFilesRequest(page=page))


@router.get("/{file_id}", response_model=GetFileResponse)
async def get_file(
    file_id: int,
    get_file_use_case: FromDishka[GetFileUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> GetFileResponse:
    """Get the detail view of a file.

    Authentication is optional. When the viewer is logged in the response
    reports whether they have bought the file.

    Args:
        file_id: File ID
        get_file_use_case: Get file use case from DI
        jwt_service: JWT service for token verification (injected)
        page: Page of top-level comments to include
        auth_token: JWT token from cookie (optional)

    Returns:
        File details, uploads, other files by the owner and comments

    Raises:
        HTTPException: If the file is missing or not visible
    """
    viewer = jwt_service.get_viewer(auth_token)

    try:
        return await get_file_use_case.execute(
            GetFileRequest(
                file_id=file_id,
                comments_page=page,
                viewer_id=viewer.user_id if viewer else None,
            )
        )
    except NotFoundError as e:
        logfire.warn("File detail requested for unavailable file", file_id=file_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
