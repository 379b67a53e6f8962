"""File use cases."""

from .get_file import GetFileRequest, GetFileResponse, GetFileUseCase
from .list_files import (
    FileListItem,
    ListFilesRequest,
    ListFilesResponse,
    ListFilesUseCase,
)

__all__ = [
    "FileListItem",
    "GetFileRequest",
    "GetFileResponse",
    "GetFileUseCase",
    "ListFilesRequest",
    "ListFilesResponse",
    "ListFilesUseCase",
]
