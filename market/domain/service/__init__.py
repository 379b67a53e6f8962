"""Domain services."""

from .base import Service
from .captcha_service import CaptchaService, CaptchaVerifier
from .comment_service import CommentService, collect_thread_ids
from .file_service import FileService
from .jwt_service import JWTService
from .sale_service import SaleService

__all__ = [
    "CaptchaService",
    "CaptchaVerifier",
    "CommentService",
    "FileService",
    "JWTService",
    "SaleService",
    "Service",
    "collect_thread_ids",
]
