"""Domain layer DI providers."""

from dishka import Scope, provide

from market.adapter.recaptcha import RecaptchaVerifier
from market.config import AuthSettings, CommentSettings
from market.domain.repository import (
    CommentRepository,
    FileRepository,
    SaleRepository,
    UploadRepository,
)
from market.domain.service import (
    CaptchaService,
    CommentService,
    FileService,
    JWTService,
    SaleService,
)
from market.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_captcha_service(self, verifier: RecaptchaVerifier) -> CaptchaService:
        """Provide captcha domain service backed by reCAPTCHA."""
        return CaptchaService(verifier=verifier)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        captcha_service: CaptchaService,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            captcha_service=captcha_service,
            require_captcha_on_reply=comment_settings.require_captcha_on_reply,
        )

    @provide
    def get_file_service(
        self,
        file_repository: FileRepository,
        upload_repository: UploadRepository,
    ) -> FileService:
        """Provide file domain service."""
        return FileService(
            file_repository=file_repository, upload_repository=upload_repository
        )

    @provide
    def get_sale_service(self, sale_repository: SaleRepository) -> SaleService:
        """Provide sale domain service."""
        return SaleService(sale_repository=sale_repository)
