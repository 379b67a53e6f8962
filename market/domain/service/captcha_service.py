"""Captcha domain service."""

import logfire

from market.domain.error import ValidationError

from .base import Service


class CaptchaVerifier:
    """Anti-automation challenge verifier interface.

    Implementations raise an adapter error when the verification backend
    cannot be reached; a reachable backend that rejects the token returns
    False.
    """

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        """Check a challenge response token.

        Args:
            token: Response token produced by the client-side widget
            remote_ip: Address of the end user, if known

        Returns:
            True if the challenge was passed
        """
        raise NotImplementedError


class CaptchaService(Service):
    """Domain service guarding actions behind a captcha."""

    def __init__(self, verifier: CaptchaVerifier) -> None:
        """Initialize captcha service.

        Args:
            verifier: Challenge verifier implementation
        """
        self.verifier = verifier

    async def ensure_passed(
        self,
        token: str | None,
        remote_ip: str | None = None,
        field: str = "captcha_token",
    ) -> None:
        """Require a passed challenge.

        Args:
            token: Response token from the request (may be missing)
            remote_ip: Address of the end user, if known
            field: Form field to blame in the validation error

        Raises:
            ValidationError: If the token is missing or rejected
        """
        with logfire.span("captcha_service.ensure_passed", remote_ip=remote_ip):
            if not token:
                logfire.warn("Captcha token missing")
                raise ValidationError(field, "The captcha is required.")

            if not await self.verifier.verify(token, remote_ip=remote_ip):
                logfire.warn("Captcha rejected", remote_ip=remote_ip)
                raise ValidationError(field, "The captcha check failed.")

            logfire.info("Captcha passed")
