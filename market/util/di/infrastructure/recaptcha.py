"""reCAPTCHA infrastructure providers."""

from dishka import Scope, provide

from market.adapter.recaptcha import RealRecaptchaVerifier, RecaptchaVerifier
from market.config import Settings
from market.util.di.base import ProviderBase
from market.util.error import ConfigurationError


class RecaptchaProvider(ProviderBase):
    """reCAPTCHA component base."""

    __mock_component__ = "recaptcha"


class ProdRecaptchaProvider(RecaptchaProvider):
    """Production reCAPTCHA provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_recaptcha_verifier(self, settings: Settings) -> RecaptchaVerifier:
        """Provide reCAPTCHA verifier.

        Raises:
            ConfigurationError: If no secret key is configured
        """
        if not settings.recaptcha.secret_key:
            raise ConfigurationError("reCAPTCHA secret key must be configured")

        return RealRecaptchaVerifier(
            secret_key=settings.recaptcha.secret_key,
            verify_url=settings.recaptcha.verify_url,
            timeout=settings.recaptcha.timeout_seconds,
        )
