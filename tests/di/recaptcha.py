"""Mock reCAPTCHA providers for testing."""

from dishka import Scope, provide

from market.adapter.recaptcha import MockRecaptchaVerifier, RecaptchaVerifier
from market.util.di.infrastructure.recaptcha import RecaptchaProvider


class MockRecaptchaProvider(RecaptchaProvider):
    """Mock reCAPTCHA provider, no network calls."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_recaptcha_verifier(self) -> RecaptchaVerifier:
        """Provide mock reCAPTCHA verifier."""
        return MockRecaptchaVerifier()
