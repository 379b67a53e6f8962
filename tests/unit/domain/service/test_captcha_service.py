"""Unit tests for CaptchaService."""

import pytest

from market.adapter.recaptcha import MockRecaptchaVerifier
from market.domain.error import ValidationError
from market.domain.service import CaptchaService


@pytest.fixture
def verifier() -> MockRecaptchaVerifier:
    return MockRecaptchaVerifier()


@pytest.fixture
def captcha_service(verifier) -> CaptchaService:
    return CaptchaService(verifier=verifier)


@pytest.mark.asyncio
async def test_accepted_token_passes(captcha_service, verifier):
    await captcha_service.ensure_passed("token-123", remote_ip="203.0.113.9")

    assert verifier.verified_tokens == ["token-123"]


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, ""])
async def test_missing_token_fails_without_calling_verifier(
    captcha_service, verifier, token
):
    with pytest.raises(ValidationError) as exc_info:
        await captcha_service.ensure_passed(token)

    assert exc_info.value.field == "captcha_token"
    assert exc_info.value.message == "The captcha is required."
    assert verifier.verified_tokens == []


@pytest.mark.asyncio
async def test_rejected_token_fails(captcha_service):
    with pytest.raises(ValidationError) as exc_info:
        await captcha_service.ensure_passed(MockRecaptchaVerifier.REJECTED_TOKEN)

    assert exc_info.value.message == "The captcha check failed."


@pytest.mark.asyncio
async def test_custom_field_is_reported(captcha_service):
    with pytest.raises(ValidationError) as exc_info:
        await captcha_service.ensure_passed(None, field="g-recaptcha-response")

    assert exc_info.value.field == "g-recaptcha-response"
