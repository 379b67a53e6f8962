"""Google reCAPTCHA adapter."""

from .client import (
    MockRecaptchaVerifier,
    RealRecaptchaVerifier,
    RecaptchaError,
    RecaptchaVerifier,
)

__all__ = [
    "MockRecaptchaVerifier",
    "RealRecaptchaVerifier",
    "RecaptchaError",
    "RecaptchaVerifier",
]
