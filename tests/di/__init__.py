"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .recaptcha import MockRecaptchaProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockRecaptchaProvider",
    "build_test_container",
]
