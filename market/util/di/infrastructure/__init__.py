"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .recaptcha import RecaptchaProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .recaptcha import ProdRecaptchaProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdRecaptchaProvider",
    "RecaptchaProvider",
]
