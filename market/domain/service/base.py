"""Base class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span entities or need a
    repository to enforce them.
    """

    pass
