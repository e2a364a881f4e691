"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold logic that sits beside the repositories rather than in a
    single entity.
    """

    pass
