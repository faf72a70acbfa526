"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold rules that span several aggregates, such as
    consent gating or action item ordering.
    """

    pass
