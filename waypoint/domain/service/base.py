"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the behaviour that does not belong to a single
    entity: gate decisions, invite resolution, key lookups.
    """

    pass
