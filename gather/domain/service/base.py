"""Domain service base."""


class Service:
    """Marker base for domain services.

    Services receive repositories and settings through their constructor and
    keep no per-request state, so one instance serves a whole request scope.
    Ownership and invitation checks live here rather than in the API layer.
    """
