"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span several entities, such as keeping a
    counter on one row in step with rows of another table. They are built
    per request by the container.
    """
