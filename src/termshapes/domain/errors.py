"""Domain-layer error definitions."""


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidContentItemError(DomainError):
    """Raised when a content item record is missing a required field."""

    def __init__(self, field_name: str, values: object) -> None:
        super().__init__(
            f"Content item record is missing required field '{field_name}': {values!r}"
        )
        self.field_name = field_name
