"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyLikedError(DomainError):
    """Raised when a visitor likes a quote they have already liked."""

    def __init__(self, quote_id: str, visitor_id: str):
        self.quote_id = quote_id
        self.visitor_id = visitor_id
        super().__init__(f"Visitor {visitor_id} already liked quote {quote_id}")
