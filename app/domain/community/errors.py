"""
Domain-specific errors for the community bounded context.

Each error carries the stable ``code`` returned to clients.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class CommunityDomainError(Exception):
    """Base error for all community domain errors."""

    code = "community_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MissingFieldsError(CommunityDomainError):
    """Raised when a required question field is empty after sanitizing."""

    code = "missing_fields"

    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"Missing required fields: {', '.join(fields)}")
        self.fields = fields


class DatastoreNotConfiguredError(CommunityDomainError):
    """Raised when no questions datastore is configured."""

    code = "supabase_not_configured"

    def __init__(self) -> None:
        super().__init__("Questions datastore is not configured")


class DatastoreError(CommunityDomainError):
    """Raised when the questions datastore rejects a read or write."""

    code = "db_error"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Questions datastore error: {reason}")
        self.reason = reason
