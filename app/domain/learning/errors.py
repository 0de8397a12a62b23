"""
Domain-specific errors for the learning bounded context.

Each error carries a stable ``code`` that the interface layer
returns to clients. No framework imports allowed.
"""


class LearningDomainError(Exception):
    """Base error for all learning domain errors."""

    code = "learning_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ContentNotFoundError(LearningDomainError):
    """Raised when neither the locale nor the English document exists."""

    code = "content_not_found"

    def __init__(self, content_type: str, locale: str, slug: str) -> None:
        super().__init__(f"Content not found: {content_type}/{locale}/{slug}")
        self.content_type = content_type
        self.locale = locale
        self.slug = slug


class UnsupportedLocaleError(LearningDomainError):
    """Raised when a locale outside the configured set is requested."""

    code = "unsupported_locale"

    def __init__(self, locale: str) -> None:
        super().__init__(f"Unsupported locale: {locale}")
        self.locale = locale


class InvalidMessageError(LearningDomainError):
    """Raised when a chat message is empty or too long."""

    code = "invalid_message"

    def __init__(self, length: int, max_length: int) -> None:
        super().__init__(
            f"Invalid chat message length {length}, must be 1-{max_length}"
        )
        self.length = length
        self.max_length = max_length
