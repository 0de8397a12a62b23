"""
Request-level errors raised by the interface layer.

These describe malformed HTTP input rather than domain rule violations.
"""


class InvalidJsonError(Exception):
    """Raised when a request body is not a JSON object."""

    code = "invalid_json"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid JSON body: {reason}")
