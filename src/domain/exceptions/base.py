"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Carries a machine-readable ``code`` alongside the human message; the
    API layer maps the exception type to an HTTP status and returns both.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Error body fields for API responses."""
        return {"error": self.code, "message": self.message}
