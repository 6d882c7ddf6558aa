"""
Base exception for the storefront pricing & shipping core.
"""


class StorefrontException(Exception):
    """
    Root of the storefront exception hierarchy.

    Raised when catalog or shipping configuration cannot be used, e.g. a rate
    band with max <= min. ``details`` carries the offending field values so an
    admin form can point at them.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if not self.details:
            return f"<{type(self).__name__}: {self.message}>"
        fields = ' '.join(f"{key}={value!r}" for key, value in self.details.items())
        return f"<{type(self).__name__}: {self.message} [{fields}]>"

    def to_dict(self) -> dict:
        """Error payload for admin forms: {"error", "message", "details"}."""
        return {
            'error': type(self).__name__,
            'message': self.message,
            'details': dict(self.details),
        }
