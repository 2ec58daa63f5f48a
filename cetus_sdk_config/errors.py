from typing import Optional


class SdkConfigError(ValueError):
    """Raised when an options record is malformed or cannot be resolved."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
