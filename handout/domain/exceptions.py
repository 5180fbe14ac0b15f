class HandoutError(Exception):
    """Base exception for handout builder errors"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PlanValidationError(HandoutError):
    """Raised when an entry cannot be added; the message is shown to the user as-is"""

    def __init__(self, message: str, code: str, details: dict = None):
        super().__init__(message, details)
        self.code = code
