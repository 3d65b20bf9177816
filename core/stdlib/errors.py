# ==========================================
# ERROR HANDLING: coded stdlib failures
# ==========================================
from enum import Enum


class ErrorCode(str, Enum):
    """Stable codes printed in front of every stdlib error."""
    INVALID_PATTERN = "TEXT-001"
    INDEX_OUT_OF_BOUNDS = "TEXT-002"
    DIVISION_BY_ZERO = "MATH-001"
    INVALID_NUMBER = "MATH-002"
    OVERFLOW = "MATH-003"
    INVALID_OPERATOR = "MATH-004"
    EMPTY_LIST = "LIST-001"
    INVALID_INDEX = "LIST-002"


class StdlibError(Exception):
    """Raised by stdlib helpers; str() is 'CODE: message'."""

    def __init__(self, code, message):
        self.code = code
        self.message = message
        super().__init__(f"{code.value}: {message}")
