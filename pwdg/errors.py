"""
Errors raised when a configuration cannot produce a valid password.

All of them are detected before any randomness is consumed. They subclass
ValueError so plain callers can keep catching that.
"""

from typing import Optional

from .charset import Category


class GenerationError(ValueError):
    """
    Base class for generation errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Offending values (optional)
    """

    code = "GENERATION_ERROR"

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        result = {
            "error": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class LengthTooShort(GenerationError):
    code = "LENGTH_TOO_SHORT"

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Password length must be at least {minimum} characters.",
            {"length": length, "minimum": minimum},
        )


class MinimumsExceedLength(GenerationError):
    code = "MINIMUMS_EXCEED_LENGTH"

    def __init__(self, total: int, length: int):
        self.total = total
        self.length = length
        super().__init__(
            "Sum of minimum character requirements exceeds password length.",
            {"total": total, "length": length},
        )


class EmptyCategory(GenerationError):
    """A category has a positive minimum but every one of its characters is excluded."""

    code = "EMPTY_CATEGORY"

    def __init__(self, category: Category):
        self.category = category
        super().__init__(
            f"Insufficient characters available for {category.value}.",
            {"category": category.value},
        )


class EmptyPool(GenerationError):
    code = "EMPTY_POOL"

    def __init__(self):
        super().__init__("No characters available after exclusions.")
