"""pwdg: random passwords with per-category minimums and exclusions."""

__version__ = "0.1.0"

from .charset import SPECIAL_CHARS, Category
from .errors import (
    EmptyCategory,
    EmptyPool,
    GenerationError,
    LengthTooShort,
    MinimumsExceedLength,
)
from .generator import (
    MIN_LENGTH,
    Configuration,
    PasswordGenerator,
    configuration,
    generate,
    validate,
)

__all__ = [
    "SPECIAL_CHARS",
    "Category",
    "GenerationError",
    "LengthTooShort",
    "MinimumsExceedLength",
    "EmptyCategory",
    "EmptyPool",
    "MIN_LENGTH",
    "Configuration",
    "PasswordGenerator",
    "configuration",
    "generate",
    "validate",
]
