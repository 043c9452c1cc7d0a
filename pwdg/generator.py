"""
pwdg.generator
Constrained password generator using the OS CSPRNG (secrets.SystemRandom).
"""

import dataclasses
from random import Random
from secrets import SystemRandom
from typing import Dict, FrozenSet, Iterable, List, NamedTuple, Optional

from .charset import ALL_CHARS, CATEGORIES, Category, filtered
from .errors import EmptyCategory, EmptyPool, LengthTooShort, MinimumsExceedLength


MIN_LENGTH = 8


def _check_count(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")


@dataclasses.dataclass(frozen=True)
class Configuration:
    length: int = MIN_LENGTH
    min_upper: int = 0
    min_lower: int = 0
    min_digit: int = 0
    min_special: int = 0
    excluded: FrozenSet[str] = frozenset()

    def __post_init__(self):
        _check_count("length", self.length)
        for category in CATEGORIES:
            _check_count(f"min_{category.value}", self.minimum(category))
        # any iterable of strings; multi-character entries count as their characters
        excluded = frozenset(ch for item in (self.excluded or ()) for ch in item)
        object.__setattr__(self, "excluded", excluded)

    def minimum(self, category: Category) -> int:
        return getattr(self, f"min_{category.value}")

    @property
    def total_minimum(self) -> int:
        return sum(self.minimum(c) for c in CATEGORIES)

    def strong(self) -> "Configuration":
        """Copy with at least one character of every category required."""
        return dataclasses.replace(
            self, min_upper=1, min_lower=1, min_digit=1, min_special=1
        )


class CharacterSets(NamedTuple):
    available: Dict[Category, str]
    pool: str
    remaining: int


def validate(config: Configuration) -> CharacterSets:
    """
    Check `config` and return the per-category sets and the filler pool
    after exclusions. Raises a GenerationError subclass on failure.
    """
    if config.length < MIN_LENGTH:
        raise LengthTooShort(config.length, MIN_LENGTH)

    total = config.total_minimum
    if total > config.length:
        raise MinimumsExceedLength(total, config.length)

    available = {}
    for category in CATEGORIES:
        chars = filtered(category.chars, config.excluded)
        if config.minimum(category) > 0 and not chars:
            raise EmptyCategory(category)
        available[category] = chars

    pool = filtered(ALL_CHARS, config.excluded)
    remaining = config.length - total
    if remaining > 0 and not pool:
        raise EmptyPool()

    return CharacterSets(available, pool, remaining)


class PasswordGenerator:
    """
    Validates a Configuration once and generates passwords from it.

    `rng` must provide `choice` and `shuffle` (any random.Random). Each
    generator gets its own SystemRandom unless one is passed in.
    """

    def __init__(self, config: Configuration, rng: Optional[Random] = None):
        self._sets = validate(config)
        self.config = config
        self.rng = rng if rng is not None else SystemRandom()

    @property
    def length(self) -> int:
        return self.config.length

    def generate(self) -> str:
        password_chars: List[str] = []
        for category in CATEGORIES:
            chars = self._sets.available[category]
            password_chars.extend(
                self.rng.choice(chars) for _ in range(self.config.minimum(category))
            )

        pool = self._sets.pool
        password_chars.extend(self.rng.choice(pool) for _ in range(self._sets.remaining))

        # guaranteed characters must not sit at fixed positions
        self.rng.shuffle(password_chars)
        return "".join(password_chars)

    def generate_many(self, count: int) -> List[str]:
        if count < 1:
            raise ValueError("count must be > 0")
        return [self.generate() for _ in range(count)]


def generate(config: Configuration, rng: Optional[Random] = None) -> str:
    """Generate one password for `config`."""
    return PasswordGenerator(config, rng).generate()


def configuration(
    length: int = MIN_LENGTH,
    min_upper: int = 0,
    min_lower: int = 0,
    min_digit: int = 0,
    min_special: int = 0,
    exclude: Iterable[str] = "",
    strong: bool = False,
) -> Configuration:
    """
    Build a Configuration from loose options. `strong` forces every minimum
    to 1, overriding the explicit ones.
    """
    cfg = Configuration(
        length=length,
        min_upper=min_upper,
        min_lower=min_lower,
        min_digit=min_digit,
        min_special=min_special,
        excluded=frozenset(exclude or ""),
    )
    return cfg.strong() if strong else cfg
