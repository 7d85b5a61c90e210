"""Engine configuration."""

from dataclasses import dataclass

from decimals.rounding import RoundingMode


@dataclass(frozen=True)
class DecimalConfig:
    """Settings bound into a DecimalEngine.

    Attributes:
        max_digits: Maximum coefficient digit count for any result, or None
            for unbounded precision (default: None)
        default_rounding: Rounding mode used when a call gives none
            (default: HALF_UP)
        default_scale: Result scale for divide() when a call gives none
            (default: 18)
        trim_whitespace: If True, parse() ignores surrounding whitespace
            (default: False)
    """

    max_digits: int | None = None
    default_rounding: RoundingMode = RoundingMode.HALF_UP
    default_scale: int = 18
    trim_whitespace: bool = False

    def __post_init__(self) -> None:
        if self.max_digits is not None and self.max_digits < 1:
            raise ValueError(f"max_digits must be positive or None, got {self.max_digits}")
        if not isinstance(self.default_rounding, RoundingMode):
            raise ValueError(f"default_rounding must be a RoundingMode, got {self.default_rounding!r}")


# Default configuration instance
DEFAULT_CONFIG = DecimalConfig()
