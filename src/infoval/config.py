"""
Configuration constants for the infoval package.

Provides centralized default values for the ROC sweep, threshold statistics
and WOE/IV analysis.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class RocConfig:
    """ROC sweep defaults"""

    # Any two scores inside the same step are indistinguishable to the curve.
    DEFAULT_STEP: Final[float] = 0.02


@dataclass(frozen=True)
class ClassificationConfig:
    """Threshold statistic defaults"""

    DEFAULT_THRESHOLD: Final[float] = 0.5
    ROUND_DIGITS: Final[int] = 4


@dataclass(frozen=True)
class WOEConfig:
    """WOE/IV defaults"""

    DEFAULT_VALUE_OF_GOOD: Final[int] = 1
    DEFAULT_EPSILON: Final[float] = 1e-8
    NOT_PREDICTIVE_IV: Final[float] = 0.03
    SOMEWHAT_PREDICTIVE_IV: Final[float] = 0.1


# Singleton instances for easy access
ROC = RocConfig()
CLASSIFICATION = ClassificationConfig()
WOE = WOEConfig()
