import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from .config import RESPONSIBLE_GAMING_MESSAGES, STATISTICAL_CONFIG, LotteryConfig
from .data import DrawResult
from .statistical import FrequencyAnalyzer, cold_numbers, hot_numbers

logger = logging.getLogger(__name__)

HOT_MESSAGE = ('You picked several "hot" numbers. Remember that numbers drawn often '
               'in the past are not more likely to win.')
COLD_MESSAGE = ('You picked several "cold" numbers. Some players believe they are "due", '
                'but every draw is independent.')
BALANCED_MESSAGE = ('You have a balanced mix of numbers. Remember that every combination '
                    'has the same probability.')


class RiskTier(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class CombinationAnalysis:
    hot_count: int
    cold_count: int
    average_frequency: float
    risk_tier: RiskTier
    message: str

    def to_dict(self) -> dict:
        return {
            'hot_count': self.hot_count,
            'cold_count': self.cold_count,
            'average_frequency': self.average_frequency,
            'risk_tier': self.risk_tier.value,
            'message': self.message,
        }


class CombinationAdvisor:
    """Classifies a combination by its overlap with the hot and cold numbers of a history."""

    def __init__(
        self,
        analyzer: Optional[FrequencyAnalyzer] = None,
        window: int = STATISTICAL_CONFIG["hot_cold_count"],
        threshold: int = STATISTICAL_CONFIG["risk_threshold"],
    ):
        self.analyzer = analyzer or FrequencyAnalyzer()
        self.window = window
        self.threshold = threshold

    def advise(self, main_numbers: Sequence[int], results: Sequence[DrawResult]) -> CombinationAnalysis:
        """
        Describe `main_numbers` against `results`.

        The hot check runs before the cold check: a combination with enough
        hot numbers is HIGH even when it also holds enough cold ones.
        """
        entries = self.analyzer.analyze(results)
        hot = set(hot_numbers(entries, self.window))
        cold = set(cold_numbers(entries, self.window))
        counts = {e.number: e.occurrence_count for e in entries}

        hot_count = sum(1 for n in main_numbers if n in hot)
        cold_count = sum(1 for n in main_numbers if n in cold)
        frequencies = [counts.get(n, 0) for n in main_numbers]
        average = float(np.mean(frequencies)) if frequencies else 0.0

        if hot_count >= self.threshold:
            tier, message = RiskTier.HIGH, HOT_MESSAGE
        elif cold_count >= self.threshold:
            tier, message = RiskTier.LOW, COLD_MESSAGE
        else:
            tier, message = RiskTier.MEDIUM, BALANCED_MESSAGE

        logger.debug("Combination %s: hot=%d cold=%d avg=%.2f -> %s",
                     list(main_numbers), hot_count, cold_count, average, tier.value)
        return CombinationAnalysis(hot_count, cold_count, average, tier, message)


def jackpot_probability(config: LotteryConfig) -> float:
    """Percent chance of matching every main number of `config` with one ticket."""
    return 100.0 / math.comb(config.max_number, config.total_numbers)


class ResponsibleGaming:
    """Picks a responsible-gaming reminder to show next to generated numbers."""

    def __init__(
        self,
        messages: Sequence[str] = RESPONSIBLE_GAMING_MESSAGES,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        if not messages:
            raise ValueError("At least one message is required")
        self.messages = tuple(messages)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def pick(self) -> str:
        return self.messages[int(self.rng.integers(len(self.messages)))]
