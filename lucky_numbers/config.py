import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List

from .errors import UnknownLotteryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LotteryConfig:
    """Draw shape of a lottery: how many main/bonus numbers and their ranges."""
    id: str
    display_name: str
    max_number: int
    total_numbers: int
    bonus_count: int = 0
    max_bonus: int = 0

    def __post_init__(self):
        if self.max_number <= 0:
            raise ValueError(f"{self.id}: max_number must be positive")
        if not 1 <= self.total_numbers <= self.max_number:
            raise ValueError(f"{self.id}: total_numbers must be within 1..{self.max_number}")
        if self.bonus_count < 0 or self.max_bonus < 0:
            raise ValueError(f"{self.id}: bonus settings cannot be negative")
        if self.bonus_count > 0 and not 0 < self.bonus_count <= self.max_bonus:
            raise ValueError(f"{self.id}: bonus_count must be within 1..max_bonus")

    @property
    def has_bonus(self) -> bool:
        return self.bonus_count > 0


# Lottery Rules
DEFAULT_LOTTERIES = (
    LotteryConfig("euromillions", "EuroMillions", max_number=50, total_numbers=5, bonus_count=2, max_bonus=12),
    LotteryConfig("powerball", "Powerball", max_number=69, total_numbers=5, bonus_count=1, max_bonus=26),
    LotteryConfig("megamillions", "Mega Millions", max_number=70, total_numbers=5, bonus_count=1, max_bonus=25),
    LotteryConfig("spanish", "Lotería Primitiva", max_number=49, total_numbers=6, bonus_count=1, max_bonus=9),
)

NUMEROLOGY_CONFIG = {
    "step": 7,                  # offset added per position when spreading seeds
    "master_numbers": (11, 22)  # never reduced further
}

STATISTICAL_CONFIG = {
    "hot_cold_count": 10,
    "risk_threshold": 3,
    "latest_results": 5
}

SPENDING_CONFIG = {
    "caution_percent": 60,
    "warning_percent": 80
}

RESPONSIBLE_GAMING_MESSAGES = (
    "Remember: the lottery is a game of chance. Only play what you can afford to lose.",
    "Set spending limits and stick to them. Your financial wellbeing matters more.",
    "Past numbers do not predict the future. Every draw is independent.",
    "If gambling is affecting your life, seek professional help.",
    "Play for fun, not as a way to solve financial problems.",
    "The chance of winning the jackpot is extremely low.",
    "Never borrow money to play the lottery.",
    "Gambling should be entertainment, not an obsession.",
)


class LotteryConfigRegistry:
    """Immutable lookup table from lottery id to its draw shape."""

    def __init__(self, configs: Iterable[LotteryConfig] = DEFAULT_LOTTERIES):
        table: Dict[str, LotteryConfig] = {}
        for config in configs:
            if config.id in table:
                raise ValueError(f"Duplicate lottery id: {config.id}")
            table[config.id] = config
        self._configs = table
        logger.debug("Registered %d lottery configurations", len(table))

    def lookup(self, lottery_id: str) -> LotteryConfig:
        """Return the configuration for `lottery_id` or raise UnknownLotteryError."""
        try:
            return self._configs[lottery_id]
        except KeyError:
            raise UnknownLotteryError(lottery_id) from None

    def ids(self) -> List[str]:
        return list(self._configs)

    def __contains__(self, lottery_id) -> bool:
        return lottery_id in self._configs

    def __iter__(self) -> Iterator[LotteryConfig]:
        return iter(self._configs.values())

    def __len__(self) -> int:
        return len(self._configs)
