import logging
import operator
import re
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .config import NUMEROLOGY_CONFIG, LotteryConfig, LotteryConfigRegistry
from .errors import ValidationError
from .numerology import life_path_number, reduce_digits, reduce_name
from .profile import UserProfile

logger = logging.getLogger(__name__)

_INTEGER_TOKEN = re.compile(r"^[+-]?\d+$", re.ASCII)


class GenerationMode(str, Enum):
    NUMEROLOGY = "numerology"
    RANDOM = "random"
    CUSTOM = "custom"


@dataclass(frozen=True)
class GeneratedCombination:
    lottery_id: str
    main_numbers: Tuple[int, ...]
    bonus_numbers: Tuple[int, ...]
    source_mode: GenerationMode

    def to_dict(self) -> dict:
        return {
            'lottery_id': self.lottery_id,
            'main_numbers': list(self.main_numbers),
            'bonus_numbers': list(self.bonus_numbers),
            'source': self.source_mode.value,
        }


def parse_custom_numbers(raw: Union[str, Sequence[int]]) -> List[int]:
    """Turn '7, 14, 21' (or an already parsed sequence) into a list of ints."""
    if isinstance(raw, str):
        tokens = [t.strip() for t in raw.split(',')]
        for token in tokens:
            if not _INTEGER_TOKEN.match(token):
                raise ValidationError("format", f"'{token}' is not a whole number", tokens)
        return [int(token) for token in tokens]

    numbers = []
    for value in raw:
        if isinstance(value, (bool, np.bool_)):
            raise ValidationError("format", f"{value!r} is not a whole number", raw)
        try:
            numbers.append(operator.index(value))
        except TypeError:
            raise ValidationError("format", f"{value!r} is not a whole number", raw) from None
    return numbers


class NumberGenerator:
    """Produces main and bonus numbers for a lottery in numerology, random or custom mode."""

    def __init__(
        self,
        registry: LotteryConfigRegistry,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        self.registry = registry
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.step = NUMEROLOGY_CONFIG["step"]

    def numerology(self, profile: UserProfile, lottery_id: str) -> List[int]:
        """Deterministic combination derived from the profile's birth date, name and significant dates."""
        config = self.registry.lookup(lottery_id)

        seeds = [life_path_number(profile.birth_date)]
        seeds += reduce_name(profile.name)
        seeds += [reduce_digits(d.date) for d in profile.significant_dates]

        numbers: List[int] = []
        for i in range(config.total_numbers):
            num = (seeds[i % len(seeds)] + i * self.step) % config.max_number + 1
            # Linear probe over 1..max_number, always finds a free slot
            while num in numbers:
                num = num % config.max_number + 1
            numbers.append(num)

        logger.debug("Numerology seeds for %s: %s", lottery_id, seeds)
        return sorted(numbers)

    def random(self, lottery_id: str) -> List[int]:
        config = self.registry.lookup(lottery_id)
        return self._sample(config.max_number, config.total_numbers)

    def bonus(self, lottery_id: str) -> List[int]:
        config = self.registry.lookup(lottery_id)
        if not config.has_bonus:
            return []
        return self._sample(config.max_bonus, config.bonus_count)

    def custom(self, lottery_id: str, raw: Union[str, Sequence[int]]) -> List[int]:
        """Validate a player-chosen combination and return it sorted."""
        config = self.registry.lookup(lottery_id)
        numbers = parse_custom_numbers(raw)
        self._validate(config, numbers)
        return sorted(numbers)

    def generate(
        self,
        lottery_id: str,
        mode: Union[GenerationMode, str],
        profile: Optional[UserProfile] = None,
        custom: Union[str, Sequence[int], None] = None,
    ) -> GeneratedCombination:
        mode = GenerationMode(mode)
        if mode is GenerationMode.NUMEROLOGY:
            if profile is None:
                raise ValueError("Numerology mode needs a user profile")
            main = self.numerology(profile, lottery_id)
        elif mode is GenerationMode.RANDOM:
            main = self.random(lottery_id)
        else:
            if custom is None:
                raise ValueError("Custom mode needs a list of numbers")
            main = self.custom(lottery_id, custom)

        bonus = self.bonus(lottery_id)
        logger.info("Generated %s combination for %s: %s + %s", mode.value, lottery_id, main, bonus)
        return GeneratedCombination(lottery_id, tuple(main), tuple(bonus), mode)

    def _sample(self, max_number: int, size: int) -> List[int]:
        picks = self.rng.choice(np.arange(1, max_number + 1), size=size, replace=False)
        return sorted(int(n) for n in picks)

    @staticmethod
    def _validate(config: LotteryConfig, numbers: List[int]) -> None:
        if len(numbers) != config.total_numbers:
            raise ValidationError(
                "count",
                f"{config.display_name} needs exactly {config.total_numbers} numbers, got {len(numbers)}",
                numbers,
            )

        out_of_range = [n for n in numbers if not 1 <= n <= config.max_number]
        if out_of_range:
            raise ValidationError(
                "range",
                f"Numbers must be between 1 and {config.max_number}: {out_of_range}",
                numbers,
            )

        repeated = sorted(n for n, count in Counter(numbers).items() if count > 1)
        if repeated:
            raise ValidationError("duplicate", f"Numbers cannot repeat: {repeated}", numbers)
