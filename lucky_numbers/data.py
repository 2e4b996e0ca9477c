import json
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

import pandas as pd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawResult:
    """One historical draw. Main numbers are stored sorted ascending."""
    date: str
    numbers: Tuple[int, ...]
    bonus_numbers: Tuple[int, ...] = ()
    jackpot: float = 0

    def __post_init__(self):
        try:
            parsed = pd.Timestamp(self.date)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Draw has an invalid date: {self.date!r}") from e
        if pd.isna(parsed):
            raise ValueError(f"Draw has an invalid date: {self.date!r}")

        numbers = tuple(sorted(int(n) for n in self.numbers))
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"Draw {self.date} has repeated main numbers: {list(numbers)}")
        if self.jackpot < 0:
            raise ValueError(f"Draw {self.date} has a negative jackpot")
        object.__setattr__(self, "numbers", numbers)
        object.__setattr__(self, "bonus_numbers", tuple(int(n) for n in self.bonus_numbers))

    @classmethod
    def from_dict(cls, data: Mapping) -> "DrawResult":
        return cls(
            date=str(data["date"]),
            numbers=tuple(data["numbers"]),
            bonus_numbers=tuple(data.get("bonus_numbers") or ()),
            jackpot=data.get("jackpot", 0),
        )

    def to_dict(self) -> Dict:
        return {
            "date": self.date,
            "numbers": list(self.numbers),
            "bonus_numbers": list(self.bonus_numbers),
            "jackpot": self.jackpot,
        }


def _draws(rows: Iterable[Tuple[str, Sequence[int], Sequence[int], int]]) -> Tuple[DrawResult, ...]:
    return tuple(DrawResult(date, tuple(main), tuple(bonus), jackpot) for date, main, bonus, jackpot in rows)


# Sample history, newest draw first
SAMPLE_HISTORY: Dict[str, Tuple[DrawResult, ...]] = {
    "euromillions": _draws([
        ("2024-09-20", (7, 12, 23, 34, 45), (3, 8), 45000000),
        ("2024-09-17", (2, 15, 28, 39, 47), (1, 11), 42000000),
        ("2024-09-13", (9, 18, 25, 31, 42), (5, 9), 38000000),
        ("2024-09-10", (4, 16, 22, 35, 48), (2, 7), 35000000),
        ("2024-09-06", (11, 19, 26, 33, 44), (4, 10), 32000000),
    ]),
    "powerball": _draws([
        ("2024-09-21", (8, 15, 27, 42, 58), (13,), 85000000),
        ("2024-09-18", (3, 22, 35, 49, 63), (8,), 78000000),
        ("2024-09-14", (12, 28, 41, 55, 67), (19,), 72000000),
        ("2024-09-11", (5, 18, 32, 46, 61), (4,), 65000000),
        ("2024-09-07", (14, 25, 38, 52, 69), (22,), 58000000),
    ]),
    "spanish": _draws([
        ("2024-09-19", (6, 13, 21, 29, 37, 45), (3,), 8000000),
        ("2024-09-16", (2, 17, 24, 32, 41, 48), (7,), 7500000),
        ("2024-09-12", (9, 15, 26, 34, 43, 49), (1,), 7200000),
        ("2024-09-09", (4, 11, 23, 31, 39, 46), (5,), 6800000),
        ("2024-09-05", (7, 18, 25, 33, 42, 47), (9,), 6500000),
    ]),
}


def draws_to_frame(results: Sequence[DrawResult]) -> pd.DataFrame:
    """Tabular view of draws, oldest first, with a parsed `date` column."""
    frame = pd.DataFrame(
        [
            {
                'date': pd.Timestamp(r.date),
                'main_numbers': list(r.numbers),
                'bonus_numbers': list(r.bonus_numbers),
                'jackpot': r.jackpot,
            }
            for r in results
        ],
        columns=['date', 'main_numbers', 'bonus_numbers', 'jackpot'],
    )
    frame.sort_values('date', inplace=True, kind='mergesort')
    frame.reset_index(drop=True, inplace=True)
    return frame


class HistoryManager:
    """Read-only holder of historical draws keyed by lottery id."""

    def __init__(self, history: Mapping[str, Iterable[DrawResult]] = SAMPLE_HISTORY):
        self._history = {lottery_id: tuple(draws) for lottery_id, draws in history.items()}

    @classmethod
    def from_json(cls, file_path: str) -> "HistoryManager":
        """Load history from a JSON document shaped {lottery_id: [draw, ...]}."""
        with open(file_path, 'r', encoding='utf-8') as f:
            content = json.load(f)

        if not isinstance(content, dict):
            raise ValueError(f"{file_path}: expected an object keyed by lottery id")

        history = {}
        for lottery_id, rows in content.items():
            try:
                history[lottery_id] = tuple(DrawResult.from_dict(row) for row in rows)
            except (KeyError, TypeError) as e:
                raise ValueError(f"{file_path}: malformed draw for {lottery_id}: {e}") from e

        logger.info("Loaded %d draws for %d lotteries from %s",
                    sum(len(d) for d in history.values()), len(history), file_path)
        return cls(history)

    def lottery_ids(self) -> List[str]:
        return list(self._history)

    def results(self, lottery_id: str) -> Tuple[DrawResult, ...]:
        """All draws for `lottery_id`; an empty tuple when none are recorded."""
        return self._history.get(lottery_id, ())

    def latest(self, lottery_id: str, count: int = 5) -> List[DrawResult]:
        draws = sorted(self.results(lottery_id), key=lambda r: pd.Timestamp(r.date), reverse=True)
        return draws[:max(count, 0)]

    def frame(self, lottery_id: str) -> pd.DataFrame:
        return draws_to_frame(self.results(lottery_id))
