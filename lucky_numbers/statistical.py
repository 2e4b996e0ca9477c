import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, List, Sequence, Union

import pandas as pd

from .data import DrawResult, draws_to_frame

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, pd.Timestamp]


@dataclass(frozen=True)
class FrequencyEntry:
    number: int
    occurrence_count: int
    most_recent_date: str


def days_since(date_string: DateLike, reference_now: DateLike) -> int:
    """Whole days between `date_string` and `reference_now`, partial days rounded up."""
    delta = abs(pd.Timestamp(reference_now) - pd.Timestamp(date_string))
    return int(math.ceil(delta / pd.Timedelta(days=1)))


def hot_numbers(entries: Sequence[FrequencyEntry], n: int) -> List[int]:
    """First `n` numbers of entries already ordered by `FrequencyAnalyzer.analyze`."""
    if n <= 0:
        return []
    return [e.number for e in entries[:n]]


def cold_numbers(entries: Sequence[FrequencyEntry], n: int) -> List[int]:
    if n <= 0:
        return []
    return [e.number for e in reversed(entries[-n:])]


class FrequencyAnalyzer:
    """Hot/cold frequency statistics over historical main numbers."""

    def analyze(self, results: Sequence[DrawResult]) -> List[FrequencyEntry]:
        """
        Count how often each main number was drawn and when it was last seen.

        Bonus numbers are not counted. Entries are ordered by occurrence count
        (highest first) and then by number (lowest first). An empty history
        gives an empty list.
        """
        if not results:
            return []

        logger.debug("Analyzing frequency over %d draws...", len(results))
        frame = draws_to_frame(results)[['date', 'main_numbers']]
        exploded = frame.explode('main_numbers').dropna(subset=['main_numbers'])
        if exploded.empty:
            return []
        exploded = exploded.assign(number=exploded['main_numbers'].astype(int))

        stats = (
            exploded.groupby('number')
            .agg(occurrence_count=('main_numbers', 'count'), most_recent=('date', 'max'))
            .reset_index()
            .sort_values(['occurrence_count', 'number'], ascending=[False, True])
        )

        return [
            FrequencyEntry(
                number=int(row.number),
                occurrence_count=int(row.occurrence_count),
                most_recent_date=row.most_recent.date().isoformat(),
            )
            for row in stats.itertuples(index=False)
        ]

    def occurrences(self, results: Sequence[DrawResult]) -> Dict[int, int]:
        return {e.number: e.occurrence_count for e in self.analyze(results)}

    def hot(self, results: Sequence[DrawResult], n: int = 10) -> List[int]:
        """The `n` most frequently drawn numbers."""
        return hot_numbers(self.analyze(results), n)

    def cold(self, results: Sequence[DrawResult], n: int = 10) -> List[int]:
        """The `n` least frequently drawn numbers, least frequent first."""
        return cold_numbers(self.analyze(results), n)
