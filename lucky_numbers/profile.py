import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Tuple

from .config import SPENDING_CONFIG

# "2015-06-20 (Wedding)" as entered in the profile form
_LABELLED_DATE = re.compile(r"^\s*(?P<date>[^(]*?)\s*(?:\((?P<label>.*)\))?\s*$")


class SpendingStatus(str, Enum):
    OK = "ok"
    CAUTION = "caution"
    WARNING = "warning"


@dataclass(frozen=True)
class SignificantDate:
    date: str
    label: str = ""

    @classmethod
    def parse(cls, text: str) -> "SignificantDate":
        """Parse the 'date (label)' form; the label part is optional."""
        match = _LABELLED_DATE.match(text)
        if not match or not match.group("date"):
            raise ValueError(f"Invalid significant date: {text!r}")
        return cls(match.group("date"), (match.group("label") or "").strip())

    def __str__(self) -> str:
        return f"{self.date} ({self.label})" if self.label else self.date


@dataclass(frozen=True)
class UserProfile:
    """Player data supplied by the profile screen. Read-only for the engine."""
    name: str
    birth_date: str
    significant_dates: Tuple[SignificantDate, ...] = ()
    preferred_lotteries: FrozenSet[str] = field(default_factory=frozenset)
    spending_limit: float = 0.0
    current_spending: float = 0.0

    def __post_init__(self):
        if self.spending_limit < 0 or self.current_spending < 0:
            raise ValueError("Spending amounts cannot be negative")
        object.__setattr__(self, "significant_dates", tuple(self.significant_dates))
        object.__setattr__(self, "preferred_lotteries", frozenset(self.preferred_lotteries))

    @classmethod
    def from_dict(cls, data: Dict) -> "UserProfile":
        dates = []
        for item in data.get("significant_dates", []):
            if isinstance(item, SignificantDate):
                dates.append(item)
            elif isinstance(item, str):
                dates.append(SignificantDate.parse(item))
            else:
                date, label = item
                dates.append(SignificantDate(date, label))
        return cls(
            name=data.get("name", ""),
            birth_date=data.get("birth_date", ""),
            significant_dates=tuple(dates),
            preferred_lotteries=frozenset(data.get("preferred_lotteries", ())),
            spending_limit=float(data.get("spending_limit", 0)),
            current_spending=float(data.get("current_spending", 0)),
        )

    def spending_percent(self) -> float:
        if self.spending_limit == 0:
            return 100.0 if self.current_spending > 0 else 0.0
        return self.current_spending / self.spending_limit * 100

    def spending_status(self) -> SpendingStatus:
        percent = self.spending_percent()
        if percent > SPENDING_CONFIG["warning_percent"]:
            return SpendingStatus.WARNING
        if percent > SPENDING_CONFIG["caution_percent"]:
            return SpendingStatus.CAUTION
        return SpendingStatus.OK
