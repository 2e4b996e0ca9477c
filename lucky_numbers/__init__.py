"""Numerology, random and custom lottery combinations with hot/cold statistics."""

from .advisor import CombinationAdvisor, CombinationAnalysis, ResponsibleGaming, RiskTier, jackpot_probability
from .config import DEFAULT_LOTTERIES, LotteryConfig, LotteryConfigRegistry
from .data import SAMPLE_HISTORY, DrawResult, HistoryManager
from .engine import LotteryEngine, TicketResult
from .errors import LotteryError, UnknownLotteryError, ValidationError
from .generator import GeneratedCombination, GenerationMode, NumberGenerator, parse_custom_numbers
from .numerology import life_path_number, reduce_digits, reduce_name, reduce_number
from .profile import SignificantDate, SpendingStatus, UserProfile
from .statistical import FrequencyAnalyzer, FrequencyEntry, days_since

__all__ = [
    "CombinationAdvisor",
    "CombinationAnalysis",
    "DEFAULT_LOTTERIES",
    "DrawResult",
    "FrequencyAnalyzer",
    "FrequencyEntry",
    "GeneratedCombination",
    "GenerationMode",
    "HistoryManager",
    "LotteryConfig",
    "LotteryConfigRegistry",
    "LotteryEngine",
    "LotteryError",
    "NumberGenerator",
    "ResponsibleGaming",
    "RiskTier",
    "SAMPLE_HISTORY",
    "SignificantDate",
    "SpendingStatus",
    "TicketResult",
    "UnknownLotteryError",
    "UserProfile",
    "ValidationError",
    "days_since",
    "jackpot_probability",
    "life_path_number",
    "parse_custom_numbers",
    "reduce_digits",
    "reduce_name",
    "reduce_number",
]
