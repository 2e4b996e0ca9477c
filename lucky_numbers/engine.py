import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional, Sequence, Union

from .advisor import CombinationAdvisor, CombinationAnalysis, jackpot_probability
from .config import STATISTICAL_CONFIG, LotteryConfigRegistry
from .data import HistoryManager
from .generator import GeneratedCombination, GenerationMode, NumberGenerator
from .profile import UserProfile
from .statistical import days_since

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TicketResult:
    combination: GeneratedCombination
    analysis: CombinationAnalysis
    jackpot_probability: float

    def to_dict(self) -> Dict:
        return {
            **self.combination.to_dict(),
            'analysis': self.analysis.to_dict(),
            'jackpot_probability': self.jackpot_probability,
        }


class LotteryEngine:
    """Ties generation and analysis together for one registry and one history."""

    def __init__(
        self,
        registry: LotteryConfigRegistry,
        history: HistoryManager,
        generator: Optional[NumberGenerator] = None,
        advisor: Optional[CombinationAdvisor] = None,
    ):
        self.registry = registry
        self.history = history
        self.generator = generator or NumberGenerator(registry)
        self.advisor = advisor or CombinationAdvisor()

    def play(
        self,
        profile: Optional[UserProfile],
        lottery_id: str,
        mode: Union[GenerationMode, str] = GenerationMode.NUMEROLOGY,
        custom: Union[str, Sequence[int], None] = None,
    ) -> TicketResult:
        """Generate a combination for `lottery_id` and describe it against its history."""
        config = self.registry.lookup(lottery_id)
        combination = self.generator.generate(lottery_id, mode, profile=profile, custom=custom)
        analysis = self.advisor.advise(combination.main_numbers, self.history.results(lottery_id))
        return TicketResult(combination, analysis, jackpot_probability(config))

    def statistics(
        self,
        lottery_id: str,
        count: int = STATISTICAL_CONFIG["hot_cold_count"],
        today: Union[str, date, None] = None,
    ) -> Dict:
        """Hot/cold numbers, the full frequency table and the latest draws of a lottery."""
        config = self.registry.lookup(lottery_id)
        results = self.history.results(lottery_id)
        analyzer = self.advisor.analyzer
        logger.info("Computing statistics for %s over %d draws", config.display_name, len(results))

        frequency = []
        for entry in analyzer.analyze(results):
            row = {
                'number': entry.number,
                'occurrence_count': entry.occurrence_count,
                'most_recent_date': entry.most_recent_date,
            }
            if today is not None:
                row['days_since'] = days_since(entry.most_recent_date, today)
            frequency.append(row)

        return {
            'lottery_id': lottery_id,
            'display_name': config.display_name,
            'draws': len(results),
            'hot': analyzer.hot(results, count),
            'cold': analyzer.cold(results, count),
            'frequency': frequency,
            'latest': [
                r.to_dict()
                for r in self.history.latest(lottery_id, STATISTICAL_CONFIG["latest_results"])
            ],
        }
