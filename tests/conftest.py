import numpy as np
import pytest

from lucky_numbers.config import LotteryConfig, LotteryConfigRegistry
from lucky_numbers.data import SAMPLE_HISTORY, DrawResult, HistoryManager
from lucky_numbers.profile import SignificantDate, UserProfile


@pytest.fixture
def registry():
    return LotteryConfigRegistry()


@pytest.fixture
def history():
    return HistoryManager(SAMPLE_HISTORY)


@pytest.fixture
def euromillions_results():
    return SAMPLE_HISTORY["euromillions"]


@pytest.fixture
def repeated_results():
    # 3 drawn three times, 2 and 4 twice, 1 and 5 once; deliberately out of date order
    return (
        DrawResult("2024-01-08", (2, 3, 4), (9,)),
        DrawResult("2024-01-15", (3, 4, 5), (8,)),
        DrawResult("2024-01-01", (1, 2, 3), (7,)),
    )


@pytest.fixture
def profile():
    return UserProfile(
        name="Ana",
        birth_date="1990-05-15",
        significant_dates=(SignificantDate("2015-06-20", "Wedding"),),
        preferred_lotteries=frozenset({"euromillions"}),
        spending_limit=100,
        current_spending=20,
    )


@pytest.fixture
def small_registry():
    return LotteryConfigRegistry([
        LotteryConfig("tiny", "Tiny", max_number=7, total_numbers=7),
        LotteryConfig("wrap", "Wrap", max_number=5, total_numbers=2),
        LotteryConfig("nobonus", "No Bonus", max_number=20, total_numbers=3),
    ])


@pytest.fixture
def rng():
    return np.random.default_rng(2024)
