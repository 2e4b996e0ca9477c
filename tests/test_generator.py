from collections import Counter

import numpy as np
import pytest

from lucky_numbers.errors import UnknownLotteryError, ValidationError
from lucky_numbers.generator import GeneratedCombination, GenerationMode, NumberGenerator, parse_custom_numbers
from lucky_numbers.profile import SignificantDate, UserProfile


@pytest.fixture
def generator(registry, rng):
    return NumberGenerator(registry, rng=rng)


def test_numerology_known_combination(generator):
    profile = UserProfile("Ana", "1990-05-15")
    # seeds: life path 3, then a=1 n=5 a=1
    assert generator.numerology(profile, "euromillions") == [4, 9, 20, 23, 32]


def test_numerology_uses_significant_dates(generator, profile):
    # seeds: 3, 1, 5, 1 and 7 for 2015-06-20
    assert generator.numerology(profile, "spanish") == [4, 9, 20, 23, 36, 39]


def test_numerology_ignores_digits_in_date_labels(generator):
    plain = UserProfile("Ana", "1990-05-15", (SignificantDate("2015-06-20", "Wedding"),))
    numbered = UserProfile("Ana", "1990-05-15", (SignificantDate("2015-06-20", "Room 42"),))
    assert generator.numerology(numbered, "spanish") == generator.numerology(plain, "spanish")
    assert generator.numerology(numbered, "spanish") == [4, 9, 20, 23, 36, 39]


def test_numerology_is_deterministic(registry, profile):
    first = NumberGenerator(registry, seed=1).numerology(profile, "powerball")
    second = NumberGenerator(registry, seed=99).numerology(profile, "powerball")
    assert first == second


@pytest.mark.parametrize("lottery_id", ["euromillions", "powerball", "megamillions", "spanish"])
@pytest.mark.parametrize("name, birth_date", [
    ("Ana", "1990-05-15"),
    ("Zoe", "2000-01-01"),
    ("", ""),
    ("Jean-Luc Picard", "2305-07-13"),
])
def test_numerology_shape(generator, registry, lottery_id, name, birth_date):
    config = registry.lookup(lottery_id)
    numbers = generator.numerology(UserProfile(name, birth_date), lottery_id)
    assert len(numbers) == config.total_numbers
    assert len(set(numbers)) == config.total_numbers
    assert numbers == sorted(numbers)
    assert all(1 <= n <= config.max_number for n in numbers)


def test_numerology_probe_fills_whole_range(small_registry):
    generator = NumberGenerator(small_registry, seed=0)
    # with step 7 over 7 numbers every candidate is 1, so each pick comes from probing
    assert generator.numerology(UserProfile("", ""), "tiny") == [1, 2, 3, 4, 5, 6, 7]


def test_numerology_probe_wraps_around(small_registry):
    generator = NumberGenerator(small_registry, seed=0)
    # seeds [4, 2]: 5 first, then 5 again which wraps to 1
    assert generator.numerology(UserProfile("b", "4"), "wrap") == [1, 5]


def test_random_shape(generator):
    for _ in range(100):
        numbers = generator.random("powerball")
        assert len(numbers) == 5
        assert len(set(numbers)) == 5
        assert numbers == sorted(numbers)
        assert all(1 <= n <= 69 for n in numbers)


def test_random_is_uniform(registry):
    generator = NumberGenerator(registry, seed=12345)
    counts = Counter()
    draws = 10000
    for _ in range(draws):
        counts.update(generator.random("euromillions"))

    expected = draws * 5 / 50
    assert set(counts) == set(range(1, 51))
    for number in range(1, 51):
        assert abs(counts[number] - expected) < expected * 0.15


def test_random_is_reproducible_with_same_seed(registry):
    a = NumberGenerator(registry, rng=np.random.default_rng(7))
    b = NumberGenerator(registry, rng=np.random.default_rng(7))
    assert [a.random("spanish") for _ in range(5)] == [b.random("spanish") for _ in range(5)]


def test_bonus_numbers(generator, small_registry):
    for _ in range(50):
        bonus = generator.bonus("euromillions")
        assert len(bonus) == 2
        assert len(set(bonus)) == 2
        assert all(1 <= n <= 12 for n in bonus)
    assert NumberGenerator(small_registry, seed=0).bonus("nobonus") == []


def test_custom_valid(generator):
    assert generator.custom("euromillions", "7,14,21,28,35") == [7, 14, 21, 28, 35]
    assert generator.custom("euromillions", " 35, 7 ,14,28,21 ") == [7, 14, 21, 28, 35]
    assert generator.custom("euromillions", [35, 28, 21, 14, 7]) == [7, 14, 21, 28, 35]
    assert generator.custom("euromillions", np.array([1, 2, 3, 4, 50])) == [1, 2, 3, 4, 50]


@pytest.mark.parametrize("raw, rule", [
    ("7,14,21,28,7", "duplicate"),
    ("1,2,3,4", "count"),
    ("1,2,3,4,5,6", "count"),
    ("0,2,3,4,5", "range"),
    ("1,2,3,4,51", "range"),
    ("1,2,three,4,5", "format"),
    ("1,2,,4,5", "format"),
    ("", "format"),
    ([1, 2, 3.5, 4, 5], "format"),
    ([True, 2, 3, 4, 5], "format"),
    ("1_0,2,3,4,5", "format"),
    ("\uff11,2,3,4,5", "format"),
])
def test_custom_invalid(generator, raw, rule):
    with pytest.raises(ValidationError) as exc_info:
        generator.custom("euromillions", raw)
    assert exc_info.value.rule == rule
    assert isinstance(exc_info.value, ValueError)


def test_parse_custom_numbers():
    assert parse_custom_numbers("3, 1,2") == [3, 1, 2]
    assert parse_custom_numbers((5, 6)) == [5, 6]


def test_unknown_lottery(generator, profile):
    with pytest.raises(UnknownLotteryError):
        generator.numerology(profile, "nope")
    with pytest.raises(UnknownLotteryError):
        generator.random("nope")
    with pytest.raises(UnknownLotteryError):
        generator.custom("nope", "1,2,3")
    with pytest.raises(UnknownLotteryError):
        generator.bonus("nope")


def test_generate_modes(generator, profile):
    combination = generator.generate("euromillions", GenerationMode.NUMEROLOGY, profile=profile)
    assert isinstance(combination, GeneratedCombination)
    assert combination.source_mode is GenerationMode.NUMEROLOGY
    assert list(combination.main_numbers) == generator.numerology(profile, "euromillions")
    assert len(combination.bonus_numbers) == 2

    combination = generator.generate("spanish", "random")
    assert combination.source_mode is GenerationMode.RANDOM
    assert len(combination.main_numbers) == 6
    assert len(combination.bonus_numbers) == 1

    combination = generator.generate("euromillions", "custom", custom="35,7,14,21,28")
    assert combination.main_numbers == (7, 14, 21, 28, 35)
    assert len(combination.bonus_numbers) == 2
    assert combination.to_dict()["source"] == "custom"


def test_generate_requires_inputs(generator):
    with pytest.raises(ValueError):
        generator.generate("euromillions", "numerology")
    with pytest.raises(ValueError):
        generator.generate("euromillions", "custom")
    with pytest.raises(ValueError):
        generator.generate("euromillions", "astrology")


def test_custom_validation_failure_draws_nothing(registry):
    rng = np.random.default_rng(3)
    generator = NumberGenerator(registry, rng=rng)
    state = rng.bit_generator.state
    with pytest.raises(ValidationError):
        generator.generate("euromillions", "custom", custom="1,2,3")
    assert rng.bit_generator.state == state
