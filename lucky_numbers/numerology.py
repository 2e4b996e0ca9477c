import re
from typing import List

from .config import NUMEROLOGY_CONFIG

MASTER_NUMBERS = NUMEROLOGY_CONFIG["master_numbers"]


def reduce_number(value: int) -> int:
    """Re-sum the decimal digits of `value` until it is below 10 or a master number."""
    while value > 9 and value not in MASTER_NUMBERS:
        value = sum(int(d) for d in str(value))
    return value


def reduce_digits(text: str) -> int:
    """
    Reduce the digits found in `text` to a single numerology digit.

    Non-digit characters are ignored. The digit sum is summed again until it
    is below 10, except for the master numbers 11 and 22 which are kept.
    Text without digits reduces to 0.
    """
    digits = re.sub(r"\D", "", str(text))
    return reduce_number(sum(int(d) for d in digits))


def life_path_number(date: str) -> int:
    """Life-path number of a date string such as '1990-05-15'."""
    return reduce_digits(date)


def reduce_name(name: str) -> List[int]:
    """Map every letter a-z of `name` to its 1-9 cyclic value (a=1 ... i=9, j=1 ...)."""
    values = []
    for char in name.lower():
        if "a" <= char <= "z":
            values.append((ord(char) - ord("a")) % 9 + 1)
    return values
