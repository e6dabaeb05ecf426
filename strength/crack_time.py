import math
from types import MappingProxyType
import string
from typing import Dict, Optional

from .config import SETTINGS
from .models import CrackEstimate


def detect_classes(password: str, settings=None) -> Dict[str, bool]:
    """Which character classes appear in the password (ASCII ranges only)"""
    settings = settings or SETTINGS
    symbols = settings["symbols"]
    return {
        "lower": any(c in string.ascii_lowercase for c in password),
        "upper": any(c in string.ascii_uppercase for c in password),
        "digits": any(c in string.digits for c in password),
        "symbols": any(c in symbols for c in password),
    }


def combinations(charset_size: int, length: int) -> float:
    """charset_size ** length as a float, inf when it does not fit"""
    try:
        return float(charset_size) ** length
    except OverflowError:
        return math.inf


def classify_seconds(seconds: float, settings=None) -> str:
    """Map a duration to a time tier; bounds are exclusive (60s is 'minutes')"""
    settings = settings or SETTINGS
    for bound, key in settings["time_tiers"]:
        if seconds < bound:
            return key
    return "centuries"


def estimate_crack_time(password: str, settings=None) -> Optional[CrackEstimate]:
    if not password:
        return None

    settings = settings or SETTINGS
    present = detect_classes(password, settings)

    actual = len(set(password))
    potential = sum(
        size for name, size in settings["class_sizes"].items() if present.get(name)
    )
    effective = max(actual, potential)

    worst_case = combinations(effective, len(password))
    average_case = worst_case / settings["average_case_divisor"]

    speeds = dict(settings["hash_speeds"])
    per_model = {model: average_case / speed for model, speed in speeds.items()}
    worst_per_model = {model: worst_case / speed for model, speed in speeds.items()}

    canonical = settings["canonical_model"]
    return CrackEstimate(
        length=len(password),
        actual_charset_size=actual,
        potential_charset_size=potential,
        effective_charset_size=effective,
        worst_case_combinations=worst_case,
        average_case_combinations=average_case,
        guesses_per_second=MappingProxyType(speeds),
        per_model_seconds=MappingProxyType(per_model),
        worst_case_seconds=MappingProxyType(worst_per_model),
        canonical_model=canonical,
        time_tier=classify_seconds(per_model[canonical], settings),
    )
