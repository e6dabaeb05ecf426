"""
Modelling constants for strength scoring and crack-time estimates.

The guesses-per-second figures are rough assumptions about a single
modern GPU, not measurements. Tune them with make_settings() or replace
them with numbers from strength.benchmark.
"""

import copy
import string

SEQUENTIAL_RUNS = [string.digits[i : i + 3] for i in range(len(string.digits) - 2)]
SEQUENTIAL_RUNS += [
    string.ascii_lowercase[i : i + 3] for i in range(len(string.ascii_lowercase) - 2)
]

SETTINGS = {
    "hash_speeds": {
        "md5": 20e9,
        "sha256": 2e9,
        "bcrypt": 1e4,
        "argon2": 1e3,
    },
    "canonical_model": "sha256",
    # Expected attempts under uniform brute force = combinations / divisor
    "average_case_divisor": 2,
    "class_sizes": {
        "lower": 26,
        "upper": 26,
        "digits": 10,
        "symbols": 32,
    },
    "symbols": "!@#$%^&*()_+-=[]{}|;:,.<>?",
    "common_patterns": ["password", "admin", "login", "welcome", "letmein"],
    "sequential_patterns": SEQUENTIAL_RUNS + ["qwerty", "asdf", "zxcv"],
    # (exclusive upper bound in seconds, tier key); anything above is "centuries"
    "time_tiers": [
        (1, "instant"),
        (60, "seconds"),
        (3600, "minutes"),
        (86400, "hours"),
        (31536000, "days"),
        (31536000000, "years"),
    ],
}


def make_settings(**overrides):
    """Return a copy of SETTINGS with the given keys replaced"""
    unknown = set(overrides) - set(SETTINGS)
    if unknown:
        raise ValueError(f"Unknown strength settings: {', '.join(sorted(unknown))}")

    settings = copy.deepcopy(SETTINGS)
    settings.update(overrides)

    if settings["canonical_model"] not in settings["hash_speeds"]:
        raise ValueError(
            f"canonical_model {settings['canonical_model']!r} has no hash speed"
        )
    for model, speed in settings["hash_speeds"].items():
        if speed <= 0:
            raise ValueError(f"Hash speed for {model} must be positive")
    if settings["average_case_divisor"] <= 0:
        raise ValueError("average_case_divisor must be positive")
    return settings
