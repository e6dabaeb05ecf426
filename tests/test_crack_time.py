import math

import pytest

from strength.config import SETTINGS, make_settings
from strength.crack_time import classify_seconds, combinations, detect_classes, estimate_crack_time


def test_empty_password_has_no_estimate():
    assert estimate_crack_time("") is None


def test_common_password_numbers():
    est = estimate_crack_time("password")
    assert est.length == 8
    assert est.actual_charset_size == 7
    assert est.potential_charset_size == 26
    assert est.effective_charset_size == 26
    assert est.worst_case_combinations == 26.0**8
    assert est.average_case_combinations == 26.0**8 / 2
    assert est.per_model_seconds["sha256"] == pytest.approx(52.206766144)
    assert est.per_model_seconds["md5"] == pytest.approx(5.2206766144)
    assert est.per_model_seconds["bcrypt"] == pytest.approx(10441353.2288)
    assert est.per_model_seconds["argon2"] == pytest.approx(104413532.288)
    assert est.worst_case_seconds["sha256"] == pytest.approx(104.413532288)
    assert est.canonical_model == "sha256"
    assert est.canonical_seconds == est.per_model_seconds["sha256"]
    assert est.time_tier == "seconds"


def test_all_classes_sum_potential_charset():
    est = estimate_crack_time("aA1!")
    assert est.potential_charset_size == 26 + 26 + 10 + 32
    assert est.effective_charset_size == 94


def test_distinct_characters_win_when_larger():
    # 30 distinct non-ASCII characters, no class detected
    password = "".join(chr(0x400 + i) for i in range(30))
    est = estimate_crack_time(password)
    assert est.potential_charset_size == 0
    assert est.effective_charset_size == 30


def test_overflow_maps_to_centuries():
    est = estimate_crack_time("a" * 1000)
    assert math.isinf(est.worst_case_combinations)
    assert math.isinf(est.average_case_combinations)
    assert all(math.isinf(s) for s in est.per_model_seconds.values())
    assert est.time_tier == "centuries"


def test_combinations_overflow():
    assert combinations(10, 3) == 1000.0
    assert combinations(94, 400) == math.inf


@pytest.mark.parametrize(
    "seconds,tier",
    [
        (0, "instant"),
        (0.999, "instant"),
        (1, "seconds"),
        (59.999, "seconds"),
        (60, "minutes"),
        (3599.9, "minutes"),
        (3600, "hours"),
        (86400, "days"),
        (31535999, "days"),
        (31536000, "years"),
        (31536000000, "centuries"),
        (math.inf, "centuries"),
    ],
)
def test_tier_bounds_are_half_open(seconds, tier):
    assert classify_seconds(seconds) == tier


def _boundary_settings(lower_size):
    speeds = dict(SETTINGS["hash_speeds"], sha256=1.0)
    sizes = dict(SETTINGS["class_sizes"], lower=lower_size)
    return make_settings(hash_speeds=speeds, class_sizes=sizes)


def test_exactly_sixty_seconds_is_minutes():
    est = estimate_crack_time("a", _boundary_settings(120))
    assert est.canonical_seconds == 60.0
    assert est.time_tier == "minutes"

    est = estimate_crack_time("a", _boundary_settings(118))
    assert est.canonical_seconds == 59.0
    assert est.time_tier == "seconds"


def test_canonical_model_is_configurable():
    est = estimate_crack_time("password", make_settings(canonical_model="bcrypt"))
    assert est.canonical_seconds == pytest.approx(10441353.2288)
    assert est.time_tier == "days"


def test_detect_classes():
    assert detect_classes("aB3<") == {"lower": True, "upper": True, "digits": True, "symbols": True}
    assert detect_classes("éÉ٣") == {"lower": False, "upper": False, "digits": False, "symbols": False}
    assert detect_classes("~")["symbols"] is False


def test_estimate_mappings_are_read_only():
    est = estimate_crack_time("password")
    before = est.canonical_seconds
    for mapping in (est.per_model_seconds, est.worst_case_seconds, est.guesses_per_second):
        with pytest.raises(TypeError):
            mapping["sha256"] = 0.0
    assert est.canonical_seconds == before


def test_estimate_to_dict_gives_plain_dicts():
    data = estimate_crack_time("password").to_dict()
    assert type(data["per_model_seconds"]) is dict
    assert data["guesses_per_second"]["sha256"] == 2e9
    assert data["time_tier"] == "seconds"
