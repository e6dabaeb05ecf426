"""
Additive password strength scoring.

Each rule adds signed points and at most one finding. The raw total may
dip below zero (pattern penalties) before it is rounded to one decimal
and clamped to [0, 10]. Findings keep rule order: length, the four class
checks, variety, symbol count, composition, patterns.

This is a heuristic, not a security audit.
"""

from .config import SETTINGS
from .crack_time import detect_classes, estimate_crack_time
from .models import StrengthFinding, StrengthResult, Tier

MAX_SCORE = 10.0

CLASS_FINDINGS = [
    ("lower", "lowercase letters"),
    ("upper", "uppercase letters"),
    ("digits", "numbers"),
    ("symbols", "special characters"),
]


def _length_rule(password):
    length = len(password)
    if length >= 20:
        return 3, StrengthFinding("Password length is 20+ characters (excellent)", True)
    if length >= 16:
        return 2, StrengthFinding("Password length is 16+ characters (very good)", True)
    if length >= 12:
        return 2, StrengthFinding("Password length is 12+ characters", True)
    if length >= 8:
        return 1, StrengthFinding("Password length is 8+ characters", True)
    return 0, StrengthFinding(
        "Password is too short (recommended: 12+ characters)", False
    )


def _class_rules(present):
    for name, description in CLASS_FINDINGS:
        if present[name]:
            yield 1, StrengthFinding(f"Contains {description}", True)
        else:
            yield 0, StrengthFinding(f"Missing {description}", False)


def _variety_rule(password):
    ratio = len(set(password)) / len(password)
    if ratio > 0.9:
        return 2, StrengthFinding("Excellent character variety (>90% unique)", True)
    if ratio > 0.8:
        return 2, StrengthFinding("Very good character variety (>80% unique)", True)
    if ratio > 0.7:
        return 1, StrengthFinding("Good character variety (>70% unique)", True)
    if ratio > 0.5:
        return 0, StrengthFinding("Moderate character variety", True)
    return 0, StrengthFinding("Low character variety (many repeated characters)", False)


def _symbol_count_rule(password, symbols):
    count = sum(1 for c in password if c in symbols)
    if count >= 3:
        return 1, StrengthFinding("Multiple special characters (excellent)", True)
    if count == 2:
        return 0.5, StrengthFinding("Multiple special characters (good)", True)
    return 0, None


def _composition_rule(password, present):
    if len(password) >= 20 and all(present.values()):
        return 1, StrengthFinding(
            "Excellent password composition (20+ chars with all types)", True
        )
    return 0, None


def _pattern_rule(password, settings):
    lowered = password.lower()
    if any(pattern in lowered for pattern in settings["common_patterns"]):
        return -2, StrengthFinding("Contains common patterns (weak)", False)
    if any(pattern in lowered for pattern in settings["sequential_patterns"]):
        return -1, StrengthFinding(
            "Contains sequential patterns (moderate weakness)", False
        )
    return 0.5, StrengthFinding("No common or sequential patterns (excellent)", True)


def evaluate(password: str, settings=None) -> StrengthResult:
    if not password:
        return StrengthResult(score=0.0, tier=None)

    settings = settings or SETTINGS
    present = detect_classes(password, settings)

    rules = [_length_rule(password)]
    rules.extend(_class_rules(present))
    rules.append(_variety_rule(password))
    rules.append(_symbol_count_rule(password, settings["symbols"]))
    rules.append(_composition_rule(password, present))
    rules.append(_pattern_rule(password, settings))

    raw = sum(points for points, _ in rules)
    findings = tuple(finding for _, finding in rules if finding is not None)

    score = float(min(MAX_SCORE, max(0.0, round(raw, 1))))
    return StrengthResult(
        score=score,
        tier=Tier.from_score(score),
        findings=findings,
        crack_estimate=estimate_crack_time(password, settings),
    )


evaluate_password = evaluate
