"""Human-readable rendering of strength results. Wording is free to change."""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .models import CrackEstimate, HashModel, StrengthResult

NUMBER_SUFFIXES = [
    (1e18, "quintillion"),
    (1e15, "quadrillion"),
    (1e12, "trillion"),
    (1e9, "billion"),
    (1e6, "million"),
]

DURATION_UNITS = [
    (60, 1, "seconds"),
    (3600, 60, "minutes"),
    (86400, 3600, "hours"),
    (31536000, 86400, "days"),
    (31536000000, 31536000, "years"),
]

SECONDS_PER_CENTURY = 3153600000

# tier key -> (headline, advice)
TEMPLATES: Dict[str, Tuple[str, str]] = {
    "instant": (
        "⚡ EXTREMELY WEAK - Cracked almost instantly!",
        "Use a longer password (12+ characters) with more character variety.",
    ),
    "seconds": (
        "🔴 VERY WEAK - Cracked in seconds!",
        "Increase the password length to 12+ characters.",
    ),
    "minutes": (
        "🟠 WEAK - Cracked in minutes!",
        "Increase the length to 16+ characters and use all character types.",
    ),
    "hours": (
        "🟡 MODERATE - Cracked in hours!",
        "Sensitive accounts need passwords that take years to crack. "
        "Aim for 16+ characters.",
    ),
    "days": (
        "🟢 GOOD - Cracked in days!",
        "Multiple GPUs or cloud hardware shorten this a lot. "
        "Adding 2-4 characters raises the cost sharply.",
    ),
    "years": (
        "🔵 STRONG - Cracked in years!",
        "Brute force is impractical for this password on current hardware.",
    ),
    "centuries": (
        "💎 VERY STRONG - Cracked in centuries!",
        "Brute force is not a realistic threat for this password.",
    ),
}


GENERIC_TEMPLATE = (
    "Estimated brute-force time",
    "Longer passwords with more character types take longer to crack.",
)


@dataclass(frozen=True)
class CrackReport:
    tier: str
    headline: str
    time_to_crack: str
    explanation: str


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_number(num: float) -> str:
    if math.isinf(num):
        return "infinite"
    for bound, suffix in NUMBER_SUFFIXES:
        if num >= bound:
            return f"{num / bound:.2f} {suffix}"
    if num == int(num):
        return f"{int(num):,}"
    return f"{num:,.2f}"


def format_duration(seconds: float) -> str:
    if math.isinf(seconds):
        return "more centuries than can be counted"
    if seconds < 1:
        return f"{seconds * 1000:.2f} milliseconds"
    for bound, unit_seconds, unit in DURATION_UNITS:
        if seconds < bound:
            return f"{seconds / unit_seconds:.2f} {unit}"
    return f"{format_number(seconds / SECONDS_PER_CENTURY)} centuries"


def time_to_crack_label(estimate: CrackEstimate) -> str:
    """Short label for the canonical model, e.g. '52 seconds' or 'Centuries'"""
    seconds = estimate.canonical_seconds
    tier = estimate.time_tier
    if tier == "instant":
        return "Less than a second"
    if tier == "centuries":
        return "Centuries"
    for _, unit_seconds, unit in DURATION_UNITS:
        if unit == tier:
            return f"{_round_half_up(seconds / unit_seconds)} {unit}"
    # Tiers added through settings have no fixed unit
    return format_duration(seconds)


def _model_label(model: str) -> str:
    try:
        return HashModel(model).label
    except ValueError:
        return model


def describe_crack_time(
    estimate: CrackEstimate, templates: Optional[Dict[str, Tuple[str, str]]] = None
) -> CrackReport:
    templates = templates or TEMPLATES
    headline, advice = templates.get(estimate.time_tier, GENERIC_TEMPLATE)
    canonical = estimate.canonical_model

    lines = [
        headline,
        "",
        f"• Password length: {estimate.length} characters",
        f"• Actual character set used: {estimate.actual_charset_size} unique characters",
        f"• Potential character set: {estimate.potential_charset_size} characters",
        f"• Total combinations (worst case): "
        f"{format_number(estimate.worst_case_combinations)}",
        f"• Average case: {format_number(estimate.average_case_combinations)}",
        f"• Cracking speed ({_model_label(canonical)}): "
        f"{format_number(estimate.guesses_per_second[canonical])} attempts/second",
        "",
        "Time to crack (average case):",
    ]
    for model, seconds in estimate.per_model_seconds.items():
        lines.append(f"• {_model_label(model)}: {format_duration(seconds)}")
    lines.append(
        f"• Worst case ({_model_label(canonical)}): "
        f"{format_duration(estimate.worst_case_seconds[canonical])}"
    )
    lines.extend(["", advice])

    return CrackReport(
        tier=estimate.time_tier,
        headline=headline,
        time_to_crack=time_to_crack_label(estimate),
        explanation="\n".join(lines),
    )


def format_result(result: StrengthResult, verbose: bool = False) -> str:
    if result.tier is None:
        return "Enter a password to check its strength"

    lines = [f"Strength: {result.tier.label} ({result.score}/10)"]
    for finding in result.findings:
        mark = "✅" if finding.positive else "❌"
        lines.append(f"  {mark} {finding.text}")

    report = describe_crack_time(result.crack_estimate)
    lines.append(f"Estimated time to crack: {report.time_to_crack}")
    if verbose:
        lines.extend(["", report.explanation])
    return "\n".join(lines)
