import math
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Mapping, Optional, Tuple


class HashModel(str, Enum):
    MD5 = "md5"
    SHA256 = "sha256"
    BCRYPT = "bcrypt"
    ARGON2 = "argon2"

    @property
    def label(self):
        return {
            "md5": "MD5",
            "sha256": "SHA-256",
            "bcrypt": "bcrypt",
            "argon2": "Argon2",
        }[self.value]


class Tier(str, Enum):
    VERY_WEAK = "very-weak"
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @property
    def label(self):
        return self.value.replace("-", " ").title()

    @classmethod
    def from_score(cls, score: float) -> "Tier":
        if score <= 2:
            return cls.VERY_WEAK
        if score <= 4:
            return cls.WEAK
        if score <= 6:
            return cls.MODERATE
        if score <= 8:
            return cls.STRONG
        return cls.VERY_STRONG


@dataclass(frozen=True)
class StrengthFinding:
    text: str
    positive: bool


@dataclass(frozen=True)
class CrackEstimate:
    """
    Brute-force cost of a password under a uniform-guessing attacker.

    Combination counts are floats and become inf for long passwords over
    large alphabets; inf seconds always fall in the top time tier.
    """

    length: int
    actual_charset_size: int
    potential_charset_size: int
    effective_charset_size: int
    worst_case_combinations: float
    average_case_combinations: float
    guesses_per_second: Mapping[str, float]
    per_model_seconds: Mapping[str, float]
    worst_case_seconds: Mapping[str, float]
    canonical_model: str
    time_tier: str

    @property
    def canonical_seconds(self) -> float:
        return self.per_model_seconds[self.canonical_model]

    def to_dict(self):
        return {
            f.name: (
                dict(getattr(self, f.name))
                if isinstance(getattr(self, f.name), Mapping)
                else getattr(self, f.name)
            )
            for f in fields(self)
        }


@dataclass(frozen=True)
class StrengthResult:
    score: float
    tier: Optional[Tier]
    findings: Tuple[StrengthFinding, ...] = ()
    crack_estimate: Optional[CrackEstimate] = None

    def to_dict(self):
        return {
            "score": self.score,
            "tier": self.tier.value if self.tier else None,
            "tier_label": self.tier.label if self.tier else "",
            "findings": [asdict(finding) for finding in self.findings],
            "crack_estimate": (
                _json_safe(self.crack_estimate.to_dict())
                if self.crack_estimate
                else None
            ),
        }


def _json_safe(obj):
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    if isinstance(obj, dict):
        return {k: _json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_json_safe(v) for v in obj]
    return obj
