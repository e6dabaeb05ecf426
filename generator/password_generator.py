import math
import secrets
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .charsets import CharacterClass, resolve_classes, union_alphabet
from .config import SETTINGS
from .request import GenerationRequest

EXACT_QUOTA = "exact_quota"
COVERAGE_FILL = "coverage_fill"


@dataclass(frozen=True)
class GeneratedPassword:
    password: str
    mode: str
    classes: Tuple[str, ...]
    pool_size: int
    entropy_bits: float

    def __str__(self):
        return self.password

    def __len__(self):
        return len(self.password)


class PasswordGenerator:
    """
    Generates random passwords that cover every enabled character class.

    Long passwords (exact_quota_min_length and up, with several classes)
    draw a fixed quota from each class and shuffle the result. Shorter ones
    place one guaranteed character per class at a random free slot and fill
    the rest from the combined alphabet.
    """

    def __init__(self, rng=None):
        """
        rng: object exposing randrange(); defaults to secrets.SystemRandom.
        Only pass a deterministic source in tests.
        """
        self.rng = rng if rng is not None else secrets.SystemRandom()

    def select_mode(self, length: int, classes: Sequence[CharacterClass]) -> str:
        if length >= SETTINGS["exact_quota_min_length"] and len(classes) > 1:
            return EXACT_QUOTA
        return COVERAGE_FILL

    def generate(
        self,
        length: int,
        classes: Optional[Iterable[Union[str, CharacterClass]]] = None,
    ) -> GeneratedPassword:
        if length < 1:
            raise ValueError(f"Password length must be at least 1, got {length}")

        classes = resolve_classes(classes)
        alphabet = union_alphabet(classes)
        mode = self.select_mode(length, classes)

        if mode == EXACT_QUOTA:
            chars = self._exact_quota(length, classes)
        else:
            chars = self._coverage_fill(length, classes, alphabet)

        return GeneratedPassword(
            password="".join(chars),
            mode=mode,
            classes=tuple(cls.name for cls in classes),
            pool_size=len(alphabet),
            entropy_bits=round(length * math.log2(len(alphabet)), 2),
        )

    def generate_many(self, request: GenerationRequest) -> List[GeneratedPassword]:
        return [
            self.generate(request.length, request.classes)
            for _ in range(request.quantity)
        ]

    def _choice(self, alphabet: str) -> str:
        return alphabet[self.rng.randrange(len(alphabet))]

    def _exact_quota(self, length, classes):
        share, remainder = divmod(length, len(classes))

        pool = []
        for index, cls in enumerate(classes):
            count = share + (1 if index < remainder else 0)
            pool.extend(self._choice(cls.alphabet) for _ in range(count))

        # Fisher-Yates
        for i in range(len(pool) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            pool[i], pool[j] = pool[j], pool[i]
        return pool

    def _coverage_fill(self, length, classes, alphabet):
        slots = [None] * length

        for cls in classes:
            position = self.rng.randrange(length)
            attempts = 0
            while slots[position] is not None and attempts < length:
                position = (position + 1) % length
                attempts += 1
            if slots[position] is not None:
                # Every slot is taken: this class goes without a guarantee
                continue
            slots[position] = self._choice(cls.alphabet)

        return [
            char if char is not None else self._choice(alphabet) for char in slots
        ]


def generate_passwords(request: GenerationRequest, rng=None) -> List[GeneratedPassword]:
    """Generate request.quantity independent passwords"""
    return PasswordGenerator(rng).generate_many(request)
