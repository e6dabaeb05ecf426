import string
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union


@dataclass(frozen=True)
class CharacterClass:
    """A named, fixed alphabet that can be enabled for generation"""

    name: str
    alphabet: str

    @property
    def size(self) -> int:
        return len(self.alphabet)

    def __contains__(self, char):
        return char in self.alphabet


LOWERCASE = CharacterClass("lower", string.ascii_lowercase)
UPPERCASE = CharacterClass("upper", string.ascii_uppercase)
DIGITS = CharacterClass("digits", string.digits)
SYMBOLS = CharacterClass("symbols", "!@#$%^&*()_+-=[]{}|;:,.<>?")

ALL_CLASSES = (LOWERCASE, UPPERCASE, DIGITS, SYMBOLS)

CLASSES_BY_NAME = {cls.name: cls for cls in ALL_CLASSES}


def resolve_classes(
    enabled: Optional[Iterable[Union[str, CharacterClass]]],
) -> Tuple[CharacterClass, ...]:
    """
    Turn a collection of class names or CharacterClass values into a tuple
    in canonical order. Nothing enabled means every class is enabled.
    """
    if not enabled:
        return ALL_CLASSES

    selected = []
    for item in enabled:
        if isinstance(item, CharacterClass):
            cls = item
        elif item in CLASSES_BY_NAME:
            cls = CLASSES_BY_NAME[item]
        else:
            raise ValueError(f"Unknown character class: {item}")
        if cls not in selected:
            selected.append(cls)

    # Custom classes keep their given order after the built-ins
    builtin = [cls for cls in ALL_CLASSES if cls in selected]
    custom = [cls for cls in selected if cls not in ALL_CLASSES]
    return tuple(builtin + custom)


def union_alphabet(classes: Iterable[CharacterClass]) -> str:
    seen = []
    for cls in classes:
        for char in cls.alphabet:
            if char not in seen:
                seen.append(char)
    return "".join(seen)
