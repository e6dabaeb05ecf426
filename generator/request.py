from dataclasses import dataclass, field
from typing import Tuple, Union

from .charsets import ALL_CLASSES, CharacterClass, resolve_classes
from .config import SETTINGS


@dataclass
class GenerationRequest:
    """Describes one batch of passwords to generate"""

    length: int = SETTINGS["default_length"]
    classes: Tuple[Union[str, CharacterClass], ...] = field(
        default_factory=lambda: ALL_CLASSES
    )
    quantity: int = 1

    def __post_init__(self):
        """Resolve class names to CharacterClass values"""
        self.requested_classes = tuple(self.classes or ())
        self.classes = resolve_classes(self.requested_classes)

    def validate(self):
        """
        Boundary checks for callers that take user input.
        The generator itself accepts any length >= 1 and an empty class set.
        """
        if not isinstance(self.length, int) or isinstance(self.length, bool):
            raise ValueError("Password length must be an integer")
        if not SETTINGS["min_length"] <= self.length <= SETTINGS["max_length"]:
            raise ValueError(
                f"Password length must be between {SETTINGS['min_length']} "
                f"and {SETTINGS['max_length']} characters"
            )
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValueError("Quantity must be an integer")
        if not SETTINGS["min_quantity"] <= self.quantity <= SETTINGS["max_quantity"]:
            raise ValueError(
                f"Quantity must be between {SETTINGS['min_quantity']} "
                f"and {SETTINGS['max_quantity']}"
            )
        if not self.requested_classes:
            raise ValueError("Please select at least one character type")
        return self

    @classmethod
    def from_options(cls, length: int, quantity: int = 1, **flags: bool):
        """Build a request from per-class flags, e.g. lower=True, symbols=False"""
        names = [name for name, enabled in flags.items() if enabled]
        return cls(length=length, classes=tuple(names), quantity=quantity)
