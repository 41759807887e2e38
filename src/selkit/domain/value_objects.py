"""Module including value objects used across the domain layer."""

from dataclasses import dataclass
from enum import Enum


class PartKind(Enum):
    """Enumeration of selector fragment categories.

    Each member carries its label, its rank in the fixed CSS order and the
    text placed before and after the value when the fragment is rendered.
    """

    COMBINED = ("combined", 0, "", "")
    ELEMENT = ("element", 1, "", "")
    ID = ("id", 2, "#", "")
    CLASS = ("class", 3, ".", "")
    ATTRIBUTE = ("attr", 4, "[", "]")
    PSEUDO_CLASS = ("pseudo-class", 5, ":", "")
    PSEUDO_ELEMENT = ("pseudo-element", 6, "::", "")

    def __init__(self, label: str, rank: int, prefix: str, suffix: str) -> None:
        self.label = label
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix

    @property
    def unique(self) -> bool:
        """Whether the kind may occur at most once in a compound selector."""
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        """Return ``value`` decorated the way this kind is written in CSS."""
        return f"{self.prefix}{value}{self.suffix}"

    @classmethod
    def from_label(cls, label: str) -> "PartKind":
        """Look up a part kind by its label (``"pseudo-class"``, ``"attr"`` ...).

        Raises:
            ValueError: If no appendable kind has that label.
        """
        for kind in cls:
            if kind is not cls.COMBINED and kind.label == label:
                return kind
        raise ValueError(f"Unknown selector part kind: {label!r}")


_UNIQUE_KINDS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})


@dataclass(frozen=True)
class SelectorState:
    """Value object representing a selector after one builder step."""

    text: str = ""
    rank: int = 0
    kind: PartKind | None = None

    def append(self, kind: PartKind, value: str) -> "SelectorState":
        """Return the candidate state with a fragment of ``kind`` appended."""
        return SelectorState(
            text=f"{self.text}{kind.render(value)}", rank=kind.rank, kind=kind
        )


EMPTY_STATE = SelectorState()
