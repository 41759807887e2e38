"""Domain-layer error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selkit.domain.value_objects import PartKind

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                       Selector part ordering errors
# ============================================================================


class SelectorOrderError(DomainError):
    """Raised when a fragment cannot follow the previous fragment of a selector."""

    def __init__(
        self, message: str, current: PartKind | None, candidate: PartKind
    ) -> None:
        super().__init__(message)
        self.current = current
        self.candidate = candidate


class DuplicateUniquePartError(SelectorOrderError):
    """Raised when a second element, id or pseudo-element is appended."""

    def __init__(self, current: PartKind | None, candidate: PartKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            current,
            candidate,
        )


class OutOfOrderError(SelectorOrderError):
    """Raised when a lower-ranked fragment follows a higher-ranked one."""

    def __init__(self, current: PartKind | None, candidate: PartKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element",
            current,
            candidate,
        )


class UnappendableKindError(DomainError):
    """Raised when a kind that is not a selector fragment is appended."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(
            f"{kind.label!r} is not a selector fragment; "
            "combined selectors are built with combine()."
        )
        self.kind = kind
