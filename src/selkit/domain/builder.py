"""Fluent CSS selector builder.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

where class, attribute and pseudo-class parts may repeat. Compound selectors
are joined with a combinator (``" "``, ``"+"``, ``"~"``, ``">"``) by
`SelectorBuilder.combine`.

Every chain call returns a new `Selector` wrapping an immutable
`SelectorState`; ordering is validated incrementally against the previous
fragment only. `Selector.stringify` is a single-use read: it returns the text
and clears it from that selector, so later reads, combines and chains
continue from an empty string.

Example:
    ```py
    builder = SelectorBuilder()
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
    ```
"""

from __future__ import annotations

import logging
from dataclasses import replace

from .errors import DuplicateUniquePartError, OutOfOrderError, UnappendableKindError
from .value_objects import EMPTY_STATE, PartKind, SelectorState

logger = logging.getLogger(__name__)

CONVENTIONAL_COMBINATORS = (" ", "+", "~", ">")


def is_conventional_combinator(token: str) -> bool:
    """Return True if ``token`` is one of the CSS combinators."""
    return token in CONVENTIONAL_COMBINATORS


def check_order(current: SelectorState, candidate: SelectorState) -> SelectorState:
    """Validate that ``candidate`` may follow ``current``.

    Args:
        current: State before the fragment was appended.
        candidate: State after the fragment was appended.

    Returns:
        The candidate state, unchanged.

    Raises:
        DuplicateUniquePartError: If an element, id or pseudo-element follows
            a fragment of the same kind.
        OutOfOrderError: If the candidate ranks lower than the current state.
    """
    assert candidate.kind is not None
    if current.rank == candidate.rank and candidate.kind.unique:
        logger.debug("Rejected duplicate %s in %r", candidate.kind.label, current.text)
        raise DuplicateUniquePartError(current.kind, candidate.kind)
    if current.rank > candidate.rank:
        logger.debug(
            "Rejected %s after %s in %r",
            candidate.kind.label,
            current.kind.label if current.kind else "<none>",
            current.text,
        )
        raise OutOfOrderError(current.kind, candidate.kind)
    return candidate


class Selector:
    """A selector value produced by one builder step."""

    __slots__ = ("_state",)

    def __init__(self, state: SelectorState = EMPTY_STATE) -> None:
        self._state = state

    @property
    def state(self) -> SelectorState:
        """The immutable state behind this selector."""
        return self._state

    def add(self, kind: PartKind, value: str) -> Selector:
        """Append a fragment of ``kind`` and validate its position."""
        if kind is PartKind.COMBINED:
            raise UnappendableKindError(kind)
        candidate = check_order(self._state, self._state.append(kind, value))
        logger.debug("Appended %s fragment: %r", kind.label, candidate.text)
        return Selector(candidate)

    def element(self, value: str) -> Selector:
        """Append a type selector (``div``)."""
        return self.add(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        """Append an id selector (``#main``)."""
        return self.add(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        """Append a class selector (``.container``)."""
        return self.add(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Append an attribute selector (``[href$=".png"]``)."""
        return self.add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        """Append a pseudo-class (``:focus``)."""
        return self.add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        """Append a pseudo-element (``::before``)."""
        return self.add(PartKind.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        """Return the selector text and clear it from this selector.

        Rank and kind are kept, so ordering rules still apply to fragments
        chained onto a consumed selector.
        """
        text = self._state.text
        self._state = replace(self._state, text="")
        return text

    def __str__(self) -> str:
        return self._state.text

    def __repr__(self) -> str:
        return f"Selector({self._state.text!r})"


class SelectorBuilder:
    """Stateless facade that starts selector chains and combines selectors."""

    def element(self, value: str) -> Selector:
        """Start a chain with a type selector."""
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        """Start a chain with an id selector."""
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        """Start a chain with a class selector."""
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        """Start a chain with an attribute selector."""
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        """Start a chain with a pseudo-class."""
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        """Start a chain with a pseudo-element."""
        return Selector().pseudo_element(value)

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        """Join two selectors with ``combinator`` surrounded by single spaces.

        The combinator is not validated. The result carries rank 0, so any
        fragment may be chained onto it.
        """
        text = f"{first.state.text} {combinator} {second.state.text}"
        logger.debug("Combined selector: %r", text)
        return Selector(SelectorState(text=text, rank=0, kind=PartKind.COMBINED))

    @staticmethod
    def stringify(selector: Selector) -> str:
        """Consume ``selector`` and return its text."""
        return selector.stringify()


css_selector_builder = SelectorBuilder()
