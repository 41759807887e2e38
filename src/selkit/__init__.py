"""SELKIT

A fluent builder for CSS selector strings. Each chain step appends one
selector fragment and validates that element, id, class, attribute,
pseudo-class and pseudo-element parts appear in CSS order.
"""

from selkit.domain.builder import Selector, SelectorBuilder, css_selector_builder

__all__ = ["__version__", "Selector", "SelectorBuilder", "css_selector_builder"]
__version__ = "0.1.0"
