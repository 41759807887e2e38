"""Domain layer for SELKIT.

Contains the selector rules: part kinds, the immutable selector state, the
builder that enforces part ordering, and the domain errors it raises.

Dependency rule: standard library only.
"""
