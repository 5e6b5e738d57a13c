"""Person marker component.

Entities with both :class:`Person` and :class:`Name` are greeted by the greet
system whenever its timer finishes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """Marker (no fields)."""

    pass
