from dataclasses import dataclass


@dataclass(frozen=True)
class Name:
    """Display name used by the greet system."""

    value: str
