"""Game rules for a side-scrolling chain-reaction axe fighter: input, movement, combat, weapon, UI, script and screens."""

__version__ = "0.1.0"
__all__ = ["attack", "core", "input", "movement", "screens", "script", "theme", "weapon"]