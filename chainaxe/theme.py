"""UI colours, interaction palettes and the common widgets built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional, Union

from chainaxe.core import Color

LABEL_TEXT = Color.srgb(0.867, 0.827, 0.412)
TITLE_TEXT = Color.srgb(1.0, 1.0, 1.0)
HEADER_TEXT = Color.srgb(0.988, 0.984, 0.800)
BUTTON_TEXT = Color.srgb(1.0, 1.0, 1.0)
BUTTON_BACKGROUND = Color.srgb(0.0, 0.016, 0.286)
BUTTON_HOVERED_BACKGROUND = Color.srgb(0.0, 0.129, 0.702)
BUTTON_PRESSED_BACKGROUND = Color.srgb(0.902, 0.651, 0.082)

HOVER_SOUND = "audio/sound_effects/button_hover.ogg"
CLICK_SOUND = "audio/sound_effects/button_click.ogg"

Size = Union[str, float, None]


class Interaction(Enum):
    NONE = auto()
    HOVERED = auto()
    PRESSED = auto()


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours of an interactive widget in each interaction state."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        if interaction is Interaction.NONE:
            return self.none
        if interaction is Interaction.HOVERED:
            return self.hovered
        if interaction is Interaction.PRESSED:
            return self.pressed
        raise ValueError(f"unknown interaction: {interaction!r}")


@dataclass
class Widget:
    """A UI node: a name, optional text and layout, and its children."""

    name: str
    text: Optional[str] = None
    font: Optional[str] = None
    font_size: Optional[float] = None
    text_color: Optional[Color] = None
    width: Size = None
    height: Size = None
    background: Optional[Color] = None
    rounded: bool = False
    palette: Optional[InteractionPalette] = None
    action: Optional[Callable[[], object]] = None
    interaction: Interaction = Interaction.NONE
    children: list[Widget] = field(default_factory=list)

    def _interactive(self) -> Optional[Widget]:
        if self.palette is not None:
            return self
        return next(
            (found for child in self.children if (found := child._interactive()) is not None),
            None,
        )

    def click(self) -> Optional[str]:
        """Press the widget's button; returns the click sound, or None if nothing reacts."""
        target = self._interactive()
        if target is None:
            return None
        target.interaction = Interaction.PRESSED
        target.background = target.palette.color_for(target.interaction)
        if target.action is not None:
            target.action()
        return CLICK_SOUND


def ui_root(name: str) -> Widget:
    """A root node that fills the window and centres its content."""
    return Widget(name=name, width="100%", height="100%")


def title(text: str, font: str, font_size: float) -> Widget:
    return Widget(
        name="Title", text=text, font=font, font_size=font_size, text_color=TITLE_TEXT
    )


def header(text: str) -> Widget:
    return Widget(name="Header", text=text, font_size=40.0, text_color=HEADER_TEXT)


def label(text: str, font: str) -> Widget:
    return Widget(name="Label", text=text, font=font, font_size=24.0, text_color=LABEL_TEXT)


def text(text: str, font: str) -> Widget:
    return Widget(name="Label", text=text, font=font, font_size=24.0, text_color=Color.WHITE)


def _button_base(
    label_text: str,
    action: Callable[[], object],
    font: str,
    width: Size,
    height: Size,
    rounded: bool,
) -> Widget:
    inner = Widget(
        name="Button Inner",
        width=width,
        height=height,
        rounded=rounded,
        background=BUTTON_BACKGROUND,
        palette=InteractionPalette(
            none=BUTTON_BACKGROUND,
            hovered=BUTTON_HOVERED_BACKGROUND,
            pressed=BUTTON_PRESSED_BACKGROUND,
        ),
        action=action,
        children=[
            Widget(
                name="Button Text",
                text=label_text,
                font=font,
                font_size=30.0,
                text_color=BUTTON_TEXT,
            )
        ],
    )
    return Widget(name="Button", children=[inner])


def button(text: str, action: Callable[[], object], font: str) -> Widget:
    """A large rounded button that runs ``action`` when clicked."""
    return _button_base(text, action, font, "200px", "50px", True)


def button_small(text: str, action: Callable[[], object], font: str) -> Widget:
    """A small square button that runs ``action`` when clicked."""
    return _button_base(text, action, font, "30px", "30px", False)