import pytest

from chainaxe.core import Color
from chainaxe.theme import (
    BUTTON_BACKGROUND,
    BUTTON_HOVERED_BACKGROUND,
    BUTTON_PRESSED_BACKGROUND,
    BUTTON_TEXT,
    CLICK_SOUND,
    HEADER_TEXT,
    LABEL_TEXT,
    TITLE_TEXT,
    Interaction,
    InteractionPalette,
    button,
    button_small,
    header,
    label,
    text,
    title,
    ui_root,
)

FONT = "fonts/Crimson_Text/CrimsonText-Regular.ttf"


def test_palette_color_for_each_state():
    palette = InteractionPalette(Color.BLACK, Color.WHITE, BUTTON_PRESSED_BACKGROUND)
    assert palette.color_for(Interaction.NONE) == Color.BLACK
    assert palette.color_for(Interaction.HOVERED) == Color.WHITE
    assert palette.color_for(Interaction.PRESSED) == BUTTON_PRESSED_BACKGROUND


def test_palette_rejects_non_interaction():
    palette = InteractionPalette(Color.BLACK, Color.WHITE, Color.WHITE)
    with pytest.raises(ValueError):
        palette.color_for("hovered")


def test_ui_root_fills_window():
    root = ui_root("Loading Screen")
    assert (root.name, root.width, root.height) == ("Loading Screen", "100%", "100%")


def test_text_widgets():
    assert header("Hi").font_size == 40.0
    assert header("Hi").text_color == HEADER_TEXT
    lab = label("hello", FONT)
    assert (lab.name, lab.text, lab.font, lab.font_size) == ("Label", "hello", FONT, 24.0)
    assert lab.text_color == LABEL_TEXT
    assert text("hello", FONT).text_color == Color.WHITE
    big = title("Game", FONT, 90.0)
    assert (big.name, big.font_size, big.text_color) == ("Title", 90.0, TITLE_TEXT)


def test_button_structure():
    widget = button("Play", lambda: None, FONT)
    assert widget.name == "Button"
    inner = widget.children[0]
    assert inner.name == "Button Inner"
    assert (inner.width, inner.height, inner.rounded) == ("200px", "50px", True)
    assert inner.background == BUTTON_BACKGROUND
    assert inner.palette.color_for(Interaction.HOVERED) == BUTTON_HOVERED_BACKGROUND
    label_widget = inner.children[0]
    assert (label_widget.text, label_widget.font_size) == ("Play", 30.0)
    assert label_widget.text_color == BUTTON_TEXT


def test_small_button_is_square():
    inner = button_small("-", lambda: None, FONT).children[0]
    assert (inner.width, inner.height, inner.rounded) == ("30px", "30px", False)


def test_click_runs_action_and_presses():
    calls = []
    widget = button("Play", lambda: calls.append("play"), FONT)
    assert widget.click() == CLICK_SOUND
    assert calls == ["play"]
    inner = widget.children[0]
    assert inner.interaction is Interaction.PRESSED
    assert inner.background == BUTTON_PRESSED_BACKGROUND


def test_click_on_plain_widget_does_nothing():
    widget = label("static", FONT)
    assert widget.click() is None
    assert widget.interaction is Interaction.NONE