"""Screen states and the splash, loading, story, title and gameplay screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from chainaxe.core import Color, Timer
from chainaxe.input import Key
from chainaxe.theme import Widget, text, ui_root

SPLASH_BACKGROUND_COLOR = Color.srgb(0.157, 0.157, 0.157)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"

TITLE_BACKGROUND_IMAGE = "images/background.png"
TITLE_MUSIC = "audio/music/Elevator_Music_V1.ogg"
ALLURA_FONT = "fonts/Allura/Allura-Regular.ttf"
CRIMSON_FONT = "fonts/Crimson_Text/CrimsonText-Regular.ttf"

LOADING_TEXT = "The slimes are praying..."

PAUSE_OVERLAY_COLOR = Color.srgba(0.0, 0.0, 0.0, 0.8)

STORY_CONTINUE_PROMPT = "Press Enter to continue"
STORY_PAGES = (
    "[Ali, young and often overlooked by his family of skilled magicians, has always felt like an outsider. While they hone their craft and perfect their magic, he longs for something more power. Power that will earn their respect and prove he's more than just a boy. He's heard rumors of a hidden room deep within the estate, a forgotten chamber holding the family's most guarded secrets.]",
    "[Inside, the room is filled with shelves, each piled high with books some ancient, some newly bound, all forgotten with time. But one catches his eye. A book, untouched, as if it has never seen the passing years. ]",
    "[As his fingers brush its cover, the air around him shifts. The other books begin to crumble, turning to dust, one after another, as if drawn into an inevitable collapse. A chain reaction. ]",
    "[The book grows heavier in his hands, reluctant to release him. Something unseen tugs at him, pulling him in. He opens it. A sharp pain lances through his skull.]",
    "[And then...darkness.]",
)
STORY_CONTROLS = (
    "Press Z to Jump. Press or hold X to Attack. Press C to Dash.",
    "Use Arrow keys to move. And press P to pause.",
)


class Screen(Enum):
    SPLASH = auto()
    TITLE = auto()
    LOADING = auto()
    STORY = auto()
    GAMEPLAY = auto()


class Menu(Enum):
    NONE = auto()
    MAIN = auto()
    PAUSE = auto()
    RESULTS = auto()


def default_screen(dev: bool = False) -> Screen:
    """The screen the game starts on: loading in development builds, splash otherwise."""
    return Screen.LOADING if dev else Screen.SPLASH


def loading_next_screen(all_loaded: bool) -> Optional[Screen]:
    """The screen to move to from loading once every asset is in."""
    return Screen.STORY if all_loaded else None


@dataclass
class FadeInOut:
    """A trapezoid fade: in, hold at full opacity, then out."""

    total_duration: float = SPLASH_DURATION_SECS
    fade_duration: float = SPLASH_FADE_DURATION_SECS
    t: float = 0.0

    def __post_init__(self) -> None:
        if self.total_duration <= 0:
            raise ValueError(f"total duration must be positive: {self.total_duration}")
        if self.fade_duration <= 0:
            raise ValueError(f"fade duration must be positive: {self.fade_duration}")

    def alpha(self) -> float:
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, delta: float) -> None:
        self.t += delta


@dataclass
class Splash:
    """The splash screen: a fading image and a timer that leads to the title."""

    fade: FadeInOut = field(default_factory=FadeInOut)
    timer: Timer = field(default_factory=lambda: Timer.from_seconds(SPLASH_DURATION_SECS))
    image: str = SPLASH_IMAGE
    background: Color = SPLASH_BACKGROUND_COLOR
    image_alpha: float = 0.0

    def tick(self, delta: float) -> Optional[Screen]:
        """Advance the splash; returns the title screen once the timer runs out."""
        self.fade.tick(delta)
        self.timer.tick(delta)
        self.image_alpha = self.fade.alpha()
        return Screen.TITLE if self.timer.just_finished else None

    def skip(self) -> Screen:
        return Screen.TITLE


def _story_root() -> Widget:
    root = ui_root("Story")
    content = Widget(name="Story", width="80%", height="80%")
    content.children.append(text(STORY_PAGES[0], CRIMSON_FONT))
    root.children.extend([content, text(STORY_CONTINUE_PROMPT, CRIMSON_FONT)])
    return root


@dataclass
class Story:
    """The intro story, revealed a page at a time with Enter."""

    page: int = 0
    root: Widget = field(default_factory=_story_root)

    @property
    def content(self) -> Widget:
        return self.root.children[0]

    @property
    def lines(self) -> list[str]:
        return [child.text for child in self.content.children]

    def press_enter(self) -> Optional[Screen]:
        """Show the next page or the controls; returns gameplay when the story is done."""
        next_index = self.page + 1
        if next_index < len(STORY_PAGES):
            self.content.children.append(text(STORY_PAGES[next_index], CRIMSON_FONT))
            self.page += 1
            return None
        if self.page == len(STORY_PAGES) - 1:
            self.content.children = [text(line, CRIMSON_FONT) for line in STORY_CONTROLS]
            self.page += 1
            return None
        return Screen.GAMEPLAY


@dataclass
class Gameplay:
    """Pause handling while the game is being played."""

    menu: Menu = Menu.NONE
    paused: bool = False
    overlay: Optional[Widget] = None

    def press_key(self, key: Key) -> Menu:
        """React to a key press; returns the menu now open."""
        if self.menu is Menu.NONE:
            if key in (Key.KEY_P, Key.ESCAPE):
                self.paused = True
                self.overlay = Widget(
                    name="Pause Overlay",
                    width="100%",
                    height="100%",
                    background=PAUSE_OVERLAY_COLOR,
                )
                self.menu = Menu.PAUSE
        elif key is Key.KEY_P:
            self.close_menu()
        return self.menu

    def close_menu(self) -> None:
        """Close any open menu and resume play."""
        self.menu = Menu.NONE
        self.paused = False
        self.overlay = None