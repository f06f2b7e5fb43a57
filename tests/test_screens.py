import pytest

from chainaxe.input import Key
from chainaxe.screens import (
    SPLASH_DURATION_SECS,
    STORY_CONTROLS,
    STORY_PAGES,
    FadeInOut,
    Gameplay,
    Menu,
    Screen,
    Splash,
    Story,
    default_screen,
    loading_next_screen,
)


def test_default_screen_depends_on_build():
    assert default_screen(True) is Screen.LOADING
    assert default_screen(False) is Screen.SPLASH
    assert default_screen() is Screen.SPLASH


def test_loading_moves_to_story_only_when_loaded():
    assert loading_next_screen(True) is Screen.STORY
    assert loading_next_screen(False) is None


def test_fade_is_transparent_at_ends_and_opaque_in_middle():
    fade = FadeInOut()
    assert fade.alpha() == 0.0
    fade.tick(SPLASH_DURATION_SECS / 2)
    assert fade.alpha() == 1.0
    fade.tick(SPLASH_DURATION_SECS / 2)
    assert fade.alpha() == pytest.approx(0.0)


def test_fade_is_symmetric_and_bounded():
    early = FadeInOut(t=0.1)
    late = FadeInOut(t=SPLASH_DURATION_SECS - 0.1)
    assert early.alpha() == pytest.approx(late.alpha())
    assert 0.0 < early.alpha() < 1.0
    assert FadeInOut(t=100.0).alpha() == 0.0
    assert FadeInOut(t=-5.0).alpha() == 0.0


def test_fade_rejects_zero_duration():
    with pytest.raises(ValueError):
        FadeInOut(total_duration=0.0)


def test_splash_leads_to_title_when_timer_ends():
    splash = Splash()
    assert splash.tick(SPLASH_DURATION_SECS / 2) is None
    assert splash.image_alpha == 1.0
    assert splash.tick(SPLASH_DURATION_SECS / 2) is Screen.TITLE
    assert splash.tick(0.1) is None


def test_splash_can_be_skipped():
    assert Splash().skip() is Screen.TITLE


def test_story_reveals_pages_then_controls_then_gameplay():
    story = Story()
    assert story.lines == [STORY_PAGES[0]]
    for _ in range(len(STORY_PAGES) - 1):
        assert story.press_enter() is None
    assert story.lines == list(STORY_PAGES)
    assert story.press_enter() is None
    assert story.lines == list(STORY_CONTROLS)
    assert story.press_enter() is Screen.GAMEPLAY


def test_story_keeps_continue_prompt():
    story = Story()
    story.press_enter()
    assert story.root.children[1].text == "Press Enter to continue"


@pytest.mark.parametrize("key", [Key.KEY_P, Key.ESCAPE])
def test_gameplay_pause_keys_open_pause_menu(key):
    game = Gameplay()
    assert game.press_key(key) is Menu.PAUSE
    assert game.paused
    assert game.overlay.name == "Pause Overlay"


def test_gameplay_other_keys_do_nothing():
    game = Gameplay()
    assert game.press_key(Key.KEY_Z) is Menu.NONE
    assert not game.paused
    assert game.overlay is None


def test_gameplay_p_closes_menu_but_escape_does_not():
    game = Gameplay()
    game.press_key(Key.ESCAPE)
    assert game.press_key(Key.ESCAPE) is Menu.PAUSE
    assert game.paused
    assert game.press_key(Key.KEY_P) is Menu.NONE
    assert not game.paused
    assert game.overlay is None


def test_gameplay_close_menu_unpauses():
    game = Gameplay(menu=Menu.RESULTS, paused=True)
    game.close_menu()
    assert game.menu is Menu.NONE
    assert not game.paused