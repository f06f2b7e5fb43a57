import pytest

from chainaxe.core import Vec2, Vec3
from chainaxe.script import (
    TOPLEFT_SPAWN,
    Dialogue,
    EndTheGame,
    Enemy,
    Finish,
    ScriptRunner,
    Spawn,
    Wait,
    WaitForBossDead,
    WaitForSlimesDead,
    game_script,
)


def test_game_script_starts_and_ends():
    script = game_script()
    assert isinstance(script[0], WaitForSlimesDead)
    assert isinstance(script[1], Wait) and script[1].remaining == 3.0
    assert isinstance(script[-2], EndTheGame)
    assert isinstance(script[-1], Finish)


def test_game_script_first_line_and_single_boss():
    script = game_script()
    first = next(e for e in script if isinstance(e, Dialogue))
    assert first.speaker == "Narrator"
    bosses = [e for e in script if isinstance(e, Spawn) and e.enemy is Enemy.BOSS]
    assert len(bosses) == 1
    assert bosses[0].position is None
    assert bosses[0].depth == 0.3
    assert any(isinstance(e, WaitForBossDead) for e in script)


def test_game_script_is_fresh_each_call():
    a = game_script()
    a[1].remaining = 0.0
    b = game_script()
    assert b[1].remaining == 3.0


def test_spawn_translation():
    spawn = Spawn(Enemy.RED_SLIME, TOPLEFT_SPAWN)
    assert spawn.translation() == Vec3(TOPLEFT_SPAWN.x, TOPLEFT_SPAWN.y, 0.0)
    assert Spawn(Enemy.BOSS).translation() is None


def test_waits_carry_over_delta_and_spawn():
    runner = ScriptRunner.from_events(
        [
            Wait(1.0),
            Spawn(Enemy.BLACK_SLIME, Vec2(-500.0, 200.0)),
            Spawn(Enemy.RED_SLIME, Vec2(500.0, 200.0)),
            Wait(0.5),
            WaitForSlimesDead(),
            EndTheGame(),
            Finish(),
        ]
    )
    out = runner.process(1.25, 0, 0)
    assert [s.enemy for s in out.spawns] == [Enemy.BLACK_SLIME, Enemy.RED_SLIME]
    assert runner.events[0].remaining == 0.25
    assert not out.end_game

    out = runner.process(0.25, 2, 0)
    assert out.spawns == ()
    assert isinstance(runner.events[0], WaitForSlimesDead)
    assert not out.finished

    out = runner.process(0.0, 0, 0)
    assert out.end_game
    assert out.finished
    assert isinstance(runner.events[0], Finish)


def test_wait_for_boss_blocks():
    runner = ScriptRunner.from_events([WaitForBossDead(), EndTheGame()])
    assert not runner.process(1.0, 0, 1).end_game
    assert runner.process(1.0, 0, 0).end_game


def test_dialogue_blocks_until_progressed():
    runner = ScriptRunner()
    runner.process(0.0, 0, 0)
    assert not runner.dialogue_visible
    runner.process(3.5, 0, 0)
    assert runner.dialogue_visible
    assert runner.speaker == "Narrator"
    before = len(runner.events)
    runner.process(10.0, 0, 0)
    assert len(runner.events) == before

    assert runner.progress_dialogue()
    assert runner.dialogue_visible
    runner.process(0.0, 0, 0)
    assert runner.speaker == "Mysterious Voice"
    assert runner.spokage == "I've been waiting so long for this. Get up already."


def test_progress_dialogue_hides_after_last_line():
    runner = ScriptRunner.from_events([Dialogue("Ali", "Escape? How?"), Wait(1.0)])
    runner.process(0.0, 0, 0)
    assert runner.dialogue_visible
    assert runner.progress_dialogue()
    assert not runner.dialogue_visible


def test_progress_dialogue_ignores_other_events():
    runner = ScriptRunner.from_events([Wait(1.0), Dialogue("Ali", "Escape? How?")])
    assert not runner.progress_dialogue()
    assert len(runner.events) == 2


def test_empty_queue_is_finished():
    out = ScriptRunner.from_events([]).process(1.0, 0, 0)
    assert out.finished
    assert out.spawns == ()


def test_unknown_event_raises():
    runner = ScriptRunner.from_events(["not an event"])
    with pytest.raises(TypeError):
        runner.process(0.0, 0, 0)


def test_full_playthrough_reaches_end():
    script = game_script()
    dialogue_count = sum(isinstance(e, Dialogue) for e in script)
    spawn_count = sum(isinstance(e, Spawn) for e in script)
    runner = ScriptRunner()
    spawned = 0
    progressed = 0
    ended = False
    for _ in range(10_000):
        out = runner.process(100.0, 0, 0)
        spawned += len(out.spawns)
        ended = ended or out.end_game
        if out.finished:
            break
        if runner.progress_dialogue():
            progressed += 1
    assert ended
    assert progressed == dialogue_count
    assert spawned == spawn_count
    assert isinstance(runner.events[0], Finish)