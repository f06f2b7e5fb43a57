"""The scripted sequence of waves, waits and dialogue that drives a play-through."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Optional, Union

from chainaxe.core import Vec2, Vec3

BOTLEFT_SPAWN = Vec2(-500.0, 100.0)
BOTRIGHT_SPAWN = Vec2(500.0, 100.0)
TOPLEFT_SPAWN = Vec2(-500.0, 200.0)
TOPRIGHT_SPAWN = Vec2(500.0, 200.0)
TOPMIDDLE_SPAWN = Vec2(0.0, 200.0)
TOPLEFT_SKY_SPAWN = Vec2(-100.0, 400.0)
TOPRIGHT_SKY_SPAWN = Vec2(100.0, 400.0)
TOPMIDDLE_SKY_SPAWN = Vec2(0.0, 400.0)

BOSS_DEPTH = 0.3
SLIME_DEPTH = 0.0


class Enemy(Enum):
    BOSS = auto()
    BLACK_SLIME = auto()
    RED_SLIME = auto()


@dataclass
class Wait:
    """Pause the script; ``remaining`` counts down in seconds."""

    remaining: float


@dataclass(frozen=True)
class WaitForSlimesDead:
    """Hold the script until no slime is alive."""


@dataclass(frozen=True)
class WaitForBossDead:
    """Hold the script until no boss is alive."""


@dataclass(frozen=True)
class Spawn:
    """Spawn an enemy; a boss without a position appears at its own first position."""

    enemy: Enemy
    position: Optional[Vec2] = None

    @property
    def depth(self) -> float:
        return BOSS_DEPTH if self.enemy is Enemy.BOSS else SLIME_DEPTH

    def translation(self) -> Optional[Vec3]:
        if self.position is None:
            return None
        return self.position.extend(self.depth)


@dataclass(frozen=True)
class Dialogue:
    """A line of dialogue that waits for the player to continue."""

    speaker: str
    text: str


@dataclass(frozen=True)
class EndTheGame:
    """Open the results menu."""


@dataclass(frozen=True)
class Finish:
    """The end of the script; nothing runs after it."""


ScriptEvent = Union[Wait, WaitForSlimesDead, WaitForBossDead, Spawn, Dialogue, EndTheGame, Finish]


@dataclass(frozen=True)
class ScriptOutput:
    """What one step of the script asks the game to do."""

    spawns: tuple[Spawn, ...] = ()
    end_game: bool = False
    finished: bool = False


def game_script() -> list[ScriptEvent]:
    """A fresh copy of the full game script."""
    n = "Narrator"
    mv = "Mysterious Voice"
    cv = "Commanding Voice"
    ali = "Ali"
    asad = "Asad"
    zha = "Zha'kthar"
    black = Enemy.BLACK_SLIME
    red = Enemy.RED_SLIME
    return [
        WaitForSlimesDead(),
        Wait(3.0),
        Dialogue(n, "[As Ali regains consciousness, a voice echoes in his mind, sharp and demanding.]"),
        Dialogue(mv, "I've been waiting so long for this. Get up already."),
        Dialogue(n, "[Ali pushes himself to his feet, his head spinning as the world around him begins to take shape. He blinks, struggling to comprehend his surroundings. He stands on a jagged rock platform, suspended high above an infinite sea of swirling, dark clouds.]"),
        Dialogue(n, "[Suddenly, a deafening roar shakes the air, a voice booming from the heavens, its power vibrating through Ali's very bones. ]"),
        Dialogue(cv, "You stand in my domain now, mortal. Welcome to your doom!"),
        Dialogue(n, "[Ali stumbles back, his heart pounding, panic rising in his chest as his eyes dart around in terror.]"),
        Dialogue(mv, "Quick, there's no time! Pick me up, I'm over here!"),
        Dialogue(n, "[Ali shakes his head, trying to clear the fog in his mind, his voice trembling with panic.]"),
        Dialogue(ali, "What is this place? Who are you? Where are you? What's happening?!"),
        Dialogue(mv, "The axe, Ali. A weapon of your bloodline, meant for you alone. Without it, you won't survive for long in this place."),
        Dialogue(ali, "I don't even know what's happening here! How do you even know my name? Why don't you just explain?"),
        Dialogue(mv, "There's no time for explanations! I'll explain soon enough just pick up the axe. Now!"),
        Dialogue(n, "[Ali hesitates, his mind racing with uncertainty. But then his gaze locks onto the large axe resting on the ground. A strange pull tugs at him, almost like an unspoken invitation. Without fully thinking, he crouches and reaches for it. The moment his fingers touch the handle, he feels an immediate, unshakable connection as if the axe was always meant to be in his hands.]"),
        Dialogue(mv, "Well done. Now, you must prepare yourself. It's about to get dangerous. Take this time to get used to the axe it's the only thing that will keep you alive here."),
        Dialogue(n, "[A mass of dark, slimy forms materializes in front of Ali, their glistening, gelatinous bodies pulsing with a sickly light. They writhe and twitch, closing in on him with unnatural speed.]"),
        Dialogue(cv, "Let's see how you fare against my creations!"),
        Dialogue(mv, "Slimes. They're weak, but there will be many more. Use the axe get ready!"),
        Dialogue("Tip", "Hold or press X to attack. As your weapon chain reacts from hitting enemies to gain fury (Red), its swiftness increases. Attack again during the reset period to continue the chain reaction, or miss and go into the cooldown phase (blue)."),
        Wait(1.0),
        Spawn(black, TOPLEFT_SPAWN),
        Spawn(black, TOPRIGHT_SPAWN),
        Wait(0.1),
        WaitForSlimesDead(),
        Wait(3.0),
        Dialogue(mv, "Well done, Ali. You've survived the first wave."),
        Dialogue(ali, "Are you gonna tell me what's going on now?"),
        Dialogue(mv, "My name is Asad. I sealed myself away with Zha'kthar, an ancient monster. The seal has weakened, and I've seen a vision you are the one who can stop him."),
        Dialogue(ali, "A vision? Why me?"),
        Dialogue(asad, "Your bloodline is the key. The seal brought you here because you are the only one who can defeat him."),
        Dialogue(zha, "You will fail!"),
        Dialogue(asad, "Stay focused, the real battle is just beginning."),
        Wait(1.0),
        Spawn(black, TOPLEFT_SPAWN),
        Spawn(black, TOPRIGHT_SPAWN),
        Wait(0.1),
        WaitForSlimesDead(),
        Spawn(black, BOTLEFT_SPAWN),
        Spawn(black, BOTRIGHT_SPAWN),
        Wait(0.1),
        WaitForSlimesDead(),
        Spawn(black, BOTLEFT_SPAWN),
        Spawn(black, BOTRIGHT_SPAWN),
        Wait(1.0),
        Spawn(black, TOPLEFT_SPAWN),
        Spawn(black, TOPRIGHT_SPAWN),
        Wait(0.1),
        WaitForSlimesDead(),
        Wait(3.0),
        Dialogue(asad, "The seal weakens faster. Zha'kthar senses you now."),
        Dialogue(ali, "What do I do? I don't even know what's going on!"),
        Dialogue(asad, "You must stop him before he breaks free completely. It's your only choice."),
        Dialogue(zha, "You are nothing. I will destroy you!"),
        Dialogue(asad, "Focus! The next wave is worse."),
        Wait(1.0),
        Spawn(red, TOPLEFT_SKY_SPAWN),
        Spawn(red, TOPRIGHT_SKY_SPAWN),
        Wait(5.0),
        Spawn(red, TOPLEFT_SKY_SPAWN),
        Spawn(red, TOPRIGHT_SKY_SPAWN),
        Wait(5.0),
        Spawn(red, TOPLEFT_SKY_SPAWN),
        Spawn(red, TOPRIGHT_SKY_SPAWN),
        Wait(0.1),
        WaitForSlimesDead(),
        Wait(3.0),
        Dialogue(ali, "I can't keep this up!"),
        Dialogue(asad, "You can. The only way out is through him. Zha'kthar's power is growing."),
        Dialogue(ali, "I'm not ready!"),
        Dialogue(asad, "You are. It's your blood, your destiny. He must be stopped now."),
        Dialogue(zha, "You think you can stop me? You're weak!"),
        Dialogue(asad, "You're not weak, Ali. You have what it takes. Don't doubt yourself."),
        Wait(1.0),
        Spawn(red, TOPLEFT_SPAWN),
        Spawn(red, TOPRIGHT_SPAWN),
        Spawn(red, BOTLEFT_SPAWN),
        Spawn(red, BOTRIGHT_SPAWN),
        Wait(10.0),
        WaitForSlimesDead(),
        Spawn(black, TOPLEFT_SKY_SPAWN),
        Spawn(black, TOPRIGHT_SKY_SPAWN),
        Spawn(red, TOPMIDDLE_SPAWN),
        Wait(3.0),
        Spawn(black, BOTLEFT_SPAWN),
        Spawn(black, BOTRIGHT_SPAWN),
        Wait(3.0),
        Spawn(red, TOPMIDDLE_SKY_SPAWN),
        Wait(0.1),
        WaitForSlimesDead(),
        Wait(3.0),
        Dialogue(asad, "This is it. Zha'kthar's final form is coming."),
        Dialogue(ali, "I don't know if I can do this..."),
        Dialogue(asad, "You must. This is your moment."),
        Dialogue(zha, "You cannot defeat me. I will consume you!"),
        Dialogue(asad, "You've come this far. Now finish this."),
        Wait(1.0),
        Spawn(Enemy.BOSS),
        Wait(15.0),
        Spawn(black, BOTRIGHT_SPAWN),
        Spawn(red, TOPRIGHT_SPAWN),
        Wait(10.0),
        Spawn(black, BOTLEFT_SPAWN),
        Spawn(red, TOPLEFT_SPAWN),
        Wait(0.1),
        WaitForSlimesDead(),
        Wait(5.0),
        Spawn(red, BOTLEFT_SPAWN),
        Spawn(red, BOTRIGHT_SPAWN),
        Wait(5.0),
        Spawn(black, BOTLEFT_SPAWN),
        Spawn(black, BOTRIGHT_SPAWN),
        Wait(0.1),
        WaitForSlimesDead(),
        WaitForBossDead(),
        Wait(3.0),
        Dialogue(ali, "I... I did it. I stopped him."),
        Dialogue(asad, "You've slain Zha'kthar, but that was only part of the chain. The seal is weakened now. The storm is far from over."),
        Dialogue(ali, "What are you talking about? I stopped him. This nightmare should be over!"),
        Dialogue(asad, "You've triggered a reaction. Zha'kthar's death didn't end the threat. It's just the beginning of something much worse..."),
        Dialogue(ali, "What do you mean 'the beginning'?"),
        Dialogue(asad, "The seal that kept him bound is crumbling. You have unwittingly begun a chain reaction. The realm is unstable. But you still have a chance to escape it."),
        Dialogue(ali, "Escape? How?"),
        Dialogue(asad, "You can't. The realm will collapse soon. The destruction you've set in motion can't be stopped but you can leave. You were always meant to break the chain. Now, leave this place, and return to your world."),
        Dialogue(ali, "I don't know what's next, but I won't let this be in vain."),
        Dialogue(asad, "Then go, Ali. I can only guide you so far. The rest is yours to choose."),
        Dialogue(ali, "Goodbye, Asad. Thanks for showing me the way."),
        Dialogue(asad, "Choose wisely. Don't let the chain bind you."),
        Wait(3.0),
        EndTheGame(),
        Finish(),
    ]


@dataclass
class ScriptRunner:
    """Works through a script queue and keeps the dialogue box up to date."""

    events: deque = field(default_factory=lambda: deque(game_script()))
    speaker: str = ""
    spokage: str = ""
    dialogue_visible: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.events, deque):
            self.events = deque(self.events)

    @classmethod
    def from_events(cls, events: Iterable[ScriptEvent]) -> ScriptRunner:
        return cls(deque(events))

    def process(self, delta: float, slimes_alive: int, bosses_alive: int) -> ScriptOutput:
        """Run the script for one frame of ``delta`` seconds."""
        spawns: list[Spawn] = []
        end_game = False
        while self.events:
            event = self.events[0]
            if isinstance(event, Wait):
                event.remaining -= delta
                if event.remaining > 0.0:
                    break
                delta = -event.remaining
            elif isinstance(event, Spawn):
                spawns.append(event)
            elif isinstance(event, WaitForSlimesDead):
                if slimes_alive:
                    break
            elif isinstance(event, WaitForBossDead):
                if bosses_alive:
                    break
            elif isinstance(event, Dialogue):
                self.speaker = event.speaker
                self.spokage = event.text
                self.dialogue_visible = True
                break
            elif isinstance(event, EndTheGame):
                end_game = True
            elif isinstance(event, Finish):
                return ScriptOutput(tuple(spawns), end_game, True)
            else:
                raise TypeError(f"not a script event: {event!r}")
            self.events.popleft()
        return ScriptOutput(tuple(spawns), end_game, not self.events)

    def progress_dialogue(self) -> bool:
        """Dismiss the dialogue line at the front; returns whether there was one."""
        if not self.events or not isinstance(self.events[0], Dialogue):
            return False
        self.events.popleft()
        if not self.events or not isinstance(self.events[0], Dialogue):
            self.dialogue_visible = False
        return True