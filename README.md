# chainaxe

Game rules for a side-scrolling arena fighter. The hero swings an axe that
"chain reacts". Each hit makes the next swing come sooner and makes the weapon
shorter. A miss makes the weapon slower and longer and sends it into a cooldown.

Everything here is plain Python state and has no dependencies. You drive it
one frame at a time from your own game loop: pass in the input and the elapsed
seconds, then read back positions, states, sprite choices and asset paths.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `chainaxe.core` holds the value types the other modules use. `Vec2` and
  `Vec3` are immutable vectors; `Vec3.smooth_nudge` eases a point towards a
  target with exponential decay. `Color` has `srgb` and `srgba` constructors.
  `Timer` is a one-shot countdown with `tick`, `reset`, `finished` and
  `just_finished`.
- `chainaxe.input` holds the player tuning constants (speeds, jump impulse,
  dash duration and cooldown, gravity scale, health) and the key bindings:
  arrows to move, Z to jump, X to attack and C to dash. It defines `Key`,
  `GamepadButton`, `KeyboardState`, `GamepadState` and `MovementAction`.
  `input_to_direction` combines four directional buttons into a direction.
  `keyboard_movement_actions` and `gamepad_movement_actions` turn a frame of
  input into movement actions. `keyboard_attack_input` and
  `gamepad_attack_input` return the attack direction held, if any, and whether
  the attack button is down. On a gamepad the D-pad takes precedence over the
  left stick.
- `chainaxe.movement` holds the `PlayerController`. It handles running, jumping
  with 0.2 s of coyote time, dashing once per airtime with a cooldown, and
  recovering from a fall below the arena. It also steps the sprite animation,
  including footstep sounds. The movement states are `Idle`, `Run`, `Jump` and
  `Dash`. `player_sprite` returns a `SpriteChoice`, which is an image path and
  an optional atlas layout. `reversible_step` advances a ping-pong animation.
- `chainaxe.attack` holds the attack phases `Reacting`, `Attacking`, `Ready`
  and `Cooling`. `Attack` carries the fury state: `update_fury`,
  `new_reaction_timer` and `tick`. `AttackPosition` decides which side the
  weapon swings from and how it is offset and mirrored. `AttackSound`,
  `sound_index` and `choose_sound_path` pick the sound asset to play.
  `choose_attack_direction` snaps input to an axis and allows downward attacks
  only in the air. `Combat` is the per-frame state machine, with `update`,
  `register_hit` and `do_attack`.
- `chainaxe.weapon` places the weapon. `WeaponFollower.follow_idle` makes it
  trail the player. `WeaponFollower.follow_attack` aims and swings it and
  returns strike events as attack-delay flags for `Combat.do_attack`. The glow
  (`WeaponGlow`) turns red while reacting, purple while ready and blue while
  cooling. `timer_to_transparency` fades it, and `color_with_transparency`
  builds its colour. `weapon_part_offsets` lays out the base, extend and head
  parts for a given extension.
- `chainaxe.theme` holds the UI colour palette and `InteractionPalette`, which
  has `color_for`. It also builds `Widget` trees through `ui_root`, `title`,
  `header`, `label`, `text`, `button` and `button_small`. `Widget.click`
  presses the button inside a widget, runs its action and returns the click
  sound path.
- `chainaxe.script` holds the full sequence of waits, enemy spawns and dialogue
  in `game_script`. `ScriptRunner` plays it. `process` returns a
  `ScriptOutput` with the spawns to make, whether to end the game, and whether
  the script is finished. `progress_dialogue` dismisses the current line.
- `chainaxe.screens` holds the `Screen` and `Menu` states and
  `default_screen`. It also covers the fading `Splash`, the page-by-page
  `Story`, pausing with P or Escape in `Gameplay`, and `loading_next_screen`.

## Example

Two frames of the attack loop:

```python
from chainaxe.attack import Combat
from chainaxe.core import Vec2, Vec3
from chainaxe.weapon import WeaponFollower

combat = Combat()
weapon = WeaponFollower()
position = Vec3(0.0, 0.0, 2.0)
direction = Vec2(1.0, 0.0)

# The first press starts an attack in the reacting phase.
combat.update(attack_input=True, delta=0.016, position=position,
              attack_direction=direction)

# On each later frame, update the combat, move the weapon and feed strike
# events back into the combat.
sounds = combat.update(False, 0.016, position, direction)
if combat.attack is not None:
    for in_attack_delay in weapon.follow_attack(position, direction, combat.attack, 0.016):
        sounds += combat.do_attack(in_attack_delay)
else:
    weapon.follow_idle(position, Vec2(1.0, 0.0), 0.016)
```

Playing the story script:

```python
from chainaxe.script import ScriptRunner

runner = ScriptRunner()
output = runner.process(delta=0.016, slimes_alive=0, bosses_alive=0)
for spawn in output.spawns:
    print(spawn.enemy, spawn.translation())
if runner.dialogue_visible:
    print(runner.speaker, runner.spokage)
    runner.progress_dialogue()
```

## What it does not do

The package does not draw, play audio, load assets or simulate physics. Sounds,
images and fonts appear only as asset path strings. Collision, gravity and
ground contact must come from your own engine: for example, call
`PlayerController.set_grounded` and `Combat.register_hit` when your collisions
report those events. The enemies, the arena and the menus' own contents are not
included. The script only reports which enemies to spawn and where. The package
has no command to run and no playable game of its own.