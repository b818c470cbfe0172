# Ironbrew Inn

A small terminal roguelike. You start somewhere on the first floor of the Ironbrew Inn,
and zombies are shambling around. Drink ale to heal, pick up stray bullets, fight your way
through and find the exit.

## Installing and playing

```
pip install .
ironbrew
```

The map is drawn in colour with ANSI escape codes, and the screen is cleared before each
turn. When the game runs in a terminal, keys are read one at a time, so you don't have to
press Enter. Keys are case-insensitive:

| Key | Action |
|-----|--------|
| `w` `a` `s` `d` | Move up, left, down, right |
| `r` | Fire a bullet in the direction you last moved (up, if you haven't moved yet) |
| `q` | Quit |

Any other key does nothing. If input runs out, the game ends as if you had quit. When the
game is over, the final score is printed and the program waits for Enter.

## The map

| Symbol | Meaning |
|--------|---------|
| `@` | You |
| `Z` | Zombie (5 hit points) |
| `U` | Mug of ale: heals 4 hit points, up to a maximum of 10 |
| `o` | A bullet |
| `>` | The exit |
| `#` | Wall |
| `.` | Fog: ground you can't see right now |

You can see in a circle of radius 3 around you. Walls and the exit stay on the map once
you have seen them. Everything else fades back into fog when you move away.

Each floor is a walled room of 84 by 21 tiles with 20 zombies, 10 mugs of ale and 10
bullets scattered over it.

## Combat

When you walk into a zombie, you and the zombie each roll a d20. If your roll is equal or
higher, you deal a d6 of damage. If the zombie's roll is higher, it deals a d6 to you. A
natural 20 on the winning roll doubles the damage. You stay where you are either way.

A bullet flies up to 10 tiles in a straight line. It kills the first zombie it hits
outright, and it stops at a wall or at the exit. With no bullets, firing does nothing.

## Scoring

Each ale counts 1 point and each kill counts 2. Escaping through the exit adds 10 more.
The game ends when you escape, when your hit points reach zero, or when you quit.

## Using the game from code

`ironbrew.game.Game` holds the whole world and player state. It takes a `random.Random`
instance, so you can seed a game and replay it exactly, and a stream that sound effects
are written to:

```python
import io
import random

from ironbrew.game import Game, calculate_score

game = Game(rng=random.Random(1), sound_stream=io.StringIO())
game.move_player("d")
game.fire_bullet()
print(game.render_map())
print(game.stats_line())
print(calculate_score(game.player))
```

`ironbrew.main.handle_command(game, command)` applies one key press and returns `False`
when the key was a quit. `ironbrew.main.game_loop(game, read, out, clear)` runs the
interactive loop and returns the final score; you pass it the key reader, the output
stream and the screen-clearing function, so you can drive it from a script.

## What it does not do

- Three floors are built when a game starts: the inn's first floor, the cellar and a
  cave. You only ever play on the first floor; there is no way to go down to the others.
- Zombies do not move or attack on their own. They only fight back when you walk into
  them.
- Sound effects are not played. Each one is written as a text line such as
  `[SOUND] gulp`.
- Games cannot be saved or loaded.