"""World, map and player logic for the Ironbrew Inn dungeon crawl."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Dict, List, Optional, TextIO, Tuple

from .sounds import play_sound
from .tools import color_char, truncate_message

MAP_SIZE_HEIGHT = 21
MAP_SIZE_WIDTH = 84
MAX_ZOMBIES = 20
ZOMBIE_HP = 5
MAX_AMMO = 99
MAX_AMMO_PER_ZONE = 10
MAX_ALE_PER_ZONE = 10
MAX_HERO_HP = 10
ALE_HEAL = 4
DEFAULT_SIGHT_DISTANCE = 3
BULLET_RANGE = 10

TILE_WALL = "#"
TILE_EMPTY = " "
TILE_EXIT = ">"
TILE_AMMO = "o"
TILE_ALE = "U"
TILE_ZOMBIE = "Z"
TILE_FOG = "."
TILE_HERO = "@"

MOVE_UP = "w"
MOVE_DOWN = "s"
MOVE_RIGHT = "d"
MOVE_LEFT = "a"
MOVE_FIRE = "r"
MOVE_QUIT = "q"

_DIRECTIONS: Dict[str, Tuple[int, int]] = {
    MOVE_UP: (0, -1),
    MOVE_DOWN: (0, 1),
    MOVE_LEFT: (-1, 0),
    MOVE_RIGHT: (1, 0),
}

_ZONE_NAMES = {
    0: "First Floor - Ironbrew Inn",
    1: "Cellar - Ironbrew Inn",
    2: "Spooky Cave",
}


class TileFlag(IntFlag):
    VISIBLE = 0x01
    REVEALED = 0x02
    PASSABLE = 0x04
    DOOR = 0x08


class ZoneID(IntEnum):
    INN = 0
    CELLAR = 1
    CAVE1 = 2


@dataclass
class Tile:
    display: str = TILE_EMPTY
    flags: TileFlag = TileFlag(0)
    hp: int = 0

    def is_set(self, flag: TileFlag) -> bool:
        """Whether any bit of ``flag`` is on for this tile."""
        return bool(self.flags & flag)


def _empty_grid() -> List[List[Tile]]:
    return [[Tile() for _ in range(MAP_SIZE_WIDTH)] for _ in range(MAP_SIZE_HEIGHT)]


@dataclass
class Zone:
    tiles: List[List[Tile]] = field(default_factory=_empty_grid)
    name: str = ""

    def tile_at(self, x: int, y: int) -> Tile:
        return self.tiles[y][x]


@dataclass
class Player:
    hp: int = MAX_HERO_HP
    ammo: int = 0
    mugs: int = 0
    kills: int = 0
    exited: bool = False
    last_dir: str = MOVE_UP


@dataclass
class World:
    zones: Dict[ZoneID, Zone] = field(
        default_factory=lambda: {zid: Zone() for zid in ZoneID}
    )
    current_zone_id: ZoneID = ZoneID.INN
    player_x: int = 0
    player_y: int = 0

    @property
    def current_zone(self) -> Zone:
        return self.zones[self.current_zone_id]


def is_within_sight(
    source_x: int, source_y: int, sight_distance: int, target_x: int, target_y: int
) -> bool:
    """Whether the target lies within a circle of ``sight_distance`` around the source."""
    dx = target_x - source_x
    dy = target_y - source_y
    return dx * dx + dy * dy <= sight_distance * sight_distance


def calculate_score(player: Player) -> int:
    """Score: one per ale, two per kill, ten for escaping."""
    return player.mugs + player.kills * 2 + (10 if player.exited else 0)


class Game:
    """A running game: the world, the hero and the last action message."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        sound_stream: Optional[TextIO] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.sound_stream = sound_stream
        self.world = World()
        self.player = Player()
        self.last_action_msg = ""
        self.init_world()

    def _sound(self, name: str) -> None:
        play_sound(name, self.sound_stream)

    def _random_empty_location(self, zone: Zone) -> Tuple[int, int]:
        while True:
            x = self.rng.randrange(MAP_SIZE_WIDTH)
            y = self.rng.randrange(MAP_SIZE_HEIGHT)
            if zone.tile_at(x, y).display == TILE_EMPTY:
                return x, y

    def _roll_damage(self, roll: int) -> int:
        dmg = self.rng.randint(1, 6)
        return dmg * 2 if roll == 20 else dmg

    def init_world(self) -> None:
        """Build every zone, populate it, and place the hero in the inn."""
        for zid in ZoneID:
            self.init_map(zid)
            self.place_mobs(zid)
            self.place_items(zid, MAX_ALE_PER_ZONE, TILE_ALE)
            self.place_items(zid, MAX_AMMO_PER_ZONE, TILE_AMMO)
            zone = self.world.zones[zid]
            if zid == ZoneID.INN:
                x, y = self._random_empty_location(zone)
                zone.tile_at(x, y).display = TILE_EXIT
                self.world.current_zone_id = zid
            zone.name = _ZONE_NAMES[zid]
        self.init_player()

    def init_map(self, zid: ZoneID) -> None:
        """Lay out a zone as an empty room enclosed by walls."""
        zone = self.world.zones[zid]
        zone.tiles = [
            [
                Tile(
                    TILE_WALL
                    if x in (0, MAP_SIZE_WIDTH - 1) or y in (0, MAP_SIZE_HEIGHT - 1)
                    else TILE_EMPTY
                )
                for x in range(MAP_SIZE_WIDTH)
            ]
            for y in range(MAP_SIZE_HEIGHT)
        ]

    def init_player(self) -> None:
        """Reset the hero and drop them on a free tile of the current zone."""
        zone = self.world.current_zone
        x, y = self._random_empty_location(zone)
        self.player = Player()
        self.world.player_x = x
        self.world.player_y = y
        zone.tile_at(x, y).display = TILE_HERO
        self.fog_hero_pass()

    def place_mobs(self, zid: ZoneID) -> None:
        zone = self.world.zones[zid]
        for _ in range(MAX_ZOMBIES):
            x, y = self._random_empty_location(zone)
            tile = zone.tile_at(x, y)
            tile.display = TILE_ZOMBIE
            tile.hp = ZOMBIE_HP

    def place_items(self, zid: ZoneID, count: int, symbol: str) -> None:
        zone = self.world.zones[zid]
        for _ in range(count):
            x, y = self._random_empty_location(zone)
            zone.tile_at(x, y).display = symbol

    def set_last_action_msg(self, message: str) -> None:
        self.last_action_msg = truncate_message(message)

    def move_player(self, direction: str) -> None:
        """Step the hero one tile, handling pickups, combat and the exit."""
        delta = _DIRECTIONS.get(direction)
        if delta is None:
            return
        zone = self.world.current_zone
        new_x = self.world.player_x + delta[0]
        new_y = self.world.player_y + delta[1]
        tile = zone.tile_at(new_x, new_y)
        target = tile.display
        player = self.player

        if target in (TILE_WALL, TILE_HERO):
            return

        if target == TILE_ALE:
            player.hp = min(player.hp + ALE_HEAL, MAX_HERO_HP)
            player.mugs += 1
            self._sound("gulp")
            if player.hp >= MAX_HERO_HP:
                self.set_last_action_msg(
                    "\n\nYou drink down an ale and back to max hit points!\n\n"
                )
            else:
                self.set_last_action_msg(
                    "\nYou drink a mug of ale!\n +++ GOOD STUFF +++\n"
                    f" You gain {ALE_HEAL} hit points.\n\n"
                )
        elif target == TILE_AMMO:
            player.ammo += 1
            self.set_last_action_msg(
                "\n\nFortune smiles on you. You relieve the floor of its bullet.\n\n"
            )
            self._sound("reload")
        elif target == TILE_ZOMBIE:
            self._melee(tile)
            return
        elif target == TILE_EXIT:
            player.exited = True
            return

        zone.tile_at(self.world.player_x, self.world.player_y).display = TILE_EMPTY
        self.world.player_x = new_x
        self.world.player_y = new_y
        tile.display = TILE_HERO
        self.fog_hero_pass()

    def _melee(self, tile: Tile) -> None:
        player_roll = self.rng.randint(1, 20)
        zombie_roll = self.rng.randint(1, 20)
        if player_roll >= zombie_roll:
            dmg = self._roll_damage(player_roll)
            tile.hp -= dmg
            self._sound("slash")
            if tile.hp <= 0:
                tile.display = TILE_EMPTY
                self.player.kills += 1
                outcome = "Killing it!"
            else:
                outcome = "Zombie is wounded!"
            self.set_last_action_msg(
                f"\n\nYour roll of ({player_roll}) beats the Zombie's ({zombie_roll}) "
                f"and you land ({dmg}) damage. {outcome}\n\n"
            )
        else:
            dmg = self._roll_damage(zombie_roll)
            self.player.hp -= dmg
            self.set_last_action_msg(
                f"\n\nYour roll of ({player_roll}) comes up short to the Zombie's "
                f"({zombie_roll}) and you take ({dmg}) damage. Ouch!\n\n"
            )
            self._sound("hurt")

    def fire_bullet(self) -> None:
        """Shoot along the last direction moved; the first zombie hit dies."""
        if self.player.ammo <= 0:
            return
        delta = _DIRECTIONS.get(self.player.last_dir)
        if delta is None:
            return
        dx, dy = delta
        bx = self.world.player_x + dx
        by = self.world.player_y + dy
        zone = self.world.current_zone

        self.player.ammo -= 1
        for _ in range(BULLET_RANGE):
            tile = zone.tile_at(bx, by)
            if tile.display == TILE_WALL:
                self.set_last_action_msg(
                    "\n\n ***BANG*** You daftly fire off a round and hit the wall. "
                    "Take that wall!\n\n"
                )
                return
            if tile.display == TILE_EXIT:
                self.set_last_action_msg(
                    "\n\n ***BANG*** You wound the exit. "
                    "Yet it still will send you home when ready.\n\n"
                )
                return
            if tile.display == TILE_ZOMBIE:
                tile.display = TILE_EMPTY
                tile.hp = 0
                self._sound("pew")
                self.player.kills += 1
                self.set_last_action_msg(
                    "\n\nYou whip your revolver around ***BANG*** "
                    "the Zombie falls from your headshot!\n\n"
                )
                return
            bx += dx
            by += dy

    def fog_hero_pass(self) -> None:
        """Mark what the hero can see; walls and exits stay revealed once seen."""
        px, py = self.world.player_x, self.world.player_y
        for y, row in enumerate(self.world.current_zone.tiles):
            for x, tile in enumerate(row):
                if is_within_sight(px, py, DEFAULT_SIGHT_DISTANCE, x, y):
                    tile.flags |= TileFlag.VISIBLE
                    if tile.display in (TILE_WALL, TILE_EXIT):
                        tile.flags |= TileFlag.REVEALED
                else:
                    tile.flags &= ~TileFlag.VISIBLE

    def render_map(self) -> str:
        """Draw the current zone, fogging tiles neither visible nor revealed."""
        seen = TileFlag.VISIBLE | TileFlag.REVEALED
        lines = [
            "    "
            + "".join(
                color_char(tile.display if tile.is_set(seen) else TILE_FOG)
                for tile in row
            )
            for row in self.world.current_zone.tiles
        ]
        return "\n\n\n\n" + "\n".join(lines) + "\nn\n" + self.last_action_msg + "\n"

    def stats_line(self) -> str:
        p = self.player
        return f"HP: {p.hp} | Ammo: {p.ammo} | Ales: {p.mugs} | Kills: {p.kills}"