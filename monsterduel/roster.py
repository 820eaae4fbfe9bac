"""The monsters available to pick from, and their moves."""

from __future__ import annotations

from monsterduel.models import Monster, Move

EMBER = Move("Ember", "Fire", 2, 15)
FLAME_BURST = Move("Flame Burst", "Fire", 3, 20)
FIRE_SPIN = Move("Fire Spin", "Fire", 4, 25)
BLAZE_KICK = Move("Blaze Kick", "Fire", 5, 30)

WATER_GUN = Move("Water Gun", "Water", 2, 15)
AQUA_JET = Move("Aqua Jet", "Water", 3, 20)
BUBBLE_BEAM = Move("Bubble Beam", "Water", 4, 25)
HYDRO_PUMP = Move("Hydro Pump", "Water", 5, 30)

VINE_WHIP = Move("Vine Whip", "Grass", 2, 15)
LEAF_BLADE = Move("Leaf Blade", "Grass", 3, 20)
RAZOR_LEAF = Move("Razor Leaf", "Grass", 4, 25)
SOLAR_BEAM = Move("Solar Beam", "Grass", 5, 30)

THUNDER_SHOCK = Move("Thunder Shock", "Electric", 2, 15)
SPARK = Move("Spark", "Electric", 3, 20)
ELECTRO_BALL = Move("Electro Ball", "Electric", 4, 25)
THUNDER = Move("Thunder", "Electric", 5, 30)

ROCK_THROW = Move("Rock Throw", "Rock", 2, 15)
ROCK_SLIDE = Move("Rock Slide", "Rock", 3, 20)
STONE_EDGE = Move("Stone Edge", "Rock", 4, 25)
EARTHQUAKE = Move("Earthquake", "Rock", 5, 30)

MAGIC_MISSILE = Move("Magic Missile", "Psychic", 2, 15)
PSYCHIC = Move("Psychic", "Psychic", 3, 20)
FUTURE_SIGHT = Move("Future Sight", "Psychic", 4, 25)
MYSTIC_FORCE = Move("Mystic Force", "Psychic", 5, 30)

_TEMPLATES: tuple[Monster, ...] = (
    Monster("Flamo", "Fire", 100, (FLAME_BURST, FIRE_SPIN, EMBER, BLAZE_KICK)),
    Monster("Aquaril", "Water", 100, (AQUA_JET, WATER_GUN, BUBBLE_BEAM, HYDRO_PUMP)),
    Monster("Terraplant", "Grass", 100, (VINE_WHIP, LEAF_BLADE, RAZOR_LEAF, SOLAR_BEAM)),
    Monster("Zappy", "Electric", 100, (THUNDER_SHOCK, SPARK, ELECTRO_BALL, THUNDER)),
    Monster("Rocky", "Rock", 100, (ROCK_THROW, ROCK_SLIDE, STONE_EDGE, EARTHQUAKE)),
    Monster("Mysty", "Psychic", 100, (MAGIC_MISSILE, PSYCHIC, FUTURE_SIGHT, MYSTIC_FORCE)),
)


def all_monsters() -> list[Monster]:
    """Return fresh copies of every selectable monster, in menu order."""
    return [monster.copy() for monster in _TEMPLATES]


def find_monster(name: str) -> Monster:
    """Return a fresh copy of the monster with this name.

    Raises KeyError if there is no such monster.
    """
    for monster in _TEMPLATES:
        if monster.name == name:
            return monster.copy()
    raise KeyError(name)