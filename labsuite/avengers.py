"""Battle simulation between heroes and enemies wearing powered suits."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator

MAX_POWER = 5000
OVERHEAT_LIMIT = 500


def _cap_power(value: int) -> int:
    return value if value < MAX_POWER else MAX_POWER


def _floor_heat(value: int) -> int:
    return value if value > 0 else 0


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(eq=False)
class Suit:
    """A combat suit; power is capped and heat never drops below zero."""

    power: int = 1000
    durability: int = 500
    energy: int = 300
    heat: int = 0

    def merge(self, other: Suit) -> None:
        """Absorb another suit: its energy feeds power and its power feeds energy."""
        other_power, other_durability, other_energy = (
            other.power,
            other.durability,
            other.energy,
        )
        self.power = _cap_power(self.power + other_energy)
        self.durability += other_durability
        self.energy += other_power

    def take_hit(self, amount: int) -> None:
        """Absorb an attack of the given strength."""
        self.durability -= amount
        self.energy += amount
        self.heat = _floor_heat(self.heat + amount)

    def boost(self, factor: int) -> None:
        """Raise power by a percentage, at the cost of energy intake and heat."""
        self.power = _cap_power(self.power + _trunc_div(self.power * factor, 100))
        self.energy += 5 * factor
        self.heat = _floor_heat(self.heat + factor)

    def repair(self, amount: int) -> None:
        """Restore durability and cool the suit down."""
        self.durability += amount
        self.heat = _floor_heat(self.heat - amount)

    @property
    def overheated(self) -> bool:
        return self.heat > OVERHEAT_LIMIT

    @property
    def intact(self) -> bool:
        return self.durability > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Suit):
            return NotImplemented
        return self.power == other.power and self.durability == other.durability

    def __lt__(self, other: Suit) -> bool:
        return self.power + self.durability < other.power + other.durability


@dataclass
class Avenger:
    """A fighter with a name, a suit of its own and an attack strength."""

    name: str
    suit: Suit
    strength: int

    def __post_init__(self) -> None:
        self.suit = replace(self.suit)

    def attack(self, enemy: Avenger) -> None:
        enemy.suit.take_hit(self.strength)

    def upgrade(self, suit: Suit) -> None:
        self.suit.merge(suit)

    def repair(self, amount: int) -> None:
        self.suit.repair(amount)

    def status(self) -> str:
        suit = self.suit
        return f"{self.name} {suit.power} {suit.durability} {suit.energy} {suit.heat}"


class Standing(Enum):
    """Which side is ahead in a battle."""

    HEROES = 1
    TIE = 0
    ENEMIES = -1

    @property
    def message(self) -> str:
        return {
            Standing.HEROES: "heroes are winning",
            Standing.ENEMIES: "enemies are winning",
            Standing.TIE: "tie",
        }[self]


class _Exhausted(Exception):
    """Raised when the token stream runs out."""


class _Reader:
    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: Iterator[str] = iter(tokens)

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _Exhausted from None

    def number(self) -> int:
        return int(self.word())


class Battle:
    """Rosters of heroes and enemies, a queue of spare suits and a battle log."""

    def __init__(self) -> None:
        self.heroes: list[Avenger] = []
        self.enemies: list[Avenger] = []
        self.log: list[str] = []
        self._suits: deque[Suit] = deque()

    def add_suit(self, suit: Suit) -> None:
        self._suits.append(replace(suit))

    def _enlist(self, roster: list[Avenger], name: str, strength: int) -> Avenger | None:
        if not self._suits:
            return None
        avenger = Avenger(name, self._suits.popleft(), strength)
        roster.append(avenger)
        return avenger

    def add_hero(self, name: str, strength: int) -> Avenger | None:
        """Give the next spare suit to a new hero; None if no suit is left."""
        return self._enlist(self.heroes, name, strength)

    def add_enemy(self, name: str, strength: int) -> Avenger | None:
        """Give the next spare suit to a new enemy; None if no suit is left."""
        return self._enlist(self.enemies, name, strength)

    def find(self, name: str) -> Avenger | None:
        for avenger in (*self.heroes, *self.enemies):
            if avenger.name == name:
                return avenger
        return None

    def result(self) -> Standing:
        def score(roster: list[Avenger]) -> int:
            return sum(a.suit.power + a.suit.durability for a in roster if a.suit.intact)

        heroes, enemies = score(self.heroes), score(self.enemies)
        if heroes > enemies:
            return Standing.HEROES
        if heroes < enemies:
            return Standing.ENEMIES
        return Standing.TIE

    def run(self, tokens: Iterable[str]) -> list[str]:
        """Play commands until End or the tokens run out; return the printed lines.

        When a command names an unknown or unfit fighter, the same command is
        read again with the following tokens as its arguments.
        """
        reader = _Reader(tokens)
        output: list[str] = []
        try:
            command = reader.word()
            while command != "End":
                if self._execute(command, reader, output):
                    command = reader.word()
        except _Exhausted:
            pass
        return output

    def _report_heat(self, name: str, avenger: Avenger) -> None:
        if avenger.suit.overheated:
            self.log.append(f"{name} suit overheated")

    def _execute(self, command: str, reader: _Reader, output: list[str]) -> bool:
        match command:
            case "Attack":
                first, second = reader.word(), reader.word()
                attacker, target = self.find(first), self.find(second)
                if (
                    attacker is None
                    or target is None
                    or not (
                        attacker.suit.intact
                        and attacker.suit.heat <= OVERHEAT_LIMIT
                        and target.suit.intact
                    )
                ):
                    return False
                attacker.attack(target)
                self.log.append(f"{first} attacks {second}")
                if not target.suit.intact:
                    self.log.append(f"{second} suit destroyed")
                else:
                    self._report_heat(second, target)
            case "Repair":
                name, amount = reader.word(), reader.number()
                avenger = self.find(name)
                if avenger is None:
                    return False
                avenger.repair(amount)
                self.log.append(f"{name} repaired")
            case "BoostPowerByFactor":
                name, factor = reader.word(), reader.number()
                avenger = self.find(name)
                if avenger is None:
                    return False
                avenger.suit.boost(factor)
                self.log.append(f"{name} boosted")
                self._report_heat(name, avenger)
            case "BoostPower":
                name = reader.word()
                extra = Suit(reader.number(), reader.number(), reader.number(), reader.number())
                avenger = self.find(name)
                if avenger is None:
                    return False
                avenger.suit.merge(extra)
                self.log.append(f"{name} boosted")
                self._report_heat(name, avenger)
            case "AvengerStatus":
                avenger = self.find(reader.word())
                if avenger is None:
                    return False
                output.append(avenger.status())
            case "Upgrade":
                name = reader.word()
                avenger = self.find(name)
                if avenger is None:
                    return False
                if self._suits:
                    avenger.upgrade(self._suits.popleft())
                    self.log.append(f"{name} upgraded")
                else:
                    self.log.append(f"{name} upgrade Fail")
            case "PrintBattleLog":
                output.extend(self.log)
            case "BattleStatus":
                output.append(self.result().message)
        return True


def _read_suit(reader: _Reader, previous: Suit) -> Suit:
    power, durability, energy, heat = (reader.number() for _ in range(4))
    if durability <= 0:
        return previous
    return Suit(_cap_power(power), durability, energy, _floor_heat(heat))


def _simulate(tokens: Iterable[str]) -> Iterator[str]:
    stream = iter(tokens)
    reader = _Reader(stream)
    battle = Battle()
    try:
        suit_count, hero_count, enemy_count = reader.number(), reader.number(), reader.number()
        suit = Suit()
        for _ in range(suit_count):
            suit = _read_suit(reader, suit)
            battle.add_suit(suit)
        for enlist, count in ((battle.add_hero, hero_count), (battle.add_enemy, enemy_count)):
            for _ in range(count):
                name, strength = reader.word(), reader.number()
                if enlist(name, strength) is None:
                    yield f"{name} is out of fight"
        if reader.word() == "BattleBegin":
            yield from battle.run(stream)
    except _Exhausted:
        return


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a battle simulation read from standard input.")
    parser.parse_args(argv)
    for line in _simulate(sys.stdin.read().split()):
        print(line)


if __name__ == "__main__":
    main()