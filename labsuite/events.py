"""Event profit models and a scheduler choosing the most profitable compatible events."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Event(ABC):
    """An event occupying the interval from start to end."""

    start: int
    end: int

    @property
    @abstractmethod
    def profit(self) -> float:
        """Net profit of holding the event."""


@dataclass(frozen=True)
class Concert(Event):
    ticket_price: int
    tickets_sold: int
    artist_fee: int
    logistic_cost: int

    @property
    def profit(self) -> float:
        costs = self.artist_fee + self.logistic_cost
        raw = 0.82 * self.ticket_price * self.tickets_sold - costs
        return 0.7 * raw if raw > 2 * costs else raw


@dataclass(frozen=True)
class TheatreShow(Event):
    base_price: int
    total_seats: int
    venue_cost: int

    @property
    def profit(self) -> float:
        return (
            0.82 * 1.25 * self.total_seats * self.base_price
            + 37.5 * self.total_seats
            - self.venue_cost
        )


@dataclass(frozen=True)
class Wedding(Event):
    base_amount: int
    decoration_cost: int
    guest_count: int
    venue_cost: int

    @property
    def profit(self) -> float:
        venue = self.venue_cost * 3 if self.guest_count > 200 else self.venue_cost
        catering = self.guest_count * 70 if self.guest_count > 100 else self.guest_count * 100
        return float(self.base_amount - venue - self.decoration_cost - catering)


def _previous_compatible(ends: list[int], index: int, start: int) -> int:
    """Binary search for the last earlier event finishing by start, or -1."""
    low, high = 0, index - 1
    while low <= high:
        mid = (low + high) // 2
        if ends[mid] <= start and ends[mid + 1] > start:
            return mid
        if ends[mid] > start:
            high = mid - 1
        else:
            low = mid + 1
    return -1


class EventScheduler:
    """Collects events and finds the best total profit of non-overlapping ones."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def add_event(self, event: Event) -> None:
        self.events.append(event)

    def net_profit(self) -> float:
        """Maximum total profit; the earliest-ending event is always counted."""
        ordered = sorted(self.events, key=lambda event: event.end)
        ends = [event.end for event in ordered]
        best: list[float] = []
        for index, event in enumerate(ordered):
            if index == 0:
                best.append(event.profit)
                continue
            previous = _previous_compatible(ends, index, event.start)
            taken = event.profit + (best[previous] if previous >= 0 else 0.0)
            best.append(max(best[index - 1], taken))
        return best[-1] if best else 0.0


_KINDS: dict[int, tuple[type[Event], int]] = {
    1: (Concert, 4),
    2: (TheatreShow, 3),
}


def _read_events(numbers: Iterator[int]) -> Iterator[Event]:
    def take() -> int:
        try:
            return next(numbers)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    for _ in range(take()):
        kind, extra = _KINDS.get(take(), (Wedding, 4))
        yield kind(*(take() for _ in range(2 + extra)))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compute the best net profit of events read from standard input.")
    parser.parse_args(argv)
    scheduler = EventScheduler()
    for event in _read_events(int(token) for token in sys.stdin.read().split()):
        scheduler.add_event(event)
    print(f"{scheduler.net_profit():.2f}")


if __name__ == "__main__":
    main()