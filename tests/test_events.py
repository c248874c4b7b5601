import io

import pytest

from labsuite.events import Concert, Event, EventScheduler, TheatreShow, Wedding, main


def plain(start, end, amount):
    return Wedding(start, end, base_amount=amount, decoration_cost=0, guest_count=0, venue_cost=0)


def test_event_is_abstract():
    with pytest.raises(TypeError):
        Event(0, 1)


def test_wedding_small_profit():
    wedding = Wedding(0, 1, base_amount=1000, decoration_cost=100, guest_count=0, venue_cost=200)
    assert wedding.profit == 700.0


def test_concert_without_sales_loses_costs():
    concert = Concert(0, 1, ticket_price=50, tickets_sold=0, artist_fee=100, logistic_cost=200)
    assert concert.profit == -300.0


def test_theatre_without_seats_loses_venue():
    show = TheatreShow(0, 1, base_price=40, total_seats=0, venue_cost=500)
    assert show.profit == -500.0


def test_concert_profit_is_damped_below_revenue():
    concert = Concert(0, 1, ticket_price=100, tickets_sold=1000, artist_fee=0, logistic_cost=0)
    assert 0 < concert.profit < 100 * 1000


def test_wedding_venue_triples_above_two_hundred_guests():
    def wedding(guests):
        return Wedding(0, 1, base_amount=100000, decoration_cost=0, guest_count=guests, venue_cost=5000)

    assert wedding(201).profit < wedding(200).profit


def test_wedding_catering_discount_above_hundred_guests():
    def wedding(guests):
        return Wedding(0, 1, base_amount=100000, decoration_cost=0, guest_count=guests, venue_cost=0)

    assert wedding(101).profit > wedding(100).profit


def test_empty_scheduler():
    assert EventScheduler().net_profit() == 0.0


def test_single_event_counts_even_when_negative():
    scheduler = EventScheduler()
    event = Concert(0, 1, ticket_price=1, tickets_sold=0, artist_fee=10, logistic_cost=0)
    scheduler.add_event(event)
    assert scheduler.net_profit() == event.profit


def test_touching_events_are_both_taken():
    scheduler = EventScheduler()
    first, second = plain(0, 5, 300), plain(5, 10, 400)
    scheduler.add_event(first)
    scheduler.add_event(second)
    assert scheduler.net_profit() == first.profit + second.profit


def test_overlapping_events_take_the_better():
    scheduler = EventScheduler()
    first, second = plain(0, 6, 300), plain(5, 10, 400)
    scheduler.add_event(first)
    scheduler.add_event(second)
    assert scheduler.net_profit() == max(first.profit, second.profit)


def test_order_of_adding_does_not_matter():
    events = [plain(0, 3, 50), plain(2, 5, 80), plain(4, 8, 60), plain(6, 9, 90)]
    forward, backward = EventScheduler(), EventScheduler()
    for event in events:
        forward.add_event(event)
    for event in reversed(events):
        backward.add_event(event)
    assert forward.net_profit() == backward.net_profit()
    assert forward.net_profit() >= max(event.profit for event in events)


def test_best_chain_beats_single_large_event():
    chain = [plain(0, 2, 100), plain(2, 4, 100), plain(4, 6, 100)]
    big = plain(0, 6, 250)
    scheduler = EventScheduler()
    for event in [big, *chain]:
        scheduler.add_event(event)
    assert scheduler.net_profit() == sum(event.profit for event in chain)


def test_main_prints_two_decimals(monkeypatch, capsys):
    data = "3 1 0 4 20 30 100 50 2 3 8 15 10 200 3 8 12 5000 100 120 400"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    main([])
    expected = EventScheduler()
    expected.add_event(Concert(0, 4, 20, 30, 100, 50))
    expected.add_event(TheatreShow(3, 8, 15, 10, 200))
    expected.add_event(Wedding(8, 12, 5000, 100, 120, 400))
    assert capsys.readouterr().out == f"{expected.net_profit():.2f}\n"


def test_main_rejects_truncated_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1 0 4 20"))
    with pytest.raises(ValueError):
        main([])