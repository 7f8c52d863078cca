import pytest

from lifeatdev.data.events import (
    EMPLOYED_EVENTS,
    SENIOR_EVENTS,
    STUDENT_EVENTS,
    UNEMPLOYED_EVENTS,
    UNIVERSAL_EVENTS,
)
from lifeatdev.models import StatDelta
from lifeatdev.services.events_service import (
    EventDeck,
    apply_stat_changes,
    build_event,
    get_event_pool,
)


def _pool_ids(stats):
    return {event.id for event in get_event_pool(stats)}


def _ids(raw_events):
    return {event["id"] for event in raw_events}


def test_every_event_builds():
    for raw in STUDENT_EVENTS + UNEMPLOYED_EVENTS + EMPLOYED_EVENTS + SENIOR_EVENTS + UNIVERSAL_EVENTS:
        event = build_event(raw)
        assert not event.effects.is_empty()


def test_stat_delta_is_closed():
    with pytest.raises(TypeError):
        StatDelta(happiness=5)


def test_student_pool(make_stats):
    ids = _pool_ids(make_stats("cs-student"))
    assert ids == _ids(STUDENT_EVENTS) | _ids(UNIVERSAL_EVENTS)


def test_unemployed_pool(make_stats):
    assert _pool_ids(make_stats("script-kiddie")) == _ids(UNEMPLOYED_EVENTS) | _ids(UNIVERSAL_EVENTS)


def test_employed_and_senior_pools(make_stats):
    assert _pool_ids(make_stats("junior-dev")) == _ids(EMPLOYED_EVENTS) | _ids(UNIVERSAL_EVENTS)
    assert _pool_ids(make_stats("senior-dev")) == (
        _ids(EMPLOYED_EVENTS) | _ids(SENIOR_EVENTS) | _ids(UNIVERSAL_EVENTS)
    )


def test_intern_only_gets_universal_events(make_stats):
    assert _pool_ids(make_stats("intern")) == _ids(UNIVERSAL_EVENTS)


def test_apply_stat_changes_clamps_everything_but_money(make_stats):
    stats = make_stats("junior-dev", stress=95, energy=5, money=100, coding=998, reputation=3)
    updated = apply_stat_changes(
        stats,
        StatDelta(stress=20, energy=-20, money=-500, coding=10, reputation=-10),
    )
    assert updated.stress == 100
    assert updated.energy == 0
    assert updated.money == -400
    assert updated.coding == 1000
    assert updated.reputation == 0
    assert stats.stress == 95


def test_untouched_fields_stay_put(make_stats):
    stats = make_stats("junior-dev", weeks=30, stress=40)
    updated = apply_stat_changes(stats, StatDelta(coding=2))
    assert updated.weeks == 30
    assert updated.stress == 40
    assert updated.coding == stats.coding + 2


def test_deterministic_deck_cycles_universal_events(make_stats):
    deck = EventDeck(deterministic=True)
    stats = make_stats("senior-dev")
    drawn = [deck.draw_for(stats).id for _ in range(len(UNIVERSAL_EVENTS) + 1)]
    assert drawn[:-1] == [event["id"] for event in UNIVERSAL_EVENTS]
    assert drawn[-1] == UNIVERSAL_EVENTS[0]["id"]
    assert deck.counter == len(UNIVERSAL_EVENTS) + 1


def test_decks_do_not_share_state():
    first = EventDeck(deterministic=True)
    second = EventDeck(deterministic=True, counter=1)
    first.next_cycled()
    assert first.counter == 1
    assert second.counter == 1
    assert second.next_cycled().id == UNIVERSAL_EVENTS[1 % len(UNIVERSAL_EVENTS)]["id"]


def test_random_deck_draws_from_job_pool(make_stats, rng):
    deck = EventDeck(rng)
    stats = make_stats("cs-student")
    allowed = _pool_ids(stats)
    for _ in range(30):
        assert deck.draw_for(stats).id in allowed


def test_roll_respects_chance(make_stats, rng):
    deck = EventDeck(rng)
    stats = make_stats("junior-dev")
    assert deck.roll(0.0, stats) is None
    assert deck.roll(1.0, stats) is not None
