"""
Agenda Test Script

Tests the wait list:
- Entries fire in time order, ties in insertion order
- Immediate entries preempt everything due now, latest first
- Cancelled entries never fire
- Popping an empty agenda is an error
"""

import pytest
import simpy

from simulator.core.steps import Action, Continuation
from simulator.infrastructure.agenda import Agenda, AgendaEmptyError, EntryStatus


def action(kind=Action.OPEN_DOORS):
    return Continuation(kind)


def test_pops_in_time_order_and_advances_clock():
    agenda = Agenda()
    late = agenda.insert_sorted(50, action(Action.CLOSE_DOORS))
    early = agenda.insert_sorted(20, action(Action.OPEN_DOORS))

    assert agenda.pop_earliest() is early
    assert agenda.now == 20
    assert agenda.pop_earliest() is late
    assert agenda.now == 50


def test_same_time_entries_fire_in_insertion_order():
    agenda = Agenda()
    first = agenda.insert_sorted(10, action(Action.LET_PEOPLE_OUT_IN))
    second = agenda.insert_sorted(10, action(Action.CLOSE_DOORS))

    assert [agenda.pop_earliest(), agenda.pop_earliest()] == [first, second]


def test_immediate_entries_preempt_sorted_entries_due_now():
    agenda = Agenda()
    agenda.insert_sorted(10, action(Action.GO_UP_A_FLOOR))
    agenda.pop_earliest()

    sorted_now = agenda.insert_sorted(10, action(Action.CLOSE_DOORS))
    immediate = agenda.insert_immediate(action(Action.OPEN_DOORS))

    assert immediate.immediate
    assert immediate.time == 10
    assert agenda.pop_earliest() is immediate
    assert agenda.pop_earliest() is sorted_now


def test_latest_immediate_entry_fires_first():
    agenda = Agenda()
    older = agenda.insert_immediate(action(Action.OPEN_DOORS))
    newer = agenda.insert_immediate(action(Action.WAIT_FOR_CALL))

    assert agenda.pop_earliest() is newer
    assert agenda.pop_earliest() is older


def test_cancelled_entry_never_fires():
    agenda = Agenda()
    cancelled = agenda.insert_sorted(10, action(Action.CLOSE_DOORS))
    kept = agenda.insert_sorted(30, action(Action.PREPARE_TO_MOVE))
    agenda.cancel(cancelled)

    assert cancelled.status is EntryStatus.CANCELLED
    assert len(agenda) == 1
    assert agenda.pop_earliest() is kept
    assert kept.status is EntryStatus.FIRED


def test_cancel_is_a_no_op_for_fired_or_missing_entries():
    agenda = Agenda()
    entry = agenda.insert_sorted(5, action())
    agenda.pop_earliest()

    agenda.cancel(entry)
    agenda.cancel(None)

    assert entry.status is EntryStatus.FIRED


def test_empty_agenda_raises():
    agenda = Agenda()
    with pytest.raises(AgendaEmptyError):
        agenda.pop_earliest()


def test_agenda_with_only_cancelled_entries_is_empty():
    agenda = Agenda()
    agenda.cancel(agenda.insert_sorted(10, action()))

    assert agenda.is_empty()
    with pytest.raises(AgendaEmptyError):
        agenda.pop_earliest()


def test_inserting_in_the_past_is_rejected():
    agenda = Agenda()
    agenda.insert_sorted(40, action())
    agenda.pop_earliest()

    with pytest.raises(ValueError):
        agenda.insert_sorted(39, action())


def test_pending_lists_live_entries_in_firing_order():
    agenda = Agenda()
    c = agenda.insert_sorted(30, action(Action.CLOSE_DOORS))
    a = agenda.insert_sorted(10, action(Action.OPEN_DOORS))
    b = agenda.insert_immediate(action(Action.WAIT_FOR_CALL))
    agenda.cancel(a)

    assert agenda.pending() == [b, c]


def test_clock_never_goes_backwards():
    agenda = Agenda()
    for time in (70, 10, 40, 40, 0, 25):
        agenda.insert_sorted(time, action())

    times = []
    while not agenda.is_empty():
        times.append(agenda.pop_earliest().time)
        assert agenda.now == times[-1]

    assert times == sorted(times)


def test_uses_the_given_environment():
    env = simpy.Environment(initial_time=100)
    agenda = Agenda(env)
    entry = agenda.insert_immediate(action())

    assert entry.time == 100
    assert agenda.pop_earliest() is entry
    assert env.now == 100
