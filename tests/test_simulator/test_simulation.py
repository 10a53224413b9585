"""
Simulation Scenario Test Script

Whole runs against scripted users:
- One rider from the home floor to the top floor
- A user giving up before the elevator arrives
- A user who almost gives up while the queue is boarding
- A user stopping the closing doors
- A car call cleared when the elevator leaves its floor
"""

import pytest

from conftest import RecordingTrace, user
from config.simulation import SimulationConfig
from simulator.core.steps import Direction, ElevatorStep
from simulator.infrastructure.agenda import AgendaEmptyError
from simulator.infrastructure.realtime_env import RealtimeEnvironment
from simulator.implementations.random_sources import ScriptExhaustedError
from simulator.interfaces.trace_sink import ITraceSink
from simulator.simulation import Simulation


class CallSnapshots(ITraceSink):
    """Copies the car call registers at every record"""

    def __init__(self, simulation):
        self.simulation = simulation
        self.snapshots = []

    def record(self, record):
        self.snapshots.append((record.time, record.step, record.floor,
                               list(self.simulation.elevator.calls.car)))


def elevator_steps(trace):
    return [(r.time, r.step) for r in trace.records if r.step.startswith("E")]


def test_single_rider_from_home_to_top_floor(make_simulation, trace):
    sim = make_simulation([user(2, 4)])
    result = sim.run()
    rider = result.passengers[0]

    assert elevator_steps(trace) == [
        (20, "E3"), (40, "E4"), (65, "E4"), (65, "E5"), (85, "E6"),
        (100, "E7"), (151, "E7"), (216, "E2"), (216, "E3"), (236, "E4"),
        (261, "E4"), (292, "E5"), (312, "E6"), (327, "E8"), (388, "E8"),
        (472, "E2"), (472, "E3"), (492, "E4"), (548, "E5"), (568, "E6"),
        (568, "E1"), (772, "E9"),
    ]
    assert [(r.time, r.step) for r in trace.records if r.step.startswith("U")] == [
        (0, "U1"), (0, "U2"), (0, "U3"), (40, "U5"), (236, "U6"),
    ]
    assert (rider.boarding_time, rider.alighting_time) == (40, 236)
    assert result.delivered == [rider]
    assert result.gave_up == []

    elevator = sim.elevator
    assert elevator.floor == 2
    assert elevator.direction is Direction.NEUTRAL
    assert elevator.step is ElevatorStep.WAIT_FOR_CALL
    assert not (elevator.d1 or elevator.d2 or elevator.d3)


def test_trace_records_carry_state_after_the_step(make_simulation, trace):
    make_simulation([user(2, 4)]).run()

    moving = [r for r in trace.records if r.step == "E7"]
    assert [(r.floor, r.direction) for r in moving] == [(3, "U"), (4, "U")]
    opening = trace.find("E3")[0]
    assert opening.d1 and opening.d2 and not opening.d3


def test_user_gives_up_at_arrival_plus_patience(make_simulation, trace):
    sim = make_simulation([user(0, 1, give_up_time=50)])
    result = sim.run()
    quitter = result.passengers[0]

    assert quitter.gave_up_time == 50
    assert quitter.boarding_time is None
    assert quitter.container is None
    assert result.gave_up == [quitter]
    assert [r.time for r in trace.find("U4", "decides to give up")] == [50]
    # The lit hall button still brings the elevator down
    assert (180, "E3") in elevator_steps(trace)
    assert trace.find("E3")[0].floor == 0


def test_user_almost_gives_up_while_queue_boards(make_simulation, trace):
    sim = make_simulation([user(2, 4, give_up_time=1000, inter_time=1), user(2, 3, give_up_time=45)])
    result = sim.run()
    first, second = result.passengers

    assert [r.time for r in trace.find("U4", "almost gave up")] == [46]
    assert second.gave_up_time is None
    assert first.boarding_time == 41
    assert second.boarding_time == 66
    assert [r.time for r in trace.find("E5", "flutter")] == [66]
    assert result.delivered == [first, second]


def test_user_stops_closing_doors(make_simulation, trace):
    sim = make_simulation([user(2, 4, inter_time=70), user(2, 3)])
    result = sim.run()
    second = result.passengers[1]

    assert trace.find("U2", "stops them")[0].time == 70
    assert (70, "E3") in elevator_steps(trace)
    assert (85, "E6") not in elevator_steps(trace)
    assert second.boarding_time == 90
    assert second.alighting_time == 266


def test_car_call_cleared_once_when_leaving_the_floor(make_simulation):
    sim = make_simulation([user(2, 4, inter_time=70), user(2, 3)])
    snapshots = CallSnapshots(sim)
    sim.add_trace_sink(snapshots)
    sim.run()

    at_third = [(step, car[3]) for _, step, floor, car in snapshots.snapshots
                if floor == 3 and step.startswith("E")]
    assert at_third[:2] == [("E7", True), ("E2", True)]
    assert ("E6", False) in at_third

    lit = [car[3] for *_, car in snapshots.snapshots]
    turned_off = [i for i in range(1, len(lit)) if lit[i - 1] and not lit[i]]
    assert len(turned_off) == 1
    assert snapshots.snapshots[turned_off[0]][1] == "E6"


def test_run_stops_at_max_time(make_simulation, trace):
    sim = make_simulation([user(2, 4)], max_time=100)
    result = sim.run()

    assert all(time < 100 for time in trace.times())
    assert result.passengers[0].in_system
    assert not sim.step()


def test_exhausted_script_raises(make_simulation):
    sim = make_simulation([user(2, 4, inter_time=30)])
    with pytest.raises(ScriptExhaustedError):
        sim.run()


def test_empty_agenda_propagates(make_simulation):
    sim = make_simulation([user(2, 4)])
    sim.start()
    sim.scheduler.cancel(sim.arrivals)

    with pytest.raises(AgendaEmptyError):
        sim.run()


def test_start_twice_is_an_error(make_simulation):
    sim = make_simulation([user(2, 4)])
    sim.start()
    with pytest.raises(RuntimeError):
        sim.start()


def test_realtime_factor_selects_paced_environment():
    config = SimulationConfig(realtime_factor=2.0)
    sim = Simulation(config)

    assert isinstance(sim.agenda.env, RealtimeEnvironment)
    assert sim.agenda.env.get_speed() == 2.0


# ========================================
# Random traffic
# ========================================

class NeutralCheck(ITraceSink):
    """Fails if the elevator goes dormant-bound at E6 with calls elsewhere"""

    def __init__(self, simulation):
        self.simulation = simulation
        self.violations = []

    def record(self, record):
        if record.step == "E6" and record.direction == "N":
            calls = self.simulation.elevator.calls
            if calls.lowest_call_except(record.floor) is not None:
                self.violations.append(record)


def check_membership(sim):
    elevator = sim.elevator
    for p in sim.passengers:
        assert p.destination != p.origin
        if p.container is None:
            assert p not in elevator.manifest
            assert p not in sim.floor_queues.get_queue(p.origin)
        elif p.container is elevator.manifest:
            assert p in elevator.manifest
            assert p not in sim.floor_queues.get_queue(p.origin)
        else:
            assert p.container is sim.floor_queues.get_queue(p.origin)
            assert p in p.container
            assert p not in elevator.manifest

    in_containers = sum(sim.floor_queues.waiting_counts()) + len(elevator.manifest)
    assert in_containers == sum(1 for p in sim.passengers if p.container is not None)


def check_one_entry_per_handle(sim):
    handles = [sim.elevator.primary, sim.elevator.doors, sim.elevator.watchdog, sim.arrivals]
    for p in sim.passengers:
        handles += [p.process, p.give_up_timer]
    assert len(sim.agenda) == sum(1 for h in handles if h.pending)


@pytest.mark.parametrize("seed", [1, 2, 3, 42])
def test_random_run_keeps_invariants(seed, trace):
    sim = Simulation(SimulationConfig(random_seed=seed, max_time=10000), trace_sinks=[trace])
    neutral = NeutralCheck(sim)
    sim.add_trace_sink(neutral)

    sim.start()
    while sim.step():
        check_membership(sim)
        check_one_entry_per_handle(sim)

    times = trace.times()
    assert times == sorted(times)
    assert neutral.violations == []
    assert len(sim.passengers) > 5
    for p in sim.passengers:
        if p.gave_up_time is not None:
            assert p.gave_up_time == p.arrival_time + p.give_up_time


def test_long_patience_traffic_runs():
    config = SimulationConfig.from_dict({
        'traffic': {'min_give_up_time': 300, 'max_give_up_time': 3600,
                    'min_inter_time': 50, 'max_inter_time': 12000},
        'max_time': 36000,
        'random_seed': 7,
    })
    result = Simulation(config).run()

    assert result.passengers[0] in result.delivered
    assert result.end_time >= 36000


def test_same_seed_same_trace():
    def run(seed):
        recording = RecordingTrace()
        Simulation(SimulationConfig(random_seed=seed, max_time=5000), trace_sinks=[recording]).run()
        return recording.records

    assert run(11) == run(11)
