"""
Statistics Test Script

Feeds a scripted run into the analyzer and checks:
- Console trace formatting
- Trajectory and door event recording
- JSON Lines event log (metadata first)
- Passenger metrics
- Trajectory diagram output
"""

import io
import json

import pytest

from analyzer.simulation_statistics import SimulationStatistics
from config.simulation import SimulationConfig, TrafficConfig
from simulator.implementations.console_trace import ConsoleTrace
from simulator.interfaces.trace_sink import TraceRecord
from simulator.simulation import Simulation

RIDER = {'origin': 2, 'destination': 4, 'give_up_time': 600, 'inter_time': 100000}


@pytest.fixture
def stats():
    return SimulationStatistics()


@pytest.fixture
def single_rider_run(stats):
    config = SimulationConfig(traffic=TrafficConfig(script=[RIDER]), max_time=2000)
    stats.set_simulation_metadata(config.to_dict())
    result = Simulation(config, trace_sinks=[stats]).run()
    stats.register_passengers(result.passengers)
    return result


def test_console_trace_format():
    stream = io.StringIO()
    trace = ConsoleTrace(stream=stream)
    trace.record(TraceRecord(time=20, direction="N", floor=2, d1=True, d2=True, d3=False,
                             step="E3", text="Elevator doors start to open."))
    trace.record(TraceRecord(time=1234, direction="U", floor=3, d1=False, d2=True, d3=False,
                             step="E7", text="Elevator moving up to floor 3."))

    assert stream.getvalue().splitlines() == [
        "TIME\tSTATE\tFLOOR\tD1\tD2\tD3\tstep\taction",
        "0020\tN\t2\tX\tX\t0\tE3\tElevator doors start to open.",
        "1234\tU\t3\t0\tX\t0\tE7\tElevator moving up to floor 3.",
    ]


def test_console_trace_without_header():
    stream = io.StringIO()
    ConsoleTrace(stream=stream, header=False).record(
        TraceRecord(0, "N", 2, False, False, False, "U1", "User 1 arrives at floor 2, destination is 4."))

    assert stream.getvalue().startswith("0000\tN\t2\t0\t0\t0\tU1\t")


def test_trajectory_and_door_events(stats, single_rider_run):
    assert stats.trajectory == [(0, 2), (100, 3), (151, 4), (327, 3), (388, 2)]
    assert stats.get_floors_travelled() == 4
    assert stats.get_door_open_count() == 3
    door_types = [e['event_type'] for e in stats.door_events_history]
    assert door_types.count("DOOR_CLOSING_START") == 3
    assert "DOOR_FLUTTER" not in door_types
    assert stats.step_counts["E3"] == 3
    assert stats.step_counts["U5"] == 1


def test_event_log_is_json_lines_with_metadata_first(stats, single_rider_run, tmp_path):
    path = stats.save_event_log(str(tmp_path / "log.jsonl"))

    lines = [json.loads(line) for line in open(path, encoding='utf-8')]
    assert lines[0]['type'] == "metadata"
    assert lines[0]['data']['config']['simulation']['building']['num_floors'] == 5
    steps = [line for line in lines[1:] if line['type'] == 'step']
    assert steps[0]['data']['step'] == "U1"
    assert [line['time'] for line in lines[1:]] == sorted(line['time'] for line in lines[1:])
    assert len(lines) == len(stats.event_log) + 1


def test_passenger_metrics(stats, single_rider_run):
    metrics = stats.passenger_metrics()

    assert (metrics['users'], metrics['delivered'], metrics['gave_up'], metrics['in_system']) == (1, 1, 0, 0)
    assert metrics['waiting_to_boarding']['mean'] == 40
    assert metrics['riding']['max'] == 196
    assert metrics['total_journey']['count'] == 1
    assert metrics['until_give_up'] is None


def test_metrics_summary_prints(stats, single_rider_run, capsys):
    stats.print_passenger_metrics_summary()

    out = capsys.readouterr().out
    assert "PASSENGER METRICS SUMMARY" in out
    assert "Riding Time" in out
    assert "Door openings:    " + "3".rjust(6) in out.splitlines()
    assert "Floors travelled: " + "4".rjust(6) in out.splitlines()
    assert "Time Until Giving Up" not in out


def test_trajectory_plot_is_written(stats, single_rider_run, tmp_path):
    target = tmp_path / "trajectory.png"
    stats.plot_trajectory_diagram(str(target))

    assert target.exists()
    assert target.stat().st_size > 0


def test_metrics_without_passengers(stats):
    metrics = stats.passenger_metrics()
    assert metrics['users'] == 0
    assert metrics['riding'] is None
