import sys

# Configuration
from config import ConfigLoader, load_simulation_config

# Simulator components
from simulator.infrastructure.agenda import AgendaEmptyError
from simulator.implementations.random_sources import ScriptExhaustedError
from simulator.implementations.console_trace import ConsoleTrace
from simulator.simulation import Simulation

# Analyzer
from analyzer.simulation_statistics import SimulationStatistics

DEFAULT_SIM_CONFIG = "caltech_math_building"


def run_simulation(sim_config_path=DEFAULT_SIM_CONFIG):
    """
    Set up and run the entire simulation

    Args:
        sim_config_path: Bundled scenario name (see --list) or path to a YAML file

    Returns:
        SimulationResult of the run
    """
    print("--- Loading Configuration ---")

    sim_config = load_simulation_config(sim_config_path)
    print(f"Simulation Config: {sim_config_path}")

    if sim_config.random_seed is not None:
        print(f"Random seed fixed to {sim_config.random_seed} for reproducible results")
    else:
        print("Random seed not set - results will vary")

    print("\n--- Simulation Setup ---")
    building = sim_config.building
    print(f"Building: {building.num_floors} floors, home floor {sim_config.elevator.home_floor}")
    if sim_config.traffic.script is not None:
        print(f"Traffic: scripted ({len(sim_config.traffic.script)} users)")
    else:
        traffic = sim_config.traffic
        print(f"Traffic: give-up {traffic.min_give_up_time}..{traffic.max_give_up_time}, "
              f"inter-arrival {traffic.min_inter_time}..{traffic.max_inter_time}")
    if sim_config.realtime_factor > 0:
        print(f"Simulation speed: {sim_config.realtime_factor}x (1.0 = real-time)")

    # Create statistics collector
    sim_stats = SimulationStatistics()
    sim_stats.set_simulation_metadata(sim_config.to_dict())

    trace_sinks = [sim_stats]
    if sim_config.output.trace:
        trace_sinks.append(ConsoleTrace())

    simulation = Simulation(sim_config, trace_sinks=trace_sinks)

    print("\n--- Simulation Start ---")
    result = simulation.run()
    print(f"--- Simulation End (time {result.end_time}, {result.actions_executed} actions) ---")

    sim_stats.register_passengers(result.passengers)

    output = sim_config.output
    if output.event_log:
        sim_stats.save_event_log(output.event_log)

    if output.metrics_summary:
        print("\n" + "="*80)
        print("📊 SIMULATION METRICS (God's View - Research/Debug)")
        print("="*80)
        sim_stats.print_passenger_metrics_summary()

    if output.trajectory_plot:
        sim_stats.plot_trajectory_diagram(output.trajectory_plot)

    return result


def main(argv=None):
    """Console entry point: knuth-elevator [scenario | config.yaml | --list]"""
    argv = sys.argv[1:] if argv is None else argv
    if argv and argv[0] == "--list":
        for name in ConfigLoader.list_scenarios():
            print(name)
        return 0
    sim_config_path = argv[0] if argv else DEFAULT_SIM_CONFIG
    try:
        run_simulation(sim_config_path=sim_config_path)
    except (AgendaEmptyError, FileNotFoundError, ScriptExhaustedError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
