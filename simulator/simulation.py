"""
Simulation

The context object of one run: clock and agenda, the elevator, the floor
queues, the users, and the trace sinks. The main loop pops the earliest
agenda entry, advances the clock to it and executes it to completion.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

import simpy

from config.simulation import SimulationConfig
from controller.algorithms.home_floor_decision import HomeFloorDecision
from .core.effects import Effects, Note
from .core.elevator import Elevator
from .core.floor_queue_manager import FloorQueueManager
from .core.passenger import Passenger
from .core.passenger_workflow import PassengerWorkflow
from .core.steps import Action, Continuation
from .implementations.random_sources import ScriptedRandomSource, UniformRandomSource
from .infrastructure.agenda import Agenda, AgendaEntry
from .infrastructure.realtime_env import RealtimeEnvironment
from .infrastructure.scheduling import Scheduler, SchedulingHandle
from .interfaces.random_source import IRandomSource
from .interfaces.trace_sink import ITraceSink, TraceRecord


@dataclass
class SimulationResult:
    end_time: int
    actions_executed: int
    passengers: List[Passenger] = field(default_factory=list)

    @property
    def delivered(self) -> List[Passenger]:
        return [p for p in self.passengers if p.alighting_time is not None]

    @property
    def gave_up(self) -> List[Passenger]:
        return [p for p in self.passengers if p.gave_up_time is not None]


def create_random_source(config: SimulationConfig) -> IRandomSource:
    """Scripted arrivals when the traffic config has a script, uniform ones otherwise"""
    if config.traffic.script is not None:
        return ScriptedRandomSource(config.traffic.script)
    return UniformRandomSource(config.building.num_floors, config.traffic, seed=config.random_seed)


class Simulation:
    """
    One run of the elevator system.

    Usage:
        sim = Simulation(config, trace_sinks=[ConsoleTrace()])
        result = sim.run()

    Or step by step:
        sim.start()
        while sim.step():
            ...
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 random_source: Optional[IRandomSource] = None,
                 trace_sinks: Iterable[ITraceSink] = (),
                 env: Optional[simpy.Environment] = None):
        self.config = config if config is not None else SimulationConfig()
        self.config.validate()

        if env is None:
            env = RealtimeEnvironment(self.config.realtime_factor) if self.config.realtime_factor > 0 \
                else simpy.Environment()
        self.agenda = Agenda(env)
        self.scheduler = Scheduler(self.agenda)

        num_floors = self.config.building.num_floors
        self.floor_queues = FloorQueueManager(num_floors)
        self.decision_strategy = HomeFloorDecision(self.config.elevator.dormant_wake_time)
        self.elevator = Elevator(self.floor_queues, self.decision_strategy, num_floors,
                                 elevator_config=self.config.elevator, door_config=self.config.door)

        self.arrivals = SchedulingHandle("arrivals")
        self.random_source = random_source if random_source is not None else create_random_source(self.config)
        self.workflow = PassengerWorkflow(self.elevator, self.floor_queues, self.random_source,
                                          self.arrivals, clock=lambda: self.now)

        self.trace_sinks: List[ITraceSink] = list(trace_sinks)
        self.actions_executed = 0
        self.started = False
        self.finished = False

        elevator, workflow = self.elevator, self.workflow
        self._elevator_steps: Dict[Action, Callable[[], Effects]] = {
            Action.WAIT_FOR_CALL: elevator.wait_for_call,
            Action.CHANGE_OF_STATE: elevator.change_of_state,
            Action.OPEN_DOORS: elevator.open_doors,
            Action.LET_PEOPLE_OUT_IN: elevator.let_people_out_in,
            Action.CLOSE_DOORS: elevator.close_doors,
            Action.PREPARE_TO_MOVE: elevator.prepare_to_move,
            Action.GO_UP_A_FLOOR: elevator.go_up_a_floor,
            Action.FINISH_GOING_UP: elevator.finish_going_up,
            Action.GO_DOWN_A_FLOOR: elevator.go_down_a_floor,
            Action.FINISH_GOING_DOWN: elevator.finish_going_down,
            Action.SET_INACTION_INDICATOR: elevator.set_inaction_indicator,
            Action.ARRIVE: workflow.arrive,
        }
        self._passenger_steps: Dict[Action, Callable[[Passenger], Effects]] = {
            Action.SIGNAL_AND_WAIT: workflow.signal_and_wait,
            Action.ENTER_QUEUE: workflow.enter_queue,
            Action.GIVE_UP: workflow.give_up,
            Action.BOARD: workflow.board,
            Action.ALIGHT: workflow.alight,
        }

    @property
    def now(self) -> int:
        return self.agenda.now

    @property
    def passengers(self) -> List[Passenger]:
        return self.workflow.passengers

    def add_trace_sink(self, sink: ITraceSink):
        self.trace_sinks.append(sink)

    def start(self):
        """Bring the first user into the building"""
        if self.started:
            raise RuntimeError("Simulation already started")
        self.started = True
        self.apply(self.workflow.arrive())

    def step(self) -> bool:
        """
        Execute the earliest pending action.

        Returns:
            False once the clock has reached max_time (nothing is executed then)

        Raises:
            AgendaEmptyError: If nothing is pending
        """
        if not self.started:
            self.start()
        if self.finished:
            return False

        entry = self.agenda.pop_earliest()
        if self.now >= self.config.max_time:
            self.finished = True
            return False

        self.execute(entry)
        return True

    def run(self) -> SimulationResult:
        while self.step():
            pass
        return self.result()

    def result(self) -> SimulationResult:
        return SimulationResult(end_time=self.now, actions_executed=self.actions_executed,
                                passengers=list(self.passengers))

    def execute(self, entry: AgendaEntry):
        self.apply(self.dispatch(entry.action))
        self.actions_executed += 1

    def dispatch(self, continuation: Continuation) -> Effects:
        if continuation.passenger is None:
            return self._elevator_steps[continuation.action]()
        return self._passenger_steps[continuation.action](continuation.passenger)

    def apply(self, effects: Effects):
        for effect in effects:
            if isinstance(effect, Note):
                self._emit(effect)
            else:
                self.scheduler.apply(effect)

    def snapshot(self, label: str, text: str) -> TraceRecord:
        elevator = self.elevator
        return TraceRecord(
            time=self.now,
            direction=elevator.direction.value,
            floor=elevator.floor,
            d1=elevator.d1,
            d2=elevator.d2,
            d3=elevator.d3,
            step=label,
            text=text,
        )

    def _emit(self, note: Note):
        if not self.trace_sinks:
            return
        record = self.snapshot(note.label, note.text)
        for sink in self.trace_sinks:
            sink.record(record)
