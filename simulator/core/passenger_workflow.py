"""
Passenger Workflow

Steps U1-U6 of a user: arrive, signal and wait, enter the queue, maybe give
up, get in, get out.
"""

import itertools
from typing import Callable, List

from .effects import Cancel, Effects, Note, Reschedule, RescheduleImmediate
from .elevator import Elevator
from .floor_queue_manager import FloorQueueManager
from .passenger import Passenger
from .steps import Action, Continuation, Direction, ElevatorStep
from ..infrastructure.scheduling import SchedulingHandle
from ..interfaces.random_source import IRandomSource


class PassengerWorkflow:
    """
    Runs the users of the building against one elevator.

    Steps:
    1. U1 Arrive: a new user appears, the next arrival is scheduled
    2. U2 Signal and wait: catch the doors, or press a hall button
    3. U3 Enter queue: line up and start the give-up timer
    4. U4 Give up: walk away unless the doors are open right here
    5. U5 Board: queue -> car, press the car button
    6. U6 Alight: leave the car and the system

    Usage:
        workflow = PassengerWorkflow(elevator, floor_queues, source, arrivals, clock=lambda: agenda.now)
        effects = workflow.arrive()
    """

    def __init__(self, elevator: Elevator, floor_queues: FloorQueueManager,
                 random_source: IRandomSource, arrivals: SchedulingHandle,
                 clock: Callable[[], int]):
        """
        Args:
            elevator: The elevator users call
            floor_queues: Waiting lines of every floor
            random_source: Supplies origin, destination, patience and inter-arrival time
            arrivals: Handle for the next U1
            clock: Returns the current simulation time
        """
        self.elevator = elevator
        self.floor_queues = floor_queues
        self.random_source = random_source
        self.arrivals = arrivals
        self.clock = clock
        self._passenger_ids = itertools.count(1)
        self.passengers: List[Passenger] = []

    def arrive(self) -> Effects:
        """U1"""
        spec = self.random_source.next_arrival()
        if not (0 <= spec.origin < self.elevator.num_floors and 0 <= spec.destination < self.elevator.num_floors):
            raise ValueError(f"Arrival {spec} is outside floors 0..{self.elevator.num_floors - 1}")

        passenger = Passenger(next(self._passenger_ids), spec.origin, spec.destination,
                              spec.give_up_time, arrival_time=self.clock())
        self.passengers.append(passenger)

        return [
            Reschedule(self.arrivals, spec.inter_time, Continuation(Action.ARRIVE)),
            RescheduleImmediate(passenger.process, Continuation(Action.SIGNAL_AND_WAIT, passenger)),
            Note("U1", f"User {passenger.id} arrives at floor {passenger.origin}, "
                       f"destination is {passenger.destination}."),
        ]

    def signal_and_wait(self, passenger: Passenger) -> Effects:
        """U2"""
        elevator = self.elevator
        at_origin = elevator.floor == passenger.origin

        if at_origin and elevator.step is ElevatorStep.CLOSE_DOORS:
            effects = [
                Note("U2", f"User {passenger.id} arrives at doors closing and stops them."),
                RescheduleImmediate(elevator.primary, Continuation(Action.OPEN_DOORS)),
            ]
        elif at_origin and elevator.d3:
            elevator.d3 = False
            elevator.d1 = True
            effects = [
                Note("U2", f"User {passenger.id} arrives at open doors."),
                RescheduleImmediate(elevator.primary, Continuation(Action.LET_PEOPLE_OUT_IN)),
            ]
        else:
            if passenger.going_up:
                elevator.calls.up[passenger.origin] = True
                effects = [Note("U2", f"User {passenger.id} presses up button.")]
            else:
                elevator.calls.down[passenger.origin] = True
                effects = [Note("U2", f"User {passenger.id} presses down button.")]
            if not elevator.d2 or elevator.step is ElevatorStep.WAIT_FOR_CALL:
                effects += elevator.decide()

        effects.append(RescheduleImmediate(passenger.process, Continuation(Action.ENTER_QUEUE, passenger)))
        return effects

    def enter_queue(self, passenger: Passenger) -> Effects:
        """U3"""
        self.floor_queues.get_queue(passenger.origin).enqueue(passenger)
        passenger.waiting_start_time = self.clock()
        return [
            Note("U3", f"User {passenger.id} stands in queue in front of elevator."),
            Reschedule(passenger.give_up_timer, passenger.give_up_time, Continuation(Action.GIVE_UP, passenger)),
        ]

    def give_up(self, passenger: Passenger) -> Effects:
        """U4: fires only if boarding did not cancel the timer first."""
        elevator = self.elevator
        if elevator.floor != passenger.origin or not elevator.d1:
            self.floor_queues.get_queue(passenger.origin).remove(passenger)
            passenger.gave_up_time = self.clock()
            return [Note("U4", f"User {passenger.id} decides to give up, leaves the system.")]
        return [Note("U4", f"User {passenger.id} almost gave up, but stays and waits.")]

    def board(self, passenger: Passenger) -> Effects:
        """U5"""
        elevator = self.elevator
        self.floor_queues.get_queue(passenger.origin).remove(passenger)
        elevator.manifest.push(passenger)
        elevator.calls.car[passenger.destination] = True
        passenger.boarding_time = self.clock()

        effects = [
            Note("U5", f"User {passenger.id} gets in."),
            Cancel(passenger.give_up_timer),
        ]
        if elevator.direction is Direction.NEUTRAL:
            elevator.direction = Direction.GOING_UP if passenger.going_up else Direction.GOING_DOWN
            # Close faster than usual when the car had no direction yet.
            effects.append(Reschedule(elevator.doors, elevator.door.fast_close_delay,
                                      Continuation(Action.CLOSE_DOORS)))
        return effects

    def alight(self, passenger: Passenger) -> Effects:
        """U6"""
        self.elevator.manifest.remove(passenger)
        passenger.alighting_time = self.clock()
        return [Note("U6", f"User {passenger.id} gets out, leaves the system.")]
