"""
Wall-clock pacing for the agenda

Agenda times are integer ticks (tenths of a second in the classic building).
With a positive speed factor every processed agenda entry waits until the
wall clock has caught up, so a console trace scrolls at a watchable rate.
"""

import time

import simpy


class RealtimeEnvironment(simpy.Environment):
    """
    SimPy environment whose step() is held back to wall-clock speed.

    Args:
        speed_factor (float): 1.0 plays one tick per `tick_seconds`, 10.0 ten
            times faster. 0.0 disables pacing.
        tick_seconds (float): Wall-clock length of one tick at speed 1.0

    Example:
        >>> env = RealtimeEnvironment(speed_factor=10.0)
        >>> agenda = Agenda(env)
    """

    def __init__(self, speed_factor=1.0, tick_seconds=0.1, initial_time=0):
        super().__init__(initial_time=initial_time)
        if tick_seconds <= 0:
            raise ValueError(f"tick_seconds must be positive, got {tick_seconds}")
        self.tick_seconds = tick_seconds
        self.speed_factor = 0.0
        self._anchor_wall = 0.0
        self._anchor_tick = initial_time
        self.set_speed(speed_factor)

    def step(self):
        result = super().step()
        if self.speed_factor > 0:
            behind = -self.lag()
            if behind > 0:
                time.sleep(behind)
        return result

    def lag(self):
        """Seconds the wall clock is ahead of the paced agenda clock (negative when the agenda is early)"""
        if self.speed_factor == 0:
            return 0.0
        due = self._anchor_wall + (self.now - self._anchor_tick) * self.tick_seconds / self.speed_factor
        return time.monotonic() - due

    def set_speed(self, speed_factor):
        """Change playback speed; pacing restarts from the current tick"""
        if speed_factor < 0:
            raise ValueError(f"speed_factor must be >= 0, got {speed_factor}")
        self.speed_factor = speed_factor
        self._anchor_wall = time.monotonic()
        self._anchor_tick = self.now

    def get_speed(self):
        return self.speed_factor
