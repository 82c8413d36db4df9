"""Configuration types for timed stream generators."""

from dataclasses import dataclass

from reactivex.abc import SchedulerBase


@dataclass(frozen=True)
class TimerConfig:
    """Static configuration shared by interval, repeatedly, sequentially, later and poll.

    Attributes:
        scheduler: Scheduler that owns the timers. None defers to the scheduler passed
            to subscribe(), and then to reactivex's TimeoutScheduler.
    """

    scheduler: SchedulerBase | None = None
