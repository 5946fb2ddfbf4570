"""Pomodoro timing: one work interval followed by one break.

A session is a straight blocking sequence ``Idle -> Work -> Break -> Idle``.
There is no pause or cancel; stopping early means terminating the process.
"""
from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional

from .data_models import MINUTES_PER_POMODORO, Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

WORK_SECONDS = MINUTES_PER_POMODORO * 60
SHORT_BREAK_SECONDS = 300
LONG_BREAK_SECONDS = 900
LONG_BREAK_EVERY = 4

Clock = Callable[[], float]
Sleep = Callable[[float], None]


class Phase(str, Enum):
    WORK = "Work"
    SHORT_BREAK = "Short Break"
    LONG_BREAK = "Long Break"

    @property
    def seconds(self) -> int:
        return _PHASE_SECONDS[self]


_PHASE_SECONDS = {
    Phase.WORK: WORK_SECONDS,
    Phase.SHORT_BREAK: SHORT_BREAK_SECONDS,
    Phase.LONG_BREAK: LONG_BREAK_SECONDS,
}


def break_phase_for(pomodoros: int) -> Phase:
    """Pick the break that follows a work interval.

    ``pomodoros`` is the count *after* the interval was recorded, so the
    long break lands on the 4th, 8th, 12th ... interval and never on the 1st.
    """
    if pomodoros % LONG_BREAK_EVERY == 0:
        return Phase.LONG_BREAK
    return Phase.SHORT_BREAK


def format_remaining(seconds: int) -> str:
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes:02d}:{secs:02d}"


def countdown(duration: float, clock: Optional[Clock] = None, sleep: Optional[Sleep] = None) -> Iterator[int]:
    """Yield whole seconds remaining until a wall-clock deadline.

    The deadline is fixed when iteration starts and the clock is re-read on
    every tick, so drift in ``sleep`` does not accumulate. The generator stops
    once the remaining time reaches zero. Partial seconds round up, so the
    first tick shows the full duration and the last one is 1.
    """
    clock = clock or time.time
    sleep = sleep or time.sleep
    end_time = clock() + duration
    while True:
        left = end_time - clock()
        if left <= 0:
            return
        yield math.ceil(left)
        sleep(max(0.0, min(1.0, end_time - clock())))


@dataclass
class SessionResult:
    task: Task
    break_phase: Phase


class PomodoroSession:
    def __init__(
        self,
        store: TaskStore,
        clock: Optional[Clock] = None,
        sleep: Optional[Sleep] = None,
        on_tick: Optional[Callable[[Phase, int], None]] = None,
        on_phase_end: Optional[Callable[[Phase], None]] = None,
    ):
        self.store = store
        self.clock = clock or time.time
        self.sleep = sleep or time.sleep
        self.on_tick = on_tick
        self.on_phase_end = on_phase_end

    def run_phase(self, phase: Phase) -> None:
        """Block for the length of ``phase``, reporting every tick."""
        logger.debug("%s started (%ds)", phase.value, phase.seconds)
        for remaining in countdown(phase.seconds, self.clock, self.sleep):
            if self.on_tick:
                self.on_tick(phase, remaining)
        logger.debug("%s finished", phase.value)
        if self.on_phase_end:
            self.on_phase_end(phase)

    def start(self, task_id: int) -> Optional[SessionResult]:
        """Run one work interval and its break against ``task_id``.

        Returns None without starting any timer when the task does not exist,
        and None without a break if the task is gone when the work ends.
        """
        if self.store.find(task_id) is None:
            logger.info("Cannot start pomodoro: task %d not found", task_id)
            return None

        self.run_phase(Phase.WORK)
        task = self.store.record_pomodoro(task_id)
        if task is None:
            logger.warning("Task %d disappeared during the work interval; no break", task_id)
            return None
        break_phase = break_phase_for(task.pomodoros)
        self.run_phase(break_phase)
        return SessionResult(task=task, break_phase=break_phase)
