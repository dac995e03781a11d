# request_queue.py
import itertools
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from agromarket.general.config import AI_REQUEST_COOLDOWN
from agromarket.general.structures.adts import Queue

logger = logging.getLogger('RateLimitedQueue')


@dataclass
class RequestOutcome:
    ticket: int
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RateLimitedQueue:
    """Runs queued zero-argument jobs in FIFO order.

    Consecutive job starts are spaced by at least `cooldown` seconds
    (requests to the AI recommendation backend, for example). A failing
    job is logged and reported in its outcome; draining continues with the
    next one.

    Single-threaded: a process() call made while another is draining (from
    inside a job) returns an empty list instead of draining twice.
    """

    def __init__(
        self,
        cooldown: float = AI_REQUEST_COOLDOWN,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.cooldown = max(0.0, float(cooldown))
        self._clock = clock
        self._sleep = sleep
        self._jobs: Queue = Queue()
        self._tickets = itertools.count(1)
        self._last_start: Optional[float] = None
        self._processing = False

    @property
    def is_processing(self) -> bool:
        return self._processing

    def submit(self, job: Callable[[], Any]) -> int:
        """Queues job and returns its ticket number."""
        ticket = next(self._tickets)
        self._jobs.enqueue((ticket, job))
        logger.debug(f"Queued request #{ticket} ({self._jobs.size()} pending)")
        return ticket

    def pending(self) -> int:
        return self._jobs.size()

    def process(self) -> List[RequestOutcome]:
        if self._processing or self._jobs.is_empty():
            return []

        self._processing = True
        outcomes: List[RequestOutcome] = []
        try:
            while not self._jobs.is_empty():
                self._wait_for_slot()
                ticket, job = self._jobs.dequeue()
                self._last_start = self._clock()
                try:
                    outcomes.append(RequestOutcome(ticket, value=job()))
                except Exception as e:
                    logger.error(f"Request #{ticket} failed: {e}")
                    outcomes.append(RequestOutcome(ticket, error=e))
        finally:
            self._processing = False
        return outcomes

    def _wait_for_slot(self) -> None:
        if self._last_start is None:
            return
        elapsed = self._clock() - self._last_start
        if elapsed < self.cooldown:
            delay = self.cooldown - elapsed
            logger.debug(f"Cooling down for {delay:.2f}s")
            self._sleep(delay)
