# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Background fill worker.

Runs one fill on a dedicated thread so the caller stays responsive.
The worker owns the live grid; the caller only receives copies through
a message queue:

- ProgressMessage: steps, elapsed seconds, partial grid snapshot
- CompleteMessage: terminal, carries the FillOutcome
- ErrorMessage: terminal, an unexpected exception in the worker
"""

import logging
import queue
import random
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Union

from dictionary_index import DictionaryIndex
from fill_solver import (
    CancellationToken, FillOptions, FillOutcome, GridFiller,
)
from grid_models import Shape, WorkingGrid


logger = logging.getLogger(__name__)


class FillWorkerError(Exception):
    """Raised when the worker thread failed with an unexpected error."""
    pass


@dataclass(frozen=True)
class ProgressMessage:
    steps: int
    elapsed: float
    partial_grid: WorkingGrid


@dataclass(frozen=True)
class CompleteMessage:
    outcome: FillOutcome
    elapsed: float


@dataclass(frozen=True)
class ErrorMessage:
    message: str


WorkerMessage = Union[ProgressMessage, CompleteMessage, ErrorMessage]


class FillWorker:
    """
    Runs a single fill at a time on a background thread.

    Starting a new fill cancels and joins the previous one first, so two
    searches never share a working grid.
    """

    def __init__(self, join_timeout: Optional[float] = None):
        self.join_timeout = join_timeout
        self._thread: Optional[threading.Thread] = None
        self._token: Optional[CancellationToken] = None
        self._messages: "queue.Queue[WorkerMessage]" = queue.Queue()
        self._terminal: Optional[WorkerMessage] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(
        self,
        shape: Shape,
        dictionary: Union[DictionaryIndex, Iterable[str]],
        options: Optional[FillOptions] = None,
        rng: Optional[random.Random] = None,
        on_progress: Optional[Callable[[ProgressMessage], None]] = None,
    ):
        """
        Start a fill in the background.

        Args:
            shape: The black/white shape
            dictionary: DictionaryIndex or raw words
            options: Fill options
            rng: Random source for candidate order
            on_progress: Called on the worker thread for every progress message
        """
        if self.is_running:
            logger.info("Cancelling active fill before starting a new one")
            self.cancel()
            self._thread.join(self.join_timeout)

        token = CancellationToken()
        messages: "queue.Queue[WorkerMessage]" = queue.Queue()
        self._token = token
        self._messages = messages
        self._terminal = None

        self._thread = threading.Thread(
            target=self._run,
            args=(shape, dictionary, options, rng, on_progress, token, messages),
            name="fill-worker",
        )
        self._thread.daemon = True
        self._thread.start()

    def cancel(self):
        """Request cancellation; honoured at the next progress interval."""
        if self._token is not None:
            self._token.cancel()

    def _run(self, shape, dictionary, options, rng, on_progress, token, messages):
        start_time = time.monotonic()

        def report(steps: int, partial_grid: WorkingGrid) -> bool:
            if token.is_cancelled:
                return False
            message = ProgressMessage(
                steps=steps,
                elapsed=time.monotonic() - start_time,
                partial_grid=partial_grid,
            )
            messages.put(message)
            if on_progress is not None:
                on_progress(message)
            return not token.is_cancelled

        try:
            filler = GridFiller(
                shape,
                dictionary,
                options=options,
                progress_callback=report,
                rng=rng,
                cancel_token=token,
            )
            outcome = filler.solve()
        except Exception as e:
            logger.exception("Fill worker failed")
            messages.put(ErrorMessage(message=str(e) or type(e).__name__))
            return

        messages.put(CompleteMessage(outcome=outcome, elapsed=time.monotonic() - start_time))

    def messages(self, timeout: Optional[float] = None) -> Iterator[WorkerMessage]:
        """
        Yield messages until the terminal one.

        Raises:
            queue.Empty: If no message arrives within timeout
        """
        if self._terminal is not None:
            yield self._terminal
            return

        while True:
            message = self._messages.get(timeout=timeout)
            yield message
            if not isinstance(message, ProgressMessage):
                self._terminal = message
                return

    def wait(self, timeout: Optional[float] = None) -> FillOutcome:
        """
        Block until the fill finishes and return its outcome.

        Raises:
            FillWorkerError: If the worker thread failed
            queue.Empty: If no message arrives within timeout
        """
        if self._thread is None:
            raise FillWorkerError("No fill has been started")

        terminal = None
        for message in self.messages(timeout=timeout):
            terminal = message

        if isinstance(terminal, ErrorMessage):
            raise FillWorkerError(terminal.message)
        return terminal.outcome
