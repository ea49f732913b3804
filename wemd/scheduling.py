# wemd/scheduling.py

import asyncio
import inspect
import logging

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Run ``callback`` once, ``delay`` seconds after the last ``trigger()``.

    At most one call is scheduled at a time: each trigger cancels the pending
    timer and starts a new one. Must be used from code running on an asyncio
    event loop. Coroutine callbacks are scheduled as tasks.
    """

    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self._handle = None
        self._task = None

    @property
    def pending(self):
        return self._handle is not None

    def trigger(self, *args, **kwargs):
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, args, kwargs)

    def cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args, kwargs):
        self._handle = None
        try:
            result = self.callback(*args, **kwargs)
        except Exception as e:
            logger.error(f"Debounced callback failed: {e}", exc_info=True)
            return
        if inspect.isawaitable(result):
            self._task = asyncio.ensure_future(result)
            self._task.add_done_callback(self._log_task_error)

    @staticmethod
    def _log_task_error(task):
        if not task.cancelled() and task.exception() is not None:
            logger.error("Debounced callback failed", exc_info=task.exception())
