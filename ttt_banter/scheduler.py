"""
delayed callbacks that can be cancelled before they fire

The controller only needs ``call_later(delay_ms, callback) -> handle`` and
``cancel(handle)``. The Qt window plugs in a QTimer based scheduler; the
terminal front end and the tests use ManualScheduler.
"""


class ScheduledCall:
    """handle for one pending callback"""
    def __init__(self, delay_ms, callback):
        self.delay_ms = delay_ms
        self.callback = callback
        self.cancelled = False
        self.done = False


class ManualScheduler:
    """
    queues callbacks and runs them only when asked to
    """
    def __init__(self):
        self._queue = []

    def call_later(self, delay_ms, callback):
        call = ScheduledCall(delay_ms, callback)
        self._queue.append(call)
        return call

    def cancel(self, handle):
        if handle is None:
            return
        handle.cancelled = True
        if handle in self._queue:
            self._queue.remove(handle)

    @property
    def pending(self):
        return [c for c in self._queue if not c.cancelled and not c.done]

    def next_delay_ms(self):
        """delay of the oldest live callback, or None"""
        live = self.pending
        return live[0].delay_ms if live else None

    def run_pending(self):
        """
        fire every live callback in order; callbacks queued while running
        wait for the next call
        returns: number of callbacks run
        """
        batch, self._queue = self._queue, []
        ran = 0
        for call in batch:
            if call.cancelled or call.done:
                continue
            call.done = True
            call.callback()
            ran += 1
        return ran
