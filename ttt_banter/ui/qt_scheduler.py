from PySide6.QtCore import QObject, QTimer


class QtScheduler(QObject):
    """
    single-shot QTimers on the gui event loop, one per pending call
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self._timers = set()

    def call_later(self, delay_ms, callback):
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(timer, callback))
        self._timers.add(timer)
        timer.start(max(0, int(delay_ms)))
        return timer

    def cancel(self, handle):
        if handle is None or handle not in self._timers:
            return
        handle.stop()
        self._timers.discard(handle)
        handle.deleteLater()

    def _fire(self, timer, callback):
        # drop the timer before running, callback may arm a new one
        self._timers.discard(timer)
        timer.deleteLater()
        callback()

    @property
    def pending(self):
        return len(self._timers)
