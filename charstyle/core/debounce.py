"""Timer-based coalescing of rapid change notifications"""
from ..common_imports import *


class Debouncer(QObject):
    """Call `callback` once, `interval_ms` after the last `trigger()`.

    Only the arguments of the most recent trigger are delivered. Requires a
    running Qt event loop for the timer to fire; `flush()` delivers
    immediately without one.
    """

    fired = Signal()

    def __init__(self, callback: Callable, interval_ms: int = 300, parent=None):
        super().__init__(parent)
        self._callback = callback
        self._args: Tuple = ()
        self._kwargs: Dict[str, Any] = {}
        self._pending = False

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)

    @property
    def interval(self) -> int:
        return self._timer.interval()

    def trigger(self, *args, **kwargs):
        self._args = args
        self._kwargs = kwargs
        self._pending = True
        self._timer.start()  # restarts if already running

    def is_pending(self) -> bool:
        return self._pending

    def flush(self):
        """Deliver a pending call now"""
        if self._pending:
            self._timer.stop()
            self._fire()

    def cancel(self):
        self._timer.stop()
        self._pending = False
        self._args = ()
        self._kwargs = {}

    def _fire(self):
        if not self._pending:
            return
        args, kwargs = self._args, self._kwargs
        self._pending = False
        self._args = ()
        self._kwargs = {}
        self._callback(*args, **kwargs)
        self.fired.emit()
