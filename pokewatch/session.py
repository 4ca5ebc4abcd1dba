import datetime
import logging
import queue

logger = logging.getLogger(__name__)

TICK = "tick"
STEPS = "steps"
CRY = "cry"


class CompanionSession:
    """Single owner of the companion.

    The render loop and the step sensor never touch the state directly; they
    post events here, and `pump()` applies them in arrival order on the thread
    that owns the session. `post_*` methods are safe to call from any thread.
    """
    def __init__(self, engine, clock=datetime.datetime.now):
        self.engine = engine
        self.clock = clock
        self.events = queue.Queue()
        self.state = engine.spawn(clock())

    def post_tick(self, now=None):
        self.events.put((TICK, now))

    def post_step_sample(self, cumulative_steps, now=None):
        self.events.put((STEPS, (int(cumulative_steps), now)))

    def post_cry(self):
        self.events.put((CRY, None))

    def pump(self):
        """Drains pending events. Returns how many were applied."""
        handled = 0
        while True:
            try:
                kind, payload = self.events.get_nowait()
            except queue.Empty:
                return handled
            self._dispatch(kind, payload)
            handled += 1

    def _dispatch(self, kind, payload):
        if kind == TICK:
            self.engine.on_tick(self.state, payload or self.clock())
        elif kind == STEPS:
            steps, now = payload
            self.engine.on_step_event(self.state, steps, now or self.clock())
        elif kind == CRY:
            self.engine.cry(self.state)
        else:
            logger.warning("Ignoring unknown event %r", kind)
