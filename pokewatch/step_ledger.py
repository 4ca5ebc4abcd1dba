import logging

from .constants import STEP_PREFIX, DAILY_STEP_PREFIX

logger = logging.getLogger(__name__)


class StepLedger:
    """Turns the device's since-boot step counter into today's step increments.

    The counter restarts from zero on every reboot, so the first sample of a day
    only sets a baseline. A reboot later in the day is not detected: the raw
    difference is trusted even when it comes out negative.
    """
    def __init__(self, db_manager):
        self.db = db_manager

    def record_step_sample(self, cumulative_steps, day):
        """Stores the sample for day and returns the steps taken since the previous one."""
        baseline = self.db.get_day_value(STEP_PREFIX, day)
        if baseline == 0:
            self.db.set_day_value(STEP_PREFIX, day, cumulative_steps)
            logger.info("Step baseline for %s set to %d", day, cumulative_steps)
            return 0

        delta = cumulative_steps - baseline
        daily_steps = self.db.get_day_value(DAILY_STEP_PREFIX, day)
        self.db.set_day_value(STEP_PREFIX, day, cumulative_steps)
        self.db.set_day_value(DAILY_STEP_PREFIX, day, daily_steps + delta)
        logger.debug("Steps %+d, %d today", delta, daily_steps + delta)
        return delta

    def daily_steps(self, day):
        return self.db.get_day_value(DAILY_STEP_PREFIX, day)
