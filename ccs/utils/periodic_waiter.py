import logging

from ccs import time
from ccs.exceptions import ReadinessTimeoutError


class PeriodicWaiter:
    """
    Calls a poll function until it returns a truthy value, at most ``max_attempts`` times and ``poll_interval``
    seconds apart.
    """
    def __init__(self, poll_interval, max_attempts, clock=time.Clock):
        self.logger = logging.getLogger(__name__)
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts
        self.clock = clock

    def wait(self, poll_function, *poll_function_args, **poll_function_kwargs):
        """
        :return: The number of the attempt that succeeded (starting at 1).
        :raises ReadinessTimeoutError: If no attempt succeeded.
        """
        stop_watch = self.clock.stop_watch()
        stop_watch.start()

        for attempt in range(1, self.max_attempts + 1):
            if poll_function(*poll_function_args, **poll_function_kwargs):
                return attempt
            self.logger.debug("Attempt [%d/%d] was not successful.", attempt, self.max_attempts)
            if attempt < self.max_attempts:
                time.sleep(self.poll_interval)

        raise ReadinessTimeoutError(f"Giving up after [{self.max_attempts}] attempts and "
                                    f"[{stop_watch.split_time():.1f}] seconds.")
