"""Progress reporting for rewiring sweeps.

The sweep driver only calls an observer; formatting is the observer's job.
"""

import logging
from collections.abc import Callable

log = logging.getLogger(__name__)

# (sweep_index, total_sweeps, attempt_index, total_attempts_in_sweep)
ProgressCallback = Callable[[int, int, int, int], None]


class LoggingProgress:
    """Log sweep progress about once per percent of each sweep.

    Messages look like ``rewiring edges: (2 / 10) 450 of 900 (50%)``.

    Args:
        logger: Logger to write to (defaults to this module's logger).
        level: Logging level of progress messages.
    """

    def __init__(
        self, logger: logging.Logger | None = None, level: int = logging.INFO
    ) -> None:
        self.logger = logger or log
        self.level = level

    def __call__(self, sweep: int, n_sweeps: int, current: int, total: int) -> None:
        atom = total // 100 if total > 200 else 1
        if (current + 1) % atom == 0 or current + 1 == total:
            self.logger.log(
                self.level,
                "rewiring edges: (%d / %d) %d of %d (%d%%)",
                sweep + 1,
                n_sweeps,
                current + 1,
                total,
                (current + 1) * 100 // total,
            )
