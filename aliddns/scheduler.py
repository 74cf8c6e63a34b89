"""Fixed-interval pass scheduling."""

import time
from typing import Callable


def run_scheduled(
    pass_fn: Callable[[], object],
    interval: int,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
    max_passes: int | None = None,
) -> int:
    """Run passes on a fixed cadence, one at a time.

    A pass is never started before the previous one has returned. When a
    pass overruns one or more ticks, the missed ticks are dropped and the
    next pass waits for the following tick.

    Args:
        pass_fn: One reconciliation pass
        interval: Seconds between pass starts, 0 runs a single pass
        sleep: Sleep function
        clock: Monotonic clock
        max_passes: Stop after this many passes (None runs forever)

    Returns:
        Number of passes run
    """
    passes = 0
    start = clock()

    while True:
        pass_fn()
        passes += 1

        if interval <= 0 or (max_passes is not None and passes >= max_passes):
            return passes

        elapsed = clock() - start
        next_tick = (int(elapsed // interval) + 1) * interval
        sleep(next_tick - elapsed)
