"""
Asset watcher — poll the store and hand change batches to the postprocessor.

Each cycle refreshes the host and takes every change queued since the
previous cycle, including the ones caused by the previous pass itself
(generated modules, seeded examples).  Those usually classify as
irrelevant; a seeded example does not, and costs one extra pass.

Design decisions
────────────────
1. **Polling** (not inotify/watchdog): the host already diffs the tree
   on refresh, so a poll is one directory walk.
2. **First refresh only seeds the index**: files that existed before
   the watcher started are not a change.
3. **One failing pass does not stop the loop**: the error is logged and
   the next cycle runs normally.
"""

from __future__ import annotations

import logging
import threading

from menugen.core.use_cases.postprocess import AssetPostprocessor

logger = logging.getLogger(__name__)


def poll_once(postprocessor: AssetPostprocessor) -> bool:
    """Refresh the host and process what changed.

    Returns:
        True if a regeneration pass ran.
    """
    host = postprocessor.host
    host.refresh()
    batch = host.take_pending()
    if batch.is_empty:
        return False

    logger.debug(
        "Batch: %d imported, %d deleted, %d moved",
        len(batch.imported), len(batch.deleted), len(batch.moved),
    )
    result = postprocessor.on_batch(batch)
    return result.relevant


def watch(
    postprocessor: AssetPostprocessor,
    interval: float,
    stop_event: threading.Event | None = None,
    max_cycles: int | None = None,
) -> int:
    """Poll until ``stop_event`` is set or ``max_cycles`` have run.

    Returns:
        Number of regeneration passes that ran.
    """
    stop = stop_event or threading.Event()
    host = postprocessor.host

    host.refresh()
    host.take_pending()
    logger.info("Watching %s (poll every %.1fs)", host.name, interval)

    passes = 0
    cycles = 0
    while not stop.is_set():
        if max_cycles is not None and cycles >= max_cycles:
            break
        cycles += 1

        try:
            if poll_once(postprocessor):
                passes += 1
        except Exception:
            logger.exception("Regeneration pass failed")

        stop.wait(interval)

    return passes


def start_watcher(
    postprocessor: AssetPostprocessor,
    interval: float,
    stop_event: threading.Event,
) -> threading.Thread:
    """Run ``watch`` on a daemon thread until ``stop_event`` is set."""
    t = threading.Thread(
        target=watch,
        args=(postprocessor, interval, stop_event),
        daemon=True,
        name="menugen-watcher",
    )
    t.start()
    return t
