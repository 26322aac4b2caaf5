"""Host local-time rules for Calarith.

Local wall-clock fields are derived from the host's timezone rules as
exposed by the ``time`` module (``TZ`` plus ``time.tzset()`` on POSIX).
No timezone database is consulted directly.

This module is not part of the public API.
"""

from __future__ import annotations

import time

from calarith._internal.constants import MILLIS_PER_DAY, MILLIS_PER_SECOND


def local_offset(epoch_millis: int) -> int:
    """Return the host's UTC offset in effect at an instant.

    Instants the platform cannot convert (far past or future) use the
    host's standard offset.

    Args:
        epoch_millis: Milliseconds since 1970-01-01T00:00:00Z.

    Returns:
        Offset in milliseconds, positive east of UTC.
    """
    try:
        gmtoff = time.localtime(epoch_millis // MILLIS_PER_SECOND).tm_gmtoff
    except (OverflowError, OSError, ValueError):
        gmtoff = -time.timezone
    return gmtoff * MILLIS_PER_SECOND


def local_to_epoch(local_millis: int) -> int:
    """Resolve a local wall-clock time to an instant.

    Wall times repeated by a backward transition resolve to their first
    occurrence. Wall times skipped by a forward transition are read with
    the offset in effect before the transition, which moves them forward
    by the size of the gap (02:30 becomes 03:30).

    Args:
        local_millis: Local wall-clock time as milliseconds since
            1970-01-01T00:00:00 local.

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z.

    Examples:
        >>> # With TZ=UTC
        >>> local_to_epoch(0)
        0
    """
    before = local_offset(local_millis - MILLIS_PER_DAY)
    after = local_offset(local_millis + MILLIS_PER_DAY)

    for candidate in sorted({local_millis - before, local_millis - after}):
        if candidate + local_offset(candidate) == local_millis:
            return candidate

    # Skipped wall time
    return local_millis - before


__all__ = [
    "local_offset",
    "local_to_epoch",
]
