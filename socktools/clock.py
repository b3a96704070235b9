"""Local time formatting and the small console commands built on it."""

from __future__ import annotations

import socket
import sys
import time

LOCAL_TIME_PREFIX = "Local time is: "


def ctime_string(timestamp=None):
    """Return *timestamp* (seconds since the epoch, default now) in ctime form.

    The result uses local time and ends with a newline, for example
    ``"Thu Jan  1 00:00:00 1970\\n"``.
    """
    if timestamp is None:
        timestamp = time.time()
    return time.ctime(timestamp) + "\n"


def local_time_message(timestamp=None):
    """Return the ``Local time is: ...`` line for *timestamp* (default now)."""
    return LOCAL_TIME_PREFIX + ctime_string(timestamp)


def main(argv=None):
    """Print the current local time."""
    sys.stdout.write(local_time_message())
    return 0


def socket_ready_main(argv=None):
    """Check that a socket can be created and report whether the API is usable.

    Returns 0 when a socket could be opened and closed, 1 otherwise.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM):
            pass
    except OSError:
        print("Failed to initialize.", file=sys.stderr)
        return 1
    print("Ready to use socket API.")
    return 0