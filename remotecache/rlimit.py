"""Raise the process limit on open files."""

from __future__ import annotations

import logging
import subprocess
import sys

try:
    import resource
except ImportError:  # not available on Windows
    resource = None

_log = logging.getLogger(__name__)


def _darwin_max_files() -> int:
    output = subprocess.run(
        ["/usr/sbin/sysctl", "-n", "kern.maxfilesperproc"],
        capture_output=True,
        check=True,
        text=True,
    ).stdout
    value = int(output.strip("\n"))
    if value < 0:
        raise ValueError(f"negative limit: {value}")
    return value


def raise_open_file_limit() -> int | None:
    """Set the soft RLIMIT_NOFILE to the hard limit.

    Returns the new limit, or ``None`` when it could not be changed; failures
    are logged rather than raised.
    """
    if resource is None:
        return None

    try:
        soft, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    except (OSError, ValueError) as exc:
        _log.warning("Failed to find rlimit from getrlimit: %s", exc)
        return None

    if sys.platform == "darwin":
        # getrlimit's hard limit is not reliable on macOS; cap it by sysctl.
        try:
            sysctl_max = _darwin_max_files()
        except (OSError, subprocess.CalledProcessError) as exc:
            _log.warning("Failed to find rlimit from sysctl: %s", exc)
            return None
        except ValueError as exc:
            _log.warning("Failed to parse rlimit from sysctl: %s", exc)
            return None
        if hard == resource.RLIM_INFINITY or hard > sysctl_max:
            hard = sysctl_max

    _log.info("Initial RLIMIT_NOFILE cur: %d max: %d", soft, hard)
    _log.info("Setting RLIMIT_NOFILE cur: %d max: %d", hard, hard)

    try:
        resource.setrlimit(resource.RLIMIT_NOFILE, (hard, hard))
    except (OSError, ValueError) as exc:
        _log.warning("Failed to set rlimit: %s", exc)
        return None
    return hard