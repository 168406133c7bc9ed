"""Building blocks for a remote build cache: request paths, ActionResult validation, temp files, idle timers, upload workers and help text."""

__version__ = "0.1.0"