"""Error types raised by the event envelope core."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A required construction argument was missing or malformed.

    Always caller-fixable: fix the call site.  Never retried internally.
    """
