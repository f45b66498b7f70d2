"""
Internal error types — contract violations raised by the containers themselves.

Business failures (anything a caller-supplied executor or transformer
raises) travel on the failure track; the errors below are raised
immediately, at the call site that broke the contract.

Inside a chain the rule bends: a map_failure() mapper that returns
something other than an exception produces a ConstructionError, and that
error becomes the new cause, on Try and AsyncTry alike.

  - MisuseError        → a terminal accessor called in a state that cannot
                         answer it (get_cause() on a success, get() on an
                         empty Optional, get_left() on a right Either)
  - ConstructionError  → a container built with an invalid combination of
                         state (both sides, neither side, a non-exception cause)

Both subclass a builtin as well, so callers that only know
ValueError/TypeError still catch them.
"""

from __future__ import annotations


class AttemptError(Exception):
    """Base class for every error raised by the attempt containers."""


class MisuseError(AttemptError, ValueError):
    """A terminal accessor was called on a container that cannot answer it."""


class ConstructionError(AttemptError, TypeError):
    """A container was constructed with an invalid combination of state."""
