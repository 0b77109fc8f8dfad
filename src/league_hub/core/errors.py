"""
Exceptions raised by the League Hub core.

Ordinary data sparsity (missing stats, unresolved teams, an incomplete
playoff field) is never an error. These are reserved for inputs that
cannot be processed at all.
"""


class LeagueHubError(Exception):
    """Base class for League Hub errors."""


class InvalidStatEntryError(LeagueHubError, ValueError):
    """A stat entry cannot be grouped (no rosterId) or names an unknown category."""


class SnapshotLoadError(LeagueHubError):
    """A league export could not be read or does not have the expected shape."""
