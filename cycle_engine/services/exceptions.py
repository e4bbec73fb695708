"""
Service-level exceptions.

The classification engine itself never raises for degenerate input, it falls
back to defined values. These exceptions cover edits to the event history.
"""

class HistoryError(Exception):
    """Base exception for event history edits."""
    pass

class EventNotFoundError(HistoryError):
    """Raised when an event id is not part of the history."""
    pass

class DuplicateEventError(HistoryError):
    """Raised when a period start is already logged for that day."""
    pass

class InvalidEventError(HistoryError):
    """Raised when an edit would break the event invariants."""
    pass
