"""
Exception hierarchy for the recovery program.

Everything raised on purpose by the services inherits from RecoveryError so
routers can catch broad or specific failures.
"""


class RecoveryError(Exception):
    """Base exception for all recovery program errors."""


class PersistenceError(RecoveryError):
    """Raised when a read or write against the database fails."""
