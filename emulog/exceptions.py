"""
Error taxonomy.

Two tiers only: a ResolutionError is contained to the record that caused it,
anything deriving from FatalError ends the process.
"""


class EmuLogError(Exception):
    """Base class for all errors raised by emulog."""


class ResolutionError(EmuLogError):
    """A single scan code could not be resolved to an assignment."""


class FatalError(EmuLogError):
    """Infrastructure failure with no recovery path."""


class StorageError(FatalError):
    """Database open, query or insert failed."""


class ConnectivityError(FatalError):
    """Startup probe against a provider failed."""
