"""Base exceptions for callmatch domain."""


class CallMatchError(Exception):
    """Root exception for all callmatch errors.

    All domain exceptions inherit from this.
    Allows catching all callmatch-specific errors.
    """
