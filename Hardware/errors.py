"""
Exceptions raised by the engine models.

Both derive from ValueError so existing ``except ValueError`` handlers keep
working.
"""


class OffDesignError(ValueError):
    """Base class for engine-model input errors."""


class DomainError(OffDesignError):
    """Physically invalid or singular input combination (e.g. zero thrust requirement)."""


class InputContractError(OffDesignError):
    """Malformed or missing fields in an engine or flight-condition descriptor."""
