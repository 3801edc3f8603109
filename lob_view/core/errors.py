"""Exception hierarchy for the order book view."""


class BookError(Exception):
    """Base error for order book failures."""


class SchemaError(BookError):
    """Input schema or parsing error."""


class StaleUpdateError(BookError):
    """Update timestamp is older than the last applied update."""


class InvalidArgumentError(BookError, ValueError):
    """Argument outside the accepted domain."""


class NoLiquidityError(BookError):
    """No levels on the side an order would consume."""


class InsufficientLiquidityError(BookError):
    """Resting quantity is smaller than the requested order size."""
