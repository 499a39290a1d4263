"""Custom exceptions used in multregt."""


class InvalidArgument(ValueError):
    """Raised when directive content is malformed or expresses unsupported semantics."""
    pass


class LogicError(RuntimeError):
    """Raised when multiplier rules are inconsistent with the grid data they are built against."""
    pass
