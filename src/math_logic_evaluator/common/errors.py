"""Error raised for malformed or invalid expressions."""


class ExpressionError(ValueError):
    """
    Raised when an expression cannot be validated or evaluated.

    Covers both structural problems found before evaluation (e.g. two operands
    in a row) and failures during postfix execution (e.g. division by zero).
    The message is meant to be shown to the user as is.
    """
