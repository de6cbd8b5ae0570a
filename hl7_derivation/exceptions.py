"""Exception hierarchy for the field derivation engine.

These never escape a derivation function: they are raised by the stricter
internal helpers and converted into ``None`` (or a failed result) at the
function boundary.
"""


class DerivationError(Exception):
    """Base error for field derivation."""

    pass


class FieldAccessError(DerivationError):
    """A segment field could not be inspected."""

    def __init__(self, message: str, field_number: int = None):
        self.field_number = field_number
        super().__init__(message)


class TemporalParseError(DerivationError):
    """A point-in-time value could not be parsed."""

    def __init__(self, message: str, text: str = None):
        self.text = text
        super().__init__(message)


class UnknownFunctionError(DerivationError):
    """No derivation function is registered under the requested name."""

    pass
