"""
Error taxonomy for the calculation engine.

Everything derives from ValueError so callers that already guard engine
calls with ``except ValueError`` keep working.

Two families:
- ValidationError: the input itself is malformed (bad address, prefix out
  of range, characters outside a radix alphabet, unparseable value).
- UnsupportedValueError: the input is well formed but has no standard
  representation (non-standard tolerance, no band encoding).

Incomplete resistor band selections are not errors; they come back as
``None`` fields on ResistorValue.
"""


class CalculationError(ValueError):
    """Base class for all engine errors."""


class ValidationError(CalculationError):
    """Malformed caller input."""


class InvalidAddress(ValidationError):
    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Invalid IPv4 address format: {address!r}")


class InvalidPrefix(ValidationError):
    def __init__(self, prefix):
        self.prefix = prefix
        super().__init__(f"Invalid CIDR value: {prefix!r} (must be 0-32)")


class ParseError(ValidationError):
    """A string could not be parsed as a number in the requested form."""


class UnsupportedValueError(CalculationError):
    """Well-formed input with no standard representation."""


class UnsupportedTolerance(UnsupportedValueError):
    def __init__(self, tolerance: float):
        self.tolerance = tolerance
        super().__init__(
            f"No standard color band found for tolerance ±{tolerance:g}%. "
            "Common values are 1, 2, 0.5, 0.25, 0.1, 0.05, 5, 10, 20."
        )


class NoStandardRepresentation(UnsupportedValueError):
    def __init__(self, resistance: float, band_counts):
        self.resistance = resistance
        self.band_counts = tuple(band_counts)
        super().__init__(
            f"Could not determine standard bands for {resistance:g} Ω "
            f"with band counts {list(self.band_counts)}."
        )
