"""Exception types raised by the conversion pipeline"""


class ConversionError(ValueError):
    """Base class for conversion failures."""


class InvalidInput(ConversionError):
    """Malformed JSON or YAML where well-formed input was required."""


class UnsupportedConversion(ConversionError):
    """The requested (source, target) pair has no conversion route."""

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"Conversion from {source} to {target} not supported")
