class EthiocalError(Exception):
    """Base error."""

class InvalidArgumentError(EthiocalError, ValueError):
    """Raised when a caller passes a value outside its valid calendar range."""


def out_of_range(field: str, value: int, lo: int, hi: int, context: str = "") -> InvalidArgumentError:
    """Build the standard 'field value out of range (valid lo..hi)' error."""
    where = f" {context}" if context else ""
    return InvalidArgumentError(f"{field} {value} out of range{where} (valid {lo}..{hi})")
