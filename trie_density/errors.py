"""
Input validation for trie-density.
"""


class InvalidInput(ValueError):
    """Raised when a keyword or text argument is empty or not a string."""
    pass


def ensure_string(value, name: str = "word") -> str:
    """
    Validate a keyword or text argument before anything is mutated.

    Args:
        value: The argument to check
        name: Argument name used in the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidInput: If value is not a str or is empty
    """
    if not isinstance(value, str):
        raise InvalidInput(f"{name} must be a string, got {type(value).__name__}")
    if not value:
        raise InvalidInput(f"{name} must be non-empty")
    return value
