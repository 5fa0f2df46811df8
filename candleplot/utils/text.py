"""String helpers."""


def normalize(text: str) -> str:
    """Return the upper-case form of ``text``.

    Non-letters pass through unchanged.
    """
    return text.upper()


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""
    return text.strip()
