"""Input normalization helpers shared by the services."""

from uuid import UUID


def parse_id(value: UUID | str) -> UUID | None:
    """Parse an identifier coming from a URL.

    Returns:
        The UUID, or None when the value is not a valid UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def normalize_channel(value: str | None) -> str | None:
    """Normalize an email or phone value.

    Surrounding whitespace is stripped; empty values mean "absent".

        "  a@x.com " → "a@x.com"
        ""           → None
        "   "        → None
    """
    if value is None:
        return None
    value = value.strip()
    return value or None
