"""Shared validators for Discord-specific identifiers."""

from __future__ import annotations

MAX_SNOWFLAKE = 2**64


def parse_snowflake(value: str | int) -> int | None:
    """Convert a domain identifier back into a Discord snowflake.

    Discord snowflake IDs are 64-bit unsigned integers. The domain carries them
    as strings, so the adapters need the integer form to query the client cache.

    Args:
        value: Identifier as carried by the domain.

    Returns:
        The snowflake, or None if *value* is not a valid one.
    """
    try:
        snowflake = int(value)
    except (TypeError, ValueError):
        return None
    if snowflake <= 0 or snowflake >= MAX_SNOWFLAKE:
        return None
    return snowflake
