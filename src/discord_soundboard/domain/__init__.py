# ruff: noqa: N999
"""
Domain Layer

Contains pure soundboard logic organized by bounded contexts:
- shared/: Cross-cutting exceptions, message templates and types
- soundboard/: Command table, chat-to-voice resolution rules
"""

from discord_soundboard.domain.shared.exceptions import ConfigError, DomainError

__all__ = [
    "DomainError",
    "ConfigError",
]
