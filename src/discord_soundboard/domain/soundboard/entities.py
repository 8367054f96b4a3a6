"""Command table: the alias → sound mapping loaded once at startup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from discord_soundboard.domain.shared.exceptions import ConfigError
from discord_soundboard.domain.shared.messages import ErrorMessages
from discord_soundboard.domain.shared.types import SoundIdStr


class CommandEntry(BaseModel):
    """One record of the commands file: several aliases for a single sound.

    Accepts the on-disk keys (``commands``/``fileName``) as well as the field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    aliases: tuple[str, ...] = Field(
        validation_alias=AliasChoices("aliases", "commands"),
    )
    sound_id: SoundIdStr = Field(
        validation_alias=AliasChoices("sound_id", "fileName", "file_name"),
    )

    @field_validator("aliases")
    @classmethod
    def _validate_aliases(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError(ErrorMessages.EMPTY_ALIAS_LIST)
        if any(not alias for alias in v):
            raise ValueError(ErrorMessages.EMPTY_ALIAS)
        # Repeats inside one entry route to the same sound; keep first occurrence.
        return tuple(dict.fromkeys(v))


class CommandTable:
    """Immutable, case-sensitive mapping from command alias to sound id.

    Build it with :meth:`load`; every alias belongs to exactly one entry.
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Mapping[str, str] | None = None) -> None:
        self._routes: Mapping[str, str] = MappingProxyType(dict(routes or {}))

    @classmethod
    def load(cls, records: Iterable[Mapping[str, Any] | CommandEntry]) -> CommandTable:
        """Validate *records* and build a table.

        Raises:
            ConfigError: If the source is not a sequence, a record is malformed,
                or an alias is claimed by two entries. No partial table is returned.
        """
        if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
            raise ConfigError(ErrorMessages.COMMAND_SOURCE_NOT_ITERABLE)

        routes: dict[str, str] = {}
        for index, record in enumerate(records):
            entry = record if isinstance(record, CommandEntry) else cls._parse_entry(record, index)
            for alias in entry.aliases:
                existing = routes.get(alias)
                if existing is not None:
                    raise ConfigError(
                        ErrorMessages.DUPLICATE_ALIAS.format(
                            alias=alias, existing=existing, new=entry.sound_id
                        )
                    )
                routes[alias] = entry.sound_id

        return cls(routes)

    @staticmethod
    def _parse_entry(record: Any, index: int) -> CommandEntry:
        try:
            return CommandEntry.model_validate(record)
        except ValidationError as e:
            raise ConfigError(ErrorMessages.COMMAND_ENTRY_INVALID.format(index=index, error=e)) from e

    def lookup(self, alias: str) -> str | None:
        """Return the sound id for *alias*, or None if it is not a command."""
        return self._routes.get(alias)

    @property
    def aliases(self) -> frozenset[str]:
        return frozenset(self._routes)

    @property
    def sound_ids(self) -> frozenset[str]:
        return frozenset(self._routes.values())

    def __contains__(self, alias: object) -> bool:
        return alias in self._routes

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"CommandTable(aliases={len(self._routes)}, sounds={len(self.sound_ids)})"
