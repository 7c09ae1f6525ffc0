"""Configuration for samazama.

Settings are fixed at initialization: a frozen pydantic model holds the
sound groups, digraph rules, recursion ceiling and case handling, and
builds the immutable lookup tables the engines consume.
"""

from __future__ import annotations

import os
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from samazama.errors import ConfigurationError
from samazama.permutation import DEFAULT_RECURSION_CEILING
from samazama.phonetic.tables import (
    CODE_LENGTH,
    DEFAULT_DIGRAPHS,
    DEFAULT_KEEP_INITIAL,
    DEFAULT_SOUND_GROUPS,
    NONCODE,
    DigraphResponse,
    DigraphTable,
    SoundGroupTable,
)
from samazama.text import graphemes

ENV_PREFIX = "SAMAZAMA_"


class SamazamaConfig(BaseModel):
    """Initialization-time settings shared by every engine."""

    model_config = ConfigDict(frozen=True)

    # Group digit -> letters in that group
    sound_groups: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SOUND_GROUPS))
    # Digit of the vowel-like group that never appears in a code
    noncode: str = Field(default=NONCODE, min_length=1, max_length=1)
    # First letter plus digits
    code_length: int = Field(default=CODE_LENGTH, ge=1)
    # Two-letter sequence -> how to code it
    digraphs: dict[str, DigraphResponse] = Field(default_factory=lambda: dict(DEFAULT_DIGRAPHS))
    # Removable digraphs kept at the start of a word
    keep_initial: list[str] = Field(default_factory=lambda: sorted(DEFAULT_KEEP_INITIAL))
    # Total removals allowed in one variant generation call
    recursion_ceiling: int = Field(default=DEFAULT_RECURSION_CEILING, ge=0)
    # Lowercase input before coding and variants after generation
    lowercase: bool = True

    @model_validator(mode="after")
    def check_tables(self) -> "SamazamaConfig":
        if self.noncode not in self.sound_groups:
            raise ValueError(f"no-code group {self.noncode!r} missing from sound_groups")

        seen: dict[str, str] = {}
        for group, letters in self.sound_groups.items():
            for letter in letters.lower():
                if letter in seen and seen[letter] != group:
                    raise ValueError(
                        f"letter {letter!r} is in groups {seen[letter]!r} and {group!r}"
                    )
                seen[letter] = group

        for pair in self.digraphs:
            if len(graphemes(pair)) != 2:
                raise ValueError(f"digraph {pair!r} must be exactly two characters")

        unknown = [pair for pair in self.keep_initial if pair.lower() not in self._digraph_keys()]
        if unknown:
            raise ValueError(f"keep_initial entries are not digraphs: {unknown}")

        return self

    def _digraph_keys(self) -> set[str]:
        return {pair.lower() for pair in self.digraphs}

    def sound_group_table(self) -> SoundGroupTable:
        """Build the letter -> group lookup."""
        return SoundGroupTable.from_groups(self.sound_groups, noncode=self.noncode)

    def digraph_table(self) -> DigraphTable:
        """Build the digraph lookup with its keep-initial exceptions."""
        responses = {pair.lower(): response for pair, response in self.digraphs.items()}
        return DigraphTable(
            responses=MappingProxyType(responses),
            keep_initial=frozenset(pair.lower() for pair in self.keep_initial),
        )


def load_config(data: dict[str, Any] | None = None) -> SamazamaConfig:
    """Build a config from a plain dict.

    Args:
        data: Field values; missing fields take defaults

    Returns:
        Validated SamazamaConfig

    Raises:
        ConfigurationError: If the values do not form valid tables
    """
    try:
        return SamazamaConfig(**(data or {}))
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid samazama configuration",
            context={"errors": e.error_count(), "detail": str(e).splitlines()[0]},
        ) from e


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def config_from_env(environ: dict[str, str] | None = None) -> SamazamaConfig:
    """Build a config from SAMAZAMA_* environment variables.

    Recognized variables: SAMAZAMA_RECURSION_CEILING, SAMAZAMA_CODE_LENGTH,
    SAMAZAMA_LOWERCASE.

    Raises:
        ConfigurationError: If a variable has an unusable value
    """
    environ = os.environ if environ is None else environ
    data: dict[str, Any] = {}

    for field_name in ("recursion_ceiling", "code_length"):
        raw = environ.get(ENV_PREFIX + field_name.upper())
        if raw is None:
            continue
        try:
            data[field_name] = int(raw)
        except ValueError as e:
            raise ConfigurationError(
                f"{ENV_PREFIX}{field_name.upper()} must be an integer",
                context={"value": raw},
            ) from e

    lowercase = environ.get(ENV_PREFIX + "LOWERCASE")
    if lowercase is not None:
        data["lowercase"] = _env_bool(lowercase)

    return load_config(data)
