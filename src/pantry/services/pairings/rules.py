"""Pairing rule table and dish-name normalisation.

The rule table is data: it is read from ``pairing_rules.yaml`` (or an override
file) and validated into frozen models once at start-up.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pantry.core.exceptions import RuleTableError
from pantry.data import PAIRING_RULES_FILE, load_yaml_table
from pantry.observability.logging import get_logger


logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")

Weight = Annotated[float, Field(ge=0.0, le=1.0)]


def _lower_all(values: Any) -> Any:
    if isinstance(values, (list, tuple)):
        return tuple(str(v).strip().lower() for v in values)
    return values


def _lower_keys(mapping: Any) -> Any:
    if isinstance(mapping, Mapping):
        return {str(k).strip().lower(): v for k, v in mapping.items()}
    return mapping


class _Rule(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    score: dict[str, Weight] = {}

    @field_validator("score", mode="before")
    @classmethod
    def _normalise_score_keys(cls, value: Any) -> Any:
        return _lower_keys(value)


class MainRule(_Rule):
    """What traditionally goes with a staple."""

    curries: tuple[str, ...] = ()
    sides: tuple[str, ...] = ()

    @field_validator("curries", "sides", mode="before")
    @classmethod
    def _normalise_names(cls, value: Any) -> Any:
        return _lower_all(value)


class CurryRule(_Rule):
    """Which staples traditionally go with a curry."""

    mains: tuple[str, ...] = ()

    @field_validator("mains", mode="before")
    @classmethod
    def _normalise_names(cls, value: Any) -> Any:
        return _lower_all(value)


class PairingRules(BaseModel):
    """Complete rule table: normalisation data plus main/curry entries."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    prefixes: tuple[str, ...] = ()
    aliases: dict[str, str] = {}
    main_keywords: tuple[str, ...] = ()
    curry_keywords: tuple[str, ...] = ()
    mains: dict[str, MainRule] = {}
    curries: dict[str, CurryRule] = {}

    @field_validator("prefixes", "main_keywords", "curry_keywords", mode="before")
    @classmethod
    def _normalise_words(cls, value: Any) -> Any:
        return _lower_all(value)

    @field_validator("aliases", mode="before")
    @classmethod
    def _normalise_aliases(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {
                _WHITESPACE.sub(" ", str(k).strip().lower()): str(v).strip().lower()
                for k, v in value.items()
            }
        return value

    @field_validator("mains", "curries", mode="before")
    @classmethod
    def _normalise_entry_keys(cls, value: Any) -> Any:
        return _lower_keys(value)

    def normalize_dish_name(self, title: str) -> str:
        """Fold a recipe title onto its canonical dish key.

        Lower-cases, collapses whitespace, drops leading prefixes such as
        "kerala" or "traditional" (in any order), then applies the alias
        table. "Kerala  Fish Curry" and "Meen Curry" both become "fish curry".
        """
        words = _WHITESPACE.sub(" ", title.strip().lower()).split(" ")
        while len(words) > 1 and words[0] in self.prefixes:
            words.pop(0)
        key = " ".join(words)
        return self.aliases.get(key, key)


def load_pairing_rules(path: Path | str | None = None) -> PairingRules:
    """Load the packaged rule table, or the file at ``path`` when given.

    Raises:
        RuleTableError: If the table cannot be read or does not validate.
    """
    data = load_yaml_table(PAIRING_RULES_FILE, path)
    try:
        rules = PairingRules.model_validate(data)
    except ValidationError as e:
        raise RuleTableError(f"Invalid pairing rules: {e}", path=path) from e

    logger.info(
        "Pairing rules loaded",
        mains=len(rules.mains),
        curries=len(rules.curries),
        aliases=len(rules.aliases),
    )
    return rules
