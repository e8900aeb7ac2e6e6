"""Attunement prerequisite clauses.

A magic item may restrict who can attune to it ("requires attunement by a
wizard"). Each restriction is one clause; an item's clauses form a
conjunction. Clauses are a closed set of tagged models:

    ClassRequirement        kind="class"        the character has the class
    SpellcasterRequirement  kind="spellcaster"  the character casts spells
    AlignmentRequirement    kind="alignment"    the alignment matches exactly
    RaceRequirement         kind="race"         the character has the race
    UnrecognizedRequirement any other tag       treated as satisfied

Raw rule-book data is accepted in two shapes, the explicit
``{"kind": "class", "name": "Wizard"}`` and the shorthand
``{"class": "Wizard"}`` used by most item datasets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dnd_sheet.core.exceptions import PrerequisiteError
from dnd_sheet.core.normalizer import normalize_for_lookup
from dnd_sheet.models.enums import Alignment


class _Clause(BaseModel, ABC):
    model_config = ConfigDict(frozen=True, extra="forbid")

    @abstractmethod
    def describe(self) -> str:
        """Human-readable form, e.g. 'Wizard class'."""


class ClassRequirement(_Clause):
    """The character must have a level in the named class."""

    kind: Literal["class"] = "class"
    name: str = Field(min_length=1, description="Class name, e.g. 'Wizard'")

    def describe(self) -> str:
        return f"{self.name} class"


class SpellcasterRequirement(_Clause):
    """The character must be able to cast at least one spell."""

    kind: Literal["spellcaster"] = "spellcaster"

    def describe(self) -> str:
        return "Spellcaster"


class AlignmentRequirement(_Clause):
    """The character's alignment must equal the required one exactly."""

    kind: Literal["alignment"] = "alignment"
    alignment: Alignment

    @field_validator("alignment", mode="before")
    @classmethod
    def parse_alignment(cls, value: Any) -> Any:
        """Accept display names and abbreviations ('Lawful Good', 'LG')."""
        if isinstance(value, str) and not isinstance(value, Alignment):
            parsed = Alignment.parse(value)
            if parsed is None:
                raise ValueError(f"Unknown alignment: {value!r}")
            return parsed
        return value

    def describe(self) -> str:
        return f"{self.alignment.display_name} alignment"


class RaceRequirement(_Clause):
    """The character must be of the named race (or subrace)."""

    kind: Literal["race"] = "race"
    name: str = Field(min_length=1, description="Race name, e.g. 'Elf'")

    def describe(self) -> str:
        return f"{self.name} race"


class UnrecognizedRequirement(_Clause):
    """A well-formed clause whose tag the engine does not know.

    Evaluation treats it as satisfied. It is kept as its own arm so the
    permissive behavior is visible at every dispatch site.
    """

    kind: str = Field(min_length=1)
    payload: dict[str, Any] = Field(default_factory=dict)

    def describe(self) -> str:
        return f"Unrecognized requirement '{self.kind}'"


PrerequisiteClause = Union[
    ClassRequirement,
    SpellcasterRequirement,
    AlignmentRequirement,
    RaceRequirement,
    UnrecognizedRequirement,
]

_CLAUSE_TYPES = (
    ClassRequirement,
    SpellcasterRequirement,
    AlignmentRequirement,
    RaceRequirement,
    UnrecognizedRequirement,
)

_TAG_ALIASES = {
    "class": "class",
    "spellcaster": "spellcaster",
    "spellcasting": "spellcaster",
    "alignment": "alignment",
    "race": "race",
}


def _require_name(tag: str, value: Any, raw: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise PrerequisiteError(
            f"'{tag}' prerequisite needs a non-empty name",
            clause=raw,
        )
    return value.strip()


def _split_clause(raw: Mapping[str, Any]) -> tuple[str, Any, dict[str, Any]]:
    """Return (tag, shorthand value, remaining payload) for a raw clause."""
    if "kind" in raw:
        tag = raw["kind"]
        if not isinstance(tag, str) or not tag.strip():
            raise PrerequisiteError("Prerequisite 'kind' must be a non-empty string", clause=raw)
        payload = {k: v for k, v in raw.items() if k != "kind"}
        return tag.strip(), None, payload

    if len(raw) != 1:
        raise PrerequisiteError(
            "Shorthand prerequisite must have exactly one tag",
            clause=dict(raw),
            details={"tags": sorted(str(k) for k in raw)},
        )
    ((tag, value),) = raw.items()
    if not isinstance(tag, str) or not tag.strip():
        raise PrerequisiteError("Prerequisite tag must be a non-empty string", clause=dict(raw))
    return tag.strip(), value, {}


def parse_prerequisite(raw: Any) -> PrerequisiteClause:
    """Build a clause model from raw rule-book data.

    Args:
        raw: A clause model (returned unchanged) or a mapping in explicit
            or shorthand form.

    Returns:
        The parsed clause. Unknown tags produce an UnrecognizedRequirement.

    Raises:
        PrerequisiteError: If the clause is not a mapping, has no tag, or a
            known tag carries an unusable value.
    """
    if isinstance(raw, _CLAUSE_TYPES):
        return raw
    if not isinstance(raw, Mapping):
        raise PrerequisiteError(
            f"Prerequisite clause must be a mapping, got {type(raw).__name__}",
            clause=raw,
        )

    tag, value, payload = _split_clause(raw)
    kind = _TAG_ALIASES.get(normalize_for_lookup(tag))
    explicit = value is None

    if kind == "class":
        name = payload.get("name") if explicit else value
        return ClassRequirement(name=_require_name(tag, name, raw))

    if kind == "race":
        name = payload.get("name") if explicit else value
        return RaceRequirement(name=_require_name(tag, name, raw))

    if kind == "spellcaster":
        if not explicit and value is not True:
            raise PrerequisiteError("Spellcasting prerequisite must be true", clause=dict(raw))
        return SpellcasterRequirement()

    if kind == "alignment":
        wanted = payload.get("alignment") if explicit else value
        if isinstance(wanted, list) and all(isinstance(part, str) for part in wanted):
            wanted = "".join(wanted)
        parsed = Alignment.parse(wanted) if isinstance(wanted, str) else None
        if parsed is None:
            raise PrerequisiteError(f"Unknown alignment {wanted!r}", clause=dict(raw))
        return AlignmentRequirement(alignment=parsed)

    if not explicit:
        payload = {"value": value}
    return UnrecognizedRequirement(kind=tag, payload=payload)


def parse_prerequisites(raw: Iterable[Any] | None) -> list[PrerequisiteClause]:
    """Parse an ordered list of raw clauses, preserving order.

    Raises:
        PrerequisiteError: If the list itself or any clause is malformed.
    """
    if raw is None:
        return []
    if not isinstance(raw, Iterable) or isinstance(raw, (str, bytes, Mapping)):
        raise PrerequisiteError(
            "Prerequisites must be a list of clauses",
            clause=raw,
        )
    return [parse_prerequisite(item) for item in raw]


__all__ = [
    "ClassRequirement",
    "SpellcasterRequirement",
    "AlignmentRequirement",
    "RaceRequirement",
    "UnrecognizedRequirement",
    "PrerequisiteClause",
    "parse_prerequisite",
    "parse_prerequisites",
]
