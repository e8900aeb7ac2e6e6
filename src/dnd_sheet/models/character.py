"""Character models consumed by the engine.

The engine never owns a character. It reads one through the
:class:`CharacterCapabilities` protocol (for prerequisite checks) and, when
deriving a full sheet, through :class:`CharacterProfile`, a plain-data
snapshot that the UI and storage layers build from their own records.
"""

from __future__ import annotations

from typing import Annotated, Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from dnd_sheet.core.constants import MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL
from dnd_sheet.core.normalizer import normalize_for_lookup, same_key
from dnd_sheet.models.enums import Ability, Alignment


AbilityScore = Annotated[int, Field(ge=1, le=30, description="D&D ability score (1-30)")]
Level = Annotated[
    int,
    Field(ge=MIN_CHARACTER_LEVEL, le=MAX_CHARACTER_LEVEL, description="Class level (1-20)"),
]

SPELLCASTING_FEATURES = frozenset({"spellcasting", "pact magic"})
"""Feature names that grant the ability to cast spells."""


@runtime_checkable
class CharacterCapabilities(Protocol):
    """Read-only queries prerequisite evaluation needs from a character."""

    @property
    def alignment(self) -> Alignment | None: ...

    def has_class(self, name: str) -> bool: ...

    def has_race(self, name: str) -> bool: ...

    def is_spellcaster(self) -> bool: ...


class ClassLevel(BaseModel):
    """A class and level pair.

    Supports multiclassing by allowing multiple ClassLevel instances.
    """

    model_config = ConfigDict(frozen=True)

    class_name: str = Field(min_length=1)
    level: Level = Field(default=1)
    subclass: str | None = Field(default=None)
    spellcaster: bool = Field(default=False, description="Class grants spellcasting")


class AbilityScores(BaseModel):
    """The six ability scores."""

    model_config = ConfigDict(frozen=True)

    strength: AbilityScore = Field(default=10)
    dexterity: AbilityScore = Field(default=10)
    constitution: AbilityScore = Field(default=10)
    intelligence: AbilityScore = Field(default=10)
    wisdom: AbilityScore = Field(default=10)
    charisma: AbilityScore = Field(default=10)

    def get_score(self, ability: Ability) -> int:
        """Get the raw score for an ability."""
        return getattr(self, Ability(ability).value)


class CharacterProfile(BaseModel):
    """Raw character state handed to the engine by the sheet.

    Proficiencies arrive grouped by the source that granted them
    ("Class", "Race", "Background", a feat name) because the same
    proficiency is often granted twice; the engine merges them.

    Attributes:
        name: Character name.
        race: Race name.
        subrace: Optional subrace name; also satisfies race prerequisites.
        alignment: Alignment, parsed from display names or abbreviations.
        classes: Class levels (multiclass aware).
        features: Class/race/feat feature names.
        traits: Racial traits (e.g. 'Powerful Build').
        abilities: Ability scores.
        skill_proficiencies: Skill names by granting source.
        skill_expertise: Skill names with expertise.
        save_proficiencies: Abilities with saving-throw proficiency.
        other_proficiencies: Tool/weapon/armor/language names by source.
        spellcaster: Explicit override for spellcasting capability.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",
    )

    name: str = Field(default="Unnamed Character")
    race: str = Field(default="")
    subrace: str | None = Field(default=None)
    alignment: Alignment | None = Field(default=None)
    classes: list[ClassLevel] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    traits: list[str] = Field(default_factory=list)
    abilities: AbilityScores = Field(default_factory=AbilityScores)
    skill_proficiencies: dict[str, list[str]] = Field(default_factory=dict)
    skill_expertise: list[str] = Field(default_factory=list)
    save_proficiencies: list[Ability] = Field(default_factory=list)
    other_proficiencies: dict[str, list[str]] = Field(default_factory=dict)
    spellcaster: bool | None = Field(default=None)

    @field_validator("alignment", mode="before")
    @classmethod
    def parse_alignment(cls, value: Any) -> Any:
        """Accept 'Lawful Good', 'lawful_good' or 'LG'; blank means none."""
        if value is None or isinstance(value, Alignment):
            return value
        if isinstance(value, str):
            if not value.strip():
                return None
            parsed = Alignment.parse(value)
            if parsed is None:
                raise ValueError(f"Unknown alignment: {value!r}")
            return parsed
        return value

    @field_validator("save_proficiencies", mode="before")
    @classmethod
    def parse_save_abilities(cls, value: Any) -> Any:
        """Accept 'Wisdom', 'wis' or Ability values."""
        if not isinstance(value, list):
            return value
        parsed: list[Any] = []
        for entry in value:
            if isinstance(entry, str) and not isinstance(entry, Ability):
                ability = Ability.from_name(entry)
                parsed.append(ability if ability is not None else entry)
            else:
                parsed.append(entry)
        return parsed

    @computed_field(description="Total character level")
    @property
    def level(self) -> int:
        return sum(c.level for c in self.classes)

    def has_class(self, name: str) -> bool:
        """Check class membership, ignoring case and surrounding spaces."""
        return any(same_key(c.class_name, name) for c in self.classes)

    def class_level(self, name: str) -> int:
        """Levels taken in the named class (0 if none)."""
        return sum(c.level for c in self.classes if same_key(c.class_name, name))

    def has_race(self, name: str) -> bool:
        """Check race (or subrace) membership, ignoring case."""
        return same_key(self.race, name) or same_key(self.subrace, name)

    def is_spellcaster(self) -> bool:
        """Whether any class or feature grants spellcasting."""
        if self.spellcaster is not None:
            return self.spellcaster
        if any(c.spellcaster for c in self.classes):
            return True
        return any(normalize_for_lookup(f) in SPELLCASTING_FEATURES for f in self.features)

    def has_trait(self, name: str) -> bool:
        return any(same_key(trait, name) for trait in self.traits)


__all__ = [
    "AbilityScore",
    "Level",
    "SPELLCASTING_FEATURES",
    "CharacterCapabilities",
    "ClassLevel",
    "AbilityScores",
    "CharacterProfile",
]
