"""Per-character engine session.

A :class:`CharacterSession` is created when a character is loaded and
discarded when it is unloaded. It owns that character's attunement ledger,
so two characters open at the same time never share attunement state.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dnd_sheet.core.config import Settings, get_settings
from dnd_sheet.core.logging import get_logger
from dnd_sheet.models.character import CharacterProfile
from dnd_sheet.models.enums import Ability, Skill
from dnd_sheet.models.equipment import Pack
from dnd_sheet.models.items import ItemDefinition
from dnd_sheet.models.sheet import DerivedSheet, SaveLine, SkillLine
from dnd_sheet.rules.attunement import (
    AsyncItemLookup,
    AttunementLedger,
    AttunementRejection,
    ItemLookup,
)
from dnd_sheet.rules.diagnostics import FallbackDiagnostics
from dnd_sheet.rules.equipment import (
    carrying_capacity,
    encumbrance_status,
    total_value,
    total_weight,
)
from dnd_sheet.rules.modifiers import (
    PASSIVE_ABILITIES,
    ability_modifier,
    format_signed,
    passive_score,
    proficiency_bonus_for_level,
    saving_throw_modifier,
    skill_modifier,
)
from dnd_sheet.rules.prerequisites import unmet_prerequisites
from dnd_sheet.rules.proficiency import merge


logger = get_logger(__name__)


class CharacterSession:
    """Engine state for one loaded character.

    Attributes:
        profile: The character being edited.
        ledger: The character's attunement ledger.
        diagnostics: Counters of permissive fallbacks seen in this session.

    Example:
        >>> session = CharacterSession(profile, catalog.get)
        >>> session.load(["cloak-of-protection"])
        >>> session.derive().attunement_slots_remaining
        2
    """

    def __init__(
        self,
        profile: CharacterProfile,
        item_lookup: ItemLookup,
        settings: Settings | None = None,
    ) -> None:
        self.profile = profile
        self.settings = settings or get_settings()
        # Every event from this session carries the character name
        self._log = logger.bind(character=profile.name)
        self.diagnostics = FallbackDiagnostics(log=self._log)
        self.ledger = AttunementLedger(
            self.settings.rules.attunement_slots,
            diagnostics=self.diagnostics,
            log=self._log,
        )
        self._item_lookup = item_lookup

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def load(self, saved_attunement: Iterable[str] = ()) -> list[str]:
        """Restore saved attunement for the character.

        Returns:
            Saved ids that could not be re-attuned.
        """
        skipped = self.ledger.restore(saved_attunement, self._item_lookup, self.profile)
        if skipped:
            self._log.warning("Some attunements were not restored", skipped=skipped)
        return skipped

    async def load_async(
        self,
        saved_attunement: Iterable[str],
        item_lookup: AsyncItemLookup,
    ) -> list[str]:
        """Restore saved attunement through an asynchronous lookup."""
        return await self.ledger.restore_async(saved_attunement, item_lookup, self.profile)

    def unload(self) -> dict[str, Any]:
        """Clear the session's state.

        Returns:
            The final snapshot, taken before clearing.
        """
        snapshot = self.snapshot()
        self.ledger.reset()
        self.diagnostics.reset()
        self._log.debug("Session unloaded", attuned=snapshot["attuned"])
        return snapshot

    def snapshot(self) -> dict[str, Any]:
        """Persistence shape of the state this session owns."""
        return {"attuned": self.ledger.export()}

    # -------------------------------------------------------------------------
    # Attunement
    # -------------------------------------------------------------------------

    def attune(self, item_id: str) -> bool:
        return self.ledger.attune(item_id, self._item_lookup, self.profile)

    def release(self, item_id: str) -> bool:
        return self.ledger.release(item_id)

    def why_not_attune(self, item_id: str) -> AttunementRejection | None:
        """Reason attuning ``item_id`` would be refused, or None."""
        return self.ledger.check(item_id, self._item_lookup, self.profile)

    def missing_prerequisites(self, item_id: str) -> list[str]:
        """Descriptions of the item's prerequisites this character fails."""
        item = self._item_lookup(item_id)
        if item is None:
            return []
        return unmet_prerequisites(self.profile, item.attunement_prerequisites)

    def attuned_items(self) -> list[ItemDefinition]:
        return self.ledger.list_attuned(self._item_lookup)

    # -------------------------------------------------------------------------
    # Equipment
    # -------------------------------------------------------------------------

    def equipment_value(self, contents: Iterable[Any]) -> int | float:
        """Value of content entries in base units, using the configured rates.

        Unknown coin codes convert at 1:1 and are counted in
        :attr:`diagnostics`.
        """
        return total_value(
            contents, self.settings.rules.currency_rates, diagnostics=self.diagnostics
        )

    def pack_value(self, pack: Pack) -> int | float:
        return pack.value_in(self.settings.rules.currency_rates, self.diagnostics)

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------

    def derive(self, equipment: Iterable[Any] = ()) -> DerivedSheet:
        """Recompute the derived sheet from the current profile.

        Args:
            equipment: Carried content entries (PackEntry or persisted
                records) used for the encumbrance figures.

        Returns:
            A fresh DerivedSheet.
        """
        profile = self.profile
        rules = self.settings.rules
        prof_bonus = proficiency_bonus_for_level(profile.level)
        modifiers = {
            ability: ability_modifier(profile.abilities.get_score(ability)) for ability in Ability
        }

        skill_profs = merge(*profile.skill_proficiencies.values())
        expertise = merge(profile.skill_expertise)

        trained = {Skill.from_name(name) for name in skill_profs}
        experts = {Skill.from_name(name) for name in expertise}

        skills = []
        for skill in Skill:
            proficient = skill in trained
            expert = skill in experts
            modifier = skill_modifier(modifiers[skill.ability], prof_bonus, proficient, expert)
            skills.append(
                SkillLine(
                    skill=skill,
                    ability=skill.ability,
                    modifier=modifier,
                    display=format_signed(modifier),
                    proficient=proficient,
                    expertise=expert,
                )
            )

        saves = []
        for ability in Ability:
            proficient = ability in profile.save_proficiencies
            modifier = saving_throw_modifier(modifiers[ability], prof_bonus, proficient)
            saves.append(
                SaveLine(
                    ability=ability,
                    modifier=modifier,
                    display=format_signed(modifier),
                    proficient=proficient,
                )
            )

        passives = {}
        for kind, ability in PASSIVE_ABILITIES.items():
            skill = Skill(kind.value)
            passives[kind] = passive_score(
                kind,
                modifiers[ability],
                prof_bonus,
                skill in trained,
                skill in experts,
            )

        strength = profile.abilities.strength
        equipment = list(equipment)
        carried = total_weight(equipment)
        sheet = DerivedSheet(
            name=profile.name,
            level=profile.level,
            proficiency_bonus=prof_bonus,
            ability_modifiers=modifiers,
            skills=skills,
            saving_throws=saves,
            passive_scores=passives,
            skill_proficiencies=skill_profs,
            other_proficiencies=merge(*profile.other_proficiencies.values()),
            attuned=self.ledger.export(),
            attunement_slots_remaining=self.ledger.remaining_slots(),
            carried_weight=carried,
            carried_value=self.equipment_value(equipment),
            carrying_capacity=carrying_capacity(
                strength, profile.traits, rules.carry_capacity_multiplier
            ),
            encumbrance=encumbrance_status(
                carried,
                strength,
                profile.traits,
                capacity_multiplier=rules.carry_capacity_multiplier,
                encumbered_multiplier=rules.encumbered_multiplier,
                heavily_encumbered_multiplier=rules.heavily_encumbered_multiplier,
            ),
        )
        self._log.debug("Sheet derived", level=sheet.level, proficiency_bonus=prof_bonus)
        return sheet


__all__ = ["CharacterSession"]
