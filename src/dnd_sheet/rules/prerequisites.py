"""Evaluation of attunement prerequisite clauses against a character.

Clauses form a conjunction: a character satisfies an item's prerequisites
only if every clause holds. Evaluation stops at the first failing clause.
"""

from __future__ import annotations

from collections.abc import Iterable

from dnd_sheet.core.logging import get_logger
from dnd_sheet.models.character import CharacterCapabilities
from dnd_sheet.models.prerequisites import (
    AlignmentRequirement,
    ClassRequirement,
    PrerequisiteClause,
    RaceRequirement,
    SpellcasterRequirement,
    UnrecognizedRequirement,
    parse_prerequisite,
    parse_prerequisites,
)
from dnd_sheet.rules.diagnostics import FallbackDiagnostics


logger = get_logger(__name__)


def clause_holds(
    character: CharacterCapabilities,
    clause: PrerequisiteClause,
    diagnostics: FallbackDiagnostics | None = None,
) -> bool:
    """Evaluate a single clause.

    Args:
        character: The character being checked.
        clause: A parsed prerequisite clause.
        diagnostics: Optional hook told about unrecognized clauses.

    Returns:
        Whether the clause holds. Unrecognized clauses always hold.
    """
    match clause:
        case ClassRequirement(name=name):
            return character.has_class(name)
        case SpellcasterRequirement():
            return character.is_spellcaster()
        case AlignmentRequirement(alignment=alignment):
            return character.alignment == alignment
        case RaceRequirement(name=name):
            return character.has_race(name)
        case UnrecognizedRequirement(kind=kind):
            if diagnostics is not None:
                diagnostics.record("unrecognized_prerequisite", kind, payload=clause.payload)
            else:
                logger.debug("Unrecognized prerequisite treated as satisfied", kind=kind)
            return True
    raise TypeError(f"Not a prerequisite clause: {clause!r}")


def satisfies(
    character: CharacterCapabilities,
    clauses: Iterable[PrerequisiteClause],
    diagnostics: FallbackDiagnostics | None = None,
) -> bool:
    """Check that the character meets every clause.

    An empty clause list is always satisfied.
    """
    return all(clause_holds(character, clause, diagnostics) for clause in clauses)


def unmet_prerequisites(
    character: CharacterCapabilities,
    clauses: Iterable[PrerequisiteClause],
) -> list[str]:
    """Describe every failing clause, e.g. ``["Wizard class"]``.

    Unlike :func:`satisfies` this does not short-circuit.
    """
    return [clause.describe() for clause in clauses if not clause_holds(character, clause)]


__all__ = [
    "clause_holds",
    "satisfies",
    "unmet_prerequisites",
    "parse_prerequisite",
    "parse_prerequisites",
]
