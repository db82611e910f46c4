"""
Procedure Category Definitions

This module maps customs procedure category codes (e.g. "B1", "F1a") and an
optional combined category to the procedure encoded at offset 16 of an MRN.

The mapping is an ordered rule table. Each rule names a set of codes, the
combination it accepts and the resulting procedure; the first matching rule
wins. A rule accepts one of:

- STANDALONE: only when no combined category is given
- ANY: regardless of the combined category
- a set of combined categories, e.g. {"A"} for procedures combined with an
  exit summary declaration or {"F"} for an entry summary declaration

Example Usage:
    from mrn_generator.procedures import match_procedure, procedure_to_char

    procedure = match_procedure("B1")                 # Procedure.EXPORT_ONLY
    procedure = match_procedure("B2", combined="A")   # EXPORT_AND_EXIT_SUMMARY_DECLARATION
    procedure_to_char(procedure)                      # "B"
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple, Union

from mrn_generator.errors import (
    InvalidProcedureCategoryCombinationError,
    InvalidProcedureCategoryError,
)
from mrn_generator.log import get_logger, log_event

logger = get_logger("procedures")


class Procedure(Enum):
    """Procedure combinations that can be encoded in an MRN."""

    EXPORT_ONLY = "A"
    EXPORT_AND_EXIT_SUMMARY_DECLARATION = "B"
    EXIT_SUMMARY_DECLARATION_ONLY = "C"
    RE_EXPORT_NOTIFICATION = "D"
    DISPATCH_OF_GOODS_IN_RELATION_WITH_SPECIAL_FISCAL_TERRITORIES = "E"
    TRANSIT_DECLARATION_ONLY = "J"
    TRANSIT_DECLARATION_AND_EXIT_SUMMARY_DECLARATION = "K"
    TRANSIT_DECLARATION_AND_ENTRY_SUMMARY_DECLARATION = "L"
    PROOF_OF_THE_CUSTOMS_STATUS_OF_UNION_GOODS = "M"
    IMPORT_DECLARATION_ONLY = "R"
    IMPORT_DECLARATION_AND_ENTRY_SUMMARY_DECLARATION = "S"
    ENTRY_SUMMARY_DECLARATION_ONLY = "T"
    INTRODUCTION_OF_GOODS_IN_RELATION_WITH_SPECIAL_FISCAL_TERRITORIES = "U"
    TEMPORARY_STORAGE_DECLARATION = "V"
    TEMPORARY_STORAGE_DECLARATION_AND_ENTRY_SUMMARY_DECLARATION = "W"

    @property
    def description(self) -> str:
        return self.name.replace("_", " ").capitalize()


class Combination(Enum):
    STANDALONE = "standalone"
    ANY = "any"


STANDALONE = Combination.STANDALONE
ANY = Combination.ANY

# Combined categories
EXIT_SUMMARY_COMBINED = frozenset({"A"})
ENTRY_SUMMARY_COMBINED = frozenset({"F"})

CombinationConstraint = Union[Combination, FrozenSet[str]]


@dataclass(frozen=True)
class ProcedureRule:
    """One row of the procedure category table."""

    codes: FrozenSet[str]
    combination: CombinationConstraint
    outcome: Procedure

    def matches(self, code: str, combined: Optional[str]) -> bool:
        if code not in self.codes:
            return False
        if self.combination is ANY:
            return True
        if self.combination is STANDALONE:
            return combined is None
        return combined is not None and combined in self.combination


EXPORT_CODES = frozenset({"B1", "B2", "B3", "C1"})
TRANSIT_CODES = frozenset({"D1", "D2", "D3"})
IMPORT_CODES = frozenset({"H1", "H2", "H3", "H4", "H6", "H7", "I1"})
ENTRY_SUMMARY_CODES = frozenset(
    {
        "F1a",
        "F1b",
        "F1c",
        "F1d",
        "F2a",
        "F2b",
        "F2c",
        "F2d",
        "F3a",
        "F3b",
        "F4a",
        "F4b",
        "F4c",
        "F5",
    }
)

# Evaluated in order - single source of truth
PROCEDURE_RULES: Tuple[ProcedureRule, ...] = (
    ProcedureRule(EXPORT_CODES, STANDALONE, Procedure.EXPORT_ONLY),
    ProcedureRule(
        EXPORT_CODES,
        EXIT_SUMMARY_COMBINED,
        Procedure.EXPORT_AND_EXIT_SUMMARY_DECLARATION,
    ),
    ProcedureRule(
        frozenset({"A1", "A2"}), ANY, Procedure.EXIT_SUMMARY_DECLARATION_ONLY
    ),
    ProcedureRule(frozenset({"A3"}), ANY, Procedure.RE_EXPORT_NOTIFICATION),
    ProcedureRule(
        frozenset({"B4"}),
        ANY,
        Procedure.DISPATCH_OF_GOODS_IN_RELATION_WITH_SPECIAL_FISCAL_TERRITORIES,
    ),
    ProcedureRule(TRANSIT_CODES, STANDALONE, Procedure.TRANSIT_DECLARATION_ONLY),
    ProcedureRule(
        TRANSIT_CODES,
        EXIT_SUMMARY_COMBINED,
        Procedure.TRANSIT_DECLARATION_AND_EXIT_SUMMARY_DECLARATION,
    ),
    ProcedureRule(
        TRANSIT_CODES,
        ENTRY_SUMMARY_COMBINED,
        Procedure.TRANSIT_DECLARATION_AND_ENTRY_SUMMARY_DECLARATION,
    ),
    ProcedureRule(
        frozenset({"E1", "E2"}),
        ANY,
        Procedure.PROOF_OF_THE_CUSTOMS_STATUS_OF_UNION_GOODS,
    ),
    ProcedureRule(IMPORT_CODES, STANDALONE, Procedure.IMPORT_DECLARATION_ONLY),
    ProcedureRule(
        IMPORT_CODES,
        ENTRY_SUMMARY_COMBINED,
        Procedure.IMPORT_DECLARATION_AND_ENTRY_SUMMARY_DECLARATION,
    ),
    ProcedureRule(ENTRY_SUMMARY_CODES, ANY, Procedure.ENTRY_SUMMARY_DECLARATION_ONLY),
    ProcedureRule(
        frozenset({"H5"}),
        ANY,
        Procedure.INTRODUCTION_OF_GOODS_IN_RELATION_WITH_SPECIAL_FISCAL_TERRITORIES,
    ),
    ProcedureRule(
        frozenset({"G4"}), STANDALONE, Procedure.TEMPORARY_STORAGE_DECLARATION
    ),
    ProcedureRule(
        frozenset({"G4"}),
        ENTRY_SUMMARY_COMBINED,
        Procedure.TEMPORARY_STORAGE_DECLARATION_AND_ENTRY_SUMMARY_DECLARATION,
    ),
)

_CHAR_TO_PROCEDURE: Dict[str, Procedure] = {p.value: p for p in Procedure}


def match_procedure(code: str, combined: Optional[str] = None) -> Procedure:
    """
    Resolve a procedure category code to the procedure it encodes.

    Args:
        code: Procedure category code, e.g. "B1" or "F2c" (case-sensitive)
        combined: Optional combined procedure category, e.g. "A" or "F"

    Returns:
        The procedure of the first matching rule

    Raises:
        InvalidProcedureCategoryError: If no rule matches and combined is None
        InvalidProcedureCategoryCombinationError: If no rule matches the
            code together with combined
    """
    for rule in PROCEDURE_RULES:
        if rule.matches(code, combined):
            log_event(
                logger,
                "debug",
                "Matched procedure",
                code=code,
                combined=combined,
                procedure=rule.outcome.name,
            )
            return rule.outcome

    log_event(
        logger, "info", "Rejected procedure category", code=code, combined=combined
    )
    if combined is None:
        raise InvalidProcedureCategoryError(code)
    raise InvalidProcedureCategoryCombinationError(code, combined)


def procedure_to_char(procedure: Procedure) -> str:
    return procedure.value


def char_to_procedure(char: str) -> Optional[Procedure]:
    """Decode the procedure character of an MRN, or None if it encodes none."""
    return _CHAR_TO_PROCEDURE.get(char)


def procedure_rules() -> Tuple[ProcedureRule, ...]:
    return PROCEDURE_RULES


def describe_combination(combination: CombinationConstraint) -> str:
    """Human-readable form of a rule's combination constraint."""
    if isinstance(combination, Combination):
        return combination.value
    return "with " + ", ".join(sorted(combination))
