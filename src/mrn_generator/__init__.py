"""
MRN Generator

Generates and validates Movement Reference Numbers (MRNs), the 18 character
identifiers that tag customs declarations.

An MRN is laid out as:
- 2 digits: last two digits of the year
- 2 characters: country code
- optional customs office of declaration code
- random alphanumeric filler
- 1 character: procedure category (offset 16, optional)
- 1 character: check digit, calculated with the ISO 6346 character table

Example Usage:
    from mrn_generator import generate_mrn, match_procedure, compute_correction

    mrn = generate_mrn("fi")                                   # 26FI3K0X...
    mrn = generate_mrn("DK", procedure=match_procedure("B1"))  # offset 16 is "A"
    mrn = generate_mrn("SE", office_code="001000")             # office at offsets 4-9

    compute_correction("22DK1V0QQK2S6J7TU2")  # "1"
    compute_correction("22ITZXBZYUTJFLJXK6")  # None
"""

from .characters import character_value, capitalize, replace_last_char
from .checksum import (
    calculate_check_digit,
    check_remainder_value,
    compute_correction,
    correct_mrn,
    is_valid_mrn,
)
from .procedures import (
    Procedure,
    ProcedureRule,
    PROCEDURE_RULES,
    match_procedure,
    procedure_to_char,
    char_to_procedure,
    procedure_rules,
)
from .generator import generate_mrn, generate_mrns, random_alphanumeric
from .models import MrnDetails
from .errors import (
    MrnError,
    CountryCodeLengthError,
    OfficeCodeLengthError,
    InvalidProcedureCategoryError,
    InvalidProcedureCategoryCombinationError,
    NotAlphanumericError,
    MrnLengthError,
    RandomSourceError,
)

__all__ = [
    # Checksum
    "character_value",
    "capitalize",
    "replace_last_char",
    "calculate_check_digit",
    "check_remainder_value",
    "compute_correction",
    "correct_mrn",
    "is_valid_mrn",
    # Procedures
    "Procedure",
    "ProcedureRule",
    "PROCEDURE_RULES",
    "match_procedure",
    "procedure_to_char",
    "char_to_procedure",
    "procedure_rules",
    # Generation
    "generate_mrn",
    "generate_mrns",
    "random_alphanumeric",
    "MrnDetails",
    # Errors
    "MrnError",
    "CountryCodeLengthError",
    "OfficeCodeLengthError",
    "InvalidProcedureCategoryError",
    "InvalidProcedureCategoryCombinationError",
    "NotAlphanumericError",
    "MrnLengthError",
    "RandomSourceError",
]

__version__ = "0.1.0"
