"""
MRN check digit calculation.

Each of the first 17 characters is converted with the ISO 6346 character
table and weighted by 2**position. The sum modulo 11 is the check value,
and the 18th character must equal that value modulo 10.

A check value of 10 therefore only accepts '0' as its check digit, which
keeps the check digit a single decimal character.
"""

from typing import Optional

from mrn_generator.characters import character_value, replace_last_char
from mrn_generator.config import CHECKSUM_MODULUS, MRN_LENGTH
from mrn_generator.errors import MrnLengthError
from mrn_generator.log import get_logger, log_event

logger = get_logger("checksum")


def calculate_check_digit(body: str) -> int:
    """
    Calculate the modulus 11 check value of an MRN body.

    Args:
        body: The first 17 characters of an MRN

    Returns:
        Check value in the range 0-10

    Raises:
        NotAlphanumericError: If body contains a character outside [0-9A-Za-z]
    """
    total = 0
    for i, char in enumerate(body):
        total += character_value(char) << i
    return total % CHECKSUM_MODULUS


def check_remainder_value(check_digit: int, last_char: str) -> Optional[str]:
    """
    Compare a check value against the supplied check character.

    Returns None when they agree, otherwise the digit that should replace
    the supplied character.
    """
    expected = check_digit % 10
    if not last_char.isdigit() or expected != ord(last_char) - ord("0"):
        return str(expected)
    return None


def compute_correction(mrn: str) -> Optional[str]:
    """
    Check the trailing check digit of an MRN.

    Args:
        mrn: An 18 character MRN candidate

    Returns:
        None if the check digit is correct, otherwise the correct check digit

    Raises:
        MrnLengthError: If mrn is not 18 characters long
        NotAlphanumericError: If mrn contains a character outside [0-9A-Za-z]
    """
    if len(mrn) != MRN_LENGTH:
        raise MrnLengthError(mrn)

    body, supplied = mrn[:-1], mrn[-1]
    check_digit = calculate_check_digit(body)
    correction = check_remainder_value(check_digit, supplied)

    log_event(
        logger,
        "debug",
        "Checked MRN",
        mrn=mrn,
        check_digit=check_digit,
        correction=correction,
    )
    return correction


def is_valid_mrn(mrn: str) -> bool:
    return compute_correction(mrn) is None


def correct_mrn(mrn: str) -> str:
    """Return mrn with its check digit replaced if it is wrong."""
    correction = compute_correction(mrn)
    if correction is None:
        return mrn
    return replace_last_char(mrn, correction)
