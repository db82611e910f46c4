"""
MRN Generation

An MRN is assembled from fixed-width fields and then given a valid check
digit:

    YY CC [OOOOOO] RRRRRRRR... P K
    |  |   |         |         | +- check digit (offset 17)
    |  |   |         |         +--- procedure character (offset 16, optional)
    |  |   |         +------------- random alphanumeric filler
    |  |   +----------------------- declaration office code (optional)
    |  +--------------------------- country code
    +------------------------------ last two digits of the year

The filler shrinks by the length of the office code so the result is
always 18 characters. The procedure character overwrites the filler at
offset 16 instead of extending it.
"""

import secrets
from datetime import date
from typing import Callable, List, Optional

from mrn_generator.characters import capitalize, replace_last_char
from mrn_generator.checksum import compute_correction
from mrn_generator.config import (
    ALPHANUMERIC_ALPHABET,
    COUNTRY_CODE_LENGTH,
    FILLER_LENGTH,
    PROCEDURE_OFFSET,
)
from mrn_generator.errors import (
    CountryCodeLengthError,
    OfficeCodeLengthError,
    RandomSourceError,
)
from mrn_generator.log import get_logger, log_event
from mrn_generator.procedures import Procedure, procedure_to_char

logger = get_logger("generator")

RandomSource = Callable[[int], str]


def random_alphanumeric(length: int) -> str:
    """Return length uniformly chosen characters from A-Z and 0-9."""
    return "".join(secrets.choice(ALPHANUMERIC_ALPHABET) for _ in range(length))


def generate_mrn(
    country_code: str,
    procedure: Optional[Procedure] = None,
    office_code: Optional[str] = None,
    random_source: Optional[RandomSource] = None,
    year: Optional[int] = None,
) -> str:
    """
    Generate a random MRN with a valid check digit.

    Args:
        country_code: Two character country code, uppercased in the output
        procedure: Procedure to encode at offset 16
        office_code: Customs office of declaration, embedded verbatim after
            the country code
        random_source: Callable returning the requested number of uppercase
            alphanumeric characters; called exactly once
        year: Year to encode, defaults to the current year

    Returns:
        18 character MRN

    Raises:
        CountryCodeLengthError: If country_code is not two characters long
        OfficeCodeLengthError: If office_code leaves no room for the filler
        RandomSourceError: If random_source returns the wrong number of characters
        NotAlphanumericError: If the assembled MRN contains a character
            without a checksum value
    """
    if len(country_code) != COUNTRY_CODE_LENGTH:
        log_event(logger, "info", "Rejected country code", country_code=country_code)
        raise CountryCodeLengthError(country_code)

    office_code = office_code or ""
    if len(office_code) > FILLER_LENGTH:
        log_event(logger, "info", "Rejected office code", office_code=office_code)
        raise OfficeCodeLengthError(office_code)

    if random_source is None:
        random_source = random_alphanumeric
    if year is None:
        year = date.today().year

    filler_length = FILLER_LENGTH - len(office_code)
    filler = random_source(filler_length)
    if len(filler) != filler_length:
        raise RandomSourceError(filler_length, filler)

    mrn = f"{year % 100:02d}{capitalize(country_code)}{office_code}{filler}"

    if procedure is not None:
        mrn = (
            mrn[:PROCEDURE_OFFSET]
            + procedure_to_char(procedure)
            + mrn[PROCEDURE_OFFSET + 1 :]
        )

    correction = compute_correction(mrn)
    if correction is not None:
        mrn = replace_last_char(mrn, correction)

    log_event(
        logger,
        "debug",
        "Generated MRN",
        mrn=mrn,
        procedure=procedure.name if procedure else None,
        office_code=office_code or None,
    )
    return mrn


def generate_mrns(count: int, country_code: str, **kwargs) -> List[str]:
    """Generate count independent MRNs sharing the same arguments."""
    if count < 1:
        raise ValueError("Number of MRNs must be positive")
    return [generate_mrn(country_code, **kwargs) for _ in range(count)]
