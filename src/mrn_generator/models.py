from pydantic import BaseModel, Field
from typing import Optional

from mrn_generator.checksum import calculate_check_digit, check_remainder_value
from mrn_generator.config import MRN_LENGTH, PROCEDURE_OFFSET
from mrn_generator.errors import MrnLengthError
from mrn_generator.procedures import Procedure, char_to_procedure


class MrnDetails(BaseModel):
    """Field breakdown of an MRN."""

    mrn: str = Field(..., description="The full 18 character MRN.")
    year: str = Field(..., description="Last two digits of the year.")
    country_code: str = Field(..., description="Two character country code.")
    serial: str = Field(
        ...,
        description="Office code and random filler between the country code and the procedure character.",
    )
    procedure_char: str = Field(..., description="Character at offset 16.")
    procedure: Optional[Procedure] = Field(
        None,
        description="Procedure that the character at offset 16 encodes, if any. Without a procedure this offset holds random filler.",
    )
    check_digit: str = Field(..., description="Supplied check digit.")
    expected_check_digit: str = Field(
        ..., description="Check digit computed from the first 17 characters."
    )
    is_valid: bool = Field(..., description="Whether the supplied check digit is correct.")

    @classmethod
    def from_mrn(cls, mrn: str) -> "MrnDetails":
        """
        Break an MRN into its fields.

        Raises:
            MrnLengthError: If mrn is not 18 characters long
            NotAlphanumericError: If mrn contains a character without a checksum value
        """
        if len(mrn) != MRN_LENGTH:
            raise MrnLengthError(mrn)

        check_digit = calculate_check_digit(mrn[:-1])
        correction = check_remainder_value(check_digit, mrn[-1])
        procedure_char = mrn[PROCEDURE_OFFSET]

        return cls(
            mrn=mrn,
            year=mrn[0:2],
            country_code=mrn[2:4],
            serial=mrn[4:PROCEDURE_OFFSET],
            procedure_char=procedure_char,
            procedure=char_to_procedure(procedure_char),
            check_digit=mrn[-1],
            expected_check_digit=str(check_digit % 10),
            is_valid=correction is None,
        )
