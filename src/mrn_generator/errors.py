"""Exceptions raised by the MRN generator."""


class MrnError(Exception):
    """Base exception for MRN errors"""

    pass


class CountryCodeLengthError(MrnError, ValueError):
    """Country code is not exactly two characters long."""

    def __init__(self, country_code: str):
        self.country_code = country_code
        super().__init__(
            f"Country code must be exactly 2 characters, got '{country_code}'"
        )


class OfficeCodeLengthError(MrnError, ValueError):
    """Office code does not fit in the MRN."""

    def __init__(self, office_code: str):
        self.office_code = office_code
        super().__init__(
            f"Declaration office code is too long ({len(office_code)} > 14): '{office_code}'"
        )


class InvalidProcedureCategoryError(MrnError, ValueError):
    """Procedure category code is not recognised."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invalid procedure category: '{code}'")


class InvalidProcedureCategoryCombinationError(MrnError, ValueError):
    """Procedure category cannot be combined with the given code."""

    def __init__(self, code: str, combined: str):
        self.code = code
        self.combined = combined
        super().__init__(
            f"Invalid procedure category combination: '{code}' with '{combined}'"
        )


class NotAlphanumericError(MrnError, ValueError):
    """Character has no checksum value."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Character is not alphanumeric: '{char}'")


class MrnLengthError(MrnError, ValueError):
    """Checksum input is not a full-length MRN."""

    def __init__(self, mrn: str):
        self.mrn = mrn
        super().__init__(f"MRN must be exactly 18 characters, got {len(mrn)}: '{mrn}'")


class RandomSourceError(MrnError):
    """Random source returned a filler of the wrong length."""

    def __init__(self, expected: int, received: str):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Random source returned {len(received)} characters, expected {expected}"
        )
