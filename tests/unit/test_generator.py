"""Unit tests for MRN generation."""

import pytest
import string
from datetime import date
from mrn_generator.generator import generate_mrn, generate_mrns, random_alphanumeric
from mrn_generator.checksum import compute_correction
from mrn_generator.procedures import Procedure, match_procedure
from mrn_generator.errors import (
    CountryCodeLengthError,
    OfficeCodeLengthError,
    RandomSourceError,
    NotAlphanumericError,
)

ALPHANUMERIC = set(string.ascii_uppercase + string.digits)


def test_random_alphanumeric():
    filler = random_alphanumeric(14)
    assert len(filler) == 14
    assert set(filler) <= ALPHANUMERIC
    assert random_alphanumeric(0) == ""


def test_generate_mrn_layout(fixed_source):
    mrn = generate_mrn("dk", random_source=fixed_source, year=2022)

    assert len(mrn) == 18
    assert mrn[:17] == "22DKABCDEFGHJK123"
    assert compute_correction(mrn) is None
    assert fixed_source.requests == [14]


def test_generate_mrn_uses_current_year(fixed_source):
    mrn = generate_mrn("FI", random_source=fixed_source)
    assert mrn[:2] == f"{date.today().year % 100:02d}"


def test_generate_mrn_pads_year(fixed_source):
    assert generate_mrn("FI", random_source=fixed_source, year=2005)[:2] == "05"


def test_generate_mrn_with_office_code(fixed_source):
    mrn = generate_mrn("SE", office_code="001000", random_source=fixed_source)

    assert len(mrn) == 18
    assert mrn[4:10] == "001000"
    assert mrn[10:16] == "ABCDEF"
    assert fixed_source.requests == [8]
    assert compute_correction(mrn) is None


def test_generate_mrn_office_code_is_verbatim(fixed_source):
    mrn = generate_mrn("se", office_code="ab12cd", random_source=fixed_source)
    assert mrn[2:4] == "SE"
    assert mrn[4:10] == "ab12cd"
    assert compute_correction(mrn) is None


def test_generate_mrn_with_procedure(fixed_source):
    mrn = generate_mrn(
        "DK", procedure=Procedure.EXPORT_ONLY, random_source=fixed_source, year=2022
    )

    assert len(mrn) == 18
    assert mrn[:16] == "22DKABCDEFGHJK12"
    assert mrn[16] == "A"
    assert compute_correction(mrn) is None


@pytest.mark.parametrize("procedure", list(Procedure))
def test_generate_mrn_encodes_every_procedure(procedure):
    mrn = generate_mrn("IT", procedure=procedure)
    assert mrn[16] == procedure.value
    assert compute_correction(mrn) is None


def test_generate_mrn_with_office_code_and_procedure(fixed_source):
    procedure = match_procedure("D1", "F")
    mrn = generate_mrn(
        "NL", procedure=procedure, office_code="123456", random_source=fixed_source
    )

    assert len(mrn) == 18
    assert mrn[4:10] == "123456"
    assert mrn[16] == "L"
    assert compute_correction(mrn) is None


@pytest.mark.parametrize("country_code", ["", "F", "FIN", "DEU1"])
def test_generate_mrn_rejects_country_code_length(country_code, fixed_source):
    with pytest.raises(CountryCodeLengthError) as exc_info:
        generate_mrn(country_code, random_source=fixed_source)
    assert exc_info.value.country_code == country_code
    assert fixed_source.requests == []


def test_generate_mrn_rejects_long_office_code(fixed_source):
    with pytest.raises(OfficeCodeLengthError):
        generate_mrn("FI", office_code="X" * 15, random_source=fixed_source)


def test_generate_mrn_office_code_fills_serial(fixed_source):
    mrn = generate_mrn("FI", office_code="Y" * 14, random_source=fixed_source)
    assert mrn[4:17] == "Y" * 13
    assert fixed_source.requests == [0]


def test_generate_mrn_rejects_short_random_source():
    with pytest.raises(RandomSourceError) as exc_info:
        generate_mrn("FI", random_source=lambda length: "ABC")
    assert exc_info.value.expected == 14
    assert exc_info.value.received == "ABC"


def test_generate_mrn_propagates_not_alphanumeric(fixed_source):
    with pytest.raises(NotAlphanumericError):
        generate_mrn("F-", random_source=fixed_source)


def test_generated_mrns_always_pass_checksum():
    for _ in range(200):
        mrn = generate_mrn("ee")
        assert len(mrn) == 18
        assert mrn[2:4] == "EE"
        assert compute_correction(mrn) is None


def test_generate_mrns():
    mrns = generate_mrns(5, "LV", procedure=Procedure.IMPORT_DECLARATION_ONLY)
    assert len(mrns) == 5
    for mrn in mrns:
        assert mrn[16] == "R"
        assert compute_correction(mrn) is None


def test_generate_mrns_rejects_non_positive_count():
    with pytest.raises(ValueError):
        generate_mrns(0, "LV")
