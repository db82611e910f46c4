import click
import sys

from mrn_generator.checksum import compute_correction, correct_mrn
from mrn_generator.errors import MrnError
from mrn_generator.generator import generate_mrns
from mrn_generator.models import MrnDetails
from mrn_generator.procedures import match_procedure


@click.command("generate")
@click.option(
    "-c",
    "--country-code",
    envvar="MRN_COUNTRY_CODE",
    required=True,
    help="Country code of MRN.",
)
@click.option(
    "-n",
    "--number-of-mrns",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of MRNs to generate.",
)
@click.option("-p", "--procedure-category", help="Procedure category, e.g. B1 or F2a.")
@click.option("-C", "--combined", help="Combined procedure category, e.g. A or F.")
@click.option(
    "-o",
    "--declaration-office",
    envvar="MRN_DECLARATION_OFFICE",
    help="Customs office of declaration.",
)
def generate(
    country_code, number_of_mrns, procedure_category, combined, declaration_office
):
    """Generates valid MRNs."""
    if combined and not procedure_category:
        raise click.UsageError("--combined requires --procedure-category.")

    try:
        procedure = None
        if procedure_category:
            procedure = match_procedure(procedure_category, combined)

        mrns = generate_mrns(
            number_of_mrns,
            country_code,
            procedure=procedure,
            office_code=declaration_office,
        )
    except MrnError as e:
        raise click.ClickException(str(e))

    for mrn in mrns:
        click.echo(mrn)


@click.command("validate")
@click.argument("mrns", nargs=-1, required=True)
@click.option(
    "--fix", is_flag=True, help="Print the MRNs with corrected check digits instead."
)
def validate(mrns, fix):
    """Validates the check digit of one or more MRNs."""
    failed = False

    for mrn in mrns:
        try:
            if fix:
                click.echo(correct_mrn(mrn))
                continue

            correction = compute_correction(mrn)
        except MrnError as e:
            click.echo(f"Error: {e}", err=True)
            failed = True
            continue

        if correction is None:
            click.echo(f"{mrn}: valid")
        else:
            click.echo(f"{mrn}: invalid (expected check digit {correction})")
            failed = True

    if failed:
        sys.exit(1)


@click.command("describe")
@click.argument("mrn")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def describe(mrn, as_json):
    """Shows the fields of an MRN."""
    try:
        details = MrnDetails.from_mrn(mrn)
    except MrnError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(details.model_dump_json(indent=2))
        return

    click.echo(f"MRN:            {details.mrn}")
    click.echo(f"Year:           {details.year}")
    click.echo(f"Country code:   {details.country_code}")
    click.echo(f"Serial:         {details.serial}")
    procedure = details.procedure.description if details.procedure else "none"
    click.echo(f"Procedure:      {details.procedure_char} ({procedure})")
    click.echo(f"Check digit:    {details.check_digit}")
    if details.is_valid:
        click.echo("Status:         valid")
    else:
        click.echo(
            f"Status:         invalid (expected check digit {details.expected_check_digit})"
        )
