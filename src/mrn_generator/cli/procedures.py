import click

from mrn_generator.procedures import describe_combination, procedure_rules


@click.command("procedures")
def list_procedures():
    """Lists the supported procedure categories."""
    for rule in procedure_rules():
        codes = " ".join(sorted(rule.codes))
        combination = describe_combination(rule.combination)
        click.echo(f"{rule.outcome.value}  {rule.outcome.name}")
        click.echo(f"   codes: {codes} ({combination})")
