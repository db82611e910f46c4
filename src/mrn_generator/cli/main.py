import click

# Import individual commands from modules
from mrn_generator.cli.mrn import generate, validate, describe
from mrn_generator.cli.procedures import list_procedures
from mrn_generator.log import setup_logging


@click.group()
@click.version_option(package_name="mrn-generator")
def cli():
    """A CLI tool for generating and validating Movement Reference Numbers."""
    setup_logging()


# Add MRN commands
cli.add_command(generate)
cli.add_command(validate)
cli.add_command(describe)

# Add procedure commands
cli.add_command(list_procedures)


if __name__ == "__main__":
    cli()
