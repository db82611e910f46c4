from mrn_generator.cli.main import cli

cli(prog_name="mrn-generator")
