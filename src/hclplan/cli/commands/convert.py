"""Convert command - build plan JSON from a parsed module tree."""

import sys
import click
from ...utils.errors import HCLPlanError
from ...utils.logging import get_logger
from ..utils import resolve_file_path, format_error, configure_logging, write_output

logger = get_logger("cli.convert")


@click.command()
@click.argument('modules_file', type=click.Path(exists=False))
@click.option('--output', '-o', type=click.Path(), help='Save plan JSON to file')
@click.option('--pretty', is_flag=True, help='Indent the generated plan JSON')
@click.option('--config', 'config_path', type=click.Path(), help='Path to config YAML file')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--quiet', is_flag=True, help='Suppress progress messages')
def convert(modules_file, output, pretty, config_path, verbose, quiet):
    """
    Convert a parsed module tree (JSON or YAML) to Terraform plan JSON.
    
    Writes to stdout unless --output is given:
    hclplan convert modules.json > plan.json
    """
    from ... import convert_file
    
    try:
        try:
            modules_path = resolve_file_path(modules_file)
        except FileNotFoundError as e:
            click.echo(format_error(str(e)), err=True)
            sys.exit(1)
        
        configure_logging(config_path, verbose)
        
        if not quiet:
            click.echo(f"Converting module tree: {modules_path}", err=True)
        
        plan_json = convert_file(str(modules_path), indent=2 if pretty else None)
        write_output(plan_json.decode("utf-8"), output, quiet)
        
    except HCLPlanError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
