"""Flags command - show vars extracted from terraform plan flags."""

import json
import sys
import click
from ...config import load_config, load_project_config
from ...provider.hcl_provider import vars_from_plan_flags, parser_options
from ...utils.errors import HCLPlanError
from ..utils import format_error


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument('plan_flags', required=False)
@click.option('--config', 'config_path', type=click.Path(), help='Path to config YAML file')
def flags(plan_flags, config_path):
    """
    Print the -var and -var-file values found in PLAN_FLAGS as JSON.

    Example: hclplan flags "-var-file=prod.tfvars -var 'region=eu-west-1'"

    Without PLAN_FLAGS, prints the parser options of the configured project
    (plan flags plus terraform_var_files and terraform_vars).
    """
    try:
        if plan_flags is None:
            project = load_project_config(load_config(config_path))
            result = parser_options(project).model_dump()
        else:
            result = vars_from_plan_flags(plan_flags).model_dump()
    except HCLPlanError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    click.echo(json.dumps(result, indent=2))
