"""HCL provider: parse a Terraform directory and hand a built plan JSON to a plan JSON provider."""

import shlex
from typing import Any, Callable, Dict, List, Protocol
import click
from pydantic import BaseModel, Field
from ..convert.assembler import plan_json_bytes
from ..ingest.models import Module
from ..utils.errors import HCLPlanError, PlanFlagsError, ProviderError
from ..utils.logging import get_logger

logger = get_logger("provider.hcl_provider")


class ProjectConfig(BaseModel):
    """Project settings that feed the HCL parser."""
    path: str = Field(".", description="Terraform directory to parse")
    terraform_plan_flags: str = Field("", description="Flags as passed to terraform plan")
    terraform_var_files: List[str] = Field(default_factory=list, description="Extra tfvars files")
    terraform_vars: List[str] = Field(default_factory=list, description="Extra input vars (key=value)")


class PlanVars(BaseModel):
    """Var files and vars extracted from a plan-flags string."""
    files: List[str] = Field(default_factory=list)
    vars: List[str] = Field(default_factory=list)


class ParserOptions(BaseModel):
    """Options handed to the HCL parser factory."""
    tfvars_paths: List[str] = Field(default_factory=list)
    input_vars: List[str] = Field(default_factory=list)


class Parser(Protocol):
    """Configuration parser producing the block tree of a directory."""

    def parse_directory(self) -> List[Module]:
        ...


class PlanJSONProvider(Protocol):
    """Consumer that loads resources from plan JSON bytes."""

    def load_resources_from_src(self, usage: Dict[str, Any], src: bytes, extra: Any) -> List[Any]:
        ...


ParserFactory = Callable[[str, ParserOptions], Parser]


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    add_help_option=False,
)
@click.option('-var', '--var', 'input_vars', multiple=True)
@click.option('-var-file', '--var-file', 'var_files', multiple=True)
def _plan_flags(input_vars, var_files):
    return PlanVars(files=list(var_files), vars=list(input_vars))


def vars_from_plan_flags(plan_flags: str) -> PlanVars:
    """
    Extract -var and -var-file values from a terraform plan flags string.

    Unknown flags and positional arguments are ignored.

    Raises:
        PlanFlagsError: If the string cannot be split or a flag has no value
    """
    try:
        args = shlex.split(plan_flags or "")
    except ValueError as e:
        raise PlanFlagsError(f"invalid plan flags '{plan_flags}': {e}") from e

    if not args:
        return PlanVars()

    try:
        return _plan_flags.main(args=args, prog_name="terraform plan", standalone_mode=False)
    except click.ClickException as e:
        raise PlanFlagsError(f"invalid plan flags '{plan_flags}': {e.format_message()}") from e


def parser_options(project: ProjectConfig) -> ParserOptions:
    """
    Build parser options from plan flags and project var settings.

    Values from the plan flags come first, project settings are appended.

    Raises:
        PlanFlagsError: If the plan flags cannot be parsed
    """
    try:
        plan_vars = vars_from_plan_flags(project.terraform_plan_flags)
    except PlanFlagsError as e:
        raise PlanFlagsError(f"could not parse vars from plan flags: {e}") from e

    return ParserOptions(
        tfvars_paths=plan_vars.files + list(project.terraform_var_files),
        input_vars=plan_vars.vars + list(project.terraform_vars),
    )


class HCLProvider:
    """Loads resources from a Terraform directory without running terraform plan."""

    def __init__(self, parser: Parser, provider: PlanJSONProvider):
        self.parser = parser
        self.provider = provider

    def type(self) -> str:
        return "terraform_hcl"

    def display_type(self) -> str:
        return "Terraform directory (HCL)"

    def add_metadata(self, metadata: Any) -> None:
        pass

    def load_plan_json(self) -> bytes:
        """
        Parse the directory and build plan JSON bytes from its modules.

        Parser errors propagate unchanged.

        Raises:
            PlanSerializationError: If the built plan cannot be encoded
        """
        modules = self.parser.parse_directory()
        return plan_json_bytes(modules)

    def load_resources(self, usage: Dict[str, Any]) -> List[Any]:
        """
        Build plan JSON from the parsed directory and load resources from it.

        Args:
            usage: Usage data keyed by resource address

        Returns:
            Projects returned by the plan JSON provider

        Raises:
            HCLPlanError: If parsing, conversion or loading fails
        """
        plan_json = self.load_plan_json()
        logger.info(f"Built {len(plan_json)} bytes of plan JSON, loading resources")

        try:
            return self.provider.load_resources_from_src(usage, plan_json, None)
        except HCLPlanError:
            raise
        except Exception as e:
            raise ProviderError(f"plan JSON provider failed to load resources: {e}") from e


def new_hcl_provider(project: ProjectConfig, parser_factory: ParserFactory, provider: PlanJSONProvider) -> HCLProvider:
    """
    Create an HCLProvider whose parser is set up with the project's vars.

    Raises:
        PlanFlagsError: If the project's plan flags cannot be parsed
    """
    options = parser_options(project)
    logger.debug(
        f"Creating HCL parser for {project.path} "
        f"(var files: {len(options.tfvars_paths)}, vars: {len(options.input_vars)})"
    )
    parser = parser_factory(project.path, options)
    return HCLProvider(parser=parser, provider=provider)
