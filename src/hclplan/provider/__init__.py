"""HCL provider - build plan JSON from a parsed Terraform directory."""

from .hcl_provider import (
    HCLProvider,
    PlanJSONProvider,
    Parser,
    ParserOptions,
    PlanVars,
    ProjectConfig,
    new_hcl_provider,
    parser_options,
    vars_from_plan_flags,
)

__all__ = [
    "HCLProvider",
    "PlanJSONProvider",
    "Parser",
    "ParserOptions",
    "PlanVars",
    "ProjectConfig",
    "new_hcl_provider",
    "parser_options",
    "vars_from_plan_flags",
]
