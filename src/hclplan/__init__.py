"""hclplan - Build Terraform plan JSON from parsed HCL configuration."""

from typing import List, Optional
from .ingest.models import Module, Block, Attribute
from .ingest.module_loader import load_modules
from .convert.assembler import modules_to_plan_json, plan_json_bytes
from .contracts.plan_schema import PlanSchema
from .utils.logging import setup_logging, get_logger
from .utils.errors import HCLPlanError

__version__ = "0.1.0"

__all__ = [
    "convert_file",
    "convert_modules",
    "modules_to_plan_json",
    "plan_json_bytes",
    "load_modules",
    "Module",
    "Block",
    "Attribute",
    "PlanSchema",
]

setup_logging()
logger = get_logger("hclplan")


def convert_modules(modules: List[Module], indent: Optional[int] = None) -> bytes:
    """Convert parsed modules to plan JSON bytes."""
    try:
        return plan_json_bytes(modules, indent=indent)
    except HCLPlanError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error during conversion: {e}", exc_info=True)
        raise HCLPlanError(f"Conversion failed: {e}") from e


def convert_file(modules_path: str, indent: Optional[int] = None) -> bytes:
    """Load a parsed module tree file and convert it to plan JSON bytes."""
    logger.info(f"Starting conversion of module tree: {modules_path}")
    modules = load_modules(modules_path)
    plan_json = convert_modules(modules, indent=indent)
    logger.info(f"Conversion complete: {len(plan_json)} bytes of plan JSON")
    return plan_json
