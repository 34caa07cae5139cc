"""Load a parsed configuration block tree from a JSON or YAML file."""

import json
from pathlib import Path
from typing import Any, Dict, List
import yaml
from pydantic import ValidationError
from .models import Module, PROVIDER_BLOCK
from ..utils.errors import ModuleLoadError
from ..utils.logging import get_logger

logger = get_logger("ingest.module_loader")

YAML_SUFFIXES = (".yaml", ".yml")


def load_modules(modules_path: str) -> List[Module]:
    """
    Load and validate a parsed module tree file.

    The file holds either a list of modules or a mapping with a ``modules``
    key. YAML is used for .yaml/.yml files, JSON otherwise.

    Args:
        modules_path: Path to the module tree file

    Returns:
        Validated modules in file order

    Raises:
        ModuleLoadError: If the file cannot be read or does not describe modules
    """
    path = Path(modules_path)

    if not path.exists():
        raise ModuleLoadError(
            f"Module file not found: {modules_path}. "
            "Please check the file path and ensure the file exists."
        )

    if not path.is_file():
        raise ModuleLoadError(f"Path is not a file: {modules_path}.")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except json.JSONDecodeError as e:
        raise ModuleLoadError(f"Invalid JSON in module file: {e}")
    except yaml.YAMLError as e:
        raise ModuleLoadError(f"Invalid YAML in module file: {e}")
    except OSError as e:
        raise ModuleLoadError(
            f"Error reading module file: {e}. "
            "Please check file permissions and try again."
        )

    modules = parse_modules(data)
    logger.info(
        f"Loaded {len(modules)} module(s) from {modules_path} "
        f"(blocks: {sum(len(m.blocks) for m in modules)})"
    )
    return modules


def parse_modules(data: Any) -> List[Module]:
    """Validate already-decoded module tree data into Module models."""
    if isinstance(data, dict):
        if "modules" not in data:
            raise ModuleLoadError("Module document must contain a 'modules' key")
        data = data["modules"]

    if not isinstance(data, list):
        raise ModuleLoadError("'modules' must be a list")

    modules = []
    for idx, module_data in enumerate(data):
        if not isinstance(module_data, dict):
            raise ModuleLoadError(f"Invalid module at index {idx}: expected a mapping")
        try:
            modules.append(Module(**module_data))
        except ValidationError as e:
            raise ModuleLoadError(f"Invalid module at index {idx}: {e}")

    return modules


def summarize_modules(modules: List[Module]) -> Dict[str, int]:
    """Count modules, top-level blocks and resource blocks."""
    return {
        "modules": len(modules),
        "blocks": sum(len(m.blocks) for m in modules),
        "resources": sum(len(m.resource_blocks()) for m in modules),
        "providers": sum(1 for m in modules for b in m.blocks if b.type == PROVIDER_BLOCK),
    }
