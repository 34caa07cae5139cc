"""Build a Terraform-style plan JSON document from parsed configuration modules."""

import json
from typing import Dict, List, Optional
from .values import marshal_attribute_values, marshal_block
from .references import block_to_references
from ..contracts.plan_schema import (
    PlanSchema,
    ProviderConfig,
    ResourceJSON,
    ResourceChange,
    ResourceChangesJSON,
    ResourceData,
    ModuleCall,
)
from ..ingest.models import Module, Block, PROVIDER_BLOCK, RESOURCE_BLOCK
from ..utils.errors import PlanSerializationError
from ..utils.logging import get_logger

logger = get_logger("convert.assembler")


def _string_attribute(block: Block, name: str) -> Optional[str]:
    """Return the attribute value when it is a plain string, otherwise None."""
    attr = block.get_attribute(name)
    if attr is not None and isinstance(attr.value, str):
        return attr.value
    return None


def _collect_providers(module: Module, sch: PlanSchema) -> str:
    """
    Record every provider block of a module in the provider config.

    Returns:
        Default provider key of the module (first provider block), or "" if none
    """
    provider_key = ""

    for block in module.blocks:
        if block.type != PROVIDER_BLOCK:
            continue

        name = _string_attribute(block, "alias") or block.type_label

        if not provider_key:
            provider_key = name

        region = _string_attribute(block, "region") or ""
        sch.configuration.provider_config[name] = ProviderConfig.with_region(name, region)
        logger.debug(f"Registered provider config '{name}' (region: {region or 'unset'})")

    return provider_key


def _resource_values(block: Block) -> Optional[Dict]:
    json_values = marshal_attribute_values(block.type, block.values)
    if block.children:
        if json_values is None:
            json_values = {}
        marshal_block(block, json_values)
    return json_values


def _add_resource(block: Block, provider_key: str, sch: PlanSchema) -> None:
    """Add planned value, resource change and configuration entries for one resource block."""
    json_values = _resource_values(block)

    planned = ResourceJSON(
        address=block.full_name,
        type=block.type_label,
        name=block.name_label,
        values=json_values,
    )

    change = ResourceChangesJSON(
        address=block.full_name,
        module_address=block.module_address,
        type=block.type_label,
        name=block.name_label,
        change=ResourceChange(after=json_values),
    )

    provider_config_key = _string_attribute(block, "provider") or provider_key
    root_module = sch.configuration.root_module

    if block.has_module_block:
        module_name = block.module_name or ""
        mod_call = root_module.module_calls.get(module_name)
        if mod_call is None:
            mod_call = ModuleCall(source=block.module_source)
            root_module.module_calls[module_name] = mod_call

        mod_call.module.resources.append(ResourceData(
            address=block.local_name,
            type=block.type_label,
            name=block.name_label,
            provider_config_key=f"{module_name}:{block.provider}",
            expressions=block_to_references(block),
        ))
        sch.child_module.resources.append(planned)
        logger.debug(f"Added {block.full_name} to module call '{module_name}'")
    else:
        root_module.resources.append(ResourceData(
            address=block.full_name,
            type=block.type_label,
            name=block.name_label,
            provider_config_key=provider_config_key,
            expressions=block_to_references(block),
        ))
        sch.planned_values.root_module.resources.append(planned)
        logger.debug(f"Added {block.full_name} to root module (provider: {provider_config_key})")

    sch.resource_changes.append(change)


def modules_to_plan_json(modules: List[Module]) -> PlanSchema:
    """
    Build a shallow plan JSON document from parsed modules.

    Providers of a module are collected first so that every resource can fall
    back to the module's default provider. Every resource block becomes a
    create change; module-nested resources share one child module bucket.
    Blocks other than providers and resources are ignored.

    Args:
        modules: Parsed modules in declaration order

    Returns:
        Populated PlanSchema

    Raises:
        PlanSerializationError: If an attribute value cannot be encoded
    """
    sch = PlanSchema()

    for module in modules:
        provider_key = _collect_providers(module, sch)

        for block in module.blocks:
            if block.type == RESOURCE_BLOCK:
                _add_resource(block, provider_key, sch)
            elif block.type != PROVIDER_BLOCK:
                logger.debug(f"Skipping {block.type} block {block.local_name or block.type} in module '{module.name}'")

    logger.info(
        f"Built plan JSON from {len(modules)} module(s) "
        f"(resources: {len(sch.resource_changes)}, "
        f"providers: {len(sch.configuration.provider_config)}, "
        f"module calls: {len(sch.configuration.root_module.module_calls)})"
    )
    return sch


def plan_json_bytes(modules: List[Module], indent: Optional[int] = None) -> bytes:
    """
    Build the plan JSON document for modules and encode it as UTF-8 JSON.

    Raises:
        PlanSerializationError: If the document cannot be built or encoded
    """
    try:
        sch = modules_to_plan_json(modules)
        data = sch.model_dump(mode="json")
        if indent is None:
            text = json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
        return text.encode("utf-8")
    except (PlanSerializationError, TypeError, ValueError) as e:
        raise PlanSerializationError(f"error handling built plan json from hcl: {e}") from e
