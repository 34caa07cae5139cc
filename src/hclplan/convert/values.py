"""Marshal evaluated block attribute values into plan JSON values."""

import json
from typing import Any, Dict, Optional
from ..ingest.models import Block, RESOURCE_BLOCK, MODULE_BLOCK
from ..utils.errors import PlanSerializationError
from ..utils.logging import get_logger

logger = get_logger("convert.values")

# Meta-arguments that never end up in planned values
SKIPPED_META_ATTRIBUTES = {
    RESOURCE_BLOCK: ("count",),
    MODULE_BLOCK: ("count",),
}


def _encode_extra(value: Any) -> Any:
    """json.dumps hook for evaluated values JSON has no native type for."""
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=lambda item: json.dumps(item, sort_keys=True, default=_encode_extra))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json_value(value: Any) -> Any:
    """
    Convert an evaluated value to its canonical JSON form.

    Tuples and sets become lists, mapping keys become strings. NaN, infinity
    and objects with no JSON form are rejected.

    Raises:
        TypeError, ValueError: If the value cannot be encoded
    """
    return json.loads(json.dumps(value, allow_nan=False, default=_encode_extra))


def marshal_attribute_values(block_type: str, values: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Marshal a block's evaluated attribute values into JSON-ready values.

    Args:
        block_type: Kind of the block the values belong to
        values: Attribute name to evaluated value, or None when absent

    Returns:
        Attribute name to canonical JSON value, or None for absent input

    Raises:
        PlanSerializationError: If a value cannot be encoded
    """
    if values is None:
        return None

    skipped = SKIPPED_META_ATTRIBUTES.get(block_type, ())
    ret = {}
    for key, value in values.items():
        if key in skipped:
            logger.debug(f"Skipping meta-attribute '{key}' of {block_type} block")
            continue
        try:
            ret[key] = to_json_value(value)
        except (TypeError, ValueError) as e:
            raise PlanSerializationError(f"cannot encode attribute '{key}' of {block_type} block: {e}") from e
    return ret


def marshal_block(block: Block, json_values: Dict[str, Any]) -> Dict[str, Any]:
    """
    Add the marshalled values of every child block to json_values.

    Children are grouped by kind into lists in declaration order. The map is
    updated in place and returned.
    """
    for child in block.children:
        child_values = marshal_attribute_values(child.type, child.values)
        if child.children:
            if child_values is None:
                child_values = {}
            marshal_block(child, child_values)

        existing = json_values.get(child.type)
        if isinstance(existing, list):
            existing.append(child_values)
            continue

        json_values[child.type] = [child_values]
    return json_values
