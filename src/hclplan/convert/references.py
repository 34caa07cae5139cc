"""Extract attribute references of a block into plan configuration expressions."""

from typing import Any, Dict, List
from ..ingest.models import Block


def block_to_references(block: Block) -> Dict[str, Any]:
    """
    Collect the references of a block and its sub-blocks.

    Attributes map to ``{"references": [...]}`` in declaration order, sub-block
    kinds map to the list of their children's expressions. Attributes and
    children without references are left out.
    """
    expressions: Dict[str, Any] = {}

    for attr in block.attributes:
        if attr.references:
            expressions[attr.name] = {"references": list(attr.references)}

    child_expressions: Dict[str, List[Dict[str, Any]]] = {}
    for child in block.children:
        child_references = block_to_references(child)
        if child_references:
            child_expressions.setdefault(child.type, []).append(child_references)

    expressions.update(child_expressions)
    return expressions
