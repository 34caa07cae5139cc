"""Pydantic models for the parsed configuration block tree."""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, model_validator


PROVIDER_BLOCK = "provider"
RESOURCE_BLOCK = "resource"
MODULE_BLOCK = "module"


class Attribute(BaseModel):
    """Single evaluated attribute of a block."""
    name: str = Field(..., description="Attribute name")
    value: Any = Field(None, description="Evaluated attribute value")
    references: List[str] = Field(default_factory=list, description="Addresses the attribute expression refers to (e.g. aws_vpc.main.id)")


class Block(BaseModel):
    """Configuration block: provider, resource or any nested sub-block."""
    type: str = Field(..., description="Block kind (provider, resource, ebs_block_device, ...)")
    type_label: str = Field("", description="First block label (resource type, provider name)")
    name_label: str = Field("", description="Second block label (resource name)")
    attributes: List[Attribute] = Field(default_factory=list, description="Evaluated attributes in declaration order")
    children: List["Block"] = Field(default_factory=list, description="Nested sub-blocks in declaration order")
    values: Optional[Dict[str, Any]] = Field(None, description="Evaluated attribute values; built from attributes when omitted")
    has_module_block: bool = Field(False, description="Whether the block sits inside a module call")
    module_name: Optional[str] = Field(None, description="Name of the enclosing module call")
    module_source: str = Field("", description="Source of the enclosing module call")
    module_address: str = Field("", description="Address of the enclosing module call (module.<name>)")

    @model_validator(mode="after")
    def _fill_defaults(self) -> "Block":
        if "values" not in self.model_fields_set:
            self.values = {attr.name: attr.value for attr in self.attributes}
        if self.module_name and "has_module_block" not in self.model_fields_set:
            self.has_module_block = True
        if self.has_module_block and not self.module_address and self.module_name:
            self.module_address = f"module.{self.module_name}"
        return self

    def get_attribute(self, name: str) -> Optional[Attribute]:
        """Return the named attribute, or None when the block does not set it."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    @property
    def local_name(self) -> str:
        if self.name_label:
            return f"{self.type_label}.{self.name_label}"
        return self.type_label

    @property
    def full_name(self) -> str:
        if self.has_module_block and self.module_address:
            return f"{self.module_address}.{self.local_name}"
        return self.local_name

    @property
    def provider(self) -> str:
        """Provider reference of a resource: explicit provider attribute or the type prefix."""
        attr = self.get_attribute("provider")
        if attr is not None and isinstance(attr.value, str):
            return attr.value
        return self.type_label.split("_", 1)[0]


class Module(BaseModel):
    """Named scope grouping top-level blocks."""
    name: str = Field("", description="Module name; empty for the root module")
    source: str = Field("", description="Module source path")
    blocks: List[Block] = Field(default_factory=list, description="Top-level blocks in declaration order")

    def resource_blocks(self) -> List[Block]:
        return [block for block in self.blocks if block.type == RESOURCE_BLOCK]


Block.model_rebuild()
