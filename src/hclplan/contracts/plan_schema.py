"""Pydantic models for the generated plan JSON (fixed Terraform plan shape)."""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, model_serializer

FORMAT_VERSION = "1.0"
TERRAFORM_VERSION = "1.1.0"
MANAGED_MODE = "managed"
CREATE_ACTION = "create"


class ResourceJSON(BaseModel):
    """Planned value of a single resource."""
    address: str
    mode: str = MANAGED_MODE
    type: str
    name: str
    schema_version: int = 1
    values: Optional[Dict[str, Any]] = None


class ResourceChange(BaseModel):
    """Change set of a resource; always a create in generated plans."""
    actions: List[str] = Field(default_factory=lambda: [CREATE_ACTION])
    before: Any = None
    after: Optional[Dict[str, Any]] = None


class ResourceChangesJSON(BaseModel):
    """Entry of the flat resource_changes list."""
    address: str
    module_address: str = ""
    mode: str = MANAGED_MODE
    type: str
    name: str
    change: ResourceChange = Field(default_factory=ResourceChange)


class ChildModule(BaseModel):
    """Synthetic bucket holding every module-nested planned resource."""
    resources: List[ResourceJSON] = Field(default_factory=list)


class PlanRootModule(BaseModel):
    """planned_values.root_module"""
    resources: List[ResourceJSON] = Field(default_factory=list)
    child_modules: List[ChildModule] = Field(default_factory=lambda: [ChildModule()])

    @model_serializer(mode="wrap")
    def _omit_empty_resources(self, handler):
        data = handler(self)
        if not self.resources:
            data.pop("resources", None)
        return data


class PlannedValues(BaseModel):
    root_module: PlanRootModule = Field(default_factory=PlanRootModule)


class ProviderConfig(BaseModel):
    """Provider configuration keyed by provider name or alias."""
    name: str
    expressions: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def with_region(cls, name: str, region: str) -> "ProviderConfig":
        return cls(name=name, expressions={"region": {"constant_value": region}})


class ResourceData(BaseModel):
    """Resource declaration in the configuration tree (expressions, not values)."""
    address: str
    mode: str = MANAGED_MODE
    type: str
    name: str
    provider_config_key: str
    expressions: Dict[str, Any] = Field(default_factory=dict)


class ModuleCallModule(BaseModel):
    resources: List[ResourceData] = Field(default_factory=list)


class ModuleCall(BaseModel):
    """Module call declared by the root module."""
    source: str = ""
    module: ModuleCallModule = Field(default_factory=ModuleCallModule)


class ConfigurationRootModule(BaseModel):
    """configuration.root_module"""
    resources: List[ResourceData] = Field(default_factory=list)
    module_calls: Dict[str, ModuleCall] = Field(default_factory=dict)

    @model_serializer(mode="wrap")
    def _omit_empty_resources(self, handler):
        data = handler(self)
        if not self.resources:
            data.pop("resources", None)
        return data


class Configuration(BaseModel):
    provider_config: Dict[str, ProviderConfig] = Field(default_factory=dict)
    root_module: ConfigurationRootModule = Field(default_factory=ConfigurationRootModule)


class PlanSchema(BaseModel):
    """Plan JSON document - versioned, fixed wire shape."""
    format_version: str = FORMAT_VERSION
    terraform_version: str = TERRAFORM_VERSION
    planned_values: PlannedValues = Field(default_factory=PlannedValues)
    resource_changes: List[ResourceChangesJSON] = Field(default_factory=list)
    configuration: Configuration = Field(default_factory=Configuration)

    @property
    def child_module(self) -> ChildModule:
        """The single bucket that collects all module-nested resources."""
        return self.planned_values.root_module.child_modules[0]
