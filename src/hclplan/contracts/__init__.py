from .plan_schema import (
    PlanSchema,
    PlannedValues,
    PlanRootModule,
    ChildModule,
    ResourceJSON,
    ResourceChange,
    ResourceChangesJSON,
    Configuration,
    ConfigurationRootModule,
    ProviderConfig,
    ResourceData,
    ModuleCall,
    ModuleCallModule,
    FORMAT_VERSION,
    TERRAFORM_VERSION,
)

__all__ = [
    "PlanSchema",
    "PlannedValues",
    "PlanRootModule",
    "ChildModule",
    "ResourceJSON",
    "ResourceChange",
    "ResourceChangesJSON",
    "Configuration",
    "ConfigurationRootModule",
    "ProviderConfig",
    "ResourceData",
    "ModuleCall",
    "ModuleCallModule",
    "FORMAT_VERSION",
    "TERRAFORM_VERSION",
]
