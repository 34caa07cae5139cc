"""Custom exception classes for hclplan."""


class HCLPlanError(Exception):
    """Base exception for all hclplan errors."""
    pass


class ModuleLoadError(HCLPlanError):
    """Raised when a parsed module tree cannot be loaded or is invalid."""
    pass


class PlanSerializationError(HCLPlanError):
    """Raised when a value or the built plan cannot be encoded as JSON."""
    pass


class PlanFlagsError(HCLPlanError):
    """Raised when a Terraform plan-flags string cannot be parsed."""
    pass


class ConfigError(HCLPlanError):
    """Raised when configuration is invalid or missing."""
    pass


class ProviderError(HCLPlanError):
    """Raised when the downstream plan JSON provider fails."""
    pass
