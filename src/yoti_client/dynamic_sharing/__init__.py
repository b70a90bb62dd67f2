"""Builders for dynamic sharing scenarios."""
from .extensions import (
    Extension,
    ExtensionBuilder,
    LocationConstraintExtensionBuilder,
    TransactionalFlowExtensionBuilder,
)
from .policy import DynamicPolicy, DynamicPolicyBuilder, WantedAttribute, WantedAttributeBuilder
from .scenario import DynamicScenario, DynamicScenarioBuilder, ShareUrlResult

__all__ = [
    "WantedAttribute",
    "WantedAttributeBuilder",
    "DynamicPolicy",
    "DynamicPolicyBuilder",
    "Extension",
    "ExtensionBuilder",
    "LocationConstraintExtensionBuilder",
    "TransactionalFlowExtensionBuilder",
    "DynamicScenario",
    "DynamicScenarioBuilder",
    "ShareUrlResult",
]
