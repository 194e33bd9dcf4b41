"""Spec reconciliation for manual jobs."""

from .env import (
    ContainerEnvironment,
    ExternalReference,
    Literal,
    VariableValue,
    add_literal,
    apply_environments,
    extract_environments,
    find_environment,
)
from .job import JobDescriptor, build_job, manual_job_name
from .render import render_for_inspection, strip_controller_fields
from .resources import ResourceOverride, apply_resource_override
from .template import CanonicalTemplate, ResourceKind, normalize

__all__ = [
    # Template
    "CanonicalTemplate",
    "ResourceKind",
    "normalize",
    # Environment
    "ContainerEnvironment",
    "ExternalReference",
    "Literal",
    "VariableValue",
    "extract_environments",
    "apply_environments",
    "find_environment",
    "add_literal",
    # Resources
    "ResourceOverride",
    "apply_resource_override",
    # Job
    "JobDescriptor",
    "build_job",
    "manual_job_name",
    # Render
    "render_for_inspection",
    "strip_controller_fields",
]
