"""Container resource limit overrides."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .template import CanonicalTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceOverride:
    """CPU and memory limits requested for one container.

    Quantities are kept as given (e.g. ``"0.5"``, ``"512Mi"``).
    """

    container: str
    cpu: str
    memory: str


def apply_resource_override(template: CanonicalTemplate, override: ResourceOverride) -> None:
    """Set cpu and memory limits on a container of the template.

    Other limit keys and all requests are left as they are.

    Raises:
        ContainerNotFoundError: If the container is not in the template
    """
    container = template.container(override.container)

    resources = container.get("resources")
    if resources is None:
        resources = container["resources"] = {}

    limits = resources.get("limits")
    if limits is None:
        limits = resources["limits"] = {}

    limits["cpu"] = override.cpu
    limits["memory"] = override.memory

    logger.info(
        "Container %s limits set to cpu=%s memory=%s",
        override.container,
        override.cpu,
        override.memory,
    )
