"""Manual job dispatch pipeline.

Runs the steps of one dispatch in order: existing-job check, source
selection, normalization, env editing and merge-back, optional resource
override, build, submission and, for dry runs, rendering. Any failure stops
the run; nothing is retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from bakkutteh._constants import DEFAULT_BACKOFF_LIMIT, MEMORY_SUFFIXES
from bakkutteh.errors import (
    JobAlreadyExistsError,
    SourceNotFoundError,
    SubmissionError,
)
from bakkutteh.k8s.client import K8sError, K8sNotFoundError
from bakkutteh.output import emit_dry_run
from bakkutteh.prompt import (
    Prompter,
    number_validator,
    parse_env_assignment,
    validate_env_assignment,
)
from bakkutteh.spec import (
    ContainerEnvironment,
    ExternalReference,
    Literal,
    ResourceKind,
    ResourceOverride,
    add_literal,
    apply_environments,
    apply_resource_override,
    build_job,
    extract_environments,
    manual_job_name,
    normalize,
    render_for_inspection,
)

logger = logging.getLogger(__name__)


class ClusterClient(Protocol):
    """Cluster operations used by the dispatcher."""

    def get_object(self, kind: ResourceKind | str, name: str) -> dict[str, Any]: ...

    def list_objects(self, kind: ResourceKind | str) -> list[str]: ...

    def job_exists(self, name: str) -> bool: ...

    def delete_job(self, name: str) -> None: ...

    def create_job(self, manifest: dict[str, Any], dry_run: bool = False) -> dict[str, Any]: ...


@dataclass
class DispatchOptions:
    """Options of one dispatch run."""

    target_name: str
    source_name: str | None = None
    deployment: bool = False
    backoff_limit: int = DEFAULT_BACKOFF_LIMIT
    dry_run: bool = False
    dry_run_output_path: Path | None = None

    @property
    def source_kind(self) -> ResourceKind:
        return ResourceKind.DEPLOYMENT if self.deployment else ResourceKind.CRONJOB


@dataclass
class DispatchResult:
    """Outcome of a dispatch run."""

    job_name: str
    dry_run: bool
    job: dict[str, Any]
    rendered: str | None = None


class Dispatcher:
    """Derives a manual Job from a CronJob or Deployment and submits it."""

    def __init__(self, k8s: ClusterClient, prompter: Prompter):
        self.k8s = k8s
        self.prompter = prompter

    def run(self, options: DispatchOptions) -> DispatchResult:
        """Run the full pipeline.

        Raises:
            DispatchError: On the first failing step
        """
        job_name = manual_job_name(options.target_name)
        self._ensure_name_available(job_name)

        kind = options.source_kind
        source_name = options.source_name or self._select_source(kind)
        try:
            source = self.k8s.get_object(kind, source_name)
        except K8sNotFoundError:
            raise SourceNotFoundError(kind.value, source_name)  # noqa: B904

        template = normalize(kind, source_name, source)

        envs = extract_environments(template)
        self.edit_environments(envs)
        if envs and self.prompter.confirm("Do you want to add additional env ?"):
            self.add_environments(envs)
        apply_environments(template, envs)

        if envs and self.prompter.confirm("Do you want to update the resources limits ?"):
            apply_resource_override(template, self.ask_resource_override(envs))

        descriptor = build_job(options.target_name, template, options.backoff_limit)

        try:
            job = self.k8s.create_job(descriptor.to_manifest(), dry_run=options.dry_run)
        except K8sError as e:
            raise SubmissionError(descriptor.name, str(e))  # noqa: B904

        result = DispatchResult(job_name=descriptor.name, dry_run=options.dry_run, job=job)
        if options.dry_run:
            result.rendered = render_for_inspection(job)
            emit_dry_run(descriptor.name, result.rendered, options.dry_run_output_path)

        return result

    def _ensure_name_available(self, job_name: str) -> None:
        if not self.k8s.job_exists(job_name):
            return

        if not self.prompter.confirm(
            f"A job named {job_name} already exists. Do you want to delete this job ?"
        ):
            raise JobAlreadyExistsError(job_name)

        self.k8s.delete_job(job_name)

    def _select_source(self, kind: ResourceKind) -> str:
        names = self.k8s.list_objects(kind)
        if not names:
            raise SourceNotFoundError(kind.value)
        return self.prompter.select(
            f"Select the {kind.value} that you want to use as a base of the job", names
        )

    def edit_environments(self, envs: list[ContainerEnvironment]) -> None:
        """Prompt for every literal env value, defaulting to the current one."""
        for env in envs:
            for key, variable in list(env.variables.items()):
                if isinstance(variable, ExternalReference):
                    self.prompter.info(f"Env for {key} comes from {variable.describe()} (kept)")
                    continue
                value = self.prompter.text(f"Env for {key} ({env.name})", default=variable.value)
                env.variables[key] = Literal(value)

    def add_environments(self, envs: list[ContainerEnvironment]) -> None:
        """Prompt for new ``KEY=VALUE`` variables on one container."""
        container = self.prompter.select(
            "Select the container to add the additional environment variable",
            [env.name for env in envs],
        )

        while True:
            answer = self.prompter.text(
                "Input the additional env separated with a =",
                validator=validate_env_assignment,
            )
            key, value = parse_env_assignment(answer)
            add_literal(envs, container, key, value)
            logger.debug("Additional env %s queued for container %s", key, container)

            if not self.prompter.confirm("Do you still want to add additional env ?"):
                return

    def ask_resource_override(self, envs: list[ContainerEnvironment]) -> ResourceOverride:
        """Prompt for the cpu and memory limits of one container."""
        container = self.prompter.select(
            "Select the container to update the resources limits",
            [env.name for env in envs],
        )
        memory = self.prompter.text("Set the memory limits", validator=number_validator("Memory"))
        memory_suffix = self.prompter.select("Select a memory format", list(MEMORY_SUFFIXES))
        cpu = self.prompter.text("Set the cpu limits", validator=number_validator("CPU"))

        return ResourceOverride(container=container, cpu=cpu, memory=f"{memory}{memory_suffix}")
