"""Pydantic model for bakkutteh defaults."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bakkutteh._constants import DEFAULT_BACKOFF_LIMIT, DEFAULT_NAMESPACE


class DispatchConfig(BaseModel):
    """Defaults for ``bakkutteh dispatch``.

    Every field can be overridden from the command line.
    """

    model_config = ConfigDict(extra="forbid")

    namespace: str = Field(default=DEFAULT_NAMESPACE, description="Namespace of source and job")
    backoff_limit: int = Field(
        default=DEFAULT_BACKOFF_LIMIT, ge=0, description="Retries before the job is failed"
    )
    dry_run: bool = Field(default=False, description="Submit with server-side dry run")
    deployment: bool = Field(default=False, description="Use a Deployment as the source")
    dry_run_output_path: Path | None = Field(
        default=None, description="File receiving the dry-run manifest"
    )
    context: str = Field(default="", description="Kubernetes context (empty = current)")

    @field_validator("namespace")
    @classmethod
    def namespace_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("namespace cannot be empty")
        return v.strip()
