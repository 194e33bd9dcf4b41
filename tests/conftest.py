"""Shared fixtures for bakkutteh test suite."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any
from unittest.mock import MagicMock

import pytest

from bakkutteh.errors import UserCancelledError
from bakkutteh.spec import CanonicalTemplate, ResourceKind, normalize


def make_cronjob(containers: list[dict[str, Any]], name: str = "report") -> dict[str, Any]:
    """Create a CronJob API dictionary around the given containers."""
    return {
        "apiVersion": "batch/v1",
        "kind": "CronJob",
        "metadata": {"name": name, "namespace": "default"},
        "spec": {
            "schedule": "0 * * * *",
            "jobTemplate": {
                "metadata": {"labels": {"app": name}},
                "spec": {
                    "backoffLimit": 6,
                    "template": {
                        "metadata": {"labels": {"app": name}},
                        "spec": {
                            "containers": copy.deepcopy(containers),
                            "restartPolicy": "OnFailure",
                        },
                    },
                },
            },
        },
    }


def make_deployment(
    containers: list[dict[str, Any]], name: str = "api", restart_policy: str = "Always"
) -> dict[str, Any]:
    """Create a Deployment API dictionary around the given containers."""
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": name, "namespace": "default"},
        "spec": {
            "replicas": 2,
            "selector": {"matchLabels": {"app": name}},
            "template": {
                "metadata": {"labels": {"app": name}},
                "spec": {
                    "containers": copy.deepcopy(containers),
                    "restartPolicy": restart_policy,
                },
            },
        },
    }


def make_template(containers: list[dict[str, Any]]) -> CanonicalTemplate:
    """Create a canonical template from a CronJob with the given containers."""
    return normalize(ResourceKind.CRONJOB, "report", make_cronjob(containers))


MAIN_CONTAINER = {
    "name": "main",
    "image": "busybox",
    "env": [
        {"name": "MY_ENV_VAR", "value": "This is an environment variable"},
        {"name": "ANOTHER_ENV_VAR", "value": "Another variable value"},
    ],
}

SIDECAR_CONTAINER = {
    "name": "sidecar",
    "image": "alpine:3.17",
    "env": [
        {"name": "ADDITIONAL_VAR", "value": "additional-value"},
        {
            "name": "SPECIAL_LEVEL_KEY",
            "valueFrom": {"configMapKeyRef": {"name": "my-configmap", "key": "ENV_VAR_ONE"}},
        },
    ],
}


class ScriptedPrompter:
    """Prompter replaying scripted answers.

    ``texts`` and ``selects`` are consumed in order. ``None`` as a text answer
    keeps the prompt default. ``confirms`` maps message prefixes to answers;
    unmatched confirmations answer ``False``. A ``"cancel"`` text answer
    raises UserCancelledError.
    """

    def __init__(
        self,
        texts: Sequence[str | None] = (),
        selects: Sequence[str] = (),
        confirms: dict[str, Any] | None = None,
    ):
        self.texts = list(texts)
        self.selects = list(selects)
        self.confirms = confirms or {}
        self.asked: list[str] = []
        self.infos: list[str] = []

    def select(self, message: str, choices: Sequence[str]) -> str:
        self.asked.append(message)
        answer = self.selects.pop(0)
        assert answer in choices, f"{answer!r} not in {choices!r}"
        return answer

    def confirm(self, message: str, default: bool = False) -> bool:
        self.asked.append(message)
        for prefix, answer in self.confirms.items():
            if message.startswith(prefix):
                if isinstance(answer, list):
                    return answer.pop(0)
                return answer
        return False

    def text(self, message: str, default: str | None = None, validator=None) -> str:
        self.asked.append(message)
        answer = self.texts.pop(0) if self.texts else None
        if answer == "cancel":
            raise UserCancelledError("Operation cancelled")
        if answer is None:
            assert default is not None, f"no default for {message!r}"
            return default
        if validator is not None:
            assert validator(answer) is None, f"{answer!r} rejected by validator"
        return answer

    def info(self, message: str) -> None:
        self.infos.append(message)


@pytest.fixture
def cronjob() -> dict[str, Any]:
    """CronJob with a literal-only container and a container with a reference."""
    return make_cronjob([MAIN_CONTAINER, SIDECAR_CONTAINER])


@pytest.fixture
def template(cronjob) -> CanonicalTemplate:
    """Canonical template built from the ``cronjob`` fixture."""
    return normalize(ResourceKind.CRONJOB, "report", cronjob)


@pytest.fixture
def mock_k8s_client(cronjob):
    """Pre-configured mock K8sClient for unit tests."""
    client = MagicMock()
    client.namespace = "test-ns"
    client.job_exists.return_value = False
    client.list_objects.return_value = ["report"]
    client.get_object.return_value = cronjob
    client.create_job.side_effect = lambda manifest, dry_run=False: copy.deepcopy(manifest)
    return client
