"""Kubernetes client for bakkutteh."""

from __future__ import annotations

import logging
from typing import Any

from kubernetes import client, config
from kubernetes.client.rest import ApiException

from bakkutteh._constants import DEFAULT_NAMESPACE
from bakkutteh.spec.template import ResourceKind

logger = logging.getLogger(__name__)


class K8sError(Exception):
    """Base exception for Kubernetes errors."""

    pass


class K8sConnectionError(K8sError):
    """Raised when Kubernetes cluster is unreachable."""

    pass


class K8sResourceError(K8sError):
    """Raised when resource operations fail."""

    pass


class K8sNotFoundError(K8sResourceError):
    """Raised when a resource does not exist."""

    pass


class K8sClient:
    """Kubernetes client for manual job dispatch.

    This client wraps the official kubernetes-client. Objects are returned
    as API dictionaries (camelCase keys), the same shape as
    ``kubectl get -o yaml``.
    """

    def __init__(self, context: str = "", namespace: str = ""):
        """Initialize Kubernetes client."""
        self.context_name = context
        self._namespace = namespace

        try:
            if context:
                config.load_kube_config(context=context)
            else:
                # Try in-cluster config first, fall back to kubeconfig
                try:
                    config.load_incluster_config()
                except config.ConfigException:
                    config.load_kube_config()
        except Exception as e:
            raise K8sConnectionError(f"Failed to load Kubernetes config: {e}")  # noqa: B904

        self._api_client = client.ApiClient()
        self._apps_v1 = client.AppsV1Api(self._api_client)
        self._batch_v1 = client.BatchV1Api(self._api_client)

    @property
    def namespace(self) -> str:
        """Get the default namespace."""
        return self._namespace or DEFAULT_NAMESPACE

    def _to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert a kubernetes model into its API dictionary."""
        return self._api_client.sanitize_for_serialization(obj)

    def _reader(self, kind: ResourceKind):
        return {
            ResourceKind.CRONJOB: self._batch_v1.read_namespaced_cron_job,
            ResourceKind.DEPLOYMENT: self._apps_v1.read_namespaced_deployment,
            ResourceKind.JOB: self._batch_v1.read_namespaced_job,
        }[kind]

    def _lister(self, kind: ResourceKind):
        return {
            ResourceKind.CRONJOB: self._batch_v1.list_namespaced_cron_job,
            ResourceKind.DEPLOYMENT: self._apps_v1.list_namespaced_deployment,
        }[kind]

    def get_object(self, kind: ResourceKind | str, name: str) -> dict[str, Any]:
        """Get an object of the namespace.

        Args:
            kind: Resource kind
            name: Object name

        Returns:
            The object as an API dictionary

        Raises:
            K8sNotFoundError: If the object does not exist
            K8sResourceError: On any other API error
        """
        kind = ResourceKind(kind)
        try:
            obj = self._reader(kind)(name, self.namespace)
        except ApiException as e:
            if e.status == 404:
                raise K8sNotFoundError(  # noqa: B904
                    f"{kind.value} '{name}' not found in namespace '{self.namespace}'"
                )
            raise K8sResourceError(f"Error reading {kind.value} '{name}': {e.reason}")  # noqa: B904
        return self._to_dict(obj)

    def list_objects(self, kind: ResourceKind | str) -> list[str]:
        """List object names of a kind in the namespace."""
        kind = ResourceKind(kind)
        try:
            result = self._lister(kind)(self.namespace)
        except ApiException as e:
            raise K8sResourceError(f"Error listing {kind.value}: {e.reason}")  # noqa: B904
        return [item.metadata.name for item in result.items if item.metadata and item.metadata.name]

    def job_exists(self, name: str) -> bool:
        """Check if a Job exists."""
        try:
            self._reader(ResourceKind.JOB)(name, self.namespace)
            return True
        except ApiException as e:
            if e.status == 404:
                return False
            raise K8sResourceError(f"Error checking job: {e.reason}")  # noqa: B904

    def delete_job(self, name: str) -> None:
        """Delete a Job and its pods."""
        try:
            status = self._batch_v1.delete_namespaced_job(
                name,
                self.namespace,
                body=client.V1DeleteOptions(propagation_policy="Background"),
            )
        except ApiException as e:
            if e.status == 404:
                raise K8sNotFoundError(f"Job '{name}' not found")  # noqa: B904
            raise K8sResourceError(f"Unable to delete the job '{name}': {e.reason}")  # noqa: B904
        logger.info("Job %s deleted with status %s", name, getattr(status, "status", status))

    def create_job(self, manifest: dict[str, Any], dry_run: bool = False) -> dict[str, Any]:
        """Create a Job.

        Args:
            manifest: Job manifest as dict
            dry_run: Submit with server-side dry run (nothing is persisted)

        Returns:
            The Job as returned by the API server
        """
        name = manifest.get("metadata", {}).get("name", "")
        kwargs = {"dry_run": "All"} if dry_run else {}
        try:
            created = self._batch_v1.create_namespaced_job(self.namespace, manifest, **kwargs)
        except ApiException as e:
            if e.status == 409:
                raise K8sResourceError(f"Job '{name}' already exists")  # noqa: B904
            raise K8sResourceError(f"Failed to create job '{name}': {e.reason}")  # noqa: B904
        logger.info("Job %s submitted (dry_run=%s)", name, dry_run)
        return self._to_dict(created)


def get_k8s_client(context: str = "", namespace: str = "") -> K8sClient:
    """Get a Kubernetes client instance.

    Args:
        context: Kubernetes context name
        namespace: Default namespace

    Returns:
        Configured K8sClient
    """
    return K8sClient(context=context, namespace=namespace)
