"""Kubernetes client module for bakkutteh."""

from .client import (
    K8sClient,
    K8sConnectionError,
    K8sError,
    K8sNotFoundError,
    K8sResourceError,
    get_k8s_client,
)

__all__ = [
    # Client
    "K8sClient",
    "get_k8s_client",
    # Errors
    "K8sError",
    "K8sConnectionError",
    "K8sResourceError",
    "K8sNotFoundError",
]
