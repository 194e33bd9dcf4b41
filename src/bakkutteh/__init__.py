"""Dispatch a manual Kubernetes Job from a CronJob or Deployment spec."""

__version__ = "0.2.3"
