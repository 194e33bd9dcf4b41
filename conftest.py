"""Pytest configuration for bakkutteh."""

# Prevent collection from source tree
collect_ignore = ["src"]


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies, fast)")
    config.addinivalue_line("markers", "integration: Integration tests (require K8s connectivity)")
