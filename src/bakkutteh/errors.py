"""Errors raised while deriving and dispatching a manual Job."""

from __future__ import annotations


class DispatchError(Exception):
    """Base exception for dispatch errors."""

    pass


class MissingTemplateError(DispatchError):
    """Raised when the source workload carries no usable template."""

    pass


class ContainerMismatchError(DispatchError):
    """Raised when edited environments no longer line up with the template."""

    def __init__(self, expected: str | None, got: str | None):
        self.expected = expected
        self.got = got
        super().__init__(
            f"Environment for container {got!r} does not match template container {expected!r}"
        )


class ContainerNotFoundError(DispatchError):
    """Raised when a targeted container is not part of the template."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Container {name!r} not found in the job template")


class SourceNotFoundError(DispatchError):
    """Raised when the source workload cannot be found."""

    def __init__(self, kind: str, name: str | None = None):
        self.kind = kind
        self.name = name
        if name:
            message = f"{kind} {name!r} not found"
        else:
            message = f"No {kind} found to use as a source"
        super().__init__(message)


class JobAlreadyExistsError(DispatchError):
    """Raised when the manual Job name is already taken and is kept."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Job {name!r} already exists in the cluster")


class UserCancelledError(DispatchError):
    """Raised when the user aborts an interactive prompt."""

    pass


class SubmissionError(DispatchError):
    """Raised when the cluster rejects the manual Job."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Unable to create job {name!r}: {reason}")
