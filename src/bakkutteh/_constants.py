"""Shared constants for bakkutteh."""

# Suffix appended to the target name to form the manual Job name.
MANUAL_JOB_SUFFIX = "-manual"

# Labels injected by the Job controller. Stripped from dry-run output so that
# a freshly built Job and a server-echoed one render identically.
BATCH_CONTROLLER_UID_LABEL = "batch.kubernetes.io/controller-uid"
CONTROLLER_UID_LABEL = "controller-uid"
CONTROLLER_UID_LABELS = (BATCH_CONTROLLER_UID_LABEL, CONTROLLER_UID_LABEL)

# Pods derived from a Deployment must not be restarted like a Deployment's are.
JOB_RESTART_POLICY = "Never"

# Binary-SI suffixes offered for memory limits.
MEMORY_SUFFIXES = ("Ki", "Mi", "Gi", "Ti", "Pi", "Ei")

# Separator for additional env input (KEY=VALUE).
ENV_ASSIGNMENT_OPERATOR = "="

# Quote characters stripped from additional env values.
ENV_QUOTE_CHARS = ("\"", "'")

DEFAULT_NAMESPACE = "default"
DEFAULT_BACKOFF_LIMIT = 3

# Default config file name for auto-discovery
DEFAULT_CONFIG = "bakkutteh.yaml"
