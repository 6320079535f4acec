"""Services orchestrating git, the tracker and console output."""

from .validate import ReleaseValidationService, ValidationSummary
from .workspace import WorkspaceError, WorkspaceService, workspace_path

__all__ = [
    "ReleaseValidationService",
    "ValidationSummary",
    "WorkspaceError",
    "WorkspaceService",
    "workspace_path",
]
