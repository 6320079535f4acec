"""Git operations module.

Usage:
    from relval.git import Repository

    repo = Repository(Path("/path/to/clone"))
    lines = repo.log_oneline("v1.0", "HEAD")
"""

from relval.git.repository import GitError, Repository

__all__ = [
    "GitError",
    "Repository",
]
