"""Discovery layer for local workspaces.

Functions over two different graphs of the same projects:
- Physical directory tree (current project, workspace root, local parent)
- Declared module tree (module expansion)
"""

from reactorscan.application.discovery.locate import locate_project_dir
from reactorscan.application.discovery.modules import expand_modules
from reactorscan.application.discovery.parents import (
    explicit_parent_dir,
    parent_candidate_dir,
    resolve_parent_dir,
)
from reactorscan.application.discovery.root import find_root_candidate

__all__ = [
    "expand_modules",
    "explicit_parent_dir",
    "find_root_candidate",
    "locate_project_dir",
    "parent_candidate_dir",
    "resolve_parent_dir",
]
