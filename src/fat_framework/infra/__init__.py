"""Infrastructure layer — filesystem and subprocess integration.

This layer wraps all interaction with DerivedData, ``lipo``,
``plistlib`` and the filesystem.  Every raw ``OSError`` or parser
exception must be caught here and re-raised as a
:class:`~fat_framework.exceptions.FatFrameworkError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering); diagnostics
  go through :mod:`logging`.
"""

from fat_framework.infra.derived_data import (
    derived_data_root,
    find_project_build_dir,
    resolve_build_locations,
)
from fat_framework.infra.lipo_tool import LipoMerger, LipoStatus, detect_lipo
from fat_framework.infra.plist_store import PlistStore, load_plist, save_plist
from fat_framework.infra.tree_copier import FileTreeCopier, copy_tree

__all__: list[str] = [
    "FileTreeCopier",
    "LipoMerger",
    "LipoStatus",
    "PlistStore",
    "copy_tree",
    "derived_data_root",
    "detect_lipo",
    "find_project_build_dir",
    "load_plist",
    "resolve_build_locations",
    "save_plist",
]
