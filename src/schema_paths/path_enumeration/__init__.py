"""Path enumeration exports."""

from .path_enumerator import enumerate_paths, iter_paths

__all__ = ["enumerate_paths", "iter_paths"]
