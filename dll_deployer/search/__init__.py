from dll_deployer.search.locator import LibraryLocator, Validator
from dll_deployer.search.paths import SearchPaths, build_deep_dirs, build_shallow_dirs

__all__ = [
    "LibraryLocator",
    "SearchPaths",
    "Validator",
    "build_deep_dirs",
    "build_shallow_dirs",
]
