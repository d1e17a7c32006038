"""Core constants for waypath.

This module defines constants used throughout the library:
- Environment variable names read by the configuration layer
- Bounds for the auto-rename search
- Naming of auto-renamed candidates
"""

# ============================================================================
# Environment
# ============================================================================

#: Prefix shared by every environment variable waypath reads
ENV_PREFIX: str = "WAYPATH_"

#: Enables debug-level logging when set to 1/true/yes
ENV_DEBUG: str = f"{ENV_PREFIX}DEBUG"

#: Overrides the auto-rename attempt bound
ENV_MAX_RENAME_ATTEMPTS: str = f"{ENV_PREFIX}MAX_RENAME_ATTEMPTS"

#: Forces a platform family (windows, macos, posix) for directory naming
ENV_PLATFORM: str = f"{ENV_PREFIX}PLATFORM"

#: Template for per-folder base directory overrides, e.g. WAYPATH_DOWNLOADS_DIR
ENV_FOLDER_DIR_TEMPLATE: str = f"{ENV_PREFIX}{{kind}}_DIR"

#: Values accepted as "true" for boolean environment flags
TRUTHY_VALUES: tuple[str, ...] = ("1", "true", "yes")

# ============================================================================
# Auto-rename
# ============================================================================

#: Default upper bound on candidates tried by AutoRenameIfExists
DEFAULT_MAX_RENAME_ATTEMPTS: int = 10_000

#: First counter value inserted into a renamed candidate
RENAME_COUNTER_START: int = 1

#: Format of the counter inserted before the extension: "a.txt" -> "a (1).txt"
RENAME_SUFFIX_FORMAT: str = " ({counter})"
