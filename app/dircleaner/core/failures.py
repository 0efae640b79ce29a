"""Closed set of reasons a cleanup pipeline can fail.

Only structural problems with the requested root (an empty path or a
missing directory) are reported to the user. Every other reason means
"nothing matched the cleanup criteria this run" and maps to an empty
message.
"""

from enum import Enum


class FailureReason(str, Enum):
    """Reason a cleanup pipeline stopped.

    Attributes:
        PATH_NAME_CANNOT_BE_EMPTY: The root path was empty or whitespace.
        DIRECTORY_NOT_FOUND: The root path is not an existing directory.
        FILES_NOT_FOUND: No orphaned files were found (TV).
        NO_LEAF_NODES_FOUND: No leaf directories exist below the root.
        SUBDIRECTORIES_DO_NOT_EXIST: The root has no subdirectories.
        SUBDIRECTORIES_BELOW_THRESHOLD_DO_NOT_EXIST: No candidate folders (Movies/Music).
    """

    PATH_NAME_CANNOT_BE_EMPTY = "PathNameCannotBeEmpty"
    DIRECTORY_NOT_FOUND = "DirectoryNotFound"
    FILES_NOT_FOUND = "FilesNotFound"
    NO_LEAF_NODES_FOUND = "NoLeafNodesFound"
    SUBDIRECTORIES_DO_NOT_EXIST = "SubdirectoriesDoNotExist"
    SUBDIRECTORIES_BELOW_THRESHOLD_DO_NOT_EXIST = "SubdirectoriesBelowThresholdDoNotExist"


_VISIBLE_MESSAGES: dict[FailureReason, str] = {
    FailureReason.PATH_NAME_CANNOT_BE_EMPTY: "Path name cannot be empty",
    FailureReason.DIRECTORY_NOT_FOUND: "Directory not found",
}


def failure_message(reason: FailureReason) -> str:
    """Convert a failure reason to the message shown to the user.

    Args:
        reason: Failure reason produced by the pipeline.

    Returns:
        Human-readable message, or an empty string for "nothing to clean"
        outcomes that are not worth reporting.
    """
    return _VISIBLE_MESSAGES.get(reason, "")
