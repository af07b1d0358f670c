"""
Exit codes shared by the module-load subprocess and the transform runner.

The exit code is the only channel for the outcome: stdout carries the JSON
payload on success, stderr a single diagnostic line on failure.
"""
from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    # 1 and 2 belong to the interpreter itself (uncaught exception, usage
    # error) and must stay unassigned.
    INVALID_PATH = 10
    FILE_NOT_FOUND = 11
    IMPORT_FAILED = 12
    NO_DEFAULT_EXPORT = 13
    DATA_SERIALIZATION_FAILED = 14


def to_exit_code(status):
    """Map a raw process status to an ExitCode, or None if it is not one of ours."""
    if status is None:
        return None
    try:
        return ExitCode(status)
    except ValueError:
        return None
