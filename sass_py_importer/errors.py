"""
Error handling for the Python data importer.

Every failure is reported to the host compiler as one of the exceptions
below. They are terminal: nothing here retries, the host decides whether
to try another importer or abort the compile.
"""
from enum import Enum

from sass_py_importer.transform.exit_codes import ExitCode, to_exit_code


class ErrorKind(str, Enum):
    """Categorizes import failures."""
    INVALID_PATH = "InvalidPath"
    FILE_NOT_FOUND = "FileNotFound"
    IMPORT_FAILED = "ImportFailed"
    NO_DEFAULT_EXPORT = "NoDefaultExport"
    DATA_SERIALIZATION_FAILED = "DataSerializationFailed"
    DATA_PARSING_FAILED = "DataParsingFailed"
    INVALID_DATA = "InvalidData"
    RESOLUTION_NOT_FOUND = "ResolutionNotFound"
    TIMEOUT = "Timeout"
    UNKNOWN = "Unknown"


class ImporterError(Exception):
    """Base class for importer failures, carrying a kind and a diagnostic."""
    kind = ErrorKind.UNKNOWN
    default_message = "Unknown error while importing Python module"

    def __init__(self, diagnostic=None):
        if diagnostic is not None:
            diagnostic = diagnostic.strip()
        self.diagnostic = diagnostic or self.default_message
        super().__init__(self._format_error())

    def _format_error(self):
        return f"{self.kind.value}: {self.diagnostic}"


class InvalidPathError(ImporterError):
    kind = ErrorKind.INVALID_PATH
    default_message = "File path must be absolute"


class ModuleFileNotFoundError(ImporterError):
    kind = ErrorKind.FILE_NOT_FOUND
    default_message = "File does not exist"


class ImportFailedError(ImporterError):
    kind = ErrorKind.IMPORT_FAILED
    default_message = "Could not import module"


class NoDefaultExportError(ImporterError):
    kind = ErrorKind.NO_DEFAULT_EXPORT
    default_message = "Imported module has no default export"


class DataSerializationFailedError(ImporterError):
    kind = ErrorKind.DATA_SERIALIZATION_FAILED
    default_message = "Imported module data could not be serialized"


class DataParsingFailedError(ImporterError):
    kind = ErrorKind.DATA_PARSING_FAILED
    default_message = "Failed to parse JSON data"


class InvalidDataError(ImporterError):
    kind = ErrorKind.INVALID_DATA
    default_message = "Data is not an object"


class ResolutionNotFoundError(ImporterError):
    kind = ErrorKind.RESOLUTION_NOT_FOUND
    default_message = "Unable to find module in any include path"


class TransformTimeoutError(ImporterError):
    kind = ErrorKind.TIMEOUT
    default_message = "Timed out while importing module"


class UnknownImporterError(ImporterError):
    kind = ErrorKind.UNKNOWN


ERRORS_BY_EXIT_CODE = {
    ExitCode.INVALID_PATH: InvalidPathError,
    ExitCode.FILE_NOT_FOUND: ModuleFileNotFoundError,
    ExitCode.IMPORT_FAILED: ImportFailedError,
    ExitCode.NO_DEFAULT_EXPORT: NoDefaultExportError,
    ExitCode.DATA_SERIALIZATION_FAILED: DataSerializationFailedError,
}


def error_for_exit_code(status, diagnostic=None):
    """
    Build the error matching a subprocess exit status.

    Args:
        status: Raw process return code (may be None or negative)
        diagnostic: Captured stderr of the subprocess

    Returns:
        An ImporterError instance. Statuses outside the ExitCode table,
        and ExitCode.OK itself, yield UnknownImporterError.
    """
    error_class = ERRORS_BY_EXIT_CODE.get(to_exit_code(status), UnknownImporterError)
    return error_class(diagnostic)
