"""
Runs the module-load subprocess and turns its output into SCSS.
"""
import json
import os
import subprocess

from sass_py_importer.errors import (
    DataParsingFailedError,
    InvalidDataError,
    TransformTimeoutError,
    UnknownImporterError,
    error_for_exit_code,
)
from sass_py_importer.log import debug_log
from sass_py_importer.options import ImporterOptions
from sass_py_importer.serializer import to_scss_variables
from sass_py_importer.transform.exit_codes import ExitCode

TRANSFORM_MODULE = "sass_py_importer.transform.import_to_json"

# Directory holding the sass_py_importer package, so `-m` finds it no matter
# where the host compiler was started from.
WORKING_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def load_module_data(absolute_path, options=None):
    """
    Load the `default` value of a Python module in a separate process.

    Args:
        absolute_path: Absolute path of the data module
        options: ImporterOptions (interpreter and timeout)

    Returns:
        The decoded top-level mapping

    Raises:
        ImporterError: The subclass matching the failure
    """
    options = options or ImporterOptions()
    command = [options.python_executable, "-m", TRANSFORM_MODULE, absolute_path]
    debug_log(f"Loading {absolute_path}")

    try:
        result = subprocess.run(
            command,
            cwd=WORKING_DIR,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            env={**os.environ, "PYTHONIOENCODING": "utf-8"},
            timeout=options.timeout,
        )
    except subprocess.TimeoutExpired:
        raise TransformTimeoutError(
            f"Importing {absolute_path} did not finish within {options.timeout} seconds"
        )
    except OSError as e:
        raise UnknownImporterError(f"Could not start {options.python_executable}: {e}")

    debug_log(f"{TRANSFORM_MODULE} exited with {result.returncode}")
    if result.returncode != ExitCode.OK:
        raise error_for_exit_code(result.returncode, result.stderr)

    try:
        data = json.loads(result.stdout)
    except ValueError:
        raise DataParsingFailedError(f"Failed to parse JSON data: {result.stdout}")

    if not isinstance(data, dict):
        raise InvalidDataError("Data is not an object")

    return data


def run_transform(absolute_path, options=None):
    """Load a data module and return its contents as SCSS variable declarations."""
    return to_scss_variables(load_module_data(absolute_path, options))
