"""
Reads the `default` value of a Python module and prints it as JSON.

Runs as a separate process so the importer can stay synchronous while the
module is free to do anything at import time, including running an event
loop. Usage:

    python -m sass_py_importer.transform.import_to_json /abs/path/to/module.py
"""
import asyncio
import contextlib
import importlib.machinery
import importlib.util
import inspect
import json
import os
import sys
import traceback

from sass_py_importer.transform.exit_codes import ExitCode

MODULE_NAME = "__sass_data__"

# Top-level code calling sys.exit() is a failed import too
MODULE_FAILURES = (Exception, SystemExit, KeyboardInterrupt)


def fail(exit_code, message):
    print(message, file=sys.stderr)
    sys.exit(exit_code)


def describe(error):
    """Single-line summary of an exception."""
    return traceback.format_exception_only(type(error), error)[-1].strip().replace("\n", " ")


def load_module(file_path):
    """Execute the file as a fresh module and return it."""
    # Siblings of the data module should be importable from it
    sys.path.insert(0, os.path.dirname(file_path))

    loader = importlib.machinery.SourceFileLoader(MODULE_NAME, file_path)
    spec = importlib.util.spec_from_file_location(MODULE_NAME, file_path, loader=loader)
    module = importlib.util.module_from_spec(spec)
    sys.modules[MODULE_NAME] = module
    loader.exec_module(module)
    return module


async def _resolve(awaitable):
    return await awaitable


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    file_path = argv[0] if argv else ""

    if not os.path.isabs(file_path):
        fail(ExitCode.INVALID_PATH, f"File path must be absolute: {file_path}")

    if not os.path.exists(file_path):
        fail(ExitCode.FILE_NOT_FOUND, f"File does not exist: {file_path}")

    # stdout is reserved for the JSON payload; anything the module prints goes to stderr
    with contextlib.redirect_stdout(sys.stderr):
        try:
            module = load_module(file_path)
        except MODULE_FAILURES as e:
            fail(ExitCode.IMPORT_FAILED, f"Could not import module: {file_path} ({describe(e)})")

        if not hasattr(module, "default"):
            fail(ExitCode.NO_DEFAULT_EXPORT, f"Imported module has no default export: {file_path}")

        data = module.default
        if inspect.isawaitable(data):
            try:
                data = asyncio.run(_resolve(data))
            except MODULE_FAILURES as e:
                fail(ExitCode.IMPORT_FAILED, f"Could not import module: {file_path} ({describe(e)})")

    try:
        serialized_data = json.dumps(data, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        fail(
            ExitCode.DATA_SERIALIZATION_FAILED,
            f"Imported module data could not be serialized: {file_path} ({describe(e)})",
        )

    sys.stdout.write(serialized_data)
    sys.stdout.flush()
    sys.exit(ExitCode.OK)


if __name__ == "__main__":
    main()
