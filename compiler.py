import os

import sass

from sass_py_importer import ImporterOptions, create_legacy_importer
from sass_py_importer.log import debug_log, set_verbose

__all__ = ['compile_file', 'compile_string', 'libsass_importer', 'set_verbose']


def libsass_importer(legacy_importer):
    """
    Adapt a single-call importer to libsass' importer protocol.

    libsass calls importer(path, prev) and expects None (not ours) or a list
    of (filename, contents) tuples; failures must be raised.
    """
    def importer(path, prev):
        result = legacy_importer(path, prev)
        if isinstance(result, Exception):
            raise result
        if result is None:
            return None
        debug_log(f"Imported {path} from {result.file}")
        return [(result.file, result.contents)]

    return importer


def _compile_options(include_paths, timeout, output_style):
    options = ImporterOptions(include_paths=include_paths, timeout=timeout)
    return {
        "include_paths": list(options.include_paths),
        "importers": [(0, libsass_importer(create_legacy_importer(options)))],
        "output_style": output_style,
    }


def compile_file(filepath, include_paths=(), timeout=None, output_style="nested"):
    """
    Compile a stylesheet file with Python data modules importable.

    Args:
        filepath: Path to the .scss file
        include_paths: Extra search roots (sequence or os.pathsep-joined string)
        timeout: Seconds allowed per data module import, None for no limit
        output_style: libsass output style

    Returns:
        The compiled CSS
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Stylesheet not found: {filepath}")
    debug_log(f"Compiling {filepath}")
    return sass.compile(filename=filepath, **_compile_options(include_paths, timeout, output_style))


def compile_string(source_code, include_paths=(), timeout=None, output_style="nested"):
    """Compile SCSS source; relative data module imports resolve from the cwd."""
    return sass.compile(string=source_code, **_compile_options(include_paths, timeout, output_style))
