# Sass importer for Python data modules
"""
Lets Sass stylesheets import variables from Python modules:

    // style.scss
    @import "variables.py";

    # variables.py
    default = {"primary": "#c33", "breakpoints": {"sm": "576px"}}

Modules:
- importer: the two-phase and single-call Sass importers
- resolvers: specifier resolution (filesystem, include paths, external callback)
- serializer: JSON-compatible data to SCSS literals
- grammar: Lark grammar deciding which strings can stay unquoted
- transform: the module-load subprocess and its runner
- errors: error kinds reported to the host compiler
- options: importer configuration and result models
"""

from .errors import ErrorKind, ImporterError
from .options import CanonicalizeContext, ImporterOptions, ImporterResult, LegacyImporterResult
from .importer import (
    DataImporter,
    LegacyDataImporter,
    create_callback_importer,
    create_callback_legacy_importer,
    create_importer,
    create_legacy_importer,
    data_importer,
    legacy_data_importer,
)
from .serializer import to_scss_value, to_scss_variables

__all__ = [
    'ErrorKind',
    'ImporterError',
    'CanonicalizeContext',
    'ImporterOptions',
    'ImporterResult',
    'LegacyImporterResult',
    'DataImporter',
    'LegacyDataImporter',
    'create_callback_importer',
    'create_callback_legacy_importer',
    'create_importer',
    'create_legacy_importer',
    'data_importer',
    'legacy_data_importer',
    'to_scss_value',
    'to_scss_variables',
]
