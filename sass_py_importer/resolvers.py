"""
Resolution of import specifiers to Python data modules.

Two strategies:
- filesystem: next to the importing stylesheet, then the include paths
- callback: filesystem fast path, then an external error-first resolver
  (e.g. a bundler's own resolution algorithm)

Nothing is cached; every import is resolved on its own.
"""
import asyncio
import os

from sass_py_importer.errors import ResolutionNotFoundError
from sass_py_importer.log import debug_log

MODULE_EXTENSIONS = ('.py', '.pyw')


def is_data_module(specifier):
    """Check if the specifier points to a Python file."""
    return specifier.endswith(MODULE_EXTENSIONS)


def _existing_module(path):
    path = os.path.abspath(path)
    if is_data_module(path) and os.path.isfile(path):
        return path
    return None


def fs_resolver(specifier, previous):
    """
    Resolve a specifier relative to the directory of the importing file.

    Returns:
        Absolute path of an existing data module, or None
    """
    return _existing_module(os.path.join(os.path.dirname(previous), specifier))


def included_paths_resolver(specifier, include_paths):
    """
    Resolve a specifier against each include path in order.

    Returns:
        Absolute path of the first existing match, or None if there are no
        include paths at all

    Raises:
        ResolutionNotFoundError: If include paths are given but none matches
    """
    if not include_paths:
        return None

    for include_path in include_paths:
        found = _existing_module(os.path.join(include_path, specifier))
        if found is not None:
            return found

    raise ResolutionNotFoundError(
        f'Unable to find "{specifier}" from the following path(s): '
        f'{", ".join(include_paths)}. Check include paths.'
    )


def create_fs_resolver(include_paths=()):
    """Filesystem strategy: next to the importing file, then the include paths."""
    include_paths = tuple(include_paths)

    def resolve(specifier, previous):
        found = fs_resolver(specifier, previous)
        if found is not None:
            return found
        debug_log(f"{specifier} not found next to {previous}, trying include paths")
        return included_paths_resolver(specifier, include_paths)

    return resolve


def _settle(future, error, result):
    # The external resolver may call back more than once; the first call wins
    if future.done():
        return
    if error:
        future.set_exception(error if isinstance(error, BaseException) else Exception(str(error)))
    else:
        future.set_result(result or None)


def create_callback_resolver(resolve_request):
    """
    Callback strategy: filesystem fast path, then an external resolver.

    Args:
        resolve_request: Callable (previous, specifier, callback) that calls
            callback(error, result) once, from any thread

    Returns:
        An async resolver (specifier, previous) -> absolute path or None
    """
    async def resolve(specifier, previous):
        found = fs_resolver(specifier, previous)
        if found is not None:
            return found

        debug_log(f"{specifier} not found next to {previous}, asking external resolver")
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def callback(error, result=None):
            loop.call_soon_threadsafe(_settle, future, error, result)

        resolve_request(previous, specifier, callback)
        return await future

    return resolve


def select_resolver(options):
    """Pick the resolution strategy configured in ImporterOptions."""
    if options.resolve_request is not None:
        return create_callback_resolver(options.resolve_request)
    return create_fs_resolver(options.include_paths)
