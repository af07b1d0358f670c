"""
Sass importers for Python data modules.

Two host interfaces over the same resolve -> load pipeline:
- DataImporter: the two-phase canonicalize/load importer
- LegacyDataImporter: the single-call (url, prev, done) importer
"""
import asyncio
import inspect
import os
import threading
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from sass_py_importer.errors import ImporterError
from sass_py_importer.options import (
    CanonicalizeContext,
    ImporterOptions,
    ImporterResult,
    LegacyImporterResult,
)
from sass_py_importer.resolvers import create_fs_resolver, is_data_module, select_resolver
from sass_py_importer.transform.runner import run_transform


def path_to_url(absolute_path):
    if absolute_path is None:
        return None
    return Path(absolute_path).as_uri()


def url_to_path(file_url):
    parsed = urlparse(file_url)
    if parsed.scheme != "file":
        return file_url
    return url2pathname(parsed.path)


class DataImporter:
    """
    Two-phase importer: canonicalize a specifier, then load the canonical URL.

    canonicalize() mirrors the resolver: it returns the URL directly for a
    synchronous resolver and a coroutine for an asynchronous one.
    """

    def __init__(self, resolve, options=None):
        self.resolve = resolve
        self.options = options or ImporterOptions()

    def canonicalize(self, url, context):
        if not is_data_module(url):
            return None
        containing_url = getattr(context, "containing_url", None)
        if containing_url is None:
            return None

        absolute_path = self.resolve(url, url_to_path(containing_url))
        if inspect.isawaitable(absolute_path):
            return self._canonicalize_async(absolute_path)
        return path_to_url(absolute_path)

    async def _canonicalize_async(self, pending):
        return path_to_url(await pending)

    def load(self, canonical_url):
        contents = run_transform(url_to_path(canonical_url), self.options)
        return ImporterResult(contents=contents)


class LegacyDataImporter:
    """
    Single-call importer (url, prev, done=None) built on a DataImporter.

    With a synchronous resolver the result, None or the error is returned.
    With an asynchronous one nothing is returned and done() is called
    exactly once with the result, None or the error. Without a running
    event loop the completion runs on its own (non-daemon) thread.
    """

    def __init__(self, importer):
        self.importer = importer

    def __call__(self, url, prev, done=None):
        context = CanonicalizeContext(containing_url=path_to_url(os.path.abspath(prev)))
        try:
            canonical_url = self.importer.canonicalize(url, context)
        except ImporterError as error:
            return error

        if inspect.isawaitable(canonical_url):
            self._schedule(self._complete(canonical_url, done))
            return None
        return self._load(canonical_url)

    def _load(self, canonical_url):
        if canonical_url is None:
            return None
        try:
            result = self.importer.load(canonical_url)
        except ImporterError as error:
            return error
        return LegacyImporterResult(file=url_to_path(canonical_url), contents=result.contents)

    async def _complete(self, pending, done):
        try:
            canonical_url = await pending
        except Exception as error:
            outcome = error
        else:
            outcome = self._load(canonical_url)
        if done is not None:
            done(outcome)

    @staticmethod
    def _schedule(coroutine):
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Not a daemon: the interpreter waits for done() before exiting
            threading.Thread(target=asyncio.run, args=(coroutine,)).start()
            return
        task = loop.create_task(coroutine)
        _pending_tasks.add(task)
        task.add_done_callback(_pending_tasks.discard)


# Keeps scheduled legacy completions alive until they finish
_pending_tasks = set()


def create_importer(options=None):
    """Create a two-phase importer resolving with the strategy set in options."""
    options = options or ImporterOptions()
    return DataImporter(select_resolver(options), options)


def create_legacy_importer(options=None):
    """Create a single-call importer resolving with the strategy set in options."""
    return LegacyDataImporter(create_importer(options))


def create_callback_importer(resolve_request, options=None):
    """Two-phase importer delegating misses to an external error-first resolver."""
    options = options or ImporterOptions()
    return create_importer(options.model_copy(update={"resolve_request": resolve_request}))


def create_callback_legacy_importer(resolve_request, options=None):
    """Single-call importer delegating misses to an external error-first resolver."""
    return LegacyDataImporter(create_callback_importer(resolve_request, options))


# Ready-made importers resolving next to the importing stylesheet only
data_importer = DataImporter(create_fs_resolver())
legacy_data_importer = LegacyDataImporter(data_importer)
