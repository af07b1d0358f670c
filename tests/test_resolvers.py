"""
Unit tests for sass_py_importer/resolvers.py.
"""
import asyncio
import os
import sys
import threading

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from sass_py_importer.errors import ResolutionNotFoundError
from sass_py_importer.options import ImporterOptions
from sass_py_importer.resolvers import (
    create_callback_resolver,
    create_fs_resolver,
    fs_resolver,
    included_paths_resolver,
    is_data_module,
    select_resolver,
)


@pytest.fixture
def project(tmp_path):
    """A stylesheet next to a data module, plus two include path roots."""
    (tmp_path / "styles").mkdir()
    (tmp_path / "styles" / "style.scss").write_text('@import "variables.py";')
    (tmp_path / "styles" / "variables.py").write_text('default = {}')
    (tmp_path / "styles" / "notes.txt").write_text('')
    for root in ("first", "second"):
        (tmp_path / root).mkdir()
    (tmp_path / "second" / "shared.py").write_text('default = {}')
    return tmp_path


class TestIsDataModule:

    def test_python_extensions(self):
        """.py and .pyw should count as data modules."""
        assert is_data_module("variables.py")
        assert is_data_module("../lib/variables.pyw")

    def test_other_extensions(self):
        """Other extensions should not count."""
        assert not is_data_module("variables")
        assert not is_data_module("style.scss")
        assert not is_data_module("variables.pyc")
        assert not is_data_module("variables.py.scss")


class TestFsResolver:
    """Tests for resolution relative to the importing file."""

    def test_finds_sibling(self, project):
        """A module next to the stylesheet should resolve."""
        previous = str(project / "styles" / "style.scss")
        assert fs_resolver("variables.py", previous) == str(project / "styles" / "variables.py")

    def test_resolves_parent_directories(self, project):
        """Relative parent paths should resolve."""
        previous = str(project / "styles" / "style.scss")
        assert fs_resolver("../second/shared.py", previous) == str(project / "second" / "shared.py")

    def test_missing_file(self, project):
        """A missing file should return None."""
        assert fs_resolver("missing.py", str(project / "styles" / "style.scss")) is None

    def test_existing_file_with_other_extension(self, project):
        """Non-Python files should not resolve."""
        assert fs_resolver("notes.txt", str(project / "styles" / "style.scss")) is None

    def test_directory_is_not_a_module(self, project):
        """A directory named like a module should not resolve."""
        (project / "styles" / "pkg.py").mkdir()
        assert fs_resolver("pkg.py", str(project / "styles" / "style.scss")) is None


class TestIncludedPathsResolver:
    """Tests for the include path fallback."""

    def test_first_match_wins(self, project):
        """The first root holding the module should win."""
        (project / "first" / "shared.py").write_text('default = {}')
        roots = [str(project / "first"), str(project / "second")]
        assert included_paths_resolver("shared.py", roots) == str(project / "first" / "shared.py")

    def test_later_root(self, project):
        """Later roots should be searched too."""
        roots = [str(project / "first"), str(project / "second")]
        assert included_paths_resolver("shared.py", roots) == str(project / "second" / "shared.py")

    def test_not_found_lists_roots(self, project):
        """The not-found error should list the searched roots."""
        roots = [str(project / "first"), "./some/other/path/"]
        with pytest.raises(ResolutionNotFoundError) as excinfo:
            included_paths_resolver("shared.py", roots)
        assert str(excinfo.value) == (
            f'ResolutionNotFound: Unable to find "shared.py" from the following path(s): '
            f'{project / "first"}, ./some/other/path/. Check include paths.'
        )

    def test_no_include_paths(self):
        """Without roots nothing should resolve."""
        assert included_paths_resolver("shared.py", []) is None


class TestFsStrategy:
    """Tests for the combined filesystem strategy."""

    def test_prefers_sibling(self, project):
        """A sibling should beat an include path."""
        (project / "first" / "variables.py").write_text('default = {}')
        resolve = create_fs_resolver([str(project / "first")])
        previous = str(project / "styles" / "style.scss")
        assert resolve("variables.py", previous) == str(project / "styles" / "variables.py")

    def test_falls_back_to_include_paths(self, project):
        """Include paths should be tried after the sibling."""
        resolve = create_fs_resolver([str(project / "first"), str(project / "second")])
        previous = str(project / "styles" / "style.scss")
        assert resolve("shared.py", previous) == str(project / "second" / "shared.py")

    def test_miss_without_include_paths(self, project):
        """A miss without include paths should return None."""
        resolve = create_fs_resolver()
        assert resolve("shared.py", str(project / "styles" / "style.scss")) is None


class TestCallbackStrategy:
    """Tests for delegation to an external error-first resolver."""

    def test_filesystem_fast_path(self, project):
        """The external resolver should not be asked for siblings."""
        calls = []
        resolve = create_callback_resolver(lambda *args: calls.append(args))
        previous = str(project / "styles" / "style.scss")

        result = asyncio.run(resolve("variables.py", previous))

        assert result == str(project / "styles" / "variables.py")
        assert calls == []

    def test_delegates_misses(self, project):
        """Misses should be delegated to the external resolver."""
        target = str(project / "second" / "shared.py")
        calls = []

        def resolve_request(previous, specifier, callback):
            calls.append((previous, specifier))
            callback(None, target)

        resolve = create_callback_resolver(resolve_request)
        previous = str(project / "styles" / "style.scss")

        assert asyncio.run(resolve("~shared.py", previous)) == target
        assert calls == [(previous, "~shared.py")]

    def test_callback_from_another_thread(self, project):
        """The callback should work from another thread."""
        target = str(project / "second" / "shared.py")

        def resolve_request(previous, specifier, callback):
            threading.Timer(0.05, callback, args=(None, target)).start()

        resolve = create_callback_resolver(resolve_request)
        assert asyncio.run(resolve("~shared.py", str(project / "styles" / "style.scss"))) == target

    def test_callback_error(self, project):
        """A callback error should be raised."""
        def resolve_request(previous, specifier, callback):
            callback(LookupError("Can't resolve '~shared.py'"), None)

        resolve = create_callback_resolver(resolve_request)
        with pytest.raises(LookupError, match="Can't resolve"):
            asyncio.run(resolve("~shared.py", str(project / "styles" / "style.scss")))

    def test_only_first_callback_counts(self, project):
        """Only the first callback invocation should count."""
        def resolve_request(previous, specifier, callback):
            callback(None, "/first.py")
            callback(None, "/second.py")

        resolve = create_callback_resolver(resolve_request)
        assert asyncio.run(resolve("~shared.py", str(project / "styles" / "style.scss"))) == "/first.py"

    def test_empty_result_means_not_found(self, project):
        """An empty result should mean not found."""
        resolve = create_callback_resolver(lambda previous, specifier, callback: callback(None, ""))
        assert asyncio.run(resolve("~shared.py", str(project / "styles" / "style.scss"))) is None


class TestSelectResolver:

    def test_filesystem_by_default(self, project):
        """The filesystem strategy should be the default."""
        resolve = select_resolver(ImporterOptions(include_paths=[str(project / "second")]))
        assert resolve("shared.py", str(project / "styles" / "style.scss")) == str(project / "second" / "shared.py")

    def test_callback_when_configured(self, project):
        """A resolve_request should select the callback strategy."""
        resolve = select_resolver(ImporterOptions(
            resolve_request=lambda previous, specifier, callback: callback(None, None),
        ))
        assert asyncio.run(resolve("shared.py", str(project / "styles" / "style.scss"))) is None
