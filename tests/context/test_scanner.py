"""Tests for Runnable discovery."""

from collections.abc import Callable
from pathlib import Path

import pytest
from structlog.testing import capture_logs

import subo.context.scanner as scanner
from subo.context.scanner import get_runnable_dirs
from subo.core.errors import ContextError, ErrorCode
from subo.release import SUBO_DOT_VERSION

MakeRunnable = Callable[..., Path]


class TestCwdIsRunnable:
    """Scanning from inside a Runnable directory."""

    def test_given_manifest_in_cwd_when_scanned_then_single_result(
        self, tmp_path: Path, make_runnable: MakeRunnable
    ) -> None:
        # Given
        make_runnable(tmp_path, name="root-fn", lang="rust")

        # When
        runnables, cwd_is_runnable = get_runnable_dirs(tmp_path)

        # Then
        assert cwd_is_runnable is True
        assert [r.name for r in runnables] == ["root-fn"]
        assert runnables[0].fullpath == tmp_path

    def test_given_runnable_cwd_with_nested_unit_when_scanned_then_nested_ignored(
        self, tmp_path: Path, make_runnable: MakeRunnable
    ) -> None:
        """A Runnable directory is a leaf: nested manifests are not read."""
        # Given
        make_runnable(tmp_path, name="root-fn", lang="rust")
        make_runnable(tmp_path / "nested", name="nested-fn", lang="tinygo")
        make_runnable(tmp_path / "broken", lang="cobol")

        # When
        runnables, cwd_is_runnable = get_runnable_dirs(tmp_path)

        # Then
        assert cwd_is_runnable is True
        assert len(runnables) == 1
        assert runnables[0].name == "root-fn"


class TestSubdirectoryScan:
    """Scanning a project directory."""

    def test_given_units_with_distinct_langs_when_scanned_then_all_found(
        self, tmp_path: Path, make_runnable: MakeRunnable
    ) -> None:
        # Given
        langs = {
            "as-fn": ("assemblyscript", "suborbital/builder-as"),
            "rs-fn": ("rust", "suborbital/builder-rs"),
            "swift-fn": ("swift", "suborbital/builder-swift"),
            "tinygo-fn": ("tinygo", "suborbital/builder-tinygo"),
        }
        for dirname, (lang, _) in langs.items():
            make_runnable(tmp_path / dirname, lang=lang)

        # When
        runnables, cwd_is_runnable = get_runnable_dirs(tmp_path)

        # Then
        assert cwd_is_runnable is False
        assert len(runnables) == len(langs)
        for r in runnables:
            assert r.build_image == f"{langs[r.name][1]}:v{SUBO_DOT_VERSION}"

    def test_given_units_when_scanned_then_name_order(
        self, tmp_path: Path, make_runnable: MakeRunnable
    ) -> None:
        for dirname in ("zeta", "alpha", "mid"):
            make_runnable(tmp_path / dirname, lang="rust")

        runnables, _ = get_runnable_dirs(tmp_path)

        assert [r.name for r in runnables] == ["alpha", "mid", "zeta"]

    def test_given_files_and_plain_dirs_when_scanned_then_excluded(
        self, tmp_path: Path, make_runnable: MakeRunnable
    ) -> None:
        """Top-level files and directories without manifests are ignored."""
        # Given
        make_runnable(tmp_path / "fn", lang="rust")
        (tmp_path / "docs").mkdir()
        (tmp_path / "docs" / "readme.md").write_text("# docs")
        (tmp_path / "Directive.yaml").write_text("identifier: com.acme.app\n")
        (tmp_path / "runnables.wasm.zip").write_bytes(b"PK")

        # When
        runnables, _ = get_runnable_dirs(tmp_path)

        # Then
        assert [r.name for r in runnables] == ["fn"]

    def test_given_empty_project_when_scanned_then_no_runnables(self, tmp_path: Path) -> None:
        assert get_runnable_dirs(tmp_path) == ([], False)

    def test_given_unreadable_subdir_when_scanned_then_skipped_with_warning(
        self,
        tmp_path: Path,
        make_runnable: MakeRunnable,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A subdirectory that can't be listed is skipped; siblings survive."""
        # Given
        make_runnable(tmp_path / "good", lang="rust")
        make_runnable(tmp_path / "locked", lang="rust")
        original = scanner._list_names

        def fake_list_names(path: Path) -> list[str]:
            if path.name == "locked":
                raise PermissionError(13, "Permission denied", str(path))
            return original(path)

        monkeypatch.setattr(scanner, "_list_names", fake_list_names)

        # When
        with capture_logs() as logs:
            runnables, cwd_is_runnable = get_runnable_dirs(tmp_path)

        # Then
        assert cwd_is_runnable is False
        assert [r.name for r in runnables] == ["good"]
        warnings = [e for e in logs if e["event"] == "scanner.dir_unreadable"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert warnings[0]["path"] == str(tmp_path / "locked")

    def test_given_sibling_with_invalid_lang_when_scanned_then_whole_scan_fails(
        self, tmp_path: Path, make_runnable: MakeRunnable
    ) -> None:
        """Fail-fast: one unbuildable Runnable aborts the scan, no partial result."""
        # Given
        make_runnable(tmp_path / "a-good", lang="rust")
        make_runnable(tmp_path / "b-bad", name="bad-fn", lang="fortran")
        make_runnable(tmp_path / "c-good", lang="swift")

        # When / Then
        with pytest.raises(ContextError) as exc_info:
            get_runnable_dirs(tmp_path)

        assert exc_info.value.code == ErrorCode.CONTEXT_UNSUPPORTED_LANG
        assert exc_info.value.details["name"] == "bad-fn"
        assert exc_info.value.details["lang"] == "fortran"

    def test_given_sibling_with_malformed_manifest_when_scanned_then_fails(
        self, tmp_path: Path, make_runnable: MakeRunnable
    ) -> None:
        make_runnable(tmp_path / "good", lang="rust")
        bad = tmp_path / "bad"
        bad.mkdir()
        (bad / ".runnable.yaml").write_text("lang: [rust\n")

        with pytest.raises(ContextError) as exc_info:
            get_runnable_dirs(tmp_path)

        assert exc_info.value.code == ErrorCode.CONTEXT_MANIFEST_PARSE

    def test_given_missing_cwd_when_scanned_then_fatal(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope"

        with pytest.raises(ContextError) as exc_info:
            get_runnable_dirs(missing)

        assert exc_info.value.code == ErrorCode.CONTEXT_DIRECTORY_UNREADABLE
        assert exc_info.value.details["path"] == str(missing)
