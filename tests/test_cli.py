"""Tests for the command-line interface."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from markdown_extract.cli import main

DOCUMENT = "# Intro\ntext\n# Setup\nstep1\n## Details\nmore\n# Setup again\nstep2\n"


@pytest.fixture
def doc_path(tmp_path: Path) -> Path:
    """Write the sample document to a temporary README."""
    path = tmp_path / "README.md"
    path.write_text(DOCUMENT, encoding="utf-8")
    return path


class TestMain:
    """Tests for main function."""

    def test_prints_first_match(self, doc_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Should print only the first matching section."""
        assert main(["setup", str(doc_path)]) == 0

        assert capsys.readouterr().out == "# Setup\nstep1\n## Details\nmore\n"

    def test_prints_all_matches(self, doc_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Should print every matching section with --all."""
        assert main(["--all", "setup", str(doc_path)]) == 0

        out = capsys.readouterr().out
        assert out.endswith("# Setup again\nstep2\n")
        assert out.count("# Setup") == 2

    def test_omits_matched_heading(self, doc_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Should drop the heading line with -n."""
        assert main(["-n", "^setup$", str(doc_path)]) == 0

        assert capsys.readouterr().out == "step1\n## Details\nmore\n"

    def test_case_sensitive_no_match(self, doc_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Should exit 1 with a no-match error."""
        assert main(["-s", "setup", str(doc_path)]) == 1

        assert capsys.readouterr().err.strip() == "Error: No matches found"

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Should read the document from stdin with --stdin."""
        stdin = io.TextIOWrapper(io.BytesIO(DOCUMENT.encode("utf-8")), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)

        assert main(["--stdin", "intro"]) == 0

        assert capsys.readouterr().out == "# Intro\ntext\n"

    def test_stdin_keeps_lone_carriage_return(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Should split stdin lines on newlines only."""
        stdin = io.TextIOWrapper(io.BytesIO(b"# Setup\rbody\n# Other\n"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)

        assert main(["--stdin", "setup"]) == 0

        assert capsys.readouterr().out == "# Setup\rbody\n"

    def test_invalid_pattern(self, doc_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Should exit 1 for a malformed pattern."""
        assert main(["(", str(doc_path)]) == 1

        assert capsys.readouterr().err.startswith("Error: Invalid pattern")

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Should exit 1 when the file cannot be opened."""
        assert main(["x", str(tmp_path / "nope.md")]) == 1

        assert "Cannot open" in capsys.readouterr().err

    def test_requires_path_or_stdin(self) -> None:
        """Should exit 2 without a path or --stdin."""
        with pytest.raises(SystemExit) as excinfo:
            main(["pattern"])

        assert excinfo.value.code == 2

    def test_rejects_path_and_stdin(self, doc_path: Path) -> None:
        """Should exit 2 with both a path and --stdin."""
        with pytest.raises(SystemExit) as excinfo:
            main(["--stdin", "pattern", str(doc_path)])

        assert excinfo.value.code == 2

