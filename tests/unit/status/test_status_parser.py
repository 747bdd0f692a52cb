"""Unit tests for porcelain status parsing."""

import pytest

from phink.status import (
    ChangeSet,
    StatusEntry,
    parse_porcelain,
    parse_status_line,
    unquote_path,
)


class TestParseStatusLine:
    def test_untracked_file(self) -> None:
        entry = parse_status_line("?? notes.txt")
        assert entry == StatusEntry(index="?", worktree="?", path="notes.txt")
        assert entry.is_untracked is True
        assert entry.is_staged is False
        assert entry.is_unstaged is True

    def test_added_to_index(self) -> None:
        entry = parse_status_line("A  new.py")
        assert entry is not None
        assert entry.is_staged is True
        assert entry.is_unstaged is False

    def test_modified_in_worktree_only(self) -> None:
        entry = parse_status_line(" M app.py")
        assert entry is not None
        assert entry.is_staged is False
        assert entry.is_unstaged is True

    def test_modified_in_both(self) -> None:
        entry = parse_status_line("MM app.py")
        assert entry is not None
        assert entry.is_staged is True
        assert entry.is_unstaged is True

    def test_deleted_in_worktree(self) -> None:
        entry = parse_status_line(" D gone.txt")
        assert entry is not None
        assert entry.is_unstaged is True

    def test_strips_line_terminator(self) -> None:
        entry = parse_status_line("A  win.txt\r\n")
        assert entry is not None
        assert entry.path == "win.txt"

    def test_path_with_spaces_unquoted(self) -> None:
        entry = parse_status_line("?? my file.txt")
        assert entry is not None
        assert entry.path == "my file.txt"

    def test_path_in_subdirectory(self) -> None:
        entry = parse_status_line("A  src/pkg/mod.py")
        assert entry is not None
        assert entry.path == "src/pkg/mod.py"

    def test_rename_reports_destination(self) -> None:
        entry = parse_status_line("R  old.py -> new.py")
        assert entry is not None
        assert entry.path == "new.py"
        assert entry.original_path == "old.py"
        assert entry.is_staged is True

    def test_copy_reports_destination(self) -> None:
        entry = parse_status_line("C  base.py -> copy.py")
        assert entry is not None
        assert entry.path == "copy.py"
        assert entry.original_path == "base.py"

    def test_rename_with_quoted_paths(self) -> None:
        entry = parse_status_line('R  "old name.txt" -> "new\\tname.txt"')
        assert entry is not None
        assert entry.original_path == "old name.txt"
        assert entry.path == "new\tname.txt"

    def test_rename_without_separator_is_skipped(self) -> None:
        assert parse_status_line("R  only-one-path.py") is None

    @pytest.mark.parametrize("code", ["DD", "AU", "UD", "UA", "DU", "AA", "UU"])
    def test_unmerged_is_unstaged_only(self, code: str) -> None:
        entry = parse_status_line(f"{code} conflict.txt")
        assert entry is not None
        assert entry.is_unmerged is True
        assert entry.is_staged is False
        assert entry.is_unstaged is True

    def test_ignored_contributes_nothing(self) -> None:
        entry = parse_status_line("!! build/")
        assert entry is not None
        assert entry.is_ignored is True
        assert entry.is_staged is False
        assert entry.is_unstaged is False

    def test_unknown_indicator_classified_by_slot(self) -> None:
        entry = parse_status_line("Z  future.txt")
        assert entry is not None
        assert entry.is_staged is True
        assert entry.is_unstaged is False

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "A",
            "A  ",
            "garbage",
            "AM-file.txt",
            "## main...origin/main",
            '?? "unterminated',
            '?? "bad\\q escape"',
        ],
    )
    def test_malformed_lines_are_skipped(self, line: str) -> None:
        assert parse_status_line(line) is None


class TestUnquotePath:
    def test_plain_path_unchanged(self) -> None:
        assert unquote_path("plain.txt") == "plain.txt"

    def test_quoted_path_with_escapes(self) -> None:
        assert unquote_path('"a\\"b\\\\c"') == 'a"b\\c'

    def test_octal_escapes_decode_as_utf8(self) -> None:
        assert unquote_path('"caf\\303\\251.txt"') == "café.txt"

    def test_trailing_text_after_quote_is_rejected(self) -> None:
        assert unquote_path('"a.txt"b') is None

    def test_short_octal_is_rejected(self) -> None:
        assert unquote_path('"\\30"') is None


class TestParsePorcelain:
    def test_empty_output_is_clean(self) -> None:
        changes = parse_porcelain("")
        assert changes == ChangeSet()
        assert changes.is_clean is True

    def test_untracked_file_is_unstaged(self) -> None:
        changes = parse_porcelain("?? f.php\n")
        assert changes.staged == ()
        assert changes.unstaged == ("f.php",)
        assert changes.untracked == ("f.php",)

    def test_sorts_each_sequence(self) -> None:
        changes = parse_porcelain("A  zeta\nA  alpha\n?? omega\n?? beta\n")
        assert changes.staged == ("alpha", "zeta")
        assert changes.unstaged == ("beta", "omega")

    def test_path_in_both_sequences(self) -> None:
        changes = parse_porcelain("MM both.txt\n")
        assert changes.staged == ("both.txt",)
        assert changes.unstaged == ("both.txt",)

    def test_no_duplicates(self) -> None:
        changes = parse_porcelain("A  dup.txt\nA  dup.txt\n")
        assert changes.staged == ("dup.txt",)

    def test_skips_malformed_lines_between_valid_ones(self) -> None:
        changes = parse_porcelain("A  ok.txt\nnonsense\n\n?? new.txt\n")
        assert changes.staged == ("ok.txt",)
        assert changes.unstaged == ("new.txt",)
        assert len(changes.entries) == 2

    def test_entries_keep_git_order(self) -> None:
        changes = parse_porcelain("?? b\n?? a\n")
        assert [e.path for e in changes.entries] == ["b", "a"]

    def test_unmerged_listing(self) -> None:
        changes = parse_porcelain("UU merge.txt\nA  fine.txt\n")
        assert changes.unmerged == ("merge.txt",)
        assert changes.staged == ("fine.txt",)
        assert changes.unstaged == ("merge.txt",)

    def test_equality_ignores_entries(self) -> None:
        assert parse_porcelain("A  x\n") == ChangeSet(staged=("x",))
