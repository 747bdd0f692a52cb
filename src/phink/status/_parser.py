"""Porcelain status parsing.

Parses the output of ``git status --porcelain=v1``. Each line is ``XY PATH``
or, for renames and copies, ``XY ORIG -> PATH``. X is the index state, Y the
working tree state. Paths with unusual characters are C-quoted by git.

The parser is lenient: blank, header and malformed lines are skipped rather
than raising, so new indicator letters from future git versions still
classify by the blank/non-blank rule.
"""

from typing import Final

from phink.status._models import ChangeSet, StatusEntry

_RENAME_SEPARATOR: Final = " -> "
_RENAME_CODES: Final = frozenset("RC")
_OCTAL_DIGITS: Final = frozenset("01234567")
_ESCAPES: Final = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    '"': 0x22,
    "\\": 0x5C,
}


def _read_quoted(text: str, start: int = 0) -> tuple[str, int] | None:
    """Read a C-quoted string starting at ``text[start]`` (the opening quote).

    Octal escapes are raw bytes, so the result is decoded as UTF-8 once the
    closing quote is found.

    Returns:
        Tuple of (unquoted value, index just past the closing quote), or None
        if the quoting is malformed.
    """
    buffer = bytearray()
    i = start + 1
    while i < len(text):
        char = text[i]
        if char == '"':
            return buffer.decode("utf-8", errors="replace"), i + 1
        if char != "\\":
            buffer.extend(char.encode("utf-8", errors="surrogatepass"))
            i += 1
            continue

        i += 1
        if i >= len(text):
            return None
        escape = text[i]
        if escape in _ESCAPES:
            buffer.append(_ESCAPES[escape])
            i += 1
        elif escape in _OCTAL_DIGITS:
            digits = text[i : i + 3]
            if len(digits) != 3 or not set(digits) <= _OCTAL_DIGITS:
                return None
            value = int(digits, 8)
            if value > 0xFF:
                return None
            buffer.append(value)
            i += 3
        else:
            return None
    return None


def unquote_path(raw: str) -> str | None:
    """Decode a path as printed by git.

    Args:
        raw: The path text, quoted or not.

    Returns:
        The decoded path, or None if quoting is malformed.

    Examples:
        >>> unquote_path("plain.txt")
        'plain.txt'
        >>> unquote_path('"with space\\\\t.txt"')
        'with space\\t.txt'
        >>> unquote_path('"caf\\\\303\\\\251.txt"')
        'café.txt'
    """
    if not raw.startswith('"'):
        return raw
    parsed = _read_quoted(raw)
    if parsed is None:
        return None
    value, end = parsed
    if end != len(raw):
        return None
    return value


def _split_rename(rest: str) -> tuple[str, str] | None:
    """Split ``ORIG -> PATH`` into its decoded halves."""
    if rest.startswith('"'):
        parsed = _read_quoted(rest)
        if parsed is None:
            return None
        original, end = parsed
        remainder = rest[end:]
        if not remainder.startswith(_RENAME_SEPARATOR):
            return None
        target = unquote_path(remainder[len(_RENAME_SEPARATOR) :])
    else:
        original, separator, target_raw = rest.partition(_RENAME_SEPARATOR)
        if not separator:
            return None
        target = unquote_path(target_raw)

    if target is None or not original or not target:
        return None
    return original, target


def parse_status_line(line: str) -> StatusEntry | None:
    """Parse one line of porcelain v1 status output.

    Args:
        line: A single status line, with or without its line terminator.

    Returns:
        The parsed entry, or None for blank, header or malformed lines.

    Examples:
        >>> parse_status_line("?? notes.txt")
        StatusEntry(index='?', worktree='?', path='notes.txt', original_path=None)
        >>> parse_status_line("R  old.py -> new.py").path
        'new.py'
        >>> parse_status_line("garbage") is None
        True
    """
    line = line.rstrip("\r\n")
    if len(line) < 4 or line[2] != " " or line.startswith("#"):
        return None

    index, worktree, rest = line[0], line[1], line[3:]

    original: str | None = None
    if index in _RENAME_CODES or worktree in _RENAME_CODES:
        split = _split_rename(rest)
        if split is None:
            return None
        original, path = split
    else:
        decoded = unquote_path(rest)
        if not decoded:
            return None
        path = decoded

    return StatusEntry(index=index, worktree=worktree, path=path, original_path=original)


def parse_porcelain(text: str) -> ChangeSet:
    """Parse porcelain v1 status output into a change-set.

    Args:
        text: Complete ``git status --porcelain=v1`` output.

    Returns:
        ChangeSet with sorted, de-duplicated staged and unstaged paths.

    Example:
        >>> changes = parse_porcelain("A  b.txt\\n?? a.txt\\nMM c.txt\\n")
        >>> changes.staged
        ('b.txt', 'c.txt')
        >>> changes.unstaged
        ('a.txt', 'c.txt')
    """
    entries = tuple(
        entry
        for line in text.split("\n")
        if (entry := parse_status_line(line)) is not None
    )
    return ChangeSet.from_entries(entries)
