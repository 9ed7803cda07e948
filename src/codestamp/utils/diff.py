"""Line diff rendering for out-of-date targets."""

import difflib
from typing import List, Tuple

from rich.text import Text

_LINE_STYLES = {
    '-': "red",
    '+': "green",
    ' ': "dim",
}

NO_NEWLINE_MARKER = "\\ No newline at end of file"


def _split_ending(line: str) -> Tuple[str, str]:
    body = line.splitlines()[0]
    return body, line[len(body):]


def _describe_ending(ending: str) -> str:
    if not ending:
        return NO_NEWLINE_MARKER
    return ending.encode("unicode_escape").decode("ascii")


def diff_lines(old: str, new: str) -> List[Tuple[str, str]]:
    """Compute a line diff between two texts.

    Lines are compared with their terminators, so a change that only touches
    line endings still shows up. When a removed and an added line have the
    same text, both are suffixed with their terminator (``\\n``, ``\\r\\n``)
    or with a no-newline marker.

    Returns:
        List[Tuple[str, str]]: ``(tag, line)`` pairs where tag is ``-`` for
        removed lines, ``+`` for added lines and a space for common lines.
    """
    entries = []
    for entry in difflib.ndiff(old.splitlines(keepends=True), new.splitlines(keepends=True)):
        tag = entry[0]
        if tag == '?':
            continue
        entries.append((tag, _split_ending(entry[2:])))

    removed = {body for tag, (body, _) in entries if tag == '-'}
    added = {body for tag, (body, _) in entries if tag == '+'}
    ending_only = removed & added

    result = []
    for tag, (body, ending) in entries:
        if tag != ' ' and body in ending_only:
            result.append((tag, f"{body} {_describe_ending(ending)}"))
        else:
            result.append((tag, body))
    return result


def render_diff(old: str, new: str) -> Text:
    """Render a coloured diff of ``old`` against ``new``."""
    text = Text()
    for tag, line in diff_lines(old, new):
        text.append(f"{tag} {line}\n", style=_LINE_STYLES[tag])
    return text
