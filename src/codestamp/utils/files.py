"""Dependency file discovery for codestamp."""

import glob
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union


@dataclass
class FileItem:
    """A dependency file resolved from a glob."""
    absolute_file_path: str
    relative_file_path: str
    content: str


def glob_to_item_list(patterns: Union[str, List[str]], cwd: Union[str, Path]) -> List[FileItem]:
    """Expand file paths and globs into file items, sorted by absolute path.

    Args:
        patterns: A single path/glob or a list of them. ``**`` matches any
            number of directories.
        cwd: Directory that relative patterns are resolved against.

    Returns:
        List[FileItem]: Matched files with their UTF-8 content. Directories are
        skipped; a file matched by several patterns appears once per match.
    """
    pattern_list = [patterns] if isinstance(patterns, str) else list(patterns)
    base_dir = os.path.abspath(cwd)

    items: List[FileItem] = []
    for pattern in pattern_list:
        for match in glob.glob(pattern, root_dir=base_dir, recursive=True):
            absolute_file_path = os.path.normpath(os.path.join(base_dir, match))
            if not os.path.isfile(absolute_file_path):
                continue

            with open(absolute_file_path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()

            items.append(FileItem(
                absolute_file_path=absolute_file_path,
                relative_file_path=os.path.relpath(absolute_file_path, base_dir),
                content=content,
            ))

    # Sort by absolute path for a stable hash input
    return sorted(items, key=lambda item: item.absolute_file_path)
