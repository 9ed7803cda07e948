"""Read a target file from disk, reconcile its stamp, and report or write back."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union

from .stamping import (
    ApplyStampResult,
    MultipleStampsError,
    StampNew,
    StampOk,
    StampPlacer,
    StampPlacerError,
    StampStatus,
    StampUpdate,
    apply_stamp,
)
from .utils.console import _rich_error, _rich_print, _rich_success
from .utils.diff import render_diff
from .utils.files import glob_to_item_list
from .utils.helpers import assert_never

FileTransformerForHashing = Callable[..., str]


@dataclass
class RunnerResult:
    """Result of running codestamp against a single file."""
    result: ApplyStampResult
    did_write: bool
    should_fatal_if_desired: bool

    @property
    def status(self) -> StampStatus:
        return self.result.status


def format_error(result: Union[MultipleStampsError, StampPlacerError]) -> str:
    """Render a stamping error for the console."""
    if isinstance(result, MultipleStampsError):
        stamps = ", ".join(json.dumps(stamp) for stamp in result.stamp_list)
        return f"CodeStamp: {result.error_description}\nStamps: {stamps}"
    if isinstance(result, StampPlacerError):
        return (
            f"CodeStamp: {result.error_description}\n"
            f"Placer: {json.dumps(result.placer, ensure_ascii=False)}\n"
            f"Placer return value: {json.dumps(result.placer_return_value, ensure_ascii=False, default=repr)}"
        )
    assert_never(result)


def runner(
    target_file_path: Union[str, Path],
    should_write: bool,
    dependency_glob_list: List[str],
    initial_stamp_placer: Optional[StampPlacer] = None,
    file_transformer_for_hashing: Optional[FileTransformerForHashing] = None,
    cwd: Optional[Union[str, Path]] = None,
    silent: bool = False,
) -> RunnerResult:
    """Read the target and its dependencies from disk and reconcile the stamp.

    - OK: the file is left alone.
    - NEW/UPDATE with ``should_write``: the file is rewritten in place.
    - NEW/UPDATE without ``should_write``: the diff is printed to stderr.
    - ERROR: the error is printed to stderr.

    Args:
        target_file_path: File to verify or stamp.
        should_write: Rewrite the file in place when the stamp is missing or stale.
        dependency_glob_list: Paths and/or globs whose contents feed the hash.
        initial_stamp_placer: See ``apply_stamp``.
        file_transformer_for_hashing: Callable ``(content, absolute_file_path)``
            applied to the target and every dependency before hashing.
        cwd: Directory globs are resolved against. Defaults to the process cwd.
        silent: Suppress all console output.

    Returns:
        RunnerResult: The reconciliation result plus write/exit hints.

    Raises:
        OSError: If the target file cannot be read or written.
        UnicodeDecodeError: If the target or a dependency is not UTF-8.
    """
    base_dir = Path(cwd) if cwd is not None else Path.cwd()
    target_path = Path(target_file_path)
    absolute_target_path = os.path.abspath(base_dir / target_path)

    with open(absolute_target_path, 'r', encoding='utf-8', newline='') as f:
        target_content = f.read()

    dependency_item_list = glob_to_item_list(dependency_glob_list, cwd=base_dir)

    content_transformer_for_hashing = None
    if file_transformer_for_hashing is not None:
        dependency_content_list = [
            file_transformer_for_hashing(item.content, item.absolute_file_path)
            for item in dependency_item_list
        ]

        def content_transformer_for_hashing(content: str, stamp: str) -> str:
            return file_transformer_for_hashing(content, absolute_target_path)
    else:
        dependency_content_list = [item.content for item in dependency_item_list]

    result = apply_stamp(
        dependency_content_list=dependency_content_list,
        target_content=target_content,
        initial_stamp_placer=initial_stamp_placer,
        content_transformer_for_hashing=content_transformer_for_hashing,
    )

    if isinstance(result, StampOk):
        if not silent:
            _rich_success(f"CodeStamp: ✅ Verified `{target_file_path}`.")
        return RunnerResult(result=result, did_write=False, should_fatal_if_desired=False)

    if isinstance(result, (StampNew, StampUpdate)):
        if should_write:
            with open(absolute_target_path, 'w', encoding='utf-8', newline='') as f:
                f.write(result.new_content)
            if not silent:
                _rich_success(f"CodeStamp: 🔏 Stamped `{target_file_path}`.")
            return RunnerResult(result=result, did_write=True, should_fatal_if_desired=False)

        if not silent:
            _rich_print(render_diff(target_content, result.new_content), err=True)
        return RunnerResult(result=result, did_write=False, should_fatal_if_desired=True)

    if isinstance(result, (MultipleStampsError, StampPlacerError)):
        if not silent:
            _rich_error(format_error(result))
        return RunnerResult(result=result, did_write=False, should_fatal_if_desired=True)

    assert_never(result)
