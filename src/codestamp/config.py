"""Configuration loading for codestamp."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import yaml

CONFIG_FILE = "codestamp.yml"


@dataclass
class StampConfig:
    """Settings for stamping one target file."""
    deps: List[str] = field(default_factory=list)
    template: Optional[str] = None
    write: bool = False

    @classmethod
    def from_codestamp_yml(
        cls,
        target_file_path: Union[str, Path],
        config_path: Optional[Union[str, Path]] = None,
        **overrides,
    ) -> 'StampConfig':
        """Create configuration from codestamp.yml with command-line overrides.

        Top-level ``deps`` and ``template`` apply to every target; entries under
        ``targets`` keyed by the target path override them.

        Args:
            target_file_path: The target being stamped, as given on the command line.
            config_path: Explicit config file. Defaults to ``codestamp.yml`` in
                the current directory, which may be absent.
            **overrides: Command-line values; None means "not provided".

        Returns:
            StampConfig: Configuration with file values and overrides applied.

        Raises:
            ValueError: If the config file is unreadable or malformed, or an
                explicit ``config_path`` does not exist.
        """
        config = cls()

        path = Path(config_path) if config_path is not None else Path(CONFIG_FILE)
        if path.exists():
            raw = _load_yml(path)
            config._apply(raw, path)

            targets = raw.get('targets') or {}
            if not isinstance(targets, dict):
                raise ValueError(f"{path}: 'targets' must be a mapping")
            target_config = _lookup_target(targets, target_file_path)
            if target_config is not None:
                if not isinstance(target_config, dict):
                    raise ValueError(f"{path}: entry for '{target_file_path}' must be a mapping")
                config._apply(target_config, path)
        elif config_path is not None:
            raise ValueError(f"Configuration file {path} not found")

        # Command-line overrides have the highest priority
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)

        return config

    def _apply(self, values: dict, path: Path):
        if 'deps' in values:
            deps = values['deps']
            if isinstance(deps, str):
                deps = [deps]
            if not isinstance(deps, list) or not all(isinstance(d, str) for d in deps):
                raise ValueError(f"{path}: 'deps' must be a string or a list of strings")
            self.deps = deps
        if 'template' in values:
            template = values['template']
            if template is not None and not isinstance(template, str):
                raise ValueError(f"{path}: 'template' must be a string")
            self.template = template
        if 'write' in values:
            self.write = bool(values['write'])


def _load_yml(path: Path) -> dict:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Error loading {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return raw


def _lookup_target(targets: dict, target_file_path: Union[str, Path]) -> Optional[dict]:
    """Find the per-target entry, matching the path as written or normalized."""
    wanted = Path(target_file_path)
    for key, value in targets.items():
        if Path(str(key)) == wanted:
            return value
    return None
