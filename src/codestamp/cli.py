"""Command-line interface for codestamp."""

import sys

import click
from rich.panel import Panel
from rich.text import Text

from codestamp.config import StampConfig
from codestamp.runner import runner
from codestamp.utils.console import _get_console, _rich_error
from codestamp.utils.helpers import undo_unescape
from codestamp.version import get_version

EPILOG = """\b
Examples:
  $ codestamp types.ts --deps ffi.rs,data.json
  $ codestamp types.ts --deps 'data/**/*.json,types/*.ts' --write
  $ codestamp target.py -t '# @codegen %STAMP%\\n%CONTENT%'
"""


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    console = _get_console()
    version_text = Text()
    version_text.append("codestamp", style="bold cyan")
    version_text.append(f" version {get_version()}", style="white")
    if console:
        console.print(Panel(version_text, border_style="cyan", expand=False))
    else:
        click.echo(f"codestamp version {get_version()}")
    ctx.exit()


def _fail_usage(message: str):
    _rich_error(f"CodeStamp Error: {message}\n\nRun `codestamp --help` to see the quick guide and examples.")
    sys.exit(1)


@click.command(
    help="Stamp and verify generated files against their dependencies.",
    epilog=EPILOG,
    context_settings={'help_option_names': ['-h', '--help']},
)
@click.argument('target_file', type=click.Path(dir_okay=False))
@click.option('--write', '-w', is_flag=True,
              help="Rewrite the file in-place. Without this flag, codestamp runs in "
                   "verification mode: it prints the diff to stderr and exits with 1 "
                   "when the stamp is invalid.")
@click.option('--deps', '-d', default=None,
              help="Comma-separated file paths or globs. The stamp hash is computed from "
                   "the target file's content and all dependencies. Quote globs so "
                   "codestamp expands them, not your shell.")
@click.option('--template', '-t', default=None,
              help="Template for placing the stamp. %STAMP% is replaced with the stamp "
                   "and %CONTENT% with the rest of the content.")
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=None,
              help="Path to a codestamp.yml (defaults to ./codestamp.yml if present).")
@click.option('--version', is_flag=True, callback=print_version, expose_value=False,
              is_eager=True, help="Show the version and exit.")
def cli(target_file, write, deps, template, config_path):
    """Stamp and verify TARGET_FILE."""
    if deps is not None and not deps:
        _fail_usage("Received empty value for option `-d, --deps`.")
    if template is not None and not template:
        _fail_usage("Received empty value for option `-t, --template`.")

    try:
        config = StampConfig.from_codestamp_yml(
            target_file,
            config_path=config_path,
            deps=[d for d in deps.split(",") if d] if deps is not None else None,
            template=undo_unescape(template) if template is not None else None,
            write=True if write else None,
        )
    except ValueError as e:
        _rich_error(f"CodeStamp Error: {e}")
        sys.exit(1)

    try:
        result = runner(
            target_file_path=target_file,
            should_write=config.write,
            dependency_glob_list=config.deps,
            initial_stamp_placer=config.template,
        )
    except (OSError, UnicodeDecodeError) as e:
        _rich_error(f"CodeStamp Error: {e}")
        sys.exit(1)

    if result.should_fatal_if_desired:
        sys.exit(1)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
