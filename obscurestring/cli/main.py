#!/usr/bin/env python3
"""obscure-string CLI - mask a string given as an argument or on stdin."""

import sys
from typing import Any, Dict, List, Optional

import click

from obscurestring import __version__
from obscurestring.core.exceptions import ObscureStringError
from obscurestring.engine import ObscureEngine
from obscurestring.observability.config import LoggingConfig
from obscurestring.observability.logging import configure_logging


class ObscureCommand(click.Command):
    """Command whose usage errors exit with status 1 like every other failure."""

    def make_context(self, info_name: Any, args: Any, parent: Any = None, **extra: Any) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def _read_stdin() -> str:
    stream = click.get_text_stream("stdin")
    if stream.isatty():
        return ""
    data = stream.read()
    if data.endswith("\n"):
        data = data[:-1]
    if data.endswith("\r"):
        data = data[:-1]
    return data


@click.command(
    cls=ObscureCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("text", metavar="INPUT", required=False)
@click.option("--prefix", "-p", type=int, help="Characters to keep at the start (default: 3)")
@click.option("--suffix", "-s", type=int, help="Characters to keep at the end (default: 3)")
@click.option("--char", "-c", "mask_char", default="*", show_default=True, help="Mask character(s)")
@click.option("--full", is_flag=True, help="Mask the entire string")
@click.option("--reverse", is_flag=True, help="Mask the edges and keep the middle")
@click.option("--percentage", type=float, help="Mask this percentage of the string (0-100)")
@click.option("--preset", help="Named preset: email, creditCard, phone")
@click.option("--pattern", help="Format pattern: email, phone, generic, auto")
@click.option("--preserve", help="Regular expression whose matches stay visible")
@click.option("--random", "random_mask", is_flag=True, help="Mask with random characters")
@click.option("--min-mask", type=int, help="Minimum number of masked characters")
@click.option("--max-length", type=int, help="Maximum accepted input length")
@click.option("--strict", is_flag=True, help="Reject prefix and suffix that overlap")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for diagnostics on stderr",
)
@click.version_option(
    __version__, "--version", "-v", prog_name="obscure-string", message="%(prog)s %(version)s"
)
def cli(
    text: Optional[str],
    prefix: Optional[int],
    suffix: Optional[int],
    mask_char: str,
    full: bool,
    reverse: bool,
    percentage: Optional[float],
    preset: Optional[str],
    pattern: Optional[str],
    preserve: Optional[str],
    random_mask: bool,
    min_mask: Optional[int],
    max_length: Optional[int],
    strict: bool,
    log_level: Optional[str],
) -> None:
    """Mask the middle of INPUT, keeping the edges readable.

    INPUT is read from stdin when it is not given.

    \b
    Examples:
      obscure-string "mysecretkey"                 # mys*****key
      obscure-string "mysecretkey" -p 2 -s 2 -c "#"
      echo "john@example.com" | obscure-string --preset email
    """
    if log_level:
        configure_logging(LoggingConfig(level=log_level.upper()))
    else:
        configure_logging()

    if text is None:
        text = _read_stdin()
    if not text:
        raise click.ClickException("No input string provided")

    options: Dict[str, Any] = {
        "mask_char": mask_char,
        "full_mask": full,
        "reverse_mask": reverse,
        "random_mask": random_mask,
        "strict": strict,
    }
    supplied = {
        "prefix_length": prefix,
        "suffix_length": suffix,
        "percentage": percentage,
        "preset": preset,
        "pattern": pattern,
        "preserve_pattern": preserve,
        "min_mask_length": min_mask,
        "max_length": max_length,
    }
    options.update({k: v for k, v in supplied.items() if v is not None})

    engine = ObscureEngine()
    try:
        result = engine.obscure(text, options)
    except ObscureStringError as e:
        raise click.ClickException(e.message) from e

    click.echo(result)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        rv = cli.main(args=argv, prog_name="obscure-string", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    sys.exit(main())
