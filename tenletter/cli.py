import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional, TextIO

import click
from dotenv import load_dotenv

from tenletter.config import TenConfig, load_config
from tenletter.loader import load_newsletter
from tenletter.render import render_newsletter
from tenletter.text import WRAP_WIDTH, filter_markup, wrap_lines

try:
    __version__ = version("tenletter")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="TENLETTER_LOG_FILE",
)
@click.version_option(__version__, prog_name="tenletter")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _config(config_file: Optional[str], base_url: Optional[str]) -> TenConfig:
    """Load the configuration, reporting bad files as usage errors."""

    try:
        return load_config(
            Path(config_file) if config_file else None, base_url=base_url
        )
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


config_option = click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="YAML file with configuration strings.",
)
base_url_option = click.option(
    "--base-url",
    default=None,
    help="Prefix for links starting with '/'.",
)
width_option = click.option(
    "--width",
    type=click.IntRange(min=2),
    default=WRAP_WIDTH,
    show_default=True,
    help="Column threshold for wrapped lines.",
)


@cli.command()
@click.argument(
    "input_file", type=click.Path(exists=True, dir_okay=False)
)
@config_option
@base_url_option
@click.option(
    "--no-contents",
    is_flag=True,
    help="Leave out the contents listing.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=False),
    default=None,
    help="Write output to FILE instead of the console.",
)
def render(
    input_file: str,
    config_file: Optional[str] = None,
    base_url: Optional[str] = None,
    no_contents: bool = False,
    output_path: Optional[str] = None,
) -> None:
    """Render a JSON or YAML newsletter as TEN plain text.

    Args:
        input_file: Newsletter file to render.
        config_file: Optional YAML configuration file.
        base_url: Prefix for links starting with "/".
        no_contents: Leave out the contents listing.
        output_path: Optional file for the rendered text.
    """

    config = _config(config_file, base_url)

    try:
        newsletter = load_newsletter(Path(input_file), config)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    if no_contents:
        newsletter.include_contents = False

    content = render_newsletter(newsletter)
    if output_path:
        Path(output_path).write_text(content, encoding="utf-8")
    else:
        click.echo(content, nl=False)


@cli.command("filter")
@click.argument("input_file", type=click.File("r"), default="-")
@config_option
@base_url_option
@width_option
def filter_command(
    input_file: TextIO,
    config_file: Optional[str] = None,
    base_url: Optional[str] = None,
    width: int = WRAP_WIDTH,
) -> None:
    """Convert a markup fragment into wrapped plain text."""

    config = _config(config_file, base_url)
    click.echo(filter_markup(input_file.read(), config, width), nl=False)


@cli.command()
@click.argument("input_file", type=click.File("r"), default="-")
@width_option
def wrap(input_file: TextIO, width: int = WRAP_WIDTH) -> None:
    """Wrap plain text without filtering markup."""

    click.echo(wrap_lines(input_file.read(), width), nl=False)
