"""namefilter command line: filter file listings or stdin records by name."""

import logging
import sys

import click

from . import __version__
from .config.parser import load_config
from .exceptions import ConfigurationError
from .filtering.keyword_filter import KeywordFilter
from .models.settings import OutputFormat
from .tools.formatter import get_formatter
from .tools.listing import DirectoryLister
from .tools.sources import read_json_records, read_line_records


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send package log records to stderr so they never mix with filtered output."""
    package_logger = logging.getLogger("namefilter")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level))


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("terms", nargs=-1, required=True)
@click.option(
    "--source",
    type=click.Choice(["files", "lines", "jsonl"]),
    default="files",
    show_default=True,
    help="Where records come from: a directory listing, stdin lines, or stdin JSON lines.",
)
@click.option(
    "-p", "--path", "paths", multiple=True, type=click.Path(file_okay=False),
    help="Directory to list (repeatable). Defaults to the configured roots.",
)
@click.option(
    "--recurse/--no-recurse", "-r/-R", default=None,
    help="Descend into subdirectories when listing files.",
)
@click.option("-a", "--attribute", default=None, help="Record attribute holding the name (default: Name).")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print matching records as NDJSON.")
@click.option(
    "-c", "--config", "config_path", type=click.Path(exists=True, dir_okay=False),
    help="Settings file (default: search for .namefilter.yaml).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log parse decisions and per-record results.")
@click.version_option(__version__, prog_name="namefilter")
def main(terms, source, paths, recurse, attribute, as_json, config_path, verbose):
    """Print the records whose name contains the given keywords.

    TERMS are keywords. Several keywords match if any of them is found (OR);
    put the word "and" among them to require all of them, or "or" to say so
    explicitly. Only the first operator word counts; a later one is a keyword.

    \b
    Examples:
      namefilter report 2024
      namefilter report and 2024 -p ~/Documents -r
      ps -eo comm | namefilter --source lines python
    """
    try:
        result = load_config(config_path)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    settings = result.settings
    configure_logging("DEBUG" if verbose else settings.effective_log_level())
    for warning in result.warnings:
        logger.info(warning)

    name_attribute = attribute or settings.name_attribute

    try:
        keyword_filter = KeywordFilter.from_terms(terms, name_attribute=name_attribute)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    if source == "files":
        listing = settings.listing
        if recurse is not None:
            listing = listing.model_copy(update={"recurse": recurse})
        records = DirectoryLister(listing).list_entries(list(paths) or None)
    elif source == "lines":
        records = read_line_records(sys.stdin, name_attribute)
    else:
        records = read_json_records(sys.stdin)

    output_format = OutputFormat.JSON if as_json else settings.output.format
    formatter = get_formatter(output_format, name_attribute)

    for record in keyword_filter.filter(records):
        click.echo(formatter(record))

    logger.debug(f"Filter statistics: {keyword_filter.get_stats()}")


if __name__ == "__main__":
    main()
