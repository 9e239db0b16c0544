import logging

from contextlib import contextmanager
from pathlib import Path

import click

from utf8reader.main import logger, open_reader, count_chars
from utf8reader.errors import ReaderError

logging.basicConfig(format="{name}: {message}", style="{")


@contextmanager
def reporting_errors():
    # EndOfStream is an EOFError, which click would turn into "Aborted!"
    try:
        yield
    except ReaderError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True)
def main(verbose):
    if verbose:
        logger.setLevel(logging.INFO)


@main.command()
@click.argument("file", required=True,
                type=click.Path(exists=True, dir_okay=False, readable=True,
                                path_type=Path))
@click.option("--codepoints", is_flag=True,
              help="print U+XXXX code points instead of characters")
def dump(file, codepoints):
    """Print the characters of FILE, one per line."""
    with reporting_errors(), open_reader(file) as reader:
        for char in reader:
            if codepoints:
                click.echo(f"U+{ord(char):04X}")
            else:
                click.echo(repr(char)[1:-1])


@main.command()
@click.argument("file", required=True,
                type=click.Path(exists=True, dir_okay=False, readable=True,
                                path_type=Path))
def count(file):
    """Print the number of characters in FILE."""
    with reporting_errors(), open_reader(file) as reader:
        first = count_chars(reader)
        second = count_chars(reader)
        if first != second:
            raise click.ClickException(
                f"passes disagree: {first} != {second}")
        logger.info("%s: %d bytes", reader.name, reader.source.length)
    click.echo(first)


if __name__ == "__main__":
    main()
