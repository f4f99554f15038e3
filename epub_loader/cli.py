"""
Command-line interface for EPUB File Loader.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.table import Table

from epub_loader.exceptions import EnumerationError
from epub_loader.loader import EpubFileLoader
from epub_loader.result import Ok
from epub_loader.utils import configure_logging, format_file_size, get_epub_info, validate_epub

console = Console()

SOURCE_TYPES = ["auto", "glob", "dir"]


def _build_loader(source, source_type):
    if source_type == "dir" or (source_type == "auto" and os.path.isdir(source)):
        return EpubFileLoader.with_dir(source)
    return EpubFileLoader.with_glob(source)


def _source_options(func):
    func = click.option(
        '--source-type', '-t',
        type=click.Choice(SOURCE_TYPES),
        default='auto',
        help='Treat SOURCE as a glob pattern or a directory (auto: directory if it exists)'
    )(func)
    return click.argument('source')(func)


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    EPUB Loader CLI - Load EPUB files and extract their text.
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.command(name="scan")
@_source_options
@click.option('--ignore-errors', is_flag=True, help='Hide files that failed to load')
def scan(source, source_type, ignore_errors):
    """
    Try to open every candidate EPUB and report the outcome.

    Examples:

        epub-loader scan books/

        epub-loader scan "library/**/*.epub" --ignore-errors
    """
    try:
        loader = _build_loader(source, source_type)
    except EnumerationError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    table = Table(title=f"EPUB scan: {source}")
    table.add_column("File", style="cyan")
    table.add_column("Status")
    table.add_column("Title / Error")
    table.add_column("Pages", justify="right")

    loaded = 0
    failures = 0
    for item in loader.load_with_path():
        if isinstance(item, Ok):
            path, document = item.value
            with document:
                table.add_row(
                    os.path.basename(path),
                    "[green]✓ ok[/green]",
                    document.title or "",
                    str(document.num_pages),
                )
            loaded += 1
        else:
            failures += 1
            if not ignore_errors:
                table.add_row("", "[red]✗ error[/red]", str(item.error), "")

    console.print()
    console.print(table)
    console.print(f"\n[bold]Loaded:[/bold] {loaded}  [bold]Failed:[/bold] {failures}\n")

    sys.exit(1 if failures and not ignore_errors else 0)


@cli.command(name="info")
@click.argument('input_epub', type=click.Path(exists=True))
def show_info(input_epub):
    """
    Display information about an EPUB file.

    Example:

        epub-loader info book.epub
    """
    is_valid, error_msg = validate_epub(input_epub)
    if not is_valid:
        console.print(f"[bold red]✗ Error:[/bold red] {error_msg}")
        sys.exit(1)

    info = get_epub_info(input_epub)

    table = Table(title=f"EPUB Information: {os.path.basename(input_epub)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", os.path.abspath(input_epub))
    table.add_row("File Size", format_file_size(info.file_size))
    table.add_row("Number of Pages", str(info.num_pages))
    table.add_row("TOC Entries", str(info.toc_entries))
    if info.title:
        table.add_row("Title", info.title)
    if info.authors:
        table.add_row("Authors", ", ".join(info.authors))
    if info.language:
        table.add_row("Language", info.language)
    if info.identifier:
        table.add_row("Identifier", info.identifier)

    console.print()
    console.print(table)
    console.print()


@cli.command(name="text")
@_source_options
@click.option('--by-page', is_flag=True, help='Emit each page separately instead of whole documents')
def text(source, source_type, by_page):
    """
    Print the extracted text of every EPUB found.

    Examples:

        epub-loader text book.epub

        epub-loader text books/ --by-page
    """
    try:
        loader = _build_loader(source, source_type)
    except EnumerationError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    if by_page:
        items = loader.load_with_path().extract_text_with_path()
    else:
        items = loader.read_with_path()

    failures = 0
    last_path = None
    for item in items:
        if not isinstance(item, Ok):
            failures += 1
            console.print(f"[bold red]✗ Error:[/bold red] {item.error}")
            continue

        path, content = item.value
        if path != last_path:
            console.rule(os.path.basename(path))
            last_path = path
        console.print(content, markup=False, highlight=False)

    sys.exit(1 if failures else 0)


if __name__ == '__main__':
    cli()
