"""keyfilter CLI -- Rich-formatted keyword filtering from the terminal."""

import logging

import click


@click.group()
@click.version_option(package_name="keyfilter-core")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """keyfilter -- Keyword filtering and comparison for CSV and Excel tables."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _fail(console, exc):
    console.print(f"[red]Error:[/red] {exc}")
    raise SystemExit(1)


def _results_table(result, title):
    """Build the matched-rows table shared by analyse and compare."""
    from rich.table import Table

    from .matching import matches_column

    matches = matches_column(result["headers"])
    table = Table(title=title)
    for col in result["headers"]:
        style = "cyan" if col in result["selected_columns"] else "dim"
        table.add_column(col, style=style, overflow="fold")
    table.add_column(matches, style="bold green", overflow="fold")

    for row in result["preview"]:
        table.add_row(*[str(row.get(c, "")) for c in result["headers"]], row[matches])

    return table


def _print_footer(console, result):
    if result["columns_reset"]:
        console.print("[yellow]No known column selected, searching all columns.[/yellow]")

    shown = len(result["preview"])
    if shown < result["matched_rows"]:
        console.print(f"[dim]Showing {shown} of {result['matched_rows']} rows.[/dim]")

    if result.get("saved_to"):
        console.print(f"\nSaved to: [bold]{result['saved_to']}[/bold]")


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--rows", "-n", default=10, help="Number of rows to preview.")
def parse(file, rows):
    """Parse a CSV or Excel file and preview its rows."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table

    from .ingestion import load_dataset

    console = Console()

    try:
        dataset = load_dataset(file)
    except (ValueError, ImportError) as exc:
        _fail(console, exc)

    separator = {"\t": "tab"}.get(dataset.separator, dataset.separator) or "-"
    console.print(Panel(
        f"[bold]{file}[/bold]\n"
        f"Rows: {len(dataset.rows):,}  |  Columns: {len(dataset.headers)}  |  "
        f"Separator: {separator}",
        title="Parsed",
    ))

    if not dataset.headers:
        console.print("[yellow]No data found.[/yellow]")
        return

    table = Table(title="Preview")
    for col in dataset.headers:
        table.add_column(col, style="cyan", overflow="fold")
    for row in dataset.rows[:rows]:
        table.add_row(*[row.get(c, "") for c in dataset.headers])

    console.print(table)


@cli.command()
@click.argument("reference", type=click.Path(exists=True))
@click.option("--limit", "-n", default=50, help="Maximum keywords to list.")
def keywords(reference, limit):
    """List the keywords extracted from a reference file."""
    from rich.console import Console

    from .ingestion import load_dataset
    from .matching import extract_keywords

    console = Console()

    try:
        found = extract_keywords(load_dataset(reference))
    except (ValueError, ImportError) as exc:
        _fail(console, exc)

    console.print(f"\n[bold]{len(found)} keywords extracted from {reference}[/bold]\n")
    for keyword in found[:limit]:
        console.print(f"  {keyword}")
    if len(found) > limit:
        console.print(f"  [dim]... and {len(found) - limit} more[/dim]")


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--keywords", "-k", default="", help="Comma-separated keywords.")
@click.option("--column", "-c", "columns", multiple=True, help="Column to search (repeatable, default: all).")
@click.option("--case-sensitive", is_flag=True, help="Match keywords case-sensitively.")
@click.option("--limit", "-n", default=20, help="Maximum rows to show.")
@click.option("--output", "-o", default="", help="Save matched rows to this CSV file.")
def analyse(file, keywords, columns, case_sensitive, limit, output):
    """Filter the rows of one file by keywords."""
    from rich.console import Console
    from rich.panel import Panel

    from .analysis import analyse_file

    console = Console()

    try:
        with console.status("Filtering..."):
            result = analyse_file(file, keywords, columns, case_sensitive, limit, output)
    except (ValueError, ImportError) as exc:
        _fail(console, exc)

    console.print(Panel(
        f"[bold]{result['file']}[/bold]\n"
        f"Rows: {result['matched_rows']:,} of {result['total_rows']:,}  |  "
        f"Keywords: {', '.join(result['keywords']) or '-'}  |  "
        f"Case-sensitive: {'yes' if result['case_sensitive'] else 'no'}",
        title="Analysis",
    ))
    console.print(_results_table(result, "Matched Rows"))
    _print_footer(console, result)


@cli.command()
@click.argument("reference", type=click.Path(exists=True))
@click.argument("target", type=click.Path(exists=True))
@click.option("--keywords", "-k", default="", help="Comma-separated keywords (default: reference values).")
@click.option("--column", "-c", "columns", multiple=True, help="Target column to search (repeatable, default: all).")
@click.option("--case-sensitive", is_flag=True, help="Match keywords case-sensitively.")
@click.option("--limit", "-n", default=20, help="Maximum rows to show.")
@click.option("--output", "-o", default="", help="Save matched rows to this CSV file.")
def compare(reference, target, keywords, columns, case_sensitive, limit, output):
    """Keep the rows of TARGET that contain a keyword from REFERENCE."""
    from rich.console import Console
    from rich.panel import Panel

    from .analysis import compare_files

    console = Console()

    try:
        with console.status("Comparing..."):
            result = compare_files(reference, target, keywords, columns, case_sensitive, limit, output)
    except (ValueError, ImportError) as exc:
        _fail(console, exc)

    console.print(Panel(
        f"Reference: {result['reference_file']} ({result['reference_keywords']:,} keywords)\n"
        f"Target: {result['file']}  |  "
        f"Rows: {result['matched_rows']:,} of {result['total_rows']:,}  |  "
        f"Case-sensitive: {'yes' if result['case_sensitive'] else 'no'}",
        title="Comparison",
    ))
    if result["keywords_reverted"]:
        console.print("[dim]No keywords given, using the reference keywords.[/dim]")

    console.print(_results_table(result, "Matched Rows"))
    _print_footer(console, result)

