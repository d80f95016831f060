from collections.abc import Iterable
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from android_reverser.cli.settings import Settings, first_error_message
from android_reverser.core.packages import check_package
from android_reverser.core.source_set import SourceSet
from android_reverser.models import SourceSetConfig

console = Console()


def _load_settings(src: Path, pkg: str) -> Settings:
    try:
        return Settings(source=src, package=pkg)
    except ValidationError as exc:
        field = exc.errors()[0]["loc"][0]
        hint = "'--src'" if field == "source" else "'--pkg'"
        raise typer.BadParameter(first_error_message(exc), param_hint=hint) from None


def _get_source_set(root: Path, config: SourceSetConfig) -> SourceSet:
    return SourceSet(root, config)


def _render_files(root: Path, files: Iterable[Path]) -> None:
    rows = sorted(str(path.relative_to(root)) for path in files)
    table = Table(show_lines=False)
    table.add_column("file")
    for row in rows:
        table.add_row(escape(row))
    console.print(table)
    console.print(f"({len(rows)} files)")


def locate(
    src: Annotated[Path, typer.Option("--src", help="Directory containing source code.")],
    pkg: Annotated[str, typer.Option("--pkg", help="Package name of R.java file(s) to reverse.")],
    all_sources: Annotated[
        bool, typer.Option("--all", help="List every source file in the package, not only R files.")
    ] = False,
    exact: Annotated[bool, typer.Option("--exact", help="Require the declared package to equal --pkg.")] = False,
    follow_symlinks: Annotated[bool, typer.Option(help="Descend into symlinked directories.")] = False,
) -> None:
    """List the R files (or all source files) of a package."""
    settings = _load_settings(src, pkg)
    source_set = _get_source_set(
        settings.source, SourceSetConfig(exact_package=exact, follow_symlinks=follow_symlinks)
    )

    scan = source_set.scan()
    if not scan.ok:
        console.print(f"[yellow]Could not scan {escape(str(settings.source))}: {escape(str(scan.error))}[/yellow]")

    if all_sources:
        files = source_set.source_files(settings.package, scan=scan)
    else:
        files = source_set.resource_files(settings.package, scan=scan)
    _render_files(settings.source, files)


def check(
    file: Annotated[Path, typer.Argument(help="Source file to inspect.")],
    pkg: Annotated[str, typer.Option("--pkg", help="Package name to test for.")],
    exact: Annotated[bool, typer.Option("--exact", help="Require the declared package to equal --pkg.")] = False,
) -> None:
    """Report whether a source file declares a package."""
    result = check_package(file, pkg, SourceSetConfig(exact_package=exact))
    if result.error is not None:
        console.print(f"[yellow]Could not read {escape(str(file))}: {escape(str(result.error))}[/yellow]")
    if result.member:
        console.print(f"[green]{escape(file.name)}[/green] is in {escape(pkg)}")
        return
    console.print(f"[red]{escape(file.name)}[/red] is not in {escape(pkg)}")
    raise typer.Exit(1)
