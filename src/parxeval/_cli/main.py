import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from parxeval._errors import FormulaError, FormulaNotFound
from parxeval._evaluate import FormulaResult, evaluate_by_process_output, evaluate_formula
from parxeval._expression import format_number
from parxeval._store import SparqlGraphStore

from .config import ConfigError, ParxevalConfig, get_config

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

EndpointOption = Annotated[
    str | None,
    typer.Option("--endpoint", help="SPARQL query endpoint URL (overrides --server/--repository)"),
]
RepositoryOption = Annotated[
    str | None,
    typer.Option("-r", "--repository", help="GraphDB repository name"),
]
ServerOption = Annotated[
    str | None,
    typer.Option("--server", help="GraphDB server URL (default: http://localhost:7200)"),
]
TimeoutOption = Annotated[
    float | None,
    typer.Option("--timeout", help="Seconds to wait for each query (default: no timeout)"),
]
BindingsOption = Annotated[
    bool,
    typer.Option("--bindings", help="Also print the value of every variable"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Evaluate process formulas stored in a knowledge graph."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config(
    *,
    endpoint: str | None,
    repository: str | None,
    server: str | None,
    timeout: float | None,
) -> ParxevalConfig:
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    return config.with_overrides(endpoint=endpoint, repository=repository, server=server, timeout=timeout)


def _make_store(config: ParxevalConfig) -> SparqlGraphStore:
    try:
        endpoint = config.query_endpoint()
    except ConfigError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    err_console.print(f"[cyan]SPARQL endpoint:[/cyan] {escape(endpoint)}")
    return SparqlGraphStore(endpoint, timeout=config.timeout)


def _print_result(result: FormulaResult, *, show_bindings: bool) -> None:
    table = Table(show_header=False, box=None)
    table.add_column(style="cyan")
    table.add_column()
    table.add_row("Formula", escape(str(result.formula)))
    table.add_row("Expression", escape(result.symbolic))
    table.add_row("Evaluated Expression", escape(result.expression))
    table.add_row("Result", f"[bold]{result.result!r}[/bold]")
    out_console.print(Panel(table, title="[bold]Calculation Result[/bold]", border_style="cyan"))

    if show_bindings and result.bindings:
        bindings_table = Table(show_header=True, header_style="bold cyan")
        bindings_table.add_column("Variable", style="dim")
        bindings_table.add_column("Value", justify="right")
        for name, value in sorted(result.bindings.items()):
            bindings_table.add_row(escape(name), format_number(value))
        out_console.print(bindings_table)


def _fail(error: FormulaError) -> typer.Exit:
    logger.debug("Evaluation failed", exc_info=error)
    err_console.print(f"[red]✗ {type(error).__name__}:[/red] {escape(str(error))}")
    return typer.Exit(code=1)


@app.command()
def solve(
    process: Annotated[str, typer.Argument(help="IRI of the process")],
    data_element: Annotated[str, typer.Argument(help="IRI of the output data element")],
    *,
    endpoint: EndpointOption = None,
    repository: RepositoryOption = None,
    server: ServerOption = None,
    timeout: TimeoutOption = None,
    bindings: BindingsOption = False,
) -> None:
    """Find the interdependency formula for a process output and evaluate it."""
    err_console.print()
    config = _load_config(endpoint=endpoint, repository=repository, server=server, timeout=timeout)
    with _make_store(config) as store:
        err_console.print("[cyan]Searching interdependency formula...[/cyan]")
        try:
            result = evaluate_by_process_output(store, process, data_element)
            if result is None:
                raise FormulaNotFound(process, data_element)
        except FormulaError as e:
            raise _fail(e) from e
        except ValueError as e:
            # Invalid IRI passed on the command line
            err_console.print(f"[red]✗ {escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e

    err_console.print(f"[green]✓ Interdependency formula found:[/green] {escape(str(result.formula))}")
    err_console.print()
    _print_result(result, show_bindings=bindings)


@app.command()
def formula(
    formula_iri: Annotated[str, typer.Argument(metavar="FORMULA", help="IRI (or _:label) of the formula node")],
    *,
    endpoint: EndpointOption = None,
    repository: RepositoryOption = None,
    server: ServerOption = None,
    timeout: TimeoutOption = None,
    bindings: BindingsOption = False,
) -> None:
    """Evaluate a formula node directly."""
    err_console.print()
    config = _load_config(endpoint=endpoint, repository=repository, server=server, timeout=timeout)
    with _make_store(config) as store:
        err_console.print(f"[cyan]Evaluating formula:[/cyan] {escape(formula_iri)}")
        try:
            result = evaluate_formula(store, formula_iri)
        except FormulaError as e:
            raise _fail(e) from e
        except ValueError as e:
            err_console.print(f"[red]✗ {escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e

    err_console.print()
    _print_result(result, show_bindings=bindings)


if __name__ == "__main__":
    app()
