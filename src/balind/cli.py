import logging
import time
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from balind.core.config import PROTOCOL_TYPE_NAME, DispatcherConfig
from balind.core.errors import BalindError

console = Console(stderr=True)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.group()
def cli() -> None:
    """balind — Balancer v2 pool-creation component extractor."""


@cli.command("map-components")
@click.argument("trace_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--protocol-type-name",
    default=PROTOCOL_TYPE_NAME,
    show_default=True,
    help="Protocol family tag attached to each component",
)
@click.option(
    "--lenient-correlation/--strict-correlation",
    default=False,
    show_default=True,
    help="On duplicate vault registrations take the first one instead of failing",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    show_default=True,
)
def map_components_cmd(
    trace_file: Path,
    protocol_type_name: str,
    lenient_correlation: bool,
    log_level: str,
) -> None:
    """Decode the pools created in a block trace (JSON) and print them as JSON lines."""
    _setup_logging(log_level)

    from balind.adapters.sinks import StreamComponentSink
    from balind.adapters.traces import load_block
    from balind.core.use_cases.map_components import map_and_emit

    config = DispatcherConfig(
        protocol_type_name=protocol_type_name,
        strict_correlation=not lenient_correlation,
    )

    t0 = time.time()
    try:
        block = load_block(trace_file)
    except ValidationError as e:
        raise click.ClickException(f"invalid trace document: {e}") from e

    sink = StreamComponentSink(click.get_text_stream("stdout"))
    try:
        result = map_and_emit(block, sink, config=config)
    except BalindError as e:
        raise click.ClickException(str(e)) from e

    elapsed = time.time() - t0
    console.print(
        f"[bold]done[/]: block {block.number:,} • "
        f"[green]components[/]={result.size()} • "
        f"transactions={len(block.transactions)} • {elapsed:.2f}s"
    )


@cli.command("factories")
def factories_cmd() -> None:
    """List the pool factories the dispatcher recognizes (and the ones it skips)."""
    from balind.factories.schemas import FACTORY_TABLE, UNSUPPORTED_FACTORIES

    out = Console()
    table = Table(title="Balancer v2 pool factories")
    table.add_column("pool_type")
    table.add_column("address")
    table.add_column("tokens from")
    table.add_column("status")
    for binding in FACTORY_TABLE.values():
        table.add_row(
            binding.schema.value,
            "0x" + binding.address.hex(),
            "create call" if binding.call_tokens_authoritative else "TokensRegistered",
            "[green]supported[/]",
        )
    for unsupported in UNSUPPORTED_FACTORIES.values():
        table.add_row(
            unsupported.name,
            "0x" + unsupported.address.hex(),
            "-",
            f"[yellow]unsupported[/]: {unsupported.reason}",
        )
    out.print(table)


if __name__ == "__main__":
    cli()
