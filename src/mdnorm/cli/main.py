"""Typer-based command line interface for mdnorm."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Tuple

import structlog
import typer

from ..config import AppConfig, dump_default_config, load_config
from ..lines import split_lines
from ..logging import configure_logging
from ..registry import classify as classify_char
from ..registry import Transform, compose, default_registry

app = typer.Typer(help="mdnorm command line interface")

_COMPONENT = "mdnorm.cli"


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level())


def _read_text(path: Path) -> str:
    # Invalid UTF-8 becomes U+FFFD before any transform sees it.
    return path.read_bytes().decode("utf-8", errors="replace")


def _apply(text: str, transform: Transform, per_line: bool) -> Tuple[str, int]:
    """Return the transformed text and the number of units the chain ran on."""

    if not per_line:
        return transform(text), 1
    lines = split_lines(text)
    return "".join(f"{transform(line)}\n" for line in lines), len(lines)


@app.command()
def normalize(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    transform: Optional[List[str]] = typer.Option(
        None, "--transform", "-t", help="Transform to apply; repeat to chain. Overrides the configured chain."
    ),
    whole: bool = typer.Option(False, "--whole", help="Apply the chain to the whole text instead of each line"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write normalized text here"),
) -> None:
    log = structlog.get_logger(__name__).bind(component=_COMPONENT, path=str(path))
    config: AppConfig = ctx.obj
    names = list(transform or config.normalize.transforms)
    try:
        chain = compose(names)
    except KeyError as exc:
        log.error("normalize.unknown_transform", transforms=names)
        typer.echo(exc.args[0], err=True)
        raise typer.Exit(code=2) from exc

    per_line = config.normalize.per_line and not whole
    text = _read_text(path)
    log.debug("normalize.start", chain_length=len(names), per_line=per_line, chars_in=len(text))
    result, units = _apply(text, chain, per_line)
    log.debug("normalize.complete", lines=units, chars_out=len(result))
    if output is None:
        typer.echo(result, nl=False)
    else:
        output.write_text(result, encoding="utf-8")
        log.info("normalize.written", output=str(output))
        typer.echo(f"Normalized output written to {output}")


@app.command()
def classify(text: str = typer.Argument(..., help="Characters to classify")) -> None:
    registry = default_registry()
    rows = [
        {"char": char, "codepoint": f"U+{ord(char):04X}", "classes": list(classify_char(char, registry))}
        for char in text
    ]
    typer.echo(json.dumps(rows, ensure_ascii=False, indent=2))


@app.command()
def transforms() -> None:
    for name in default_registry().transforms():
        typer.echo(name)


@app.command()
def config_init(target: Path = typer.Argument(..., help="Destination configuration file")) -> None:
    dump_default_config(target)
    typer.echo(f"Default configuration written to {target}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
