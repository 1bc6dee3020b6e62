"""Typer-based command line interface.

``table2dsv SOURCE`` loads ``SOURCE`` in a headless browser, collects the
rendered text of every table row, removes quoted-printable soft line breaks
and prints the rows, one per line, on standard output.  ``SOURCE`` is an
http(s) URL, a ``.htm``/``.html``/``.mhtml`` file or an inline
``<table>...</table>`` fragment.  Playwright is imported on demand so that
argument errors are reported without starting a browser.

Exit codes
----------
0 success
1 missing or unrecognized input argument
3 I/O error (local file not found, unsupported output extension, write failure)
4 configuration error
5 rendering error (browser launch, navigation or evaluation failure)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .config.schema import deep_merge_dicts
from .extract import extract_table_text
from .io import write_file
from .render import create_renderer
from .source import SourceKind, base_dir_for, resolve_source
from .utils.errors import SourceError, UnsupportedFormatError
from .utils.logging import configure_logging, emit_output, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="table2dsv",
    help="Print the rows of HTML tables as delimiter-separated text.",
    add_completion=False,
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    delimiter: str | None,
    browser: str | None,
    timeout: float | None,
    base_dir: Path | None,
) -> ConfigModel:
    """Return a validated copy of ``cfg`` with CLI overrides applied."""

    overrides: dict[str, Any] = {}
    if delimiter is not None:
        overrides.setdefault("output", {})["delimiter"] = delimiter
    if browser is not None:
        overrides.setdefault("render", {})["browser"] = browser
    if timeout is not None:
        # 0 disables the timeout; keep small positive values from rounding to it.
        timeout_ms = round(timeout * 1000)
        if timeout > 0:
            timeout_ms = max(1, timeout_ms)
        overrides.setdefault("render", {})["timeout_ms"] = timeout_ms
    if base_dir is not None:
        overrides.setdefault("source", {})["base_dir"] = base_dir
    if not overrides:
        return cfg
    return ConfigModel.model_validate(deep_merge_dicts(cfg.model_dump(), overrides))


def _first_line(exc: BaseException) -> str:
    text = str(exc).strip()
    return text.splitlines()[0] if text else type(exc).__name__


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.command()
def convert(  # noqa: PLR0913
    source: Optional[str] = typer.Argument(  # noqa: B008
        None,
        metavar="SOURCE",
        help="http(s) URL, .htm/.html/.mhtml file or inline <table>...</table> fragment",
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", "-o", help="Write the result to a .txt/.tsv/.csv/.dsv file"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    delimiter: Optional[str] = typer.Option(  # noqa: B008
        None, "--delimiter", "-d", help="Cell delimiter replacing the browser's tab"
    ),
    browser: Optional[str] = typer.Option(  # noqa: B008
        None, "--browser", help="Browser engine [chromium|firefox|webkit]"
    ),
    timeout: Optional[float] = typer.Option(  # noqa: B008
        None, "--timeout", help="Navigation timeout in seconds (0 disables it)"
    ),
    base_dir: Optional[Path] = typer.Option(  # noqa: B008
        None, "--base-dir", help="Directory relative HTML file paths are resolved against"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Convert the table rows of SOURCE to delimiter-separated text."""

    configure_logging("INFO" if verbose else "WARNING")

    # Load configuration
    try:
        cfg = load_config(config_path)
        cfg = _apply_overrides(
            cfg, delimiter=delimiter, browser=browser, timeout=timeout, base_dir=base_dir
        )
    except (ValidationError, ValueError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, _first_line(exc))
    configure_logging("INFO" if verbose else cfg.logging.level)
    logger.info("Loaded config")

    # Resolve the input argument
    try:
        resolved = resolve_source(source, base_dir_for(cfg.source))
    except SourceError as exc:
        _safe_exit(1, f"error: {exc}")
    if resolved.kind is SourceKind.FILE and resolved.path is not None:
        if not resolved.path.is_file():
            _safe_exit(3, f"File not found: {resolved.path}")
    logger.info("Resolved %s source", resolved.kind.value)

    # Render and clean
    renderer = create_renderer(cfg.render)
    try:
        with Timing() as t_render:
            result = extract_table_text(resolved.uri, renderer, delimiter=cfg.output.delimiter)
    except Exception as exc:
        msg = _first_line(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {exc}"
        _safe_exit(5, msg)
    logger.info("Rendered %d rows in %.1f ms", len(result.rows), t_render.ms)

    # Emit
    if out_path is None:
        emit_output(result.text)
        return
    try:
        write_file(out_path, result.text, encoding=cfg.output.encoding)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    logger.info("Wrote %s", out_path)
