from __future__ import annotations

import importlib
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Final

import typer

from jsonwarn.decoder import Decoder
from jsonwarn.diagnostics import DecodeDiagnostic, adapt_outcome
from jsonwarn.outcome import (
    DecodeErrors,
    DecodeOutcome,
    InvalidInput,
    SuccessWithWarnings,
    decode_string,
    strict,
)
from jsonwarn.report import errors_to_string, warnings_to_string
from jsonwarn.strip import strip_string
from jsonwarn.values import InvalidInputError

from .config import ConfigError, OutputFormat, ReportConfig, load_report_config

app = typer.Typer(help="Validating JSON decoder CLI")

_CHECK_OUTPUT_SCHEMA_VERSION: Final[int] = 1
_STATUS_EXIT_CODES: Final[dict[str, int]] = {"pass": 0, "warn": 1, "fail": 2}
_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="YAML report configuration file",
)


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", help="Emit debug logging on stderr"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command()
def check(
    decoder: str,
    document: str,
    strict_mode: bool = typer.Option(False, "--strict", help="Treat warnings as errors"),
    output_format: OutputFormat | None = typer.Option(
        None,
        "--format",
        help="Check output format: text|json",
    ),
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Decode DOCUMENT with DECODER (module:attribute) and report errors and warnings."""
    report_config = _load_config(config)
    target = _load_decoder(decoder)
    text = _read_document(document)

    outcome = decode_string(target, text, max_depth=report_config.max_depth)
    if strict_mode or report_config.strict:
        outcome = strict(outcome)

    resolved_format = output_format if output_format is not None else report_config.output_format
    _emit_check_output(document=document, outcome=outcome, output_format=resolved_format)
    raise typer.Exit(code=_derive_exit_code(outcome))


@app.command()
def strip(
    decoder: str,
    document: str,
    indent: int | None = typer.Option(
        None,
        "--indent",
        min=0,
        help="Indentation of the printed document; 0 prints it compact",
    ),
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Print the smallest document that DECODER decodes like DOCUMENT."""
    report_config = _load_config(config)
    target = _load_decoder(decoder)
    text = _read_document(document)

    resolved_indent = indent if indent is not None else report_config.indent
    try:
        minimal = strip_string(
            target,
            text,
            max_depth=report_config.max_depth,
            indent=resolved_indent or None,
        )
    except InvalidInputError as exc:
        typer.echo(f"invalid input: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(minimal)


def _load_config(path: Path | None) -> ReportConfig:
    try:
        return load_report_config(path)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _load_decoder(reference: str) -> Decoder[object]:
    module_name, separator, attribute_path = reference.partition(":")
    if not separator or not module_name or not attribute_path:
        raise typer.BadParameter(
            f"decoder reference '{reference}' must look like 'package.module:attribute'"
        )
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"cannot import module '{module_name}': {exc}") from exc
    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise typer.BadParameter(
                f"module '{module_name}' has no attribute '{attribute_path}'"
            ) from exc
    if not isinstance(target, Decoder):
        raise typer.BadParameter(f"'{reference}' does not name a Decoder")
    return target


def _read_document(document: str) -> str:
    if document == "-":
        return typer.get_text_stream("stdin").read()
    try:
        return Path(document).read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"cannot read document '{document}': {exc}") from exc


def _outcome_status(outcome: DecodeOutcome[object]) -> str:
    if isinstance(outcome, InvalidInput | DecodeErrors):
        return "fail"
    if isinstance(outcome, SuccessWithWarnings):
        return "warn"
    return "pass"


def _derive_exit_code(outcome: DecodeOutcome[object]) -> int:
    return _STATUS_EXIT_CODES[_outcome_status(outcome)]


def _emit_check_output(
    *,
    document: str,
    outcome: DecodeOutcome[object],
    output_format: OutputFormat,
) -> None:
    if output_format is OutputFormat.JSON:
        typer.echo(
            _build_check_json_output(
                document=document,
                outcome=outcome,
                diagnostics=adapt_outcome(outcome),
            )
        )
        return
    typer.echo(_render_text(outcome))


def _build_check_json_output(
    *,
    document: str,
    outcome: DecodeOutcome[object],
    diagnostics: Sequence[DecodeDiagnostic],
) -> str:
    payload: dict[str, object] = {
        "schema_version": _CHECK_OUTPUT_SCHEMA_VERSION,
        "document": document,
        "status": _outcome_status(outcome),
        "exit_code": _derive_exit_code(outcome),
        "diagnostics": [
            diagnostic.model_dump(mode="json", exclude_none=True) for diagnostic in diagnostics
        ],
    }
    return json.dumps(payload, ensure_ascii=True, separators=(",", ":"))


def _render_text(outcome: DecodeOutcome[object]) -> str:
    if isinstance(outcome, InvalidInput):
        return f"invalid input: {outcome.detail.code}: {outcome.detail.message}"
    if isinstance(outcome, DecodeErrors):
        return f"decode failed:\n\n{errors_to_string(outcome.errors)}"
    if isinstance(outcome, SuccessWithWarnings):
        return f"decoded with warnings:\n\n{warnings_to_string(outcome.warnings)}"
    return "decoded without errors or warnings"


def main() -> None:
    app()
