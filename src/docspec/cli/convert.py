import json
import logging
from typing import IO, Any

import click

from docspec.cli.utils import (
    configure_logging,
    get_env_flag,
    output_error,
    output_failure,
    output_result,
)
from docspec.validator import (
    DocumentValidator,
    ValidationMode,
    decode_document,
    encode_document,
)
from docspec.validator.loaders import format_for_path, load_content

logger = logging.getLogger(__name__)


def _resolve_mode(lazy: bool) -> ValidationMode:
    # Get lazy flag from environment if not set
    if not lazy:
        lazy = get_env_flag("DOCSPEC_LAZY")
    return ValidationMode.COLLECT_ALL if lazy else ValidationMode.FAIL_FAST


def _read_value(source: IO[str]) -> Any:
    """Read a native value; stdin and unknown extensions are read as YAML."""
    try:
        format = format_for_path(source.name)
    except ValueError:
        format = "yaml"
    return load_content(source.read(), format=format)


def _render_value(value: Any) -> str:
    """Render a decoded value for humans (integer keys are written as strings)."""
    return json.dumps(value, indent=2, ensure_ascii=False)


@click.command(name="decode")
@click.argument("schema", type=click.Path(dir_okay=False))
@click.argument("document", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--lazy", is_flag=True, help="Report every error instead of stopping at the first")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def decode(schema: str, document: IO[str], lazy: bool, json_output: bool, debug: bool) -> None:
    """Decode a JSON document against a schema.

    The document is read from DOCUMENT, or from stdin when it is omitted, and the
    normalized value is printed.

    \b
    Examples:
        docspec decode user.yml user.json
        cat user.json | docspec decode user.yml --lazy
    """
    configure_logging(debug)
    mode = _resolve_mode(lazy)

    try:
        block = DocumentValidator.from_file(schema).schema
        result = decode_document(document.read(), block, mode)
    except click.ClickException:
        raise
    except Exception as e:
        output_error(e, json_output, debug)
        return

    if not result.ok:
        logger.debug(f"Document does not match {schema}")
        output_failure(result, json_output)

    if json_output:
        output_result({"value": result.value}, json_output, debug)
    else:
        output_result(_render_value(result.value))


@click.command(name="encode")
@click.argument("schema", type=click.Path(dir_okay=False))
@click.argument("value", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--lazy", is_flag=True, help="Report every error instead of stopping at the first")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def encode(schema: str, value: IO[str], lazy: bool, json_output: bool, debug: bool) -> None:
    """Encode a value into a JSON document against a schema.

    The value is read from a YAML or JSON file VALUE, or from stdin (as YAML) when it is
    omitted, and the produced document is printed.

    \b
    Examples:
        docspec encode user.yml user-value.yml
        echo '{id: 1}' | docspec encode user.yml
    """
    configure_logging(debug)
    mode = _resolve_mode(lazy)

    try:
        block = DocumentValidator.from_file(schema).schema
        result = encode_document(_read_value(value), block, mode)
    except click.ClickException:
        raise
    except Exception as e:
        output_error(e, json_output, debug)
        return

    if not result.ok:
        logger.debug(f"Value does not match {schema}")
        output_failure(result, json_output)

    if json_output:
        output_result({"document": result.value}, json_output, debug)
    else:
        output_result(result.value)
