import logging

import click

from docspec.cli.utils import (
    configure_logging,
    format_diagnostics,
    get_env_flag,
    output_error,
    output_failure,
    output_result,
    output_warnings,
)
from docspec.validator import ValidationMode, check_schema, load_schema_from_file

logger = logging.getLogger(__name__)


@click.command(name="validate")
@click.argument("schema", type=click.Path(dir_okay=False))
@click.option("--lazy", is_flag=True, help="Report every error instead of stopping at the first")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def validate(schema: str, lazy: bool, json_output: bool, debug: bool) -> None:
    """Validate a schema file.

    The schema is read from a YAML or JSON file and checked against the block grammar.

    \b
    Examples:
        docspec validate user.yml                 # Stop at the first error
        docspec validate user.yml --lazy          # Report every error
        docspec validate user.yml --json-output   # Output results in JSON format
    """
    configure_logging(debug)

    # Get lazy flag from environment if not set
    if not lazy:
        lazy = get_env_flag("DOCSPEC_LAZY")

    try:
        raw_schema = load_schema_from_file(schema)
        mode = ValidationMode.COLLECT_ALL if lazy else ValidationMode.FAIL_FAST
        result = check_schema(raw_schema, mode)
    except click.ClickException:
        raise
    except Exception as e:
        output_error(e, json_output, debug)
        return

    if not result.ok:
        logger.debug(f"Schema {schema} has {len(result.errors)} error(s)")
        output_failure(result, json_output)

    if json_output:
        output_result({"valid": True, **format_diagnostics(result)}, json_output, debug)
    else:
        output_warnings(result)
        output_result(f"{click.style('Schema is valid:', fg='green', bold=True)} {schema}")
