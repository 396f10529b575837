import json
import logging
import os
import traceback
from typing import Any

import click

from docspec.validator import ValidationResult


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Get a boolean flag from an environment variable.

    Args:
        env_var: Name of the environment variable
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to "1", "true", or "yes" (case insensitive)
        False otherwise
    """
    value = os.environ.get(env_var, "").lower()
    return value in ("1", "true", "yes") if value else default


def configure_logging(debug: bool = False) -> None:
    """Configure logging for all modules.

    Args:
        debug: Whether to enable debug logging (also enabled by DOCSPEC_DEBUG)
    """
    # Check environment variable if debug flag is not set
    if not debug:
        debug = get_env_flag("DOCSPEC_DEBUG")

    level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    root_logger.addHandler(stream_handler)

    for logger_name in logging.root.manager.loggerDict:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


def format_error(error: Exception, debug: bool = False) -> dict[str, Any]:
    """Format an error for output.

    Args:
        error: The exception that occurred
        debug: Whether to include debug information

    Returns:
        Dict containing error information
    """
    error_info = {"error": str(error)}

    if debug:
        error_info["traceback"] = traceback.format_exc()
        error_info["type"] = error.__class__.__name__

    return error_info


def format_diagnostics(result: ValidationResult) -> dict[str, list[dict[str, Any]]]:
    """Render the errors and warnings of a result as plain data."""
    return {
        "errors": [
            {"path": error.path, "location": error.location, "message": error.message}
            for error in result.errors
        ],
        "warnings": [
            {"path": warning.path, "location": warning.location, "message": warning.message}
            for warning in result.warnings
        ],
    }


def output_result(result: Any, json_output: bool = False, debug: bool = False) -> None:
    """Output a result in either JSON or human-readable format.

    Args:
        result: The result to output
        json_output: Whether to output in JSON format
        debug: Whether to include debug information
    """
    if json_output:
        print(json.dumps({"status": "ok", "result": result}, indent=2, default=str))
    else:
        click.echo(result)


def output_warnings(result: ValidationResult) -> None:
    for warning in result.warnings:
        click.echo(
            f"{click.style('Warning:', fg='yellow')} {warning.location}: {warning.message}",
            err=True,
        )


def output_failure(result: ValidationResult, json_output: bool = False) -> None:
    """Output every error of a failed result and abort.

    Raises:
        click.Abort: Always
    """
    if json_output:
        print(json.dumps({"status": "failed", **format_diagnostics(result)}, indent=2))
    else:
        output_warnings(result)
        for error in result.errors:
            click.echo(
                f"{click.style('Error:', fg='red')} {error.location}: {error.message}", err=True
            )

    raise click.Abort()


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Output an error in either JSON or human-readable format.

    Args:
        error: The exception that occurred
        json_output: Whether to output in JSON format
        debug: Whether to include debug information
    """
    error_info = format_error(error, debug)

    if json_output:
        print(json.dumps({"status": "error", **error_info}, indent=2))
    else:
        click.echo(f"Error: {error_info['error']}", err=True)
        if debug and "traceback" in error_info:
            click.echo("\nTraceback:", err=True)
            click.echo(error_info["traceback"], err=True)

    raise click.Abort()
