import click

from docspec.cli.convert import decode, encode
from docspec.cli.validate import validate


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """docspec CLI"""
    # Show help when no subcommand is provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(validate)
cli.add_command(decode)
cli.add_command(encode)


if __name__ == "__main__":
    cli()
