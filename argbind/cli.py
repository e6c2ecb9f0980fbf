import asyncio
import logging
from typing import List, Optional

import typer

from config.settings import settings

from .commands import CommandArgument, CommandArgumentError, converters, type_names
from .core import CommandContext, bind_arguments, find_prefix, has_mention_prefix, has_string_prefix, split_arguments

app = typer.Typer(
    name="argbind",
    help="Prefix command argument tools",
    add_completion=False,
)

CATCH_ALL_SUFFIX = "..."


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def parse_param(index: int, text: str) -> CommandArgument:
    """Parse ``label``, ``label=default`` or ``label...`` into an argument."""
    catch_all = text.endswith(CATCH_ALL_SUFFIX)
    if catch_all:
        text = text[: -len(CATCH_ALL_SUFFIX)]

    label, has_default, default = text.partition("=")
    arg_type = type_names.resolve(label.strip())
    if arg_type is None:
        raise typer.BadParameter(f"Unknown argument type: {label!r}")

    return CommandArgument(
        name=f"arg{index}",
        arg_type=arg_type,
        required=not has_default and not catch_all,
        default=default if has_default else None,
        catch_all=catch_all,
    )


@app.command()
def tokenize(
    text: str = typer.Argument(help="Argument text to split"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Print the tokens of an argument string, one per line."""
    setup_logging(log_level or settings.log_level)

    for token in split_arguments(text):
        typer.echo(repr(token))


@app.command()
def prefix(
    text: str = typer.Argument(help="Message content"),
    literal: Optional[str] = typer.Option(None, "--prefix", help="Literal prefix (defaults to the configured one)"),
    user_id: Optional[int] = typer.Option(None, "--user-id", help="Match a mention of this user id"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Check a message for a command prefix."""
    setup_logging(log_level or settings.log_level)

    if literal is not None:
        consumed = has_string_prefix(text, literal)
        if consumed is None and user_id is not None:
            consumed = has_mention_prefix(text, user_id)
    else:
        consumed = find_prefix(text, user=user_id)

    if consumed is None:
        typer.echo("no match")
        raise typer.Exit(1)

    typer.echo(f"{consumed}: {text[consumed:]!r}")


@app.command("converters")
def list_converters(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """List the registered argument types."""
    setup_logging(log_level or settings.log_level)

    typer.echo("🔧 Registered converters:")
    for target_type in converters.types():
        converter = converters.get(target_type)
        typer.echo(f"  {type_names.get(target_type):<15} {type(converter).__name__}")


@app.command()
def bind(
    text: str = typer.Argument(help="Argument text to bind"),
    params: List[str] = typer.Option([], "--param", "-p", help="Argument type: label, label=default or label..."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Bind an argument string against a list of argument types."""
    setup_logging(log_level or settings.log_level)

    arguments = [parse_param(index, param) for index, param in enumerate(params)]

    async def run_bind() -> list:
        ctx = CommandContext(content=text, raw_arguments=list(split_arguments(text)))
        # Defaults given on the command line are strings; convert them like tokens
        for argument in arguments:
            if argument.default is not None:
                argument.default = await converters.convert(argument.default, ctx, argument.arg_type)
        return await bind_arguments(arguments, ctx.raw_arguments, ctx)

    try:
        bound = asyncio.run(run_bind())
    except CommandArgumentError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1)

    for argument, value in zip(arguments, bound[1:]):
        typer.echo(f"{argument.name} ({type_names.get(argument.arg_type)}): {value!r}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
