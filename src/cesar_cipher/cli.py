from typing import Optional, Tuple

import click
from rich.console import Console

from cesar_cipher.config import CesarConfig, DEFAULT_INDEX_DIGIT_NUMBER, DEFAULT_START_INDEX
from cesar_cipher.errors import CesarError
from cesar_cipher.fixed_width import add_missing_character, digit_groups_to_numbers, split_digit_string
from cesar_cipher.log_config import configure_logging
from cesar_cipher.ui import render

ENVVAR_PREFIX = "CESAR"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every pipeline stage to stderr")
def cli(verbose: bool):
    configure_logging(verbose)


CONFIG_OPTIONS = [
    click.option("--key-value", "-k", type=int, help="Signed shift added to every group"),
    click.option("--group-size", "-g", type=int, help="Number of symbols packed per group"),
    click.option("--possibilities", "-n", type=int, help="Modulus of the shift"),
    click.option("--digits", "-d", type=int, help="Digit width of one symbol code"),
    click.option("--start-index", "-s", type=int, help=f"Code of the first alphabet symbol  [default: {DEFAULT_START_INDEX}]"),
    click.option("--alphabet", "-a", help="Custom alphabet symbols, numbered from the start index"),
]


def config_options(fn):
    """Options shared by the commands that build a full configuration."""
    for option in reversed(CONFIG_OPTIONS):
        fn = option(fn)
    return fn


def build_config(
    key_value: Optional[int],
    group_size: Optional[int],
    possibilities: Optional[int],
    digits: Optional[int],
    start_index: Optional[int],
    alphabet: Optional[str],
) -> CesarConfig:
    """Apply the command line overrides on top of the default configuration."""
    if alphabet:
        try:
            config = CesarConfig.from_symbols(alphabet, start_index=start_index if start_index is not None else DEFAULT_START_INDEX)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--alphabet")
    else:
        config = CesarConfig.default()
        if start_index is not None:
            config = config.start_index(start_index)

    if key_value is not None:
        config = config.key_value(key_value)
    if group_size is not None:
        config = config.group_size(group_size)
    if possibilities is not None:
        config = config.number_of_possibilities(possibilities)
    if digits is not None:
        config = config.index_digit_number(digits)
    return config


@cli.command()
@click.argument("words", nargs=-1, required=True)
@config_options
def encrypt(words: Tuple[str, ...], **options):
    """Encrypt each word and print one ciphertext per line."""
    config = build_config(**options)
    try:
        for word in words:
            click.echo(config.encrypt_word(word))
    except CesarError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument("word")
@config_options
def trace(word: str, **options):
    """Show every pipeline stage for a single word."""
    config = build_config(**options)
    try:
        encoding_trace = config.trace_word(word)
    except CesarError as e:
        raise click.ClickException(str(e))
    Console().print(render(encoding_trace))


@cli.command()
@click.argument("digits")
@click.option("--group-size", "-g", type=int, default=1, show_default=True)
@click.option("--digits-per-symbol", "-d", type=int, default=DEFAULT_INDEX_DIGIT_NUMBER, show_default=True)
def pad(digits: str, group_size: int, digits_per_symbol: int):
    """Right pad a digit string with zeros up to a whole group width."""
    try:
        click.echo(add_missing_character(digits, group_size, digits_per_symbol))
    except CesarError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument("digits")
@click.option("--group-size", "-g", type=int, default=1, show_default=True)
@click.option("--digits-per-symbol", "-d", type=int, default=DEFAULT_INDEX_DIGIT_NUMBER, show_default=True)
@click.option("--start-index", "-s", type=int, default=DEFAULT_START_INDEX, show_default=True)
def split(digits: str, group_size: int, digits_per_symbol: int, start_index: int):
    """Split a fixed-width digit string and print the zero-based group values."""
    try:
        chunks = split_digit_string(digits, group_size, digits_per_symbol)
        numbers = digit_groups_to_numbers(chunks, start_index, digits_per_symbol)
    except CesarError as e:
        raise click.ClickException(str(e))

    for chunk, number in zip(chunks, numbers):
        click.echo(f"{chunk}\t{number}")


@cli.command("demo-api")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True)
@click.option("--reload", is_flag=True, help="Restart the server when the sources change")
def demo_api(host: str, port: int, reload: bool):
    """Serve the cipher over HTTP (GET /api/demo1, POST /api/encrypt)."""
    try:
        import uvicorn
    except ImportError as e:
        raise click.ClickException(f"Demo API dependencies not available ({e}). Install with: pip install -e '.[demo]'")

    click.echo(f"Serving GET /api/demo1 and POST /api/encrypt on http://{host}:{port}")
    uvicorn.run("demo_api.api:app", host=host, port=port, reload=reload)


def main():
    cli(auto_envvar_prefix=ENVVAR_PREFIX)


if __name__ == "__main__":
    main()
