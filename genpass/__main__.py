"""
CLI interface for genpass.
"""

import logging
import sys

import click
import pyperclip

from .config import Config, default_config
from .exceptions import GenpassException
from .utils.password_generator import PasswordGenerator


DEFAULTS = default_config()


def copy_to_clipboard(text: str) -> None:
    """Copy text to the clipboard, reporting failures on stderr."""
    try:
        pyperclip.copy(text)
        click.echo("Password(s) copied to clipboard.", err=True)
    except pyperclip.PyperclipException as e:
        click.echo(f"Could not copy to clipboard: {e}", err=True)


BOOLEAN_FLAGS_NOTE = (
    "Boolean options take no value: use --symbols or --no-symbols rather than "
    "--symbols=true or --symbols=false. The same applies to every on/off pair."
)


@click.command(epilog=BOOLEAN_FLAGS_NOTE)
@click.option("--length", "-l", default=DEFAULTS.length, type=int, show_default=True,
              help="Length of the password")
@click.option("--characters", default=DEFAULTS.character_set,
              help="Character set to draw from, overrides the character type flags")
@click.option("--symbols/--no-symbols", default=DEFAULTS.include_symbols, show_default=True,
              help="Include symbols")
@click.option("--numbers/--no-numbers", default=DEFAULTS.include_numbers, show_default=True,
              help="Include numbers")
@click.option("--lowercase/--no-lowercase", default=DEFAULTS.include_lowercase, show_default=True,
              help="Include lowercase letters")
@click.option("--uppercase/--no-uppercase", default=DEFAULTS.include_uppercase, show_default=True,
              help="Include uppercase letters")
@click.option("--exclude-similar/--include-similar", default=DEFAULTS.exclude_similar,
              show_default=True, help="Exclude similar characters (i, l, o, 0, 1...)")
@click.option("--exclude-ambiguous/--include-ambiguous", default=DEFAULTS.exclude_ambiguous,
              show_default=True, help="Exclude ambiguous symbols (<>{}[]()/|\\...)")
@click.option("--times", "-n", default=1, type=click.IntRange(min=0), show_default=True,
              help="How many passwords to generate")
@click.option("--copy", "-c", is_flag=True, help="Also copy the passwords to the clipboard")
@click.option("--show-charset", is_flag=True, help="Describe the character set on stderr")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="genpass")
def cli(length: int, characters: str, symbols: bool, numbers: bool, lowercase: bool,
        uppercase: bool, exclude_similar: bool, exclude_ambiguous: bool, times: int,
        copy: bool, show_charset: bool, verbose: bool) -> None:
    """genpass - generate secure random passwords."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = Config(
        length=length,
        character_set=characters,
        include_symbols=symbols,
        include_numbers=numbers,
        include_lowercase=lowercase,
        include_uppercase=uppercase,
        exclude_similar=exclude_similar,
        exclude_ambiguous=exclude_ambiguous,
    )

    try:
        generator = PasswordGenerator(config)
        passwords = generator.generate_many(times)
    except GenpassException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if show_charset:
        click.echo(f"Character set: {generator.charset_info()}", err=True)

    for password in passwords:
        click.echo(password)

    if copy and passwords:
        copy_to_clipboard("\n".join(passwords))


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
