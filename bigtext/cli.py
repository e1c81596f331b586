import sys
from pathlib import Path
from typing import List, Optional

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .base import BigText
from .charmaps import CATEGORIES, GlyphTable, digits, letters, punctuation, whitespace
from .config import Settings, load_settings, logger
from .swiftcli import CLI, argument, console, option
from .version import __prog__, __version__

CHARSETS = list(CATEGORIES)
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Initialize CLI app
app = CLI(
    name=__prog__,
    help="Print text as big block letters",
    version=__version__,
    default_command="render",
)


def _resolve(config: Optional[str], **overrides) -> Settings:
    """Settings from file and environment with command-line overrides applied."""
    settings = load_settings(config).update(overrides, source="option")
    logger.set_level(settings.level())
    return settings


def _categories() -> dict:
    """Map every built-in character to the name of its category."""
    names = {}
    for name, loader in (("letters", letters), ("digits", digits),
                         ("punctuation", punctuation), ("whitespace", whitespace)):
        names.update(dict.fromkeys(loader(), name))
    return names


@app.command()
def version():
    """Show the version of bigtext."""
    console.print(f"{__prog__} version: {__version__}", highlight=False)


@app.command()
@argument("text", multiple=True, help="Strings to print")
@option("--charset", "-c", help="Built-in glyph set to print with", choices=CHARSETS, case_sensitive=False)
@option("--glyphs", "-g", help="JSON glyph file to print with")
@option("--no-header", is_flag=True, help="Do not print the string=\"...\" line")
@option("--config", help="JSON or YAML settings file")
@option("--log-level", help="Log level", choices=LOG_LEVELS, case_sensitive=False)
def render(text: List[str], charset: str = None, glyphs: str = None,
           no_header: bool = False, config: str = None, log_level: str = None):
    """Print each TEXT in its ascii-art form."""
    settings = _resolve(
        config,
        charset=charset,
        glyph_file=glyphs,
        show_header=False if no_header else None,
        log_level=log_level,
    )
    # load once, every string is printed with the same table
    printer = BigText("", settings.glyph_table())
    out = sys.stdout
    for item in text:
        missing = sorted({c for c in item if not printer.is_supported(c)})
        if missing:
            logger.info(f"No glyph for {''.join(missing)!r}, printing blanks")
        if settings.show_header:
            out.write(f'string="{item}"\n')
        printer.set_text(item).render(out)
    out.flush()


@app.command()
@option("--charset", "-c", help="Built-in glyph set to list", choices=CHARSETS, case_sensitive=False)
@option("--glyphs", "-g", help="JSON glyph file to list")
@option("--config", help="JSON or YAML settings file")
def chars(charset: str = None, glyphs: str = None, config: str = None):
    """List the characters the selected glyph table can print."""
    settings = _resolve(config, charset=charset, glyph_file=glyphs)
    table: GlyphTable = settings.glyph_table()

    source = Path(settings.glyph_file).name if settings.glyph_file else settings.charset
    view = Table(title=f"{escape(str(source))}: {len(table)} characters")
    view.add_column("Char", justify="center")
    view.add_column("Code point")
    view.add_column("Category")
    categories = _categories()
    for char in sorted(table):
        view.add_row(Text(repr(char)), f"U+{ord(char):04X}", categories.get(char, "custom"))
    console.print(view)


def main(args: Optional[List[str]] = None) -> int:
    """Console script entry point."""
    return app.run(args)


if __name__ == "__main__":
    sys.exit(main())
