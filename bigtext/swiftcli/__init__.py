"""
SwiftCLI - a small command-line framework.

Basic Usage:
    >>> from bigtext.swiftcli import CLI, option
    >>> app = CLI(name="my-app", help="My CLI app")
    >>> @app.command()
    ... @option("--name", default="world")
    ... def hello(name: str):
    ...     '''Say hello to someone'''
    ...     print(f"Hello {name}!")
    >>> app.run(["hello", "--name", "you"])
"""

from .cli import CLI
from .decorators import argument, option
from .exceptions import BadParameter, SwiftCLIException, UsageError
from .formatting import console, format_error

__all__ = [
    'CLI',
    'argument',
    'option',
    'SwiftCLIException',
    'UsageError',
    'BadParameter',
    'console',
    'format_error',
]
