"""Parameter decorators for SwiftCLI."""

from typing import Any, Callable, List, Optional

def option(
    *param_decls: str,
    type: Any = str,
    required: bool = False,
    default: Any = None,
    help: str = None,
    is_flag: bool = False,
    choices: Optional[List[Any]] = None,
    case_sensitive: bool = True
) -> Callable:
    """
    Decorator to add an option to a command.

    Options are named parameters that can be provided in any order.

    Args:
        param_decls: Option names (e.g., "--name", "-n")
        type: Expected type
        required: Whether option is required
        default: Default value
        help: Help text
        is_flag: Whether option is a boolean flag that takes no value
        choices: List of valid choices
        case_sensitive: Whether choices are case sensitive

    Example:
        @app.command()
        @option("--count", "-c", type=int, default=1)
        @option("--verbose", is_flag=True)
        def process(count: int, verbose: bool):
            '''Process data'''
    """
    def decorator(f: Callable) -> Callable:
        if not hasattr(f, '_options'):
            f._options = []

        # decorators apply bottom-up; insert so help lists options top-down
        f._options.insert(0, {
            'param_decls': param_decls,
            'type': bool if is_flag else type,
            'required': required,
            'default': False if is_flag and default is None else default,
            'help': help,
            'is_flag': is_flag,
            'choices': choices,
            'case_sensitive': case_sensitive
        })
        return f
    return decorator

def argument(
    name: str,
    type: Any = str,
    required: bool = True,
    help: str = None,
    default: Any = None,
    multiple: bool = False
) -> Callable:
    """
    Decorator to add a command argument.

    Arguments are positional parameters that must be provided in order.
    A ``multiple`` argument collects every remaining positional into a list
    and must be the last one.

    Args:
        name: Argument name
        type: Expected type
        required: Whether argument is required
        help: Help text
        default: Default value if not required
        multiple: Whether argument collects all remaining values

    Example:
        @app.command()
        @argument("names", multiple=True)
        def greet(names: list):
            '''Greet everyone'''
    """
    def decorator(f: Callable) -> Callable:
        if not hasattr(f, '_arguments'):
            f._arguments = []

        f._arguments.insert(0, {
            'name': name,
            'type': type,
            'required': required,
            'help': help,
            'default': default,
            'multiple': multiple
        })
        return f
    return decorator
