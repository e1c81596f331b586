"""Utility functions for parsing and validating command-line arguments."""

from typing import Any, Collection, Dict, List, Optional, Type

from .exceptions import BadParameter

def parse_args(
    args: List[str],
    flags: Collection[str] = (),
    options: Optional[Collection[str]] = None
) -> Dict[str, Any]:
    """
    Parse command line arguments into a dictionary.

    Options named in ``flags`` never consume a value. Everything after a
    bare ``--`` is positional. When ``options`` is given, dash-prefixed
    arguments that name neither an option nor a flag are positional too,
    so values like ``-1`` need no escaping.

    Args:
        args: List of command line arguments
        flags: Normalized names of boolean options
        options: Normalized names of value options (None accepts any name)

    Returns:
        Dictionary of parsed arguments; positionals are stored as arg0, arg1, ...

    Example:
        >>> parse_args(['--name', 'test', '--flag', 'x'], flags={'flag'})
        {'name': 'test', 'flag': True, 'arg0': 'x'}
    """
    parsed: Dict[str, Any] = {}
    positional = 0
    options_done = False
    i = 0
    while i < len(args):
        arg = args[i]

        if not options_done and arg == '--':
            options_done = True
        elif not options_done and _is_option(arg, flags, options):
            key = _option_key(arg)

            # Check if next arg is a value or another flag
            if key in flags or i + 1 >= len(args) or args[i + 1].startswith('-'):
                parsed[key] = True
            else:
                parsed[key] = args[i + 1]
                i += 1
        else:
            parsed[f'arg{positional}'] = arg
            positional += 1

        i += 1

    return parsed

def _option_key(arg: str) -> str:
    return arg.lstrip('-').replace('-', '_')

def _is_option(arg: str, flags: Collection[str], options: Optional[Collection[str]]) -> bool:
    if not arg.startswith('-') or len(arg) < 2:
        return False
    if options is None:
        return True
    key = _option_key(arg)
    return key in flags or key in options

def convert_type(
    value: Any,
    type_: Type,
    param_name: str
) -> Any:
    """
    Convert string value to specified type.

    Args:
        value: String value to convert
        type_: Target type
        param_name: Parameter name for error messages

    Returns:
        Converted value

    Raises:
        BadParameter: If conversion fails
    """
    if isinstance(value, bool) and type_ is not bool:
        raise BadParameter(f"Option {param_name} requires a value")
    try:
        if type_ == bool:
            if isinstance(value, bool):
                return value
            return value.lower() in ('true', 't', 'yes', 'y', '1')
        return type_(value)
    except (ValueError, TypeError):
        raise BadParameter(
            f"Invalid value for {param_name}: {value} (expected {type_.__name__})"
        )

def validate_choice(
    value: Any,
    choices: List[Any],
    param_name: str,
    case_sensitive: bool = True
) -> None:
    """
    Validate value is one of allowed choices.

    Args:
        value: Value to validate
        choices: List of allowed choices
        param_name: Parameter name for error messages
        case_sensitive: Whether to do case-sensitive comparison

    Raises:
        BadParameter: If value not in choices
    """
    if not case_sensitive and isinstance(value, str):
        valid = value.lower() in [str(c).lower() for c in choices]
    else:
        valid = value in choices
    if not valid:
        raise BadParameter(
            f"Invalid choice for {param_name}: {value} "
            f"(choose from {', '.join(str(c) for c in choices)})"
        )
