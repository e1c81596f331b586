"""Main CLI application class."""

import sys
from typing import Any, Dict, List, Optional

from .exceptions import UsageError
from .formatting import console, format_error
from .parsing import convert_type, parse_args, validate_choice

class CLI:
    """
    Main CLI application class.

    Handles command registration, argument parsing and command execution.

    Attributes:
        name: Application name
        help: Application description
        version: Application version
        debug: Re-raise command errors instead of printing them
        default_command: Command used when the first argument is not a command
        commands: Registered commands

    Example:
        >>> app = CLI(name="myapp", version="1.0.0")
        >>> @app.command()
        ... def greet(name: str):
        ...     '''Greet someone'''
        ...     print(f"Hello {name}!")
        >>> app.run()
    """

    def __init__(
        self,
        name: str,
        help: Optional[str] = None,
        version: Optional[str] = None,
        debug: bool = False,
        default_command: Optional[str] = None
    ):
        self.name = name
        self.help = help
        self.version = version
        self.debug = debug
        self.default_command = default_command

        self.commands: Dict[str, Dict[str, Any]] = {}

    def command(
        self,
        name: Optional[str] = None,
        help: Optional[str] = None
    ):
        """
        Decorator to register a command.

        Args:
            name: Command name (defaults to function name)
            help: Command help text
        """
        def decorator(f):
            cmd_name = name or f.__name__
            self.commands[cmd_name] = {
                'name': cmd_name,
                'func': f,
                'help': help or _summary(f.__doc__)
            }

            return f
        return decorator

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run the CLI application.

        Args:
            args: Command line arguments (defaults to sys.argv[1:])

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            args = sys.argv[1:] if args is None else list(args)

            # Show help if no arguments
            if not args or args[0] in ['-h', '--help']:
                self._print_help()
                return 0

            # Show version if requested
            if args[0] in ['-v', '--version'] and self.version:
                console.print(self.version, highlight=False)
                return 0

            command_name = args[0]
            command_args = args[1:]

            if command_name not in self.commands:
                if self.default_command is None:
                    format_error(f"Unknown command: {command_name}")
                    self._print_help()
                    return 1
                command_name = self.default_command
                command_args = args

            command = self.commands[command_name]
            options_part = command_args[:command_args.index('--')] if '--' in command_args else command_args
            if '-h' in options_part or '--help' in options_part:
                self._print_command_help(command)
                return 0

            try:
                result = command['func'](**self._parse_args(command, command_args))
            except Exception as e:
                if self.debug:
                    raise
                format_error(str(e))
                return 1
            return result if isinstance(result, int) else 0

        except KeyboardInterrupt:
            console.print("\nOperation cancelled by user")
            return 130

    def _parse_args(self, command: Dict[str, Any], args: List[str]) -> Dict[str, Any]:
        """Parse command arguments."""
        params = {}
        func = command['func']
        options = getattr(func, '_options', [])
        arguments = getattr(func, '_arguments', [])

        flags, known = set(), set()
        for opt in options:
            names = {p.lstrip('-').replace('-', '_') for p in opt['param_decls']}
            (flags if opt['is_flag'] else known).update(names)

        # unrecognised dash-prefixed words are kept as positional values
        parsed_args = parse_args(args, flags, known)

        # Handle options
        for opt in options:
            # Use the longest parameter name (usually the --long-form) for the parameter name
            param_names = [p.lstrip('-').replace('-', '_') for p in opt['param_decls']]
            name = max(param_names, key=len)

            found = [p for p in param_names if p in parsed_args]
            if found:
                value = convert_type(parsed_args[found[0]], opt['type'], name)
                if opt['choices']:
                    validate_choice(value, opt['choices'], name, opt['case_sensitive'])
                params[name] = value
            elif opt['required']:
                raise UsageError(f"Missing required option: {name}")
            else:
                params[name] = opt['default']

        # Handle arguments
        positionals = [v for k, v in parsed_args.items() if k.startswith('arg')]
        for i, arg in enumerate(arguments):
            name = arg['name']
            if arg['multiple']:
                values = [convert_type(v, arg['type'], name) for v in positionals[i:]]
                if not values and arg['required']:
                    raise UsageError(f"Missing required argument: {name}")
                params[name] = values or list(arg['default'] or [])
                positionals = positionals[:i]
                break
            if i < len(positionals):
                params[name] = convert_type(positionals[i], arg['type'], name)
            elif arg['required']:
                raise UsageError(f"Missing required argument: {name}")
            else:
                params[name] = arg['default']

        if len(positionals) > len(arguments):
            raise UsageError(f"Unexpected argument: {positionals[len(arguments)]}")

        return params

    def _print_help(self) -> None:
        """Print application help message."""
        console.print(f"\n[bold]{self.name}[/]")
        if self.help:
            console.print(f"\n{self.help}", markup=False)

        console.print("\n[bold]Commands:[/]")
        for name, cmd in self.commands.items():
            console.print(f"  {name:20} {cmd['help'] or ''}", markup=False)

        console.print("\nUse -h or --help with any command for more info")
        if self.version:
            console.print("Use -v or --version to show version")

    def _print_command_help(self, command: Dict[str, Any]) -> None:
        """Print help for a single command."""
        func = command['func']
        usage = [self.name, command['name']]
        for arg in getattr(func, '_arguments', []):
            label = arg['name'].upper() + ('...' if arg['multiple'] else '')
            usage.append(label if arg['required'] else f"[{label}]")
        console.print(f"\nUsage: {' '.join(usage)} [OPTIONS]", markup=False)
        if func.__doc__:
            console.print(f"\n{func.__doc__.strip()}", markup=False)

        options = getattr(func, '_options', [])
        if options:
            console.print("\n[bold]Options:[/]")
            for opt in options:
                decls = ', '.join(opt['param_decls'])
                text = opt['help'] or ''
                if opt['choices']:
                    text += f" [{'|'.join(str(c) for c in opt['choices'])}]"
                console.print(f"  {decls:24} {text}", markup=False)

    def __repr__(self) -> str:
        return f"<CLI name={self.name}>"


def _summary(doc: Optional[str]) -> Optional[str]:
    """First line of a docstring."""
    lines = (doc or '').strip().splitlines()
    return lines[0] if lines else None
