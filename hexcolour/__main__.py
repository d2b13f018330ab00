"""hexcolour — encode colours as hexadecimal strings in any notation style.

Usage: hexcolour <command> [options]

Commands are auto-discovered from hexcolour/commands/.
Each command module's docstring is its documentation.
Run `hexcolour help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, hexcolour looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from hexcolour import registry
from hexcolour.core.env import load_env
from hexcolour.core.report import format_json, format_text
from hexcolour.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'hexcolour.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  hexcolour hex 255,128,0\n'
        '  hexcolour hex 255,128,0,64 --alpha-first --style aarrggbb\n'
        '  hexcolour hex 1,0.533,0,0.267 --style S --json\n'
        '  hexcolour styles 255,136,0\n'
        '  hexcolour ramp 0,0,0 255,255,255 -n 5\n'
        '  hexcolour swatch ./tmp/ramp.png 0,0,0 255,128,0 -n 8\n'
        '  hexcolour help hex\n'
        '\n'
        'Config env vars (set in .env or environment):\n'
        '  HEXCOLOUR_STYLE=rrggbb      default style token\n'
        '  HEXCOLOUR_RAMP_LENGTH=10    default ramp length\n'
    )
    parser = argparse.ArgumentParser(
        prog='hexcolour',
        description='Encode colours as hexadecimal strings in any notation style.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        cmd.configure(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_doc(name, cmd.help)}')
        print('\nRun: hexcolour help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _command_word(argv: list[str]) -> str | None:
    """First positional argument, skipping global options and their values."""
    words = iter(argv)
    for word in words:
        if word == '--env-file':
            next(words, None)
        elif not word.startswith('-'):
            return word
    return None


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    parser = _build_parser()

    word = _command_word(argv)
    commands = registry.all_commands()
    if word is not None and word != 'help' and word not in commands:
        print(f'Unknown command: {word}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}, help', file=sys.stderr)
        sys.exit(1)

    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'hexcolour: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    report = Report(command=args.command)
    cmd = registry.get(args.command)
    try:
        cmd.execute(report, args)
    except (ValueError, TypeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
