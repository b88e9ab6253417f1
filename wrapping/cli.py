#!/usr/bin/env python3
"""Command-line interface for paragraph-wrap.

Usage:
    para-wrap fill README.txt --width 60
    para-wrap wrap notes.txt --width 40 --subsequent-indent "  " --json
    cat notes.txt | para-wrap fill --paragraphs --max-lines 3
    para-wrap shorten --width 30 title.txt
    para-wrap dedent snippet.py
    para-wrap indent --prefix "> " message.txt
    para-wrap --config ~/.para-wrap.yaml fill notes.txt
"""

import argparse
import json
import logging
import re
import sys
from typing import Any, Dict, List, Optional

import yaml

from config import build_wrap_config, get_config_value, load_config
from utils.string_utils import dedent, indent
from wrapping.text_wrapper import TextWrapper, shorten
from wrapping.wrap_config import InvalidConfigurationError


logger = logging.getLogger(__name__)


_PARAGRAPH_BREAK_RE = re.compile(r'\n[ \t]*\n\s*')


def setup_argparser() -> argparse.ArgumentParser:
    """Set up the argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog='para-wrap',
        description='Wrap, fill, shorten, dedent and indent plain text.',
        epilog='Example: para-wrap fill notes.txt --width 60',
    )

    parser.add_argument(
        '--config', '-c',
        help='YAML configuration file (default: built-in defaults)',
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging',
    )

    input_parser = argparse.ArgumentParser(add_help=False)
    input_parser.add_argument(
        'file',
        nargs='?',
        default='-',
        help='Input file (default: stdin)',
    )

    wrap_options = argparse.ArgumentParser(add_help=False)
    wrap_options.add_argument(
        '--width', '-w',
        type=int,
        help='Maximum line width (default: 70)',
    )
    wrap_options.add_argument(
        '--initial-indent',
        help='String prepended to the first line',
    )
    wrap_options.add_argument(
        '--subsequent-indent',
        help='String prepended to every line but the first',
    )
    wrap_options.add_argument(
        '--tab-size',
        type=int,
        help='Tab stop interval for tab expansion (default: 8)',
    )
    wrap_options.add_argument(
        '--no-expand-tabs',
        dest='expand_tabs',
        action='store_false',
        default=None,
        help='Do not expand tabs before wrapping',
    )
    wrap_options.add_argument(
        '--keep-whitespace',
        dest='replace_whitespace',
        action='store_false',
        default=None,
        help='Do not turn newlines and other whitespace into spaces',
    )
    wrap_options.add_argument(
        '--fix-sentence-endings',
        action='store_true',
        default=None,
        help='Put two spaces after sentence-ending punctuation',
    )
    wrap_options.add_argument(
        '--no-break-long-words',
        dest='break_long_words',
        action='store_false',
        default=None,
        help='Let words longer than the width overflow',
    )
    wrap_options.add_argument(
        '--no-break-on-hyphens',
        dest='break_on_hyphens',
        action='store_false',
        default=None,
        help='Do not split words at hyphens; spaces are no longer break points',
    )
    wrap_options.add_argument(
        '--keep-edge-whitespace',
        dest='drop_whitespace',
        action='store_false',
        default=None,
        help='Keep whitespace at the start and end of lines',
    )
    wrap_options.add_argument(
        '--max-lines',
        type=int,
        help='Truncate each paragraph to this many lines',
    )
    wrap_options.add_argument(
        '--placeholder',
        help='Text appended to truncated output (default: " [...]")',
    )
    wrap_options.add_argument(
        '--paragraphs', '-p',
        action='store_true',
        help='Wrap each blank-line separated paragraph on its own',
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    wrap_parser = subparsers.add_parser(
        'wrap',
        parents=[input_parser, wrap_options],
        help='Print wrapped lines',
    )
    wrap_parser.add_argument(
        '--json',
        action='store_true',
        help='Print the lines as a JSON list',
    )

    subparsers.add_parser(
        'fill',
        parents=[input_parser, wrap_options],
        help='Print the filled paragraph',
    )

    shorten_parser = subparsers.add_parser(
        'shorten',
        parents=[input_parser],
        help='Collapse whitespace and truncate to one line',
    )
    shorten_parser.add_argument(
        '--width', '-w',
        type=int,
        required=True,
        help='Maximum width of the result',
    )
    shorten_parser.add_argument(
        '--placeholder',
        help='Text appended when truncated (default: " [...]")',
    )

    subparsers.add_parser(
        'dedent',
        parents=[input_parser],
        help='Remove common leading whitespace',
    )

    indent_parser = subparsers.add_parser(
        'indent',
        parents=[input_parser],
        help='Prefix lines with a string',
    )
    indent_parser.add_argument(
        '--prefix',
        required=True,
        help='String to prepend to each line',
    )
    indent_parser.add_argument(
        '--all-lines',
        action='store_true',
        help='Prefix blank lines too',
    )

    return parser


def configure_logging(config: Dict[str, Any], verbose: bool = False) -> None:
    """Configure root logging from the 'logging' config section."""
    level_name = get_config_value(config, 'logging.level', 'WARNING')
    level = logging.DEBUG if verbose else getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format=get_config_value(config, 'logging.format', '%(asctime)s %(levelname)s %(message)s'),
        datefmt=get_config_value(config, 'logging.datefmt', '%Y-%m-%d %H:%M:%S'),
    )


def read_input(path: str) -> str:
    """Read the whole input file, or stdin for '-'."""
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank lines, dropping empty paragraphs."""
    return [p for p in _PARAGRAPH_BREAK_RE.split(text) if p.strip()]


def wrap_options_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the WrapConfig overrides given on the command line."""
    return {
        'width': args.width,
        'initial_indent': args.initial_indent,
        'subsequent_indent': args.subsequent_indent,
        'tab_size': args.tab_size,
        'expand_tabs': args.expand_tabs,
        'replace_whitespace': args.replace_whitespace,
        'fix_sentence_endings': args.fix_sentence_endings,
        'break_long_words': args.break_long_words,
        'break_on_hyphens': args.break_on_hyphens,
        'drop_whitespace': args.drop_whitespace,
        'max_lines': args.max_lines,
        'placeholder': args.placeholder,
    }


def run_wrap(args: argparse.Namespace, config: Dict[str, Any], text: str) -> str:
    """Run the wrap or fill command and return its output."""
    wrap_config = build_wrap_config(config, **wrap_options_from_args(args))
    wrapper = TextWrapper(wrap_config)
    logger.debug(f"Using {wrap_config}")

    paragraphs = split_paragraphs(text) if args.paragraphs else [text]
    wrapped = [wrapper.wrap(paragraph) for paragraph in paragraphs]

    if args.command == 'wrap' and args.json:
        if not args.paragraphs:
            return json.dumps(wrapped[0], indent=2)
        return json.dumps(wrapped, indent=2)

    return "\n\n".join("\n".join(lines) for lines in wrapped)


def run_shorten(args: argparse.Namespace, config: Dict[str, Any], text: str) -> str:
    """Run the shorten command and return its output."""
    options = {}
    placeholder = args.placeholder
    if placeholder is None:
        placeholder = get_config_value(config, 'wrap.placeholder')
    if placeholder is not None:
        options['placeholder'] = placeholder
    return shorten(text, args.width, **options)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = setup_argparser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        configure_logging(config, args.verbose)

        text = read_input(args.file)
        logger.debug(f"Read {len(text)} characters from {args.file}")

        if args.command in ('wrap', 'fill'):
            output = run_wrap(args, config, text)
        elif args.command == 'shorten':
            output = run_shorten(args, config, text)
        elif args.command == 'dedent':
            output = dedent(text)
        else:
            predicate = (lambda line: True) if args.all_lines else None
            output = indent(text, args.prefix, predicate)

        sys.stdout.write(output)
        if output and not output.endswith('\n'):
            sys.stdout.write('\n')
        return 0

    except InvalidConfigurationError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except yaml.YAMLError as e:
        print(f"Error: Invalid YAML configuration: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
