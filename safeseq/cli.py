"""
command line front end: read a json array, apply one safeseq operation, print the result.

examples:
  echo '[1, 2, 3]' | python -m safeseq get 1
  python -m safeseq --input data.json subrange 0 4
  echo '[1, 2]' | python -m safeseq concat '[3, 4]' 5
  echo '["a", 1, null]' | python -m safeseq join --sep ', '
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, TextIO

from .factories import from_iterable
from .sequence import Sequence

logger = logging.getLogger(__name__)


def _format_element(item: Any) -> str:
    """strings print bare, everything else as json"""
    return item if isinstance(item, str) else json.dumps(item)


def load_sequence(stream: TextIO) -> 'Sequence[Any]':
    """parse a json array from stream"""
    data = json.load(stream)
    if not isinstance(data, list):
        raise ValueError(f"input must be a json array, got {type(data).__name__}")
    logger.debug("loaded sequence of %d elements", len(data))
    return from_iterable(data)


def create_cli_interface() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='safeseq',
        description='bounds-safe operations over a json array',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--input', help='json file holding the array (default: stdin)')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')

    commands = parser.add_subparsers(dest='command', required=True)

    get_cmd = commands.add_parser('get', help='element at INDEX, exit status 1 if out of range')
    get_cmd.add_argument('index', type=int)

    sub_cmd = commands.add_parser('subrange', help='elements FROM through TO inclusive')
    sub_cmd.add_argument('from_index', type=int)
    sub_cmd.add_argument('to_index', type=int)

    concat_cmd = commands.add_parser('concat', help='append json values, splicing arrays one level')
    concat_cmd.add_argument('items', nargs='*', help='json values')

    join_cmd = commands.add_parser('join', help='join elements into one string')
    join_cmd.add_argument('--sep', default=',', help='separator (default: ",")')

    return parser


def run_command(args: argparse.Namespace, source: 'Sequence[Any]', out: TextIO) -> int:
    """execute the parsed command against source, returning the exit status"""
    if args.command == 'get':
        found = source.safe_get(args.index)
        if found.is_absent:
            print(f"index {args.index} is out of range for {len(source)} elements", file=sys.stderr)
            return 1
        print(json.dumps(found.value), file=out)
    elif args.command == 'subrange':
        print(json.dumps(source.subrange(args.from_index, args.to_index).to.list()), file=out)
    elif args.command == 'concat':
        extras = [json.loads(raw) for raw in args.items]
        print(json.dumps(source.concat(*extras).to.list()), file=out)
    elif args.command == 'join':
        print(source.join_with(args.sep, _format_element), file=out)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """main entry point for the safeseq tool"""
    parser = create_cli_interface()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.input:
            with open(args.input, encoding='utf-8') as handle:
                source = load_sequence(handle)
        else:
            source = load_sequence(sys.stdin)
        return run_command(args, source, sys.stdout)
    except (ValueError, OSError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"error: {e}", file=sys.stderr)
        return 2
