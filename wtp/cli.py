import argparse
import logging
import sys

from wtp import __version__
from wtp.errors import WtpError
from wtp.navigator import PickOutcome, navigate
from wtp.outline import load
from wtp.pickers import ChoicePickerBase
from wtp.pickers.tui import TuiChoicePicker
from wtp.storage import DEFAULT_TREE_ID, edit_tree, tree_path

log = logging.getLogger(__name__)

FILE_FORMAT_HELP = '''
PICK_TREE file format:
    It's a tree where siblings are in the same indentation level and children
    have more indentation than their parents. Example:

    A node in level 1
        Some child in level 2
        Another child in level 2
    Another node in level 1
        A child of the node above
        Another child of that same node
        Yet another child of that node
            A node in level 3
            Another one in level 3

    Indentation is counted in whitespace characters, a tab counts as one.
    A line indented as much as (or less than) the line above it is never its child.
    Blank lines are ignored.
'''


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wtp',
        description=f'wtp - What To Pick? Decision trees to help humans decide stuff (v{__version__})',
        epilog=FILE_FORMAT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('tree_id', nargs='?', default=DEFAULT_TREE_ID, metavar='PICK_TREE_ID',
                        help=f'which pick tree to use (default: {DEFAULT_TREE_ID})')
    # --edit wins over --file when both are given
    parser.add_argument('-e', '--edit', action='store_true', help='edit the PICK_TREE_ID file')
    parser.add_argument('-f', '--file', action='store_true', help='print the path of the PICK_TREE_ID file')
    parser.add_argument('-v', '--verbose', action='store_true', help='log what is going on to stderr')
    return parser


def pick_from_file(path, picker: ChoicePickerBase) -> PickOutcome:
    """Interactively picks a leaf of the tree stored at `path`, printing it if one gets picked"""
    tree = load(path)
    result = navigate(tree, picker)
    log.debug(f'{result}')
    if result.outcome == PickOutcome.COMPLETED:
        print(result.label)
    return result.outcome


def main(argv: list[str] | None = None, picker: ChoicePickerBase | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    path = tree_path(args.tree_id)
    try:
        if args.edit:
            edit_tree(path)
        elif args.file:
            print(path)
        else:
            pick_from_file(path, picker or TuiChoicePicker())
    except WtpError as e:
        print(f'wtp: error: {e}', file=sys.stderr)
        return 1

    return 0
