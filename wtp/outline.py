import logging
from collections.abc import Iterable, Iterator

from wtp.errors import PickTreeReadError

log = logging.getLogger(__name__)


class OutlineNode:
    def __init__(self, label: str):
        self.label = label
        self.children: list[OutlineNode] = []

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def labels(self) -> list[str]:
        return [c.label for c in self.children]

    def walk(self) -> Iterator['OutlineNode']:
        """Depth first, yielding self before its children"""
        yield self
        for child in self.children:
            yield from child.walk()

    def __str__(self) -> str:
        return f'{self.label} ({len(self.children)})'

    def __repr__(self) -> str:
        return f'OutlineNode({self.label!r}, children={len(self.children)})'


# str.isspace() also says yes to the information separators, which aren't White_Space
_NOT_WHITESPACE = frozenset('\x1c\x1d\x1e\x1f')

def is_whitespace(c: str) -> bool:
    return c.isspace() and c not in _NOT_WHITESPACE

def indentation(line: str) -> int:
    """Number of whitespace characters before the first non-whitespace one"""
    ws = 0
    for c in line:
        if not is_whitespace(c):
            break
        ws += 1
    return ws


def split_lines(text: str) -> Iterator[str]:
    """Splits on "\\n" only, keeping it at the end of each line"""
    start = 0
    while start < len(text):
        end = text.find('\n', start)
        if end < 0:
            yield text[start:]
            return
        yield text[start:end + 1]
        start = end + 1


def parse(lines: Iterable[str]) -> OutlineNode:
    """Builds a tree out of an outline where siblings share an indentation level and
    children are indented more than their parents.

    Lines may still end in "\\n" or "\\r\\n", so an open file can be passed directly. A lone
    "\\r" is not a line break. Blank lines are ignored. Indentation is the raw count of leading
    Unicode White_Space characters, tabs count as one."""
    # stack of (node, indentation level) for the nodes that can still get children.
    # the root sits at -1 so no real line can ever close it
    parents: list[tuple[OutlineNode, int]] = [(OutlineNode(''), -1)]
    count = 0

    for line in lines:
        if line.endswith('\n'):
            line = line[:-1].removesuffix('\r')

        ws = indentation(line)
        label = line[ws:]
        if not label:
            continue

        node = OutlineNode(label)
        count += 1

        # close everything at the same level or deeper, those aren't ancestors of `node`
        while ws <= parents[-1][1]:
            closed, _ws = parents.pop()
            parents[-1][0].children.append(closed)

        parents.append((node, ws))

    # append the still open nodes to their parents
    while len(parents) >= 2:
        closed, _ws = parents.pop()
        parents[-1][0].children.append(closed)

    root = parents.pop()[0]
    log.debug(f'parsed {count} nodes, {len(root.children)} at the top level')
    return root


def parse_text(text: str) -> OutlineNode:
    return parse(split_lines(text))


def load(path) -> OutlineNode:
    """Reads a whole pick tree file and parses it. Nothing is returned if the file can't be read."""
    log.debug(f'loading pick tree from {path}')
    try:
        # newline='' keeps line endings as they are, parse() deals with them
        with open(path, encoding='utf-8', newline='') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise PickTreeReadError(path, str(e)) from e
    return parse_text(text)
