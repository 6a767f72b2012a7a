import logging
from enum import Enum

from wtp.errors import PickerError
from wtp.outline import OutlineNode
from wtp.pickers import ChoicePickerBase

log = logging.getLogger(__name__)

EMPTY_TREE_MESSAGE = 'Nothing to pick from! See `wtp --help` for more options.'
BREADCRUMB_SEPARATOR = ' > '


class PickOutcome(Enum):
    EMPTY_TREE = 1
    COMPLETED = 2
    CANCELLED = 3

class PickResult:
    def __init__(self, outcome: PickOutcome, label: str | None = None, path: tuple[str, ...] = ()):
        self.outcome = outcome
        self.label = label
        self.path = path

    def __repr__(self) -> str:
        return f'PickResult({self.outcome.name}, label={self.label!r}, path={self.path!r})'


def navigate(root: OutlineNode, picker: ChoicePickerBase) -> PickResult:
    """Walks down from the root one level per prompt until a leaf is picked.

    There is no going back up: every answer is final. An empty tree prints a notice and
    never prompts; a cancelled prompt ends the descent right there."""
    if root.is_leaf:
        print(EMPTY_TREE_MESSAGE)
        return PickResult(PickOutcome.EMPTY_TREE)

    node = root
    path: list[str] = []
    while not node.is_leaf:
        options = node.labels()
        idx = picker.choose(options, BREADCRUMB_SEPARATOR.join(path))
        if idx is None:
            log.debug(f'cancelled after {len(path)} picks')
            return PickResult(PickOutcome.CANCELLED, path=tuple(path))
        if not 0 <= idx < len(options):
            raise PickerError(f'{type(picker).__name__} picked index {idx} out of {len(options)} options')

        node = node.children[idx]
        path.append(node.label)
        log.debug(f'picked {node.label!r} ({idx + 1}/{len(options)})')

    return PickResult(PickOutcome.COMPLETED, label=node.label, path=tuple(path))
