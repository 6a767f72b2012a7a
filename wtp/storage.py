"""Where pick trees live, and how they get edited.

Pick trees are plain files named after their id, inside the user's data directory:
    ~/.local/share/WhatToPick/<id>                      (linux, or $XDG_DATA_HOME)
    ~/Library/Application Support/WhatToPick/<id>       (macos)
    %APPDATA%\\WhatToPick\\<id>                          (windows)
$WTP_DATA_DIR replaces the whole directory.
"""

import logging
import os
import shlex
import sys
from pathlib import Path

from plumbum import local, FG
from plumbum.commands.processes import CommandNotFound

from wtp.errors import EditorError

log = logging.getLogger(__name__)

APP_DIR_NAME = 'WhatToPick'
DEFAULT_TREE_ID = 'default'


def nonempty_env_var(name: str) -> str | None:
    return os.environ.get(name) or None


def data_dir() -> Path:
    override = nonempty_env_var('WTP_DATA_DIR')
    if override:
        return Path(override)

    if sys.platform == 'win32':
        base = nonempty_env_var('APPDATA') or str(Path.home() / 'AppData' / 'Roaming')
    elif sys.platform == 'darwin':
        base = str(Path.home() / 'Library' / 'Application Support')
    else:
        base = nonempty_env_var('XDG_DATA_HOME') or str(Path.home() / '.local' / 'share')
    return Path(base) / APP_DIR_NAME


def tree_path(tree_id: str = DEFAULT_TREE_ID, root: Path | None = None) -> Path:
    return (root or data_dir()) / tree_id


def editor_command() -> list[str]:
    default = 'notepad' if sys.platform == 'win32' else 'nano'
    editor = nonempty_env_var('EDITOR') or nonempty_env_var('VISUAL') or default
    return shlex.split(editor) or [default]


def edit_tree(path: Path):
    """Opens the pick tree in the user's editor and waits for it to close. The file doesn't have to exist yet."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise EditorError(f'Unable to create directory <{path.parent}>: {e}') from e

    program, *args = editor_command()
    log.debug(f'editing {path} with {program} {args}')
    try:
        editor = local[program]
    except CommandNotFound as e:
        raise EditorError(f"Couldn't find the editor {program!r}, set $EDITOR to one that exists") from e

    # the editor's exit code doesn't say anything about the file, so it isn't checked
    editor[args + [str(path)]] & FG(retcode=None)
