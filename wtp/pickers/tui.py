import logging

from wtp.pickers import ChoicePickerBase, Choice

log = logging.getLogger(__name__)

QUIT_KEYS = [ord('q'), 27]  # q, Esc


class TuiChoicePicker(ChoicePickerBase):
    """A curses picker, vim style (j/k) or arrow keys, enter picks"""
    def __init__(self, indicator: str = '>'):
        self.indicator = indicator

    def choose(self, options: list[str], title: str = '') -> Choice:
        from pick import pick
        try:
            selected, idx = pick(options, title, indicator=self.indicator, multiselect=False, min_selection_count=1, quit_keys=QUIT_KEYS)
        except KeyboardInterrupt:
            log.debug('interrupted while picking')
            return None

        if not selected:
            log.debug('picker exited without a selection')
            return None

        return idx # type: ignore
