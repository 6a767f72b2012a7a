Choice = int | None

class ChoicePickerBase:
    """Base for choice pickers: shows some options and returns the index of the one picked,
    or None if the user backed out"""
    def choose(self, options: list[str], title: str = '') -> Choice:
        raise NotImplementedError(f'{type(self).__name__} does not implement choose()')
