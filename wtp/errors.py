class WtpError(Exception):
    """Errors that stop wtp with a message for the user."""

class PickTreeReadError(WtpError):
    """The pick tree file couldn't be opened or read."""
    def __init__(self, path, reason: str):
        super().__init__(f"Couldn't open file <{path}>: {reason}")
        self.path = path

class EditorError(WtpError):
    """The editor program couldn't be started."""

class PickerError(WtpError):
    """A picker answered with something that isn't one of the options it was shown."""
