import unittest, logging, sys

from wtp.pickers import ChoicePickerBase, Choice


class _BufferingHandler(logging.Handler):
    def __init__(self, *args):
        super().__init__(*args)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _problem_count(result: unittest.TestResult | None) -> int:
    if result is None:
        return 0
    return len(result.failures) + len(result.errors)


class LoggedTestCase(unittest.TestCase):
    """Test case which accumulates the wtp logs as it runs and only prints them if there is a failure or error"""
    def __init__(self, *args):
        super().__init__(*args)

        self.logger = logging.getLogger("wtp")
        self.logger.setLevel(logging.DEBUG)

    def setUp(self):
        super().setUp()
        self.logbuf = _BufferingHandler()
        self.logger.addHandler(self.logbuf)

    def tearDown(self):
        super().tearDown()
        self.logger.removeHandler(self.logbuf)

    def logged_messages(self) -> list[str]:
        return [r.getMessage() for r in self.logbuf.records]

    def run(self, result=None):
        if result is not None and not isinstance(result, unittest.TestResult):
            # other runners (pytest) hand over their own result object and report logs themselves
            return super().run(result)

        problems_before = _problem_count(result)
        result = super().run(result)
        logbuf = getattr(self, 'logbuf', None)
        if logbuf and _problem_count(result) > problems_before:
            sh = logging.StreamHandler(sys.stdout)
            for r in logbuf.records:
                sh.emit(r)
        return result


class ScriptedPicker(ChoicePickerBase):
    """Answers prompts from a fixed list instead of asking anyone, and remembers what it was shown.

    Answers can be indices, labels (picked by their first occurrence) or None to cancel."""
    def __init__(self, answers: list[int | str | None]):
        self.answers = list(answers)
        self.prompts: list[tuple[list[str], str]] = []

    def choose(self, options: list[str], title: str = '') -> Choice:
        self.prompts.append((list(options), title))
        if not self.answers:
            raise AssertionError(f'ran out of answers, was asked to pick from {options}')
        answer = self.answers.pop(0)
        if isinstance(answer, str):
            return options.index(answer)
        return answer
