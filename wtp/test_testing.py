import unittest, io
from contextlib import redirect_stdout

from wtp.testing import LoggedTestCase


class _RecordingResult:
    """Looks like the result objects other runners pass in: no failures/errors lists"""
    def __init__(self):
        self.events = []

    def startTest(self, test):
        self.events.append('start')

    def stopTest(self, test):
        self.events.append('stop')

    def addSuccess(self, test):
        self.events.append('success')

    def addFailure(self, test, err):
        self.events.append('failure')

    def addError(self, test, err):
        self.events.append('error')

    def addSkip(self, test, reason):
        self.events.append('skip')

    def addDuration(self, test, elapsed):
        pass


class _Sample(LoggedTestCase):
    def passes(self):
        self.logger.debug('all good')
        self.assertEqual(1, 1)

    def fails(self):
        self.logger.debug('about to fail')
        self.assertEqual(1, 2)


class TestLoggedTestCase(unittest.TestCase):
    def test_runs_under_a_foreign_result(self):
        result = _RecordingResult()
        _Sample('passes').run(result)
        self.assertListEqual(result.events, ['start', 'success', 'stop'])

    def test_reports_failure_to_a_foreign_result(self):
        result = _RecordingResult()
        _Sample('fails').run(result)
        self.assertListEqual(result.events, ['start', 'failure', 'stop'])

    def test_dumps_logs_only_when_the_test_fails(self):
        out = io.StringIO()
        with redirect_stdout(out):
            passed = _Sample('passes').run(unittest.TestResult())
        self.assertTrue(passed.wasSuccessful())
        self.assertEqual(out.getvalue(), '')

        out = io.StringIO()
        with redirect_stdout(out):
            failed = _Sample('fails').run(unittest.TestResult())
        self.assertEqual(len(failed.failures), 1)
        self.assertIn('about to fail', out.getvalue())

    def test_no_result_given(self):
        with redirect_stdout(io.StringIO()):
            result = _Sample('passes').run()
        self.assertTrue(result.wasSuccessful())
        self.assertEqual(result.testsRun, 1)


if __name__ == '__main__':
    unittest.main()
