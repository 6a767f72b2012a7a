import unittest
from unittest import mock

from wtp.pickers import ChoicePickerBase
from wtp.pickers.tui import QUIT_KEYS, TuiChoicePicker
from wtp.testing import LoggedTestCase

OPTIONS = ['Fruit', 'Vegetable']

class TestTuiChoicePicker(LoggedTestCase):
    def test_returns_picked_index(self):
        with mock.patch('pick.pick', return_value=('Vegetable', 1)) as pick:
            self.assertEqual(TuiChoicePicker().choose(OPTIONS, 'Food'), 1)

        pick.assert_called_once()
        args, kwargs = pick.call_args
        self.assertEqual(args, (OPTIONS, 'Food'))
        self.assertFalse(kwargs['multiselect'])
        self.assertEqual(kwargs['quit_keys'], QUIT_KEYS)

    def test_first_option(self):
        with mock.patch('pick.pick', return_value=('Fruit', 0)):
            self.assertEqual(TuiChoicePicker().choose(OPTIONS), 0)

    def test_quit_key_cancels(self):
        with mock.patch('pick.pick', return_value=(None, -1)):
            self.assertIsNone(TuiChoicePicker().choose(OPTIONS))
        self.assertIn('picker exited without a selection', self.logged_messages())

    def test_ctrl_c_cancels(self):
        with mock.patch('pick.pick', side_effect=KeyboardInterrupt):
            self.assertIsNone(TuiChoicePicker().choose(OPTIONS))


class TestChoicePickerBase(LoggedTestCase):
    def test_base_does_not_choose(self):
        with self.assertRaises(NotImplementedError):
            ChoicePickerBase().choose(OPTIONS)


if __name__ == '__main__':
    unittest.main()
