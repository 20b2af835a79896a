import unittest
from unittest import mock

from gradeboard.ui.app import GradeboardApp


class TimerLoopTests(unittest.TestCase):
    def setUp(self):
        self.page = mock.MagicMock()
        self.app = GradeboardApp(self.page)

    def test_clock_does_not_update_after_stop(self):
        with mock.patch("gradeboard.ui.app.time.sleep", side_effect=lambda _: self.app.stop()):
            self.app._tick_clock()
        self.page.update.assert_not_called()

    def test_banner_does_not_rotate_after_stop(self):
        with mock.patch("gradeboard.ui.app.time.sleep", side_effect=lambda _: self.app.stop()):
            self.app._rotate_banner()
        self.page.update.assert_not_called()
        self.assertEqual(self.app.state.banner_index, 0)

    def test_clock_ticks_while_running(self):
        calls = []

        def sleep(_):
            calls.append(1)
            if len(calls) > 1:
                self.app.stop()

        with mock.patch("gradeboard.ui.app.time.sleep", side_effect=sleep):
            self.app._tick_clock()
        self.assertEqual(self.page.update.call_count, 1)


if __name__ == "__main__":
    unittest.main()
