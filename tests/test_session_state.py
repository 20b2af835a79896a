import unittest

from gradeboard.state.session_state import BANNER_MESSAGES, SessionState


class SessionStateTests(unittest.TestCase):
    def test_banner_rotates_and_wraps(self):
        state = SessionState()
        self.assertEqual(state.banner, BANNER_MESSAGES[0])
        seen = [state.next_banner() for _ in range(len(BANNER_MESSAGES))]
        self.assertEqual(seen, list(BANNER_MESSAGES[1:]) + [BANNER_MESSAGES[0]])

    def test_each_session_owns_its_gradebook(self):
        first = SessionState()
        second = SessionState()
        first.gradebook.submit("Ada", "R1", "20", "50")
        self.assertEqual(first.gradebook.store.size(), 1)
        self.assertTrue(second.gradebook.store.is_empty())


if __name__ == "__main__":
    unittest.main()
