import unittest
from unittest import mock

from recordbook.domain.models.entities import ALL_DIVISIONS
from recordbook.ui.app import RecordBookApp


class RecordBookAppTests(unittest.TestCase):
    def test_builds_against_installed_flet(self):
        app = RecordBookApp(mock.MagicMock())
        self.assertEqual(app.filter_division.value, ALL_DIVISIONS)
        self.assertEqual(len(app.filter_division.options), 5)
        self.assertEqual(len(app.marks), 5)

    def test_sessions_do_not_share_controls(self):
        first = RecordBookApp(mock.MagicMock())
        second = RecordBookApp(mock.MagicMock())
        for a, b in zip(first.filter_division.options, second.filter_division.options):
            self.assertIsNot(a, b)

    def test_submit_renders_table_and_label(self):
        app = RecordBookApp(mock.MagicMock())
        for i in range(len(app.marks)):
            app.handle_mark(i, "80")
        self.assertTrue(app.preview.visible)

        app.handle_name(mock.MagicMock(control=mock.MagicMock(value="Ajeet")))
        app.handle_age(mock.MagicMock(control=mock.MagicMock(value="20")))
        app.handle_submit(None)
        self.assertEqual(len(app.state.records), 1)
        self.assertEqual(app.submit_button.text, "Submit")
        self.assertEqual(app.name.value, "")

        app.handle_edit(0)
        self.assertEqual(app.submit_button.text, "Update")
        self.assertEqual(app.name.value, "Ajeet")


if __name__ == "__main__":
    unittest.main()
