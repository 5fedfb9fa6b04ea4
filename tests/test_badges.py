import unittest

import flet as ft

from recordbook.domain.models.entities import Division
from recordbook.ui.badges import badge_colors, division_badge


class BadgeTests(unittest.TestCase):
    def test_colors(self):
        self.assertEqual(badge_colors(Division.FIRST)[0], ft.Colors.GREEN_600)
        self.assertEqual(badge_colors(Division.THIRD), (ft.Colors.AMBER_400, ft.Colors.BLACK))
        self.assertEqual(badge_colors(Division.FAIL)[0], ft.Colors.RED_600)

    def test_badge_label(self):
        badge = division_badge(Division.SECOND)
        self.assertEqual(badge.content.value, "Second Division")


if __name__ == "__main__":
    unittest.main()
