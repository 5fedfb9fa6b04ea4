import unittest

from recordbook.domain.logic.grading import calc_percentage, compute, division_from_percentage, format_percentage
from recordbook.domain.models.entities import Division, StudentRecord


class GradingTests(unittest.TestCase):
    def test_scenarios(self):
        first = compute([80, 70, 90, 60, 100])
        self.assertEqual(first.percentage, 80.0)
        self.assertEqual(first.division, Division.FIRST)

        third = compute([40, 40, 40, 40, 40])
        self.assertEqual(third.percentage, 40.0)
        self.assertEqual(third.division, Division.THIRD)

        fail = compute([10, 10, 10, 10, 10])
        self.assertEqual(fail.percentage, 10.0)
        self.assertEqual(fail.division, Division.FAIL)

    def test_division_boundaries(self):
        self.assertEqual(division_from_percentage(60.0), Division.FIRST)
        self.assertEqual(division_from_percentage(59.99), Division.SECOND)
        self.assertEqual(division_from_percentage(45.0), Division.SECOND)
        self.assertEqual(division_from_percentage(44.99), Division.THIRD)
        self.assertEqual(division_from_percentage(33.0), Division.THIRD)
        self.assertEqual(division_from_percentage(32.99), Division.FAIL)
        self.assertEqual(division_from_percentage(0.0), Division.FAIL)

    def test_percentage_matches_rounded_formula(self):
        for marks in ([0, 0, 0, 0, 0], [100, 100, 100, 100, 100], [33, 34, 35, 36, 37], [1, 0, 0, 0, 0]):
            self.assertAlmostEqual(calc_percentage(marks), round(sum(marks) / 500 * 100, 2), places=2)

    def test_round_half_up(self):
        # 300.025 / 5 = 60.005
        self.assertEqual(calc_percentage([100, 100, 100, 0.025, 0]), 60.01)
        self.assertEqual(calc_percentage([0.01, 0, 0, 0, 0]), 0.0)

    def test_division_uses_rounded_percentage(self):
        # 299.99 / 5 = 59.998, displayed as 60.00
        result = compute([100, 100, 99.99, 0, 0])
        self.assertEqual(result.percentage, 60.0)
        self.assertEqual(result.division, Division.FIRST)

    def test_format_percentage(self):
        self.assertEqual(format_percentage(80.0), "80.00")
        self.assertEqual(format_percentage(33.4), "33.40")

    def test_record_derives_grade_from_marks(self):
        record = StudentRecord(name="Ajeet Yadav", age=20, marks=[60, 60, 60, 60, 60])
        self.assertEqual(record.marks, (60, 60, 60, 60, 60))
        self.assertEqual(record.percentage, 60.0)
        self.assertEqual(record.division, Division.FIRST)

    def test_record_shares_grading_types(self):
        from recordbook.domain.logic import grading
        from recordbook.domain.models import entities

        self.assertIs(entities.Division, grading.Division)
        self.assertIs(entities.GradeResult, grading.GradeResult)

    def test_record_rejects_derived_arguments(self):
        with self.assertRaises(TypeError):
            StudentRecord(name="A", age=1, marks=(0, 0, 0, 0, 0), percentage=99.0)


if __name__ == "__main__":
    unittest.main()
