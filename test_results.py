import os
import tempfile
import unittest
from poly import die_polynomial
from results import (ReportError, coeff_to_sides, final_form, format_line,
    report_lines, report_path, sides_to_coeffs, verify, write_report)

STANDARD_D4 = ((1, 1, 1, 1),)*3
OTHER_D4 = ((1, 0, 2, 0, 1), (1, 1, 1, 1), (1, 2, 1))


class FaceConversion(unittest.TestCase):
    def test_coeff_to_sides(self):
        self.assertEqual(coeff_to_sides((1, 0, 2)), [1, 3, 3])
        self.assertEqual(coeff_to_sides((1, 0, 1, 1, 1, 1, 0, 1)), [1, 3, 4, 5, 6, 8])
        self.assertEqual(coeff_to_sides((1,)), [1])

    def test_sides_to_coeffs(self):
        self.assertEqual(sides_to_coeffs([3, 1, 3]), (1, 0, 2))
        self.assertEqual(sides_to_coeffs([2]), (0, 1))

    def test_round_trip(self):
        for p in [(1, 2, 2, 1), (1, 0, 1, 1, 1, 1, 0, 1), die_polynomial(9),
                  (0, 0, 3), (1,)]:
            self.assertEqual(sides_to_coeffs(coeff_to_sides(p)), p)

    def test_bad_faces(self):
        with self.assertRaises(ValueError):
            sides_to_coeffs([0, 1])


class Report(unittest.TestCase):
    def test_final_form_sorts_dice(self):
        self.assertEqual(final_form(OTHER_D4),
                         ([1, 2, 2, 3], [1, 2, 3, 4], [1, 3, 3, 5]))

    def test_format_line(self):
        self.assertEqual(format_line(([1], [1], [1])), '[1], [1], [1]')

    def test_report_lines(self):
        self.assertEqual(report_lines([STANDARD_D4, OTHER_D4]), [
            '[1, 2, 2, 3], [1, 2, 3, 4], [1, 3, 3, 5]',
            '[1, 2, 3, 4], [1, 2, 3, 4], [1, 2, 3, 4]',
        ])

    def test_report_path(self):
        self.assertEqual(report_path(8), os.path.join('results', 'sicherman-d008.txt'))
        self.assertEqual(report_path(120, 'out'), os.path.join('out', 'sicherman-d120.txt'))

    def test_write_report(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'nested', 'report.txt')
            write_report(path, ['a', 'b'])
            with open(path) as f:
                self.assertEqual(f.read(), 'a\nb')

    def test_write_failure_names_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            blocker = os.path.join(tmp, 'file')
            with open(blocker, 'w') as f:
                f.write('')
            path = os.path.join(blocker, 'report.txt')
            with self.assertRaises(ReportError) as ctx:
                write_report(path, ['a'])
            self.assertIn(path, str(ctx.exception))


class Verify(unittest.TestCase):
    def test_valid_trios(self):
        self.assertTrue(verify(STANDARD_D4, 4))
        self.assertTrue(verify(OTHER_D4, 4))
        self.assertTrue(verify(((1,),)*3, 1))

    def test_invalid_trio(self):
        self.assertFalse(verify(((1, 2, 1), (1, 2, 1), (1, 1, 1, 1)), 4))


if __name__ == '__main__':
    unittest.main()
