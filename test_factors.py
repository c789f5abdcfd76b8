import unittest
from factors import FactorisationError, build_pool, die_factors, factorise
from poly import die_polynomial, multiply


class Factorise(unittest.TestCase):
    def test_d4(self):
        factors = factorise([1, 1, 1, 1])
        self.assertEqual(sorted(factors), [(1, 0, 1), (1, 1)])

    def test_d6(self):
        factors = die_factors(6)
        self.assertEqual(sorted(factors), [(1, -1, 1), (1, 1), (1, 1, 1)])
        self.assertEqual(multiply(factors), die_polynomial(6))

    def test_d8(self):
        self.assertEqual(sorted(die_factors(8)), [(1, 0, 0, 0, 1), (1, 0, 1), (1, 1)])

    def test_product_is_preserved(self):
        for sides in range(1, 25):
            self.assertEqual(multiply(die_factors(sides)), die_polynomial(sides))

    def test_irreducible(self):
        # prime side counts give a single cyclotomic factor
        self.assertEqual(die_factors(2), [(1, 1)])
        self.assertEqual(die_factors(7), [die_polynomial(7)])

    def test_constant(self):
        self.assertEqual(die_factors(1), [(1,)])

    def test_repeated_factors_and_content(self):
        # 2(1 + x)^2
        factors = factorise([2, 4, 2])
        self.assertEqual(sorted(factors), [(1, 1), (1, 1), (2,)])

    def test_lowest_degree_first(self):
        # 1 + 2x is not the same as 2 + x
        self.assertEqual(factorise([1, 2]), [(1, 2)])

    def test_zero_polynomial(self):
        with self.assertRaises(FactorisationError):
            factorise([0, 0])
        with self.assertRaises(FactorisationError):
            factorise([])


class BuildPool(unittest.TestCase):
    def test_repeats_whole_list(self):
        f, g = (1, 1), (1, 0, 1)
        self.assertEqual(build_pool([f, g]), [f, g, f, g, f, g])

    def test_single_factor(self):
        self.assertEqual(build_pool([(1, 1, 1)]), [(1, 1, 1)]*3)

    def test_copies(self):
        self.assertEqual(len(build_pool(die_factors(6), copies=2)), 6)

    def test_converts_to_tuples(self):
        self.assertEqual(build_pool([[1, 1]]), [(1, 1)]*3)

    def test_empty(self):
        with self.assertRaises(FactorisationError):
            build_pool([])


if __name__ == '__main__':
    unittest.main()
