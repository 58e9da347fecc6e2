################################################################################
#
# Copyright (c) 2009 The MadGraph5_aMC@NLO Development team and Contributors
#
# This file is a part of the MadGraph5_aMC@NLO project, an application which 
# automatically generates Feynman diagrams and matrix elements for arbitrary
# high-energy processes in the Standard Model and beyond.
#
# It is subject to the MadGraph5_aMC@NLO license which should accompany this 
# distribution.
#
# For more information, visit madgraph.phys.ucl.ac.be and amcatnlo.web.cern.ch
#
################################################################################
"""Unit test library for sums of colour factors."""

import tests.unit_tests as unittest
import random

from colortools import ColorDivisionError, ColorToolsError
from colortools.core.color_factor import ColorFactor
from colortools.core.color_sum import ColorSum

#=========================================================================================
# Test ColorSum
#=========================================================================================

class ColorSumTest(unittest.TestCase):
    """Test class for the ColorSum object."""

    n_random_tests = 10
    seed = 42

    def random_sum(self, max_terms=4):

        return ColorSum(ColorFactor(complex(random.uniform(-2., 2.),
                                            random.uniform(-2., 2.)),
                                    *[random.randint(-1, 2) for _ in range(4)])
                        for _ in range(random.randint(0, max_terms)))

    def assertCanonical(self, cs):
        """Check that a sum has distinct exponents and no vanishing monomial."""

        self.assertEqual(len(set(cf.powers() for cf in cs)), len(cs))
        for cf in cs:
            self.assertFalse(cf.is_zero())

    def test_ColorSum_canonical_form(self):
        """Test that like monomials are merged and vanishing ones removed."""

        self.assertTrue(ColorSum('NC + 2*NC - 3*NC').is_zero())
        self.assertTrue(ColorSum().is_zero())
        self.assertTrue(ColorSum('').is_zero())

        cs = ColorSum('NC*TR + TR - NC*TR + 2*CF')
        self.assertEqual(len(cs), 2)
        self.assertEqual(cs[0], ColorFactor('TR'))
        self.assertEqual(cs[1], ColorFactor('2*CF'))

        # The order of first appearance is kept
        cs = ColorSum('TR') + ColorSum('NC') + ColorSum('3*TR')
        self.assertEqual([cf.powers() for cf in cs],
                         [(0, 1, 0, 0), (1, 0, 0, 0)])
        self.assertEqual(cs[0].cnum, 4.)

        # Signs within exponents or floating point literals do not split terms
        cs = ColorSum('1e-3*NC^-1 - -TR + NC^(-2)')
        self.assertEqual(len(cs), 3)
        self.assertEqual(cs[0], ColorFactor(0.001, -1))
        self.assertEqual(cs[1], ColorFactor('TR'))
        self.assertEqual(cs[2], ColorFactor(1., -2))

        random.seed(self.seed)
        for _ in range(self.n_random_tests):
            a, b = self.random_sum(), self.random_sum()
            self.assertCanonical(a + b)
            self.assertCanonical(a * b)
            self.assertCanonical(a - b)

    def test_ColorSum_arithmetics(self):
        """Test sums, products and divisions."""

        self.assertColorSumEqual(ColorSum('NC + TR') * ColorSum('NC - TR'),
                                 'NC^2 - TR^2')
        self.assertColorSumEqual(ColorSum('NC') * 2 + 1, '2*NC + 1')
        self.assertColorSumEqual(3 - ColorSum('CA'), '3 - CA')
        self.assertColorSumEqual(-ColorSum('NC - CF'), 'CF - NC')
        self.assertColorSumEqual(ColorFactor('TR') * ColorSum('NC + CF'),
                                 'NC*TR + CF*TR')

        cs = ColorSum('NC')
        cs += 'TR'
        cs *= ColorFactor('2*CA')
        self.assertColorSumEqual(cs, '2*CA*NC + 2*CA*TR')
        cs -= ColorSum('2*CA*NC')
        self.assertColorSumEqual(cs, '2*CA*TR')

        self.assertColorSumEqual(ColorSum('2*NC^2 + 4*NC') / ColorFactor('2*NC'),
                                 'NC + 2')
        self.assertRaises(ColorDivisionError, ColorSum('NC').__truediv__,
                                                                      ColorSum())
        self.assertRaises(ColorToolsError, ColorSum('NC').__truediv__,
                                                             ColorSum('NC + 1'))

        # Equality does not depend on the ordering
        self.assertEqual(ColorSum('NC + TR'), ColorSum('TR + NC'))
        self.assertNotEqual(ColorSum('NC + TR'), ColorSum('NC'))
        self.assertEqual(ColorSum('2*NC'), ColorFactor('2*NC'))
        # Text which is not a colour expression is never equal
        self.assertNotEqual(ColorSum('NC'), 't[1,2')
        self.assertFalse(ColorSum('NC') == 'NC^')

    def test_ColorSum_algebra(self):
        """Test the ring properties of sums on random input."""

        random.seed(self.seed)
        for _ in range(self.n_random_tests):
            a, b, c = [self.random_sum() for _ in range(3)]
            self.assertColorSumEqual(a + b, b + a)
            self.assertColorSumEqual(a * b, b * a)
            self.assertColorSumEqual((a + b) + c, a + (b + c))
            self.assertColorSumEqual((a * b) * c, a * (b * c))
            self.assertColorSumEqual(a * (b + c), a * b + a * c)
            self.assertColorSumEqual(a.conj().conj(), a)
            self.assertColorSumEqual((a * b).conj(), a.conj() * b.conj())
            self.assertTrue((a - a).is_zero())

    def test_ColorSum_specialisations(self):
        """Test replacements and leading colour projection."""

        self.assertColorSumEqual(ColorSum('CF*NC + TR').replace_CF(), 'NC^2*TR')
        self.assertColorSumEqual(ColorSum('CA^2 + CA').replace_CA(),
                                 '4*NC^2*TR^2 + 2*NC*TR')
        self.assertColorSumEqual(ColorSum('CF*NC - TR').replace_CF_large_N(),
                                 'NC^2*TR - TR')
        self.assertColorSumEqual(ColorSum('4*TR^2*NC + 2*TR').replace_TR(),
                                 'NC + 1')

        leading = ColorSum('CF*NC - TR + CA*NC^-1').get_leading_NC()
        self.assertEqual(len(leading), 1)
        self.assertEqual(leading[0], ColorFactor('CF*NC'))

        # Several monomials at the same order, the ordering is kept
        leading = ColorSum('NC^2*TR + CF*NC - TR').get_leading_NC()
        self.assertEqual(len(leading), 2)
        self.assertEqual(leading[0], ColorFactor('NC^2*TR'))
        self.assertEqual(leading[1], ColorFactor('CF*NC'))

        self.assertTrue(ColorSum().get_leading_NC().is_zero())

    def test_ColorSum_values(self):
        """Test the numerical evaluation of sums."""

        self.assertAlmostEqual(ColorSum('NC^2*TR - TR').value(), 4.)
        self.assertAlmostEqual(ColorSum('CF*NC - TR').value(), 3.5)
        self.assertAlmostEqual(ColorSum('CF*NC - TR').value_large_N(), 4.)
        self.assertAlmostEqual(ColorSum('CF*NC - TR').value_LC(), 4.5)
        self.assertAlmostEqual(ColorSum().value(), 0.)
        self.assertComplexAlmostEqual(ColorSum('(0,1)*CA + NC').value(), 3.+3.j)

    def test_ColorSum_string(self):
        """Test the textual representation of sums."""

        cs = ColorSum('0.5*NC^2*TR - 0.5*TR')
        self.assertEqual(cs.get_string(), '0.5*NC^2*TR-0.5*TR')
        self.assertEqual(str(ColorSum()), '0')
        self.assertEqual(ColorSum(cs.get_string()), cs)

        random.seed(self.seed)
        for _ in range(self.n_random_tests):
            cs = self.random_sum()
            self.assertColorSumEqual(ColorSum(str(cs)), cs)

        cs = ColorSum(ColorFactor(1e5/3., 1))
        self.assertEqual(ColorSum(str(cs)), cs)
        self.assertEqual(ColorSum(str(cs))[0].cnum, 1e5/3.)
        random.seed(self.seed)
        for _ in range(self.n_random_tests):
            cs = self.random_sum() * 10**random.randint(-6, 8)
            self.assertEqual([cf.cnum for cf in ColorSum(str(cs))],
                             [cf.cnum for cf in cs])

if __name__ == '__main__':
    unittest.main()
