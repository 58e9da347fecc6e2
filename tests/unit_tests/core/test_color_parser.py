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
"""Unit test library for the parsing of colour expressions."""

import tests.unit_tests as unittest

from colortools import ColorParseError
import colortools.core.color_parser as color_parser
from colortools.core.color_tensors import delta, fundamental, antisymmetric, \
                                          symmetric

#=========================================================================================
# Test the colour expression grammars
#=========================================================================================

class ColorParserTest(unittest.TestCase):
    """Test class for the colortools.core.color_parser module."""

    def test_parse_monomial(self):
        """Test the parsing of monomials."""

        self.assertEqual(color_parser.parse_monomial('2*NC^2*TR'),
                         (2., (2, 1, 0, 0)))
        self.assertEqual(color_parser.parse_monomial('CF**3 * CA'),
                         (1., (0, 0, 3, 1)))
        self.assertEqual(color_parser.parse_monomial('(0.5,-1)*NC^(-1)*NC'),
                         (0.5-1j, (0, 0, 0, 0)))
        self.assertEqual(color_parser.parse_monomial('-TR'), (-1., (0, 1, 0, 0)))

    def test_parse_sum(self):
        """Test the parsing of sums of monomials."""

        self.assertEqual(color_parser.parse_sum('NC^2*TR - TR'),
                         [(1., (2, 1, 0, 0)), (-1., (0, 1, 0, 0))])
        self.assertEqual(color_parser.parse_sum('-NC^-1 + 2.5e-1'),
                         [(-1., (-1, 0, 0, 0)), (0.25, (0, 0, 0, 0))])
        self.assertEqual(color_parser.parse_sum('  '), [])
        self.assertRaises(ColorParseError, color_parser.parse_sum, 'NC -')
        self.assertRaises(ColorParseError, color_parser.parse_sum, 'NC + (1,2')

    def test_parse_term(self):
        """Test the parsing of products of colour tensors."""

        cnum, powers, tensors = color_parser.parse_term(
                                        'f[1,2,3]*2*TR*t[1,4,5] * k[5,6]*K[7,8]')
        self.assertEqual(cnum, 2.)
        self.assertEqual(powers, (0, 1, 0, 0))
        self.assertEqual(tensors, [antisymmetric(1, 2, 3), fundamental(1, 4, 5),
                                   delta(5, 6), delta(7, 8, adj=True)])

        # Whitespace also separates factors
        cnum, powers, tensors = color_parser.parse_term('(0,1) d[1,2,3] t[1,4,5]')
        self.assertEqual(cnum, 1j)
        self.assertEqual(tensors, [symmetric(1, 2, 3), fundamental(1, 4, 5)])

        for expr in ['t[1,2]', 'f[1,2,3,4]', 'k[1]', 't[1,2,3', 'x[1,2]', '']:
            self.assertRaises(ColorParseError, color_parser.parse_term, expr)

    def test_parse_amplitude(self):
        """Test the parsing of sums of colour terms."""

        terms = color_parser.parse_amplitude('-t[1,2,3]+(0,1)*t[1,3,2] - NC^-1*k[2,3]')
        self.assertEqual(len(terms), 3)
        self.assertEqual(terms[0], (-1., (0, 0, 0, 0), [fundamental(1, 2, 3)]))
        self.assertEqual(terms[1], (1j, (0, 0, 0, 0), [fundamental(1, 3, 2)]))
        self.assertEqual(terms[2], (-1., (-1, 0, 0, 0), [delta(2, 3)]))
        self.assertEqual(color_parser.parse_amplitude(''), [])

if __name__ == '__main__':
    unittest.main()
