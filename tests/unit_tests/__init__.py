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
"""Unit tests of the colortools package. Test modules import this package as
unittest: it exposes the standard library module, with a TestCase extended by
assertions comparing colour objects."""

from unittest import *
import unittest as _unittest

from colortools.core.color_sum import ColorSum

class TestCase(_unittest.TestCase):
    """TestCase with additional assertions for colour factors and sums."""

    def assertColorSumEqual(self, first, second, msg=None):
        """Compare two ColorSum objects, or anything they can be built from,
        irrespectively of the order of their monomials."""

        first = ColorSum.coerce(first)
        second = ColorSum.coerce(second)
        if first != second:
            standardMsg = '%s != %s' % (first, second)
            self.fail(self._formatMessage(msg, standardMsg))

    def assertComplexAlmostEqual(self, first, second, places=7, msg=None):
        """Compare two complex numbers up to the given number of places."""

        first, second = complex(first), complex(second)
        self.assertAlmostEqual(first.real, second.real, places, msg)
        self.assertAlmostEqual(first.imag, second.imag, places, msg)
