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

"""Classes, methods and functions required to handle colour amplitudes, i.e.
sums of colour terms, to compute their scalar products and to build the colour
matrix of a colour basis, at full or at leading colour."""

import logging

import numpy as np

from colortools import ColorToolsError
import colortools.core.color_parser as color_parser
from colortools.core.color_factor import ColorFactor
from colortools.core.color_sum import ColorSum
from colortools.core.color_term import CTerm
from colortools.various.math_tools.su_n_group_constants import SU3

logger = logging.getLogger('colortools.ColorAlgebra')

#===============================================================================
# CAmplitude
#===============================================================================
class CAmplitude(list):
    """A colour amplitude: a list of CTerm objects standing for their sum,
    together with the ColorSum obtained when all of them are evaluated."""

    def __init__(self, init=None):
        """Initialize a new colour amplitude, either empty or from a CTerm, a
        list of CTerm objects or a string such as 't[1,2,3]-(0,1)*t[1,3,2]'."""

        list.__init__(self)
        self._result = ColorSum()

        if init is None:
            return
        if isinstance(init, str):
            for cnum, powers, tensors in color_parser.parse_amplitude(init):
                ct = CTerm(tensors, cnum=ColorFactor(cnum, *powers))
                ct.check_indices()
                self.append(ct)
        elif isinstance(init, CTerm):
            self.append(init.create_copy())
        else:
            for ct in init:
                if not isinstance(ct, CTerm):
                    raise ColorToolsError("%s is not a valid CTerm" % repr(ct))
                self.append(ct.create_copy())

    def create_copy(self):

        res = CAmplitude(self)
        res._result = self._result.create_copy()
        return res

    def add(self, ct):
        """Add a colour term, keeping the order of the terms."""

        self.append(ct.create_copy())

    def no_of_terms(self):

        return len(self)

    def max_index(self):
        """First index above all indices used in the amplitude."""

        return max([ct.fi for ct in self] + [0])

    def clear(self):
        """Remove all terms and reset the result."""

        del self[:]
        self._result = ColorSum()

    #===========================================================================
    # Products and conjugation
    #===========================================================================

    def hconj(self):
        """Return the hermitian conjugate: the conjugate of each term, in
        reversed order."""

        res = CAmplitude(ct.hconj() for ct in reversed(self))
        res._result = self._result.conj()
        return res

    def shift_to_internal(self, by):
        """Return a copy where the contracted indices of all terms are shifted
        by the constant by. Free indices, i.e. the external legs, are kept."""

        res = self.create_copy()
        for ct in res:
            ct.shift_inds(by, all_indices=False)
        return res

    def multiply(self, ca):
        """Multiply with another colour amplitude, without checking for
        duplicate indices."""

        new_terms = []
        for ct1 in self:
            for ct2 in ca:
                new_ct = ct1.create_copy()
                new_ct.push_back(ct2)
                new_terms.append(new_ct)
        self[:] = new_terms
        self._result = ColorSum()

    def __mul__(self, other):
        """Product with another colour amplitude avoiding duplicate indices,
        or with a number, a ColorFactor or a ColorSum."""

        if isinstance(other, CAmplitude):
            rhs = other.shift_to_internal(max(self.max_index(),
                                              other.max_index()))
            rhs_free = set(i for ct in rhs for i in ct.free_indices())
            res = self.create_copy()
            start = max(res.max_index(), rhs.max_index())
            for ct in res:
                ct.relabel_dummies(rhs_free, start)
            res.multiply(rhs)
            return res
        factor = ColorSum.coerce(other)
        if factor is None:
            return NotImplemented
        res = CAmplitude(ct * factor for ct in self)
        res._result = self._result * factor
        return res

    def __rmul__(self, other):

        if isinstance(other, CAmplitude):
            return NotImplemented
        return self.__mul__(other)

    def __eq__(self, other):

        if not isinstance(other, CAmplitude):
            return NotImplemented
        return list.__eq__(self, other)

    def __ne__(self, other):

        res = self.__eq__(other)
        if res is NotImplemented:
            return res
        return not res

    __hash__ = None

    #===========================================================================
    # Evaluation
    #===========================================================================

    def simplify(self, to_LC=False):
        """Simplify all terms, without splitting any of them."""

        for ct in self:
            ct.simplify(to_LC)

    def _reduce(self, to_LC):
        """Reduce all terms, replacing a term by the two terms produced by a
        Fierz identity or by the expansion of a structure constant until
        nothing is left to split. Terms reducing to zero stay in the amplitude
        as cleared terms. The amplitude is only modified once all terms are
        reduced."""

        pending = [ct.create_copy() for ct in self]
        reduced = []
        n_initial = len(pending)
        while pending:
            ct = pending.pop(0)
            ct.simplify(to_LC)
            parts = ct.split()
            if len(parts) == 1:
                reduced.append(ct)
            else:
                pending = parts + pending

        if len(reduced) != n_initial:
            logger.debug("Colour amplitude expanded from %d to %d terms" % \
                                                     (n_initial, len(reduced)))
        result = ColorSum()
        for ct in reduced:
            result += ct.result()
        self[:] = reduced
        self._result = result

    def evaluate(self):
        """Evaluate the colour amplitude at full colour."""

        self._reduce(to_LC=False)

    def evaluate_LC(self):
        """Evaluate the colour amplitude at leading colour: only the terms of
        highest order in NC are kept in the result."""

        self._reduce(to_LC=True)
        self._result = self._result.get_leading_NC()

    def result(self):
        """Returns the result of the last evaluation."""

        return self._result.create_copy()

    def scprod(self, ca, to_LC=False):
        """Scalar product < self | ca > of two colour amplitudes."""

        prod = self.hconj() * ca
        if to_LC:
            prod.evaluate_LC()
        else:
            prod.evaluate()
        return prod.result()

    #===========================================================================
    # Textual representation
    #===========================================================================

    def build_string(self):
        """Returns the textual representation of the sum of terms."""

        res = ''
        for ct in self:
            ct_str = ct.build_string()
            if ct_str == '0':
                continue
            if res and not ct_str.startswith('-'):
                res += '+'
            res += ct_str
        return res if res else '0'

    def __str__(self):

        return self.build_string()

    def __repr__(self):

        return "CAmplitude('%s')" % self.build_string()

#===============================================================================
# ColorMatrix
#===============================================================================
class ColorMatrix(dict):
    """A color matrix, meaning a dictionary with pairs (i,j) as keys where i
    and j refer to elements of colour bases, i.e. lists of colour amplitudes.
    Values are the ColorSum scalar products < basis1_i | basis2_j >. Also
    contains a dictionary with the fixed Nc representation of the matrix."""

    def __init__(self, col_basis, col_basis2=None, leading_color=False,
                 group=SU3, automatic_build=True):
        """Initialize a color matrix with one or two colour bases. If only one
        colour basis is given, the other one is assumed to be equal. Entries
        are computed at leading colour if leading_color is True, and evaluated
        numerically for the SU(N) group given."""

        dict.__init__(self)
        self.col_matrix_fixed_Nc = {}
        self.leading_color = leading_color
        self.group = group

        self._col_basis1 = [CAmplitude(amp) if not isinstance(amp, CAmplitude)
                                          else amp for amp in col_basis]
        if col_basis2 is not None:
            self._col_basis2 = [CAmplitude(amp) if not isinstance(amp,
                                  CAmplitude) else amp for amp in col_basis2]
        else:
            self._col_basis2 = self._col_basis1
        if automatic_build:
            self.build_matrix()

    def build_matrix(self):
        """Create the matrix using the stored colour bases."""

        for i1, amp1 in enumerate(self._col_basis1):
            for i2, amp2 in enumerate(self._col_basis2):
                result = amp1.scprod(amp2, to_LC=self.leading_color)
                # Store the full result...
                self[(i1, i2)] = result
                # ... and the fixed Nc one
                if self.leading_color:
                    self.col_matrix_fixed_Nc[(i1, i2)] = result.value_LC(
                                                                   self.group)
                else:
                    self.col_matrix_fixed_Nc[(i1, i2)] = result.value(
                                                                   self.group)

    def shape(self):

        return (len(self._col_basis1), len(self._col_basis2))

    def get_numeric_matrix(self):
        """Returns the fixed Nc matrix as a complex numpy array."""

        res = np.zeros(self.shape(), dtype=complex)
        for (i1, i2), value in self.col_matrix_fixed_Nc.items():
            res[i1, i2] = value
        return res

    def __str__(self):
        """Returns a nicely formatted string with the fixed Nc representation
        of the current matrix (only the real part)"""

        mystr = '\n\t' + '\t'.join([str(i) for i in \
                                    range(len(self._col_basis2))])

        for i1 in range(len(self._col_basis1)):
            mystr = mystr + '\n' + str(i1) + '\t'
            mystr = mystr + '\t'.join(['%.6g' % \
                        self.col_matrix_fixed_Nc[(i1, i2)].real \
                        for i2 in range(len(self._col_basis2))])

        return mystr
