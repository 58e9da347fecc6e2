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

"""The ColorSum class: an ordered sum of ColorFactor monomials, kept in a
canonical form where no two monomials share the same exponents and no
coefficient vanishes. An empty ColorSum is zero."""

import numbers

from colortools import ColorDivisionError, ColorParseError, ColorToolsError
import colortools.core.color_parser as color_parser
from colortools.core.color_factor import ColorFactor, is_zero_number
from colortools.various.math_tools.su_n_group_constants import SU3

#===============================================================================
# ColorSum
#===============================================================================

class ColorSum(list):
    """A list of ColorFactor objects standing for their sum."""

    def __init__(self, init=None):
        """Initialize from nothing (zero), a ColorFactor, a number, a string
        such as 'NC^2*TR - TR' or an iterable of ColorFactor objects."""

        list.__init__(self)
        if init is None:
            return
        if isinstance(init, str):
            self.extend(ColorFactor(cnum, *powers) for cnum, powers in \
                                                  color_parser.parse_sum(init))
        elif isinstance(init, ColorFactor):
            self.append(init.create_copy())
        elif isinstance(init, numbers.Number):
            self.append(ColorFactor(init))
        else:
            for cf in init:
                if not isinstance(cf, ColorFactor):
                    raise ColorToolsError(
                         "%s is not a valid ColorFactor" % repr(cf))
                self.append(cf.create_copy())
        self.collapse()

    @classmethod
    def coerce(cls, other):
        """Convert other to a ColorSum, or return None if this is not
        possible."""

        if isinstance(other, ColorSum):
            return other
        if isinstance(other, (ColorFactor, numbers.Number, str)):
            return cls(other)
        return None

    def collapse(self):
        """Bring this sum to its canonical form: monomials with the same
        exponents are merged in order of first appearance, and vanishing
        monomials are removed."""

        merged = {}
        order = []
        for cf in self:
            key = cf.powers()
            if key in merged:
                merged[key] += cf.cnum
            else:
                merged[key] = cf.cnum
                order.append(key)
        self[:] = [ColorFactor(merged[key], *key) for key in order \
                                             if not is_zero_number(merged[key])]
        return self

    def create_copy(self):

        return ColorSum(self)

    def is_zero(self):

        return len(self) == 0

    #===========================================================================
    # Arithmetics
    #===========================================================================

    def __add__(self, other):

        other = self.coerce(other)
        if other is None:
            return NotImplemented
        res = self.create_copy()
        res.extend(cf.create_copy() for cf in other)
        return res.collapse()

    __radd__ = __add__

    def __iadd__(self, other):

        other = self.coerce(other)
        if other is None:
            return NotImplemented
        self.extend(cf.create_copy() for cf in other)
        return self.collapse()

    def __neg__(self):

        return ColorSum(-cf for cf in self)

    def __sub__(self, other):

        other = self.coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):

        other = self.coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __isub__(self, other):

        other = self.coerce(other)
        if other is None:
            return NotImplemented
        self.extend(-cf for cf in other)
        return self.collapse()

    def __mul__(self, other):

        other = self.coerce(other)
        if other is None:
            return NotImplemented
        res = ColorSum()
        res.extend(cf1 * cf2 for cf1 in self for cf2 in other)
        return res.collapse()

    def __rmul__(self, other):

        # Multiplication is commutative
        return self.__mul__(other)

    def __imul__(self, other):

        res = self * other
        if res is NotImplemented:
            return res
        self[:] = res
        return self

    def __truediv__(self, other):
        """Division by a monomial. Polynomial division is not supported."""

        other = self.coerce(other)
        if other is None:
            return NotImplemented
        if other.is_zero():
            raise ColorDivisionError("Division of %s by zero" % self)
        if len(other) > 1:
            raise ColorToolsError(
              "Division of %s by the polynomial %s is not supported" % \
                                                                (self, other))
        return ColorSum(cf / other[0] for cf in self)

    def __itruediv__(self, other):

        res = self / other
        if res is NotImplemented:
            return res
        self[:] = res
        return self

    def __eq__(self, other):
        """Two sums are equal if their canonical forms contain the same
        monomials, irrespectively of their ordering."""

        try:
            other = self.coerce(other)
        except ColorParseError:
            return False
        if other is None:
            return NotImplemented
        return (self - other).is_zero()

    def __ne__(self, other):

        res = self.__eq__(other)
        if res is NotImplemented:
            return res
        return not res

    __hash__ = None

    def conj(self):
        """Complex conjugate."""

        return ColorSum(cf.conj() for cf in self)

    cconj = conj

    def clear(self):
        """Set this sum to zero."""

        del self[:]

    #===========================================================================
    # Specialisations
    #===========================================================================

    def replace_CA(self):
        """Return the sum with CA replaced by 2*TR*NC."""

        return ColorSum(cf.replace_CA() for cf in self)

    def replace_CF(self):
        """Return the sum with CF replaced by TR*(NC^2-1)/NC."""

        res = ColorSum()
        for cf in self:
            res += cf.replace_CF()
        return res

    def replace_CF_large_N(self):
        """Return the sum with CF replaced by its large-NC limit TR*NC."""

        return ColorSum(cf.replace_CF_large_N() for cf in self)

    def replace_TR(self, value=0.5):
        """Return the sum with TR replaced by a numerical value."""

        return ColorSum(cf.replace_TR(value) for cf in self)

    def get_leading_NC(self):
        """Return the monomials of highest order in NC, where CF and CA
        count as one power of NC each. The input order is kept."""

        if not self:
            return ColorSum()
        max_order = max(cf.get_order_NC() for cf in self)
        return ColorSum(cf for cf in self if cf.get_order_NC() == max_order)

    #===========================================================================
    # Numerical evaluation
    #===========================================================================

    def value(self, group=SU3):
        """Numerical value for the SU(N) group given."""

        return sum((cf.value(group) for cf in self), complex(0.))

    def value_LC(self, group=SU3):
        """Numerical value of the leading-colour part of this sum."""

        return sum((cf.value_LC(group) for cf in self.get_leading_NC()),
                                                                  complex(0.))

    def value_large_N(self, group=SU3):
        """Numerical value with CF replaced by its large-NC limit."""

        return sum((cf.value_large_N(group) for cf in self), complex(0.))

    #===========================================================================
    # Textual representation
    #===========================================================================

    def get_string(self):
        """Returns the canonical textual representation, e.g.
        '0.5*NC^2*TR-0.5*TR'."""

        if not self:
            return '0'
        res = self[0].get_string()
        for cf in self[1:]:
            cf_str = cf.get_string()
            res += cf_str if cf_str.startswith('-') else '+' + cf_str
        return res

    build_string = get_string

    def __str__(self):

        return self.get_string()

    def __repr__(self):

        return "ColorSum('%s')" % self.get_string()
