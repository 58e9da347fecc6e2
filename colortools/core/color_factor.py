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

"""The ColorFactor class: a monomial c * NC^a * TR^b * CF^c * CA^d in the
SU(N) group invariants with a complex coefficient c. NC is the number of
colours, TR the normalisation of the generators, CF = TR*(NC^2-1)/NC and
CA = 2*TR*NC the fundamental and adjoint Casimirs."""

import numbers

from colortools import ColorDivisionError, ColorParseError, ColorToolsError
import colortools.core.color_parser as color_parser
from colortools.various.math_tools.su_n_group_constants import SU3

# Coefficients smaller than this in modulus are considered to vanish
ZERO_TOLERANCE = 1e-12

def is_zero_number(z):
    """Check if the complex number z vanishes within ZERO_TOLERANCE."""

    return abs(z) < ZERO_TOLERANCE

def format_real(x):
    """Shortest literal reading back as exactly the float x, without a
    trailing '.0' for integers."""

    text = repr(float(x))
    return text[:-2] if text.endswith('.0') else text

def format_number(z):
    """Returns the textual representation of a complex number, as a real
    literal when its imaginary part vanishes and as '(re,im)' otherwise."""

    z = complex(z)
    if is_zero_number(z.imag):
        return format_real(z.real)
    return '(%s,%s)' % (format_real(z.real), format_real(z.imag))

#===============================================================================
# ColorFactor
#===============================================================================

class ColorFactor(object):
    """A single monomial in NC, TR, CF and CA. A vanishing coefficient always
    comes with vanishing exponents, so that there is a unique zero."""

    def __init__(self, cnum=1., pow_NC=0, pow_TR=0, pow_CF=0, pow_CA=0):
        """Initialize from a coefficient and the four exponents, or from a
        string such as '(0,1)*NC^2*CF'."""

        if isinstance(cnum, str):
            cnum, (pow_NC, pow_TR, pow_CF, pow_CA) = \
                                           color_parser.parse_monomial(cnum)
        elif isinstance(cnum, ColorFactor):
            cnum, (pow_NC, pow_TR, pow_CF, pow_CA) = cnum.cnum, cnum.powers()

        self.cnum = complex(cnum)
        self.pow_NC = int(pow_NC)
        self.pow_TR = int(pow_TR)
        self.pow_CF = int(pow_CF)
        self.pow_CA = int(pow_CA)
        self.normalize()

    def normalize(self):
        """Set a vanishing monomial to the canonical zero."""

        if is_zero_number(self.cnum):
            self.clear()

    def clear(self):
        """Set this factor to the canonical zero."""

        self.cnum = complex(0.)
        self.pow_NC = self.pow_TR = self.pow_CF = self.pow_CA = 0

    def is_zero(self):

        return is_zero_number(self.cnum)

    def powers(self):
        """Returns the exponent tuple (NC, TR, CF, CA)."""

        return (self.pow_NC, self.pow_TR, self.pow_CF, self.pow_CA)

    def create_copy(self):

        return ColorFactor(self.cnum, *self.powers())

    #===========================================================================
    # Arithmetics
    #===========================================================================

    def __mul__(self, other):

        if isinstance(other, ColorFactor):
            return ColorFactor(self.cnum * other.cnum,
                    *[p1 + p2 for p1, p2 in zip(self.powers(), other.powers())])
        if isinstance(other, numbers.Number):
            return ColorFactor(self.cnum * other, *self.powers())
        if isinstance(other, str):
            return self * ColorFactor(other)
        return NotImplemented

    def __rmul__(self, other):

        if isinstance(other, numbers.Number):
            return self * other
        return NotImplemented

    def __imul__(self, other):

        res = self * other
        if res is NotImplemented:
            return res
        self.cnum, (self.pow_NC, self.pow_TR, self.pow_CF, self.pow_CA) = \
                                                       res.cnum, res.powers()
        return self

    def __truediv__(self, other):

        if isinstance(other, str):
            other = ColorFactor(other)
        if isinstance(other, ColorFactor):
            if other.is_zero():
                raise ColorDivisionError(
                               "Division of %s by a zero colour factor" % self)
            return ColorFactor(self.cnum / other.cnum,
                    *[p1 - p2 for p1, p2 in zip(self.powers(), other.powers())])
        if isinstance(other, numbers.Number):
            if is_zero_number(other):
                raise ColorDivisionError("Division of %s by zero" % self)
            return ColorFactor(self.cnum / other, *self.powers())
        return NotImplemented

    def __itruediv__(self, other):

        res = self / other
        if res is NotImplemented:
            return res
        self.cnum, (self.pow_NC, self.pow_TR, self.pow_CF, self.pow_CA) = \
                                                       res.cnum, res.powers()
        return self

    def __neg__(self):

        return ColorFactor(-self.cnum, *self.powers())

    def __eq__(self, other):

        if isinstance(other, numbers.Number):
            other = ColorFactor(other)
        elif isinstance(other, str):
            try:
                other = ColorFactor(other)
            except ColorParseError:
                return False
        if not isinstance(other, ColorFactor):
            return NotImplemented
        return self.powers() == other.powers() and \
                                        is_zero_number(self.cnum - other.cnum)

    def __ne__(self, other):

        res = self.__eq__(other)
        if res is NotImplemented:
            return res
        return not res

    __hash__ = None

    def conj(self):
        """Complex conjugate. NC, TR, CF and CA are real."""

        return ColorFactor(self.cnum.conjugate(), *self.powers())

    cconj = conj

    #===========================================================================
    # Specialisations
    #===========================================================================

    def replace_CA(self):
        """Return the factor with CA replaced by 2*TR*NC."""

        return ColorFactor(self.cnum * 2**self.pow_CA,
                           self.pow_NC + self.pow_CA, self.pow_TR + self.pow_CA,
                           self.pow_CF, 0)

    def replace_CF(self):
        """Return the ColorSum obtained by replacing CF by its full expression
        TR*(NC^2-1)/NC. Negative powers of CF can not be expanded as a
        polynomial and raise an error."""

        from colortools.core.color_sum import ColorSum

        if self.pow_CF < 0:
            raise ColorToolsError(
                        "Can not expand the negative power of CF in %s" % self)
        # (NC^2-1)^n = sum_k binom(n,k) NC^(2k) (-1)^(n-k)
        n = self.pow_CF
        res = ColorSum()
        binomial = 1
        for k in range(n + 1):
            res += ColorFactor(self.cnum * binomial * (-1)**(n - k),
                               self.pow_NC + 2*k - n, self.pow_TR + n,
                               0, self.pow_CA)
            binomial = binomial * (n - k) // (k + 1)
        return res

    def replace_CF_large_N(self):
        """Return the factor with CF replaced by its large-NC limit TR*NC."""

        return ColorFactor(self.cnum, self.pow_NC + self.pow_CF,
                           self.pow_TR + self.pow_CF, 0, self.pow_CA)

    def replace_TR(self, value=0.5):
        """Return the factor with TR replaced by a numerical value."""

        if is_zero_number(value) and self.pow_TR < 0:
            raise ColorDivisionError(
                        "Can not set TR to zero in %s" % self)
        return ColorFactor(self.cnum * complex(value)**self.pow_TR,
                           self.pow_NC, 0, self.pow_CF, self.pow_CA)

    def get_order_NC(self):
        """Order in NC once CF and CA are replaced by their leading pieces."""

        return self.pow_NC + self.pow_CF + self.pow_CA

    #===========================================================================
    # Numerical evaluation
    #===========================================================================

    def value(self, group=SU3):
        """Numerical value of this factor for the SU(N) group given."""

        if self.is_zero():
            return complex(0.)
        return self.cnum * float(group.NC)**self.pow_NC * \
               float(group.TR)**self.pow_TR * \
               float(group.CF)**self.pow_CF * \
               float(group.CA)**self.pow_CA

    def value_LC(self, group=SU3):
        """Numerical value at leading colour. For a single monomial this is
        the value with CA and CF replaced by their leading pieces."""

        return self.replace_CA().replace_CF_large_N().value(group)

    def value_large_N(self, group=SU3):
        """Numerical value with CF replaced by its large-NC limit."""

        return self.replace_CF_large_N().value(group)

    #===========================================================================
    # Textual representation
    #===========================================================================

    def get_string(self):
        """Returns the canonical textual representation, e.g.
        '0.5*NC^2*TR'."""

        res = [format_number(self.cnum)]
        if self.is_zero():
            return res[0]
        for name, power in zip(color_parser.INVARIANTS, self.powers()):
            if power == 1:
                res.append(name)
            elif power != 0:
                res.append('%s^%d' % (name, power))
        return '*'.join(res)

    build_string = get_string

    def __str__(self):

        return self.get_string()

    def __repr__(self):

        return "ColorFactor('%s')" % self.get_string()
