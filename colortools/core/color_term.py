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

"""The CTerm class: a product of Kronecker deltas, fundamental generators and
structure constants carrying a ColorSum prefactor, together with the reducer
contracting its internal indices with SU(N) identities.

The reducer only applies identities which map a single product onto a single
product (simplify). The identities producing a sum of two products, namely the
Fierz identity and the expression of f and d as traces of generators, are
applied one at a time by split() and flattened by the colour amplitude.

Conventions: Tr(t^a t^b) = TR delta^{ab}, [t^a, t^b] = i f^{abc} t^c and
{t^a, t^b} = 2 TR/NC delta^{ab} + d^{abc} t^c, with CF = TR (NC^2-1)/NC and
CA = 2 TR NC."""

import collections
import logging

from colortools import ColorIndexError, ColorToolsError
import colortools.core.color_parser as color_parser
import colortools.core.color_tensors as color_tensors
from colortools.core.color_tensors import ColorTensor, delta, fundamental
from colortools.core.color_factor import ColorFactor
from colortools.core.color_sum import ColorSum

logger = logging.getLogger('colortools.ColorAlgebra')

#===============================================================================
# Prefactors of the SU(N) identities
#===============================================================================

# f^{abc} f^{abc} and f^{abc} f^{abd} = CA delta^{cd}
FF_FULL = 'CA*NC^2-CA'
FF_PARTIAL = 'CA'
# d^{abc} d^{abc} and d^{abc} d^{abd} = 2 TR (NC^2-4)/NC delta^{cd}
DD_FULL = '2*NC^3*TR-10*NC*TR+8*NC^-1*TR'
DD_PARTIAL = '2*NC*TR-8*NC^-1*TR'
# (t^a)_{ij} (t^a)_{jk} = CF delta_{ik}
TT_ADJACENT = 'CF'
# t^a t^b t^a = (CF - CA/2) t^b
TTT_SANDWICH = '-NC^-1*TR'
# f^{abc} t^b t^c = i CA/2 t^a and d^{abc} t^b t^c = TR (NC^2-4)/NC t^a
FTT = '(0,0.5)*CA'
DTT = 'NC*TR-4*NC^-1*TR'
# (t^a)_{ij} (t^a)_{kl} = TR delta_{il} delta_{kj} - TR/NC delta_{ij} delta_{kl}
FIERZ_EXCHANGE = 'TR'
FIERZ_SINGLET = '-NC^-1*TR'
# f^{abc} = -i/TR [Tr(t^a t^b t^c) - Tr(t^b t^a t^c)]
# d^{abc} =  1/TR [Tr(t^a t^b t^c) + Tr(t^b t^a t^c)]
F_TRACE = '(0,-1)*TR^-1'
D_TRACE = 'TR^-1'

# Lists of a CTerm holding each kind of tensor
LIST_NAMES = {
    color_tensors.FUNDAMENTAL_DELTA : 'k_list',
    color_tensors.ADJOINT_DELTA     : 'k_list',
    color_tensors.FUNDAMENTAL       : 't_list',
    color_tensors.ANTISYMMETRIC     : 'f_list',
    color_tensors.SYMMETRIC         : 'd_list',
}

def rotate_to_front(indices, ind):
    """Cyclic permutation of a triplet of indices bringing ind in front. Cyclic
    permutations leave both f and d invariant."""

    pos = indices.index(ind)
    return tuple(indices[pos:]) + tuple(indices[:pos])

def remove_positions(a_list, positions):
    """Remove the elements at the given positions of a_list."""

    for pos in sorted(set(positions), reverse=True):
        del a_list[pos]

#===============================================================================
# CTerm
#===============================================================================

class CTerm(object):
    """A single product of colour tensors with a ColorSum prefactor.

    An index appearing once is free, an index appearing twice is contracted
    (summed over). The attribute fi is the first index above all indices used
    in the term, from which fresh internal indices are allocated."""

    def __init__(self, tensors=None, cnum=1.):
        """Initialize from a string such as '(0,1)*f[1,2,3]*t[3,4,5]', a
        single tensor, another CTerm or a list of tensors. The optional cnum
        multiplies the prefactor."""

        self.cnum = ColorSum(cnum) if not isinstance(cnum, ColorSum) \
                                                       else cnum.create_copy()
        self.k_list = []
        self.t_list = []
        self.f_list = []
        self.d_list = []
        self.fi = 0

        if tensors is None:
            return
        if isinstance(tensors, str):
            parsed_cnum, powers, tensors = color_parser.parse_term(tensors)
            self.cnum *= ColorFactor(parsed_cnum, *powers)
            for tensor in tensors:
                self.push_back(tensor)
            self.check_indices()
        elif isinstance(tensors, (ColorTensor, CTerm)):
            self.push_back(tensors)
        else:
            for tensor in tensors:
                self.push_back(tensor)

    def create_copy(self):

        res = CTerm(cnum=self.cnum)
        res.k_list = list(self.k_list)
        res.t_list = list(self.t_list)
        res.f_list = list(self.f_list)
        res.d_list = list(self.d_list)
        res.fi = self.fi
        return res

    def tensors(self):
        """Iterate over all tensors of this term."""

        for a_list in (self.k_list, self.t_list, self.f_list, self.d_list):
            for tensor in a_list:
                yield tensor

    def index_counts(self):
        """Returns a Counter of the number of occurrences of each index."""

        return collections.Counter(i for tensor in self.tensors() \
                                                   for i in tensor.indices)

    def free_indices(self):

        return sorted(i for i, n in self.index_counts().items() if n == 1)

    def contracted_indices(self):

        return sorted(i for i, n in self.index_counts().items() if n > 1)

    def update_fi(self):
        """Recompute the first free index from the indices present."""

        self.fi = max([i for tensor in self.tensors() \
                                        for i in tensor.indices] + [-1]) + 1

    def check_indices(self):
        """Raise a ColorIndexError if an index appears more than twice, or is
        used both as an adjoint and as a fundamental index."""

        for ind, n in self.index_counts().items():
            if n > 2:
                raise ColorIndexError(
                    "Index %d appears %d times in %s" % \
                                              (ind, n, self.build_string()))
        adjoint = set()
        fund = set()
        for tensor in self.tensors():
            adjoint.update(tensor.adjoint_indices())
            fund.update(tensor.fundamental_indices())
        if adjoint & fund:
            raise ColorIndexError(
                "Indices %s are used both as adjoint and fundamental in %s" % \
                        (sorted(adjoint & fund), self.build_string()))

    def push_back(self, obj):
        """Multiply with a tensor or another CTerm, without checking for
        duplicate indices."""

        if isinstance(obj, CTerm):
            self.cnum *= obj.cnum
            self.k_list.extend(obj.k_list)
            self.t_list.extend(obj.t_list)
            self.f_list.extend(obj.f_list)
            self.d_list.extend(obj.d_list)
        elif isinstance(obj, ColorTensor):
            getattr(self, LIST_NAMES[obj.kind]).append(obj)
        else:
            raise ColorToolsError("Can not multiply a colour term with %s" % \
                                                                    repr(obj))
        self.update_fi()

    def set_cnumber(self, cf):
        """Replace the prefactor."""

        self.cnum = ColorSum(cf) if not isinstance(cf, ColorSum) \
                                                         else cf.create_copy()

    def clear(self):
        """Set this term to zero."""

        self.cnum = ColorSum()
        self.k_list = []
        self.t_list = []
        self.f_list = []
        self.d_list = []
        self.fi = 0

    def is_zero(self):

        return self.cnum.is_zero()

    def is_reduced(self):
        """True when no contracted index is left."""

        return not self.contracted_indices()

    #===========================================================================
    # Products and conjugation
    #===========================================================================

    def shift_inds(self, by, all_indices=False):
        """Shift the contracted indices by the constant by. Free indices are
        shifted too if all_indices is True."""

        to_shift = None if all_indices else set(self.contracted_indices())
        for name in ('k_list', 't_list', 'f_list', 'd_list'):
            setattr(self, name, [tensor.shift(by, to_shift) \
                                            for tensor in getattr(self, name)])
        self.update_fi()

    def relabel_dummies(self, avoid, start):
        """Rename the contracted indices found in avoid to fresh indices,
        counting from start. Returns the first index left unused."""

        for ind in sorted(set(self.contracted_indices()) & set(avoid)):
            self._replace_index(ind, start)
            start += 1
        self.update_fi()
        return start

    def __mul__(self, other):
        """Product avoiding duplicate indices: the contracted indices of
        other are shifted above all indices of both terms, and those of self
        which are free indices of other are renamed."""

        if isinstance(other, CTerm):
            rhs = other.create_copy()
            rhs.shift_inds(max(self.fi, other.fi))
            res = self.create_copy()
            res.relabel_dummies(rhs.free_indices(), max(res.fi, rhs.fi))
            res.push_back(rhs)
            return res
        factor = ColorSum.coerce(other)
        if factor is None:
            return NotImplemented
        res = self.create_copy()
        res.cnum *= factor
        return res

    def __rmul__(self, other):

        if isinstance(other, CTerm):
            return NotImplemented
        return self.__mul__(other)

    def hconj(self):
        """Hermitian conjugate. The chain of generators is reversed, each
        (t^i)_{ab} becoming (t^i)_{ba}, the f's are reversed with a sign per
        f, and the prefactor is complex conjugated."""

        res = CTerm(cnum=self.cnum.conj())
        res.k_list = list(self.k_list)
        res.t_list = [fundamental(i, b, a) for (i, a, b) in \
                            (t.indices for t in reversed(self.t_list))]
        res.f_list = list(reversed(self.f_list))
        res.d_list = list(self.d_list)
        if len(self.f_list) % 2:
            res.cnum = -res.cnum
        res.fi = self.fi
        return res

    def __eq__(self, other):

        if not isinstance(other, CTerm):
            return NotImplemented
        return self.cnum == other.cnum and self.k_list == other.k_list and \
               self.t_list == other.t_list and self.f_list == other.f_list and \
               self.d_list == other.d_list

    def __ne__(self, other):

        res = self.__eq__(other)
        if res is NotImplemented:
            return res
        return not res

    __hash__ = None

    #===========================================================================
    # Reduction
    #===========================================================================

    def _set_zero(self):

        self.cnum = ColorSum()
        self.k_list = []
        self.t_list = []
        self.f_list = []
        self.d_list = []

    def _replace_index(self, old, new):
        """Rename the index old into new in all tensors."""

        for name in ('k_list', 't_list', 'f_list', 'd_list'):
            setattr(self, name, [tensor.replace_index(old, new) \
                                   if tensor.is_free(old) else tensor \
                                          for tensor in getattr(self, name)])

    def replace_zero(self):
        """Set the term to zero if it obviously vanishes. Returns True if it
        does."""

        if self.cnum.is_zero():
            self._set_zero()
            return True
        vanishing = False
        # f and d with a repeated index
        for tensor in self.f_list + self.d_list:
            if len(set(tensor.indices)) < 3:
                vanishing = True
        # Tr(t^a) = 0
        for tensor in self.t_list:
            if tensor.indices[1] == tensor.indices[2]:
                vanishing = True
        # f^{abc} d^{abd} = 0
        for f in self.f_list:
            for d in self.d_list:
                if len(set(f.indices) & set(d.indices)) > 1:
                    vanishing = True
        if vanishing:
            self._set_zero()
        return vanishing

    def evaluate_deltas(self, to_LC=False):
        """Absorb the Kronecker deltas with a contracted index by renaming the
        index in the tensor it is contracted with. Traces give NC for the
        fundamental delta and NC^2-1 for the adjoint one. At leading colour
        (to_LC) the traces keep their full value: a subleading piece of one
        term may cancel a leading piece of another, so only the accumulated
        result is projected. Deltas between two free indices are kept."""

        pos = 0
        while pos < len(self.k_list):
            k = self.k_list[pos]
            i, j = k.indices
            if i == j:
                del self.k_list[pos]
                if k.kind == color_tensors.FUNDAMENTAL_DELTA:
                    self.cnum *= ColorFactor(1., 1)
                else:
                    self.cnum *= ColorSum('NC^2-1')
                continue
            counts = self.index_counts()
            if counts[i] > 1 or counts[j] > 1:
                old, new = (i, j) if counts[i] > 1 else (j, i)
                del self.k_list[pos]
                self._replace_index(old, new)
                # Renaming may turn an earlier delta into a trace
                pos = 0
                continue
            pos += 1

    def _contract_structure_constants(self):
        """f f and d d sharing two or three indices."""

        for a_list, antisym in ((self.f_list, True), (self.d_list, False)):
            for p1, s1 in enumerate(a_list):
                for p2 in range(p1 + 1, len(a_list)):
                    s2 = a_list[p2]
                    shared = set(s1.indices) & set(s2.indices)
                    if len(shared) < 2:
                        continue
                    if len(shared) == 3:
                        first = s1.indices[0]
                        sign = 1
                        if antisym and rotate_to_front(s2.indices, first) != \
                                                                  s1.indices:
                            sign = -1
                        factor = ColorSum(FF_FULL if antisym else DD_FULL)
                        new_delta = None
                    else:
                        c = [i for i in s1.indices if i not in shared][0]
                        d = [i for i in s2.indices if i not in shared][0]
                        sign = 1
                        if antisym and rotate_to_front(s1.indices, c)[1:] != \
                                         rotate_to_front(s2.indices, d)[1:]:
                            sign = -1
                        factor = ColorSum(FF_PARTIAL if antisym else DD_PARTIAL)
                        new_delta = delta(c, d, adj=True)
                    remove_positions(a_list, [p1, p2])
                    if new_delta is not None:
                        self.k_list.append(new_delta)
                    self.cnum *= factor * sign
                    return True
        return False

    def _contract_adjacent_generators(self):
        """(t^a)_{ij} (t^a)_{jk} = CF delta_{ik}"""

        for p1, t1 in enumerate(self.t_list):
            for p2, t2 in enumerate(self.t_list):
                if p1 == p2 or t1.indices[0] != t2.indices[0]:
                    continue
                if t1.indices[2] == t2.indices[1]:
                    remove_positions(self.t_list, [p1, p2])
                    self.k_list.append(delta(t1.indices[1], t2.indices[2]))
                    self.cnum *= ColorSum(TT_ADJACENT)
                    return True
        return False

    def _contract_sandwiched_generator(self):
        """t^a t^b t^a = -TR/NC t^b"""

        for p1, t1 in enumerate(self.t_list):
            for p2, t2 in enumerate(self.t_list):
                if p1 == p2 or t1.indices[0] != t2.indices[0]:
                    continue
                for pm, tm in enumerate(self.t_list):
                    if pm in (p1, p2):
                        continue
                    if t1.indices[2] == tm.indices[1] and \
                                              tm.indices[2] == t2.indices[1]:
                        remove_positions(self.t_list, [p1, p2, pm])
                        self.t_list.append(fundamental(tm.indices[0],
                                             t1.indices[1], t2.indices[2]))
                        self.cnum *= ColorSum(TTT_SANDWICH)
                        return True
        return False

    def _contract_structure_constant_with_generators(self):
        """f^{abc} t^b t^c = i CA/2 t^a and d^{abc} t^b t^c =
        TR (NC^2-4)/NC t^a, for adjacent generators."""

        for a_list, antisym in ((self.f_list, True), (self.d_list, False)):
            for ps, s in enumerate(a_list):
                for p1, t1 in enumerate(self.t_list):
                    for p2, t2 in enumerate(self.t_list):
                        if p1 == p2 or t1.indices[2] != t2.indices[1]:
                            continue
                        x, y = t1.indices[0], t2.indices[0]
                        if x == y or not s.is_free(x) or not s.is_free(y):
                            continue
                        a = [i for i in s.indices if i not in (x, y)][0]
                        sign = 1
                        if antisym and rotate_to_front(s.indices, a)[1:] != \
                                                                       (x, y):
                            sign = -1
                        del a_list[ps]
                        remove_positions(self.t_list, [p1, p2])
                        self.t_list.append(fundamental(a, t1.indices[1],
                                                          t2.indices[2]))
                        self.cnum *= ColorSum(FTT if antisym else DTT) * sign
                        return True
        return False

    def replace_adjoint(self):
        """Apply one term-preserving identity eliminating adjoint indices.
        Returns True if an identity was applied."""

        return self._contract_structure_constants() or \
               self._contract_adjacent_generators() or \
               self._contract_sandwiched_generator() or \
               self._contract_structure_constant_with_generators()

    def simplify(self, to_LC=False):
        """Contract the internal indices as far as possible without splitting
        the term into a sum. Raises a ColorIndexError, leaving the term
        unchanged, if the indices are misused."""

        self.check_indices()
        while True:
            if self.replace_zero():
                break
            self.evaluate_deltas(to_LC)
            if self.replace_zero():
                break
            if not self.replace_adjoint():
                break
        return self

    def split(self):
        """Apply one identity turning the term into a sum of two terms, and
        return the list of resulting terms. If no such identity applies, the
        list only contains this term.

        Two generators sharing an adjoint index are replaced using the Fierz
        identity. Otherwise, an f or a d carrying a contracted index is
        written as a sum of two traces of generators."""

        for p1, t1 in enumerate(self.t_list):
            for p2 in range(p1 + 1, len(self.t_list)):
                t2 = self.t_list[p2]
                if t1.indices[0] != t2.indices[0]:
                    continue
                (i, j), (k, l) = t1.indices[1:], t2.indices[1:]
                res = []
                for deltas, factor in (((delta(i, l), delta(k, j)),
                                                            FIERZ_EXCHANGE),
                                       ((delta(i, j), delta(k, l)),
                                                            FIERZ_SINGLET)):
                    new_term = self.create_copy()
                    remove_positions(new_term.t_list, [p1, p2])
                    new_term.k_list.extend(deltas)
                    new_term.cnum *= ColorSum(factor)
                    res.append(new_term)
                return res

        counts = self.index_counts()
        for name, trace_factor, sign in (('f_list', F_TRACE, -1),
                                         ('d_list', D_TRACE, 1)):
            for ps, s in enumerate(getattr(self, name)):
                if all(counts[i] == 1 for i in s.indices):
                    continue
                a, b, c = s.indices
                p, q, r = self.fi, self.fi + 1, self.fi + 2
                res = []
                for chain, factor in (((a, b, c), 1), ((b, a, c), sign)):
                    new_term = self.create_copy()
                    del getattr(new_term, name)[ps]
                    new_term.t_list.extend([fundamental(chain[0], p, q),
                                            fundamental(chain[1], q, r),
                                            fundamental(chain[2], r, p)])
                    new_term.cnum *= ColorSum(trace_factor) * factor
                    new_term.update_fi()
                    res.append(new_term)
                return res

        return [self]

    def result(self):
        """Returns the prefactor. If contracted indices are left, the term
        could not be fully reduced and a warning is issued."""

        if not self.is_zero() and not self.is_reduced():
            logger.warning("Colour term %s is not fully reduced, " % \
                           self.build_string() + \
                           "the tensor structure is dropped from its result.")
        return self.cnum.create_copy()

    #===========================================================================
    # Textual representation
    #===========================================================================

    def build_string(self):
        """Returns the textual representation, one product per monomial of
        the prefactor, e.g. '0.5*TR*t[1,2,3]*k[4,5]'."""

        tensors_str = '*'.join(tensor.build_string() for tensor in \
                                                               self.tensors())
        if self.cnum.is_zero():
            return '0'
        res = ''
        for cf in self.cnum:
            cf_str = cf.get_string()
            if tensors_str:
                if cf_str == '1':
                    cf_str = tensors_str
                elif cf_str == '-1':
                    cf_str = '-' + tensors_str
                else:
                    cf_str = cf_str + '*' + tensors_str
            if res and not cf_str.startswith('-'):
                res += '+'
            res += cf_str
        return res

    def __str__(self):

        return self.build_string()

    def __repr__(self):

        return "CTerm('%s')" % self.build_string()
