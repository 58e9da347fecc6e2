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

"""Tensor primitives of the SU(N) colour algebra: Kronecker deltas in the
fundamental and adjoint representations, fundamental generators t and the
antisymmetric and symmetric structure constants f and d. All of them are
represented by a single immutable record tagged by its kind."""

import collections

from bidict import bidict

#===============================================================================
# Kinds of colour tensors
#===============================================================================

FUNDAMENTAL_DELTA = 'fundamental_delta'
ADJOINT_DELTA = 'adjoint_delta'
FUNDAMENTAL = 'fundamental'
ANTISYMMETRIC = 'antisymmetric'
SYMMETRIC = 'symmetric'

# One-letter tokens used in the textual representation
KIND_TOKENS = bidict({
    FUNDAMENTAL_DELTA : 'k',
    ADJOINT_DELTA     : 'K',
    FUNDAMENTAL       : 't',
    ANTISYMMETRIC     : 'f',
    SYMMETRIC         : 'd',
})

#===============================================================================
# ColorTensor
#===============================================================================

class ColorTensor(collections.namedtuple('ColorTensor', ['kind', 'indices'])):
    """A colour tensor k[i,j], K[i,j], t[i,a,b], f[i,j,k] or d[i,j,k]. The
    generator t[i,a,b] stands for (t^i)_{ab}, i being an adjoint index and
    a, b fundamental ones."""

    __slots__ = ()

    N_INDICES = {FUNDAMENTAL_DELTA: 2, ADJOINT_DELTA: 2, FUNDAMENTAL: 3,
                 ANTISYMMETRIC: 3, SYMMETRIC: 3}

    def __new__(cls, kind, indices):

        assert kind in KIND_TOKENS, "Unknown colour tensor kind %s" % kind
        indices = tuple(indices)
        assert len(indices) == cls.N_INDICES[kind], \
            "Colour tensor %s takes %d indices" % (kind, cls.N_INDICES[kind])
        return super(ColorTensor, cls).__new__(cls, kind, indices)

    def is_free(self, ind):
        """Check whether the index ind is one of the slots of this tensor."""

        return ind in self.indices

    def adjoint_indices(self):
        """Return the indices of this tensor living in the adjoint
        representation."""

        if self.kind == FUNDAMENTAL_DELTA:
            return ()
        if self.kind == FUNDAMENTAL:
            return self.indices[:1]
        return self.indices

    def fundamental_indices(self):
        """Return the indices of this tensor living in the fundamental
        representation."""

        if self.kind == FUNDAMENTAL_DELTA:
            return self.indices
        if self.kind == FUNDAMENTAL:
            return self.indices[1:]
        return ()

    def replace_index(self, old, new):
        """Return a copy of this tensor where index old is replaced by new."""

        return ColorTensor(self.kind,
                           [new if i == old else i for i in self.indices])

    def shift(self, by, indices=None):
        """Return a copy of this tensor with the indices shifted by the
        constant by. If a collection of indices is given, only those are
        shifted."""

        return ColorTensor(self.kind,
                    [i + by if indices is None or i in indices else i
                                                       for i in self.indices])

    def build_string(self):
        """Returns the textual representation, e.g. 't[1,2,3]'."""

        return '%s[%s]' % (KIND_TOKENS[self.kind],
                           ','.join(str(i) for i in self.indices))

    def __str__(self):

        return self.build_string()

#===============================================================================
# Constructors
#===============================================================================

def delta(i, j, adj=False):
    """Kronecker delta, adjoint if adj is True and fundamental otherwise."""

    return ColorTensor(ADJOINT_DELTA if adj else FUNDAMENTAL_DELTA, (i, j))

def fundamental(i, a, b):
    """Fundamental generator (t^i)_{ab}."""

    return ColorTensor(FUNDAMENTAL, (i, a, b))

def antisymmetric(i, j, k):
    """Antisymmetric structure constant f^{ijk}."""

    return ColorTensor(ANTISYMMETRIC, (i, j, k))

def symmetric(i, j, k):
    """Symmetric structure constant d^{ijk}."""

    return ColorTensor(SYMMETRIC, (i, j, k))
