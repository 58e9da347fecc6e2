"""Numerical invariants of SU(N) groups.
Symbolic colour factors are only turned into numbers at the very end, by
substituting the values NC, TR, CF and CA held by one of these objects.
"""

from colortools import ColorToolsError

class SU_N_group:
    def __init__(self,nc=3,tr=0.5):
        if nc < 2 or tr <= 0:
            raise ColorToolsError("Invalid SU(N) group with nc=%s, tr=%s"%(nc,tr))
        self.NC = nc
        self.TR = tr
        self.CF = tr*(nc**2-1)/nc
        self.CA = 2*tr*nc

    def dimension(self, representation):
        """Dimension of the 'fundamental' or 'adjoint' representation"""
        if representation == 'fundamental':
            return self.NC
        elif representation == 'adjoint':
            return self.NC**2-1
        raise ColorToolsError("Unknown representation %s"%representation)

    def casimir(self, representation_dimension):
        """Return the Casimir invariant of a representation with dimension representation_dimension,
        negative for the anti-fundamental"""
        if abs(representation_dimension) == self.dimension('fundamental'):
            return self.CF
        elif representation_dimension == self.dimension('adjoint'):
            return self.CA
        raise ColorToolsError("No Casimir for a representation of dimension %s"%representation_dimension)

    def __repr__(self):
        return 'SU_N_group(nc=%s,tr=%s)' % (self.NC, self.TR)


# The usual convention for QCD
SU3 = SU_N_group(nc=3,tr=1./2.)
