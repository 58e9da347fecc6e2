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
"""Symbolic SU(N) colour algebra: colour factors, colour sums, colour terms
and colour amplitudes."""

class ColorToolsError(Exception):
    """Exception raised if an error occurs in the definition or the
    manipulation of a colour object."""

class ColorParseError(ColorToolsError):
    """a class for malformed colour expressions"""

class ColorIndexError(ColorToolsError):
    """An index is used both as adjoint and fundamental, or more than twice"""

class ColorDivisionError(ColorToolsError, ZeroDivisionError):
    """Division of a colour factor by zero"""
