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

"""Parsers for the textual representation of colour objects.

The monomial grammar reads products such as '(0,0.5)*NC^2*TR*CF**-1', a sum
is a list of monomials joined by '+' or '-', and a colour term is a product of
tensor tokens 'k[i,j]', 'K[i,j]', 't[i,a,b]', 'f[i,j,k]', 'd[i,j,k]', possibly
mixed with monomial factors. The parsers only return plain python data: the
colour classes build themselves from it."""

import re

from colortools import ColorParseError
from colortools.core.color_tensors import ColorTensor, KIND_TOKENS

# Order of the group invariants in exponent tuples
INVARIANTS = ('NC', 'TR', 'CF', 'CA')

_ATOM_RE = re.compile(r'^(NC|TR|CF|CA)(?:\^\(?\s*([-+]?\d+)\s*\)?)?$')
_COMPLEX_RE = re.compile(r'^\(\s*([^,()]+?)\s*,\s*([^,()]+?)\s*\)$')
_TENSOR_RE = re.compile(r'^([%s])\[\s*(\d+(?:\s*,\s*\d+)*)\s*\]$' % \
                                              ''.join(KIND_TOKENS.inverse))

#===============================================================================
# Low level splitting
#===============================================================================

def _split_top_level(expr, separators):
    """Split expr on any character of separators found outside of brackets.
    Empty pieces are discarded."""

    pieces = []
    current = []
    depth = 0
    for char in expr:
        if char in '([':
            depth += 1
        elif char in ')]':
            depth -= 1
            if depth < 0:
                raise ColorParseError("Unbalanced brackets in '%s'" % expr)
        if depth == 0 and char in separators:
            pieces.append(''.join(current))
            current = []
        else:
            current.append(char)
    if depth != 0:
        raise ColorParseError("Unbalanced brackets in '%s'" % expr)
    pieces.append(''.join(current))
    return [p.strip() for p in pieces if p.strip()]

def _split_signed_terms(expr):
    """Split a sum into a list of (sign, text) pairs. A '+' or '-' does not
    separate terms when it is the sign of an exponent ('NC^-1'), of a factor
    ('2*-TR') or of the exponent of a floating point literal ('1e-3')."""

    terms = []
    current = []
    sign = 1
    depth = 0
    for char in expr:
        if char in '([':
            depth += 1
        elif char in ')]':
            depth -= 1
        if depth == 0 and char in '+-':
            previous = ''.join(current).strip()
            if previous and previous[-1] in '^*' or \
                    len(previous) > 1 and previous[-1] in 'eE' and \
                                                       previous[-2].isdigit():
                current.append(char)
                continue
            if previous:
                terms.append((sign, previous))
                sign = 1
            # Consecutive signs combine
            if char == '-':
                sign = -sign
            current = []
            continue
        current.append(char)
    if depth != 0:
        raise ColorParseError("Unbalanced brackets in '%s'" % expr)
    last = ''.join(current).strip()
    if last:
        terms.append((sign, last))
    elif expr.strip():
        raise ColorParseError("Dangling sign in expression '%s'" % expr)
    return terms

#===============================================================================
# Monomials and sums
#===============================================================================

def _parse_number(text):
    """Convert a real or complex literal to a complex number."""

    match = _COMPLEX_RE.match(text)
    try:
        if match:
            return complex(float(match.group(1)), float(match.group(2)))
        return complex(float(text))
    except ValueError:
        raise ColorParseError("Invalid number '%s'" % text)

def parse_factor(text, cnum, powers):
    """Multiply the coefficient cnum and update the exponent list powers with
    a single monomial factor. Returns the new coefficient."""

    if text and text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        return sign * parse_factor(text[1:].strip(), cnum, powers)
    match = _ATOM_RE.match(text)
    if match:
        exponent = int(match.group(2)) if match.group(2) is not None else 1
        powers[INVARIANTS.index(match.group(1))] += exponent
        return cnum
    return cnum * _parse_number(text)

def parse_monomial(expr):
    """Parse a monomial and return a tuple (cnum, (pow_NC, pow_TR, pow_CF,
    pow_CA))."""

    expr = expr.replace('**', '^').strip()
    if not expr:
        raise ColorParseError("Empty monomial")
    cnum = complex(1.)
    powers = [0, 0, 0, 0]
    for factor in _split_top_level(expr, '*'):
        cnum = parse_factor(factor, cnum, powers)
    return cnum, tuple(powers)

def parse_sum(expr):
    """Parse a sum of monomials and return a list of (cnum, powers) tuples.
    A blank expression stands for zero and returns an empty list."""

    expr = expr.replace('**', '^')
    res = []
    for sign, term in _split_signed_terms(expr):
        cnum, powers = parse_monomial(term)
        res.append((sign * cnum, powers))
    return res

#===============================================================================
# Colour terms and amplitudes
#===============================================================================

def parse_term(expr):
    """Parse a product of colour tensors and monomial factors. Returns a tuple
    (cnum, powers, tensors) where tensors is the list of ColorTensor objects
    in the order they were given."""

    expr = expr.replace('**', '^').strip()
    cnum = complex(1.)
    while expr and expr[0] in "+-":
        if expr[0] == "-":
            cnum = -cnum
        expr = expr[1:].strip()
    if not expr:
        raise ColorParseError("Empty colour term")
    powers = [0, 0, 0, 0]
    tensors = []
    for token in _split_top_level(expr, '* \t\n'):
        match = _TENSOR_RE.match(token)
        if not match:
            cnum = parse_factor(token, cnum, powers)
            continue
        kind = KIND_TOKENS.inverse[match.group(1)]
        indices = tuple(int(i) for i in match.group(2).split(','))
        if len(indices) != ColorTensor.N_INDICES[kind]:
            raise ColorParseError("Tensor '%s' expects %d indices" % \
                                      (token, ColorTensor.N_INDICES[kind]))
        tensors.append(ColorTensor(kind, indices))
    return cnum, tuple(powers), tensors

def parse_amplitude(expr):
    """Parse a sum of colour terms and return a list of parsed terms as
    returned by parse_term, with the sign of each term folded in cnum."""

    res = []
    for sign, term in _split_signed_terms(expr.replace('**', '^')):
        cnum, powers, tensors = parse_term(term)
        res.append((sign * cnum, powers, tensors))
    return res
