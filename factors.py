'''
Factorisation of die polynomials and construction of the factor pool.
Factorising is handed off to sympy; everything here works with plain tuples
of ints, lowest degree first, the same as poly.py.
'''
import sympy
from sympy.polys.polyerrors import BasePolynomialError
from poly import Polynomial, die_polynomial

class FactorisationError(Exception):
    '''Raised when a polynomial couldn't be turned into a usable list of factors.'''

_x = sympy.symbols('x')

def _coefficients(factor: sympy.Poly) -> Polynomial:
    out = []
    # sympy lists the highest degree first
    for c in reversed(factor.all_coeffs()):
        if not c.is_Integer:
            raise FactorisationError(f'Factorisation step returned non-integer coefficient {c} in {factor}')
        out.append(int(c))
    return tuple(out)

def factorise(coeffs: list[int]|Polynomial) -> list[Polynomial]:
    '''
    Factors a polynomial into irreducible factors over the integers.
    coeffs: Integer coefficients, lowest degree first
    Returns a list of factors, also lowest degree first. A factor that divides
    the polynomial k times appears k times. If the polynomial has no
    non-constant factors, the constant itself is returned as the only factor.
    Ex: factorise([1, 1, 1, 1]) returns [(1, 1), (1, 0, 1)]
    '''
    coeffs = [int(c) for c in coeffs]
    if not any(coeffs):
        raise FactorisationError('Factorisation step was given the zero polynomial')
    try:
        p = sympy.Poly(list(reversed(coeffs)), _x, domain='ZZ')
        content, factor_list = p.factor_list()
    except BasePolynomialError as e:
        raise FactorisationError(f'Factorisation step failed on {coeffs}') from e
    out = []
    for factor, multiplicity in factor_list:
        out.extend([_coefficients(factor)]*multiplicity)
    if not content.is_Integer:
        raise FactorisationError(f'Factorisation step returned non-integer content {content}')
    if content != 1 or len(out) == 0:
        out.append((int(content),))
    return out

def die_factors(sides: int) -> list[Polynomial]:
    '''Returns the irreducible factors of the generating polynomial of a standard die.'''
    return factorise(die_polynomial(sides))

def build_pool(factors: list[Polynomial], copies: int = 3) -> list[Polynomial]:
    '''
    Repeats the whole factor list `copies` times, back to back. Three dice have
    the generating polynomial of one die cubed, so each factor is needed three
    times. The order is fixed so pool indices mean the same thing everywhere.
    Ex: build_pool([f, g]) returns [f, g, f, g, f, g]
    '''
    if len(factors) == 0:
        raise FactorisationError('Factorisation step returned no factors')
    pool = [tuple(int(c) for c in f) for f in factors]
    return pool*copies
