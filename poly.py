'''Internal math functions'''
from functools import reduce
from typing import Iterable
import numpy as np

# Raw transform output further than this from an integer means the FFT has
# lost precision and the rounded result can't be trusted.
ROUNDING_TOLERANCE = 1e-3
# float64 holds every integer below 2**53 exactly, but the FFT error grows
# with the magnitude of the coefficients, so we stay well clear of that.
MAX_EXACT_BOUND = 2**40

Polynomial = tuple[int, ...]

class ConvolutionError(ArithmeticError):
    '''Raised when an FFT product can't be rounded back to exact integers.'''

def die_polynomial(sides: int) -> Polynomial:
    '''
    Returns the generating polynomial of a standard die, 1 + x + ... + x^(sides-1).
    Coefficients are listed lowest degree first, so index i counts the faces
    showing i+1.
    '''
    if sides < 1:
        raise ValueError('A die needs at least one side')
    return (1,)*sides

def at_one(x: Iterable[int]) -> int:
    '''Evaluates the polynomial at x=1, ie the sum of the coefficients.'''
    return sum(int(c) for c in x)

def is_valid_die(x: Polynomial, sides: int) -> bool:
    '''
    Returns True if x describes a die with the given number of sides,
    meaning no negative coefficients and coefficients summing to sides.
    '''
    return all(c >= 0 for c in x) and at_one(x) == sides

def trim(x: Iterable[int]) -> Polynomial:
    '''
    Internal function, drops trailing zero coefficients.
    Ex: trim([1, 0, 2, 0, 0]) returns (1, 0, 2)
    The zero polynomial trims down to (0,).
    '''
    out = list(x)
    while len(out) > 1 and out[-1] == 0:
        out.pop()
    return tuple(int(c) for c in out)

def _bound(x: Iterable[int]) -> int:
    return sum(abs(int(c)) for c in x)

def _to_exact(raw: np.ndarray) -> Polynomial:
    '''
    Internal function, rounds FFT output to integers. Raises ConvolutionError
    if any entry was too far from an integer for the rounding to be safe.
    '''
    out = np.rint(raw)
    if len(raw) > 0:
        error = float(np.max(np.abs(raw - out)))
        if error > ROUNDING_TOLERANCE:
            raise ConvolutionError(f'FFT rounding error of {error} exceeds {ROUNDING_TOLERANCE}')
    return tuple(int(c) for c in out)

def convolve(x: Iterable[int], y: Iterable[int]) -> Polynomial:
    '''
    Multiplies two polynomials using FFT convolution.
    x, y: Coefficient sequences, lowest degree first
    Returns the coefficients of x*y, which has len(x)+len(y)-1 entries.
    '''
    x = tuple(x)
    y = tuple(y)
    if len(x) == 0 or len(y) == 0:
        raise ValueError('Cannot convolve an empty coefficient list')
    if _bound(x)*_bound(y) >= MAX_EXACT_BOUND:
        raise ConvolutionError('Coefficients too large for an exact FFT product')
    n = len(x) + len(y) - 1
    # rfft zero-pads to n, which is long enough that the circular
    # convolution doesn't wrap around.
    raw = np.fft.irfft(np.fft.rfft(x, n) * np.fft.rfft(y, n), n)
    return _to_exact(raw)

def multiply(polys: Iterable[Iterable[int]]) -> Polynomial:
    '''
    Multiplies any number of polynomials together, one convolution at a time.
    The product of no polynomials is the constant 1.
    '''
    return reduce(convolve, polys, (1,))

def power(x: Iterable[int], n: int) -> Polynomial:
    '''
    Returns x**n. Like multiplying n copies of x, but only does one forward
    and one inverse transform.
    Ex: power(die_polynomial(6), 3) gives the number of ways 3d6 rolls each total.
    '''
    x = tuple(x)
    if n != round(n) or n < 0:
        raise ValueError('Can only raise a polynomial to a non-negative integer power')
    n = round(n)
    if n == 0:
        return (1,)
    if n == 1:
        return x
    if _bound(x)**n >= MAX_EXACT_BOUND:
        raise ConvolutionError('Coefficients too large for an exact FFT power')
    # Equivalently, if X(t) is the transform of 1d6 then X(t)**3 is the
    # transform of 3d6.
    size = (len(x) - 1)*n + 1
    raw = np.fft.irfft(np.fft.rfft(x, size)**n, size)
    return _to_exact(raw)
