'''Turns found trios into face values and writes the report.'''
from typing import Iterable
import collections
import os
from poly import Polynomial, die_polynomial, multiply, power, trim

RESULTS_DIR = 'results'

class ReportError(OSError):
    '''Raised when the report file can't be written.'''

def coeff_to_sides(coeffs: Iterable[int]) -> list[int]:
    '''
    Lists the faces of the die described by coeffs.
    A coefficient c at index i means c faces showing i+1.
    Ex: coeff_to_sides([1, 0, 2]) returns [1, 3, 3]
    '''
    sides = []
    for i, c in enumerate(coeffs):
        if c > 0:
            sides.extend([i + 1]*int(c))
    return sides

def sides_to_coeffs(faces: Iterable[int]) -> Polynomial:
    '''
    Inverse of coeff_to_sides. Faces must be positive integers.
    Ex: sides_to_coeffs([3, 1, 3]) returns (1, 0, 2)
    '''
    counts = collections.Counter(int(f) for f in faces)
    if len(counts) == 0:
        return (0,)
    if min(counts) < 1:
        raise ValueError('Faces must be positive integers')
    return trim(counts[i + 1] for i in range(max(counts)))

def final_form(trio: Iterable[Iterable[int]]) -> tuple[list[int], list[int], list[int]]:
    '''Converts each polynomial of a trio to its faces, then sorts the three dice.'''
    a, b, c = sorted(coeff_to_sides(p) for p in trio)
    return (a, b, c)

def format_line(dice: tuple[list[int], list[int], list[int]]) -> str:
    '''
    Ex: format_line(([1, 2], [1, 2], [1, 2])) returns '[1, 2], [1, 2], [1, 2]'
    '''
    return ', '.join(str(d) for d in dice)

def report_lines(solutions: Iterable[Iterable[Polynomial]]) -> list[str]:
    '''
    Returns one line per solution, sorted by the faces of the dice.
    '''
    return [format_line(dice) for dice in sorted(final_form(t) for t in solutions)]

def report_path(sides: int, directory: str = RESULTS_DIR) -> str:
    return os.path.join(directory, f'sicherman-d{sides:03}.txt')

def write_report(path: str, lines: list[str]) -> None:
    '''
    Writes the lines to path, creating the directory if needed.
    Raises ReportError naming the path if anything goes wrong.
    '''
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w') as f:
            f.write('\n'.join(lines))
    except OSError as e:
        raise ReportError(f'Unable to write file {path}') from e

def verify(trio: Iterable[Polynomial], sides: int) -> bool:
    '''
    Returns True if rolling the three dice of trio and adding them up has the
    same distribution as rolling three standard dice.
    '''
    return trim(multiply(trio)) == trim(power(die_polynomial(sides), 3))
