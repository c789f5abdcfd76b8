#!/usr/bin/env python3
'''
Finds generalized Sicherman dice trios: sets of three s-sided dice, labelled
with positive integers, whose sums are distributed exactly like the sums of
three standard s-sided dice.
Usage:
    python sicherman.py [--plot] [sides]
sides defaults to 8. Results go to results/sicherman-dNNN.txt, one trio per
line. The search can also be used directly, as in
    found = run(6)
    print('\n'.join(report_lines(found)))
'''
from typing import Callable
import numpy as np
from factors import FactorisationError, factorise, build_pool
from poly import Polynomial, die_polynomial, multiply, power
from results import (RESULTS_DIR, ReportError, final_form, report_lines,
    report_path, sides_to_coeffs, verify, write_report)
from search import PRINT_PROGRESS, canonical, search, solution_set
import sys
import threading
import traceback

DEFAULT_SIDES = 8

# matplotlib takes a while to import and is only needed for --plot, so it's
# imported in the background while the search runs.
plt = None
plt_initialized = False
import_thread = None
def import_plt():
    global plt
    global plt_initialized
    import matplotlib.pyplot as plt
    plt_initialized = True

def start_plt_import():
    global import_thread
    if import_thread is None:
        import_thread = threading.Thread(target=import_plt, name='import matplotlib')
        import_thread.start()

def parse_sides(args: list[str]) -> int:
    '''
    Reads the side count from the last argument that isn't a flag.
    Anything missing, unparseable or below 1 gives DEFAULT_SIDES.
    '''
    values = [a for a in args if not a.startswith('--')]
    if len(values) == 0:
        return DEFAULT_SIDES
    try:
        sides = int(values[-1])
    except ValueError:
        return DEFAULT_SIDES
    if sides < 1:
        return DEFAULT_SIDES
    return sides

def run(sides: int, factoriser: Callable[[Polynomial], list[Polynomial]] = factorise,
        workers: int|None = None) -> solution_set:
    '''
    Does the whole search for one side count.
    sides: A positive integer
    factoriser (optional): Splits a polynomial (coefficients lowest degree
                           first) into irreducible integer factors
    workers (optional): Number of search threads
    Returns a solution_set of canonical trios.
    '''
    target = die_polynomial(sides)
    factors = factoriser(target)
    try:
        product = multiply(factors)
    except (TypeError, ValueError) as e:
        raise FactorisationError(f'Factorisation step returned malformed factors {factors}') from e
    if product != target:
        raise FactorisationError(f'Factorisation step returned factors {factors} '
                                 f'whose product is {product}, not {target}')
    pool = build_pool(factors)
    if PRINT_PROGRESS[0]:
        print(len(pool))
    found = search(pool, sides, workers)
    for trio in found:
        if not verify(trio, sides):
            raise RuntimeError(f'Search produced {trio}, which does not match 3d{sides}')
    return found

def first_nonstandard(found: solution_set, sides: int) -> tuple|None:
    '''Returns the first trio in report order that isn't three standard dice.'''
    standard = canonical([die_polynomial(sides)]*3)
    others = [t for t in found if t != standard]
    if len(others) == 0:
        return None
    return min(others, key=final_form)

def plot(trio, sides: int, name: str = '') -> 'matplotlib.figure.Figure': # type: ignore
    '''
    Plots the faces of each die in trio, and the distribution of their sum
    next to that of three standard dice.
    '''
    start_plt_import()
    assert import_thread is not None
    import_thread.join()
    assert plt is not None
    fig, (ax, ax2) = plt.subplots(2, 1)
    fig.suptitle(name or f'Sicherman trio for d{sides}')
    width = 0.25
    for k, faces in enumerate(final_form(trio)):
        counts = sides_to_coeffs(faces)
        x = np.arange(1, len(counts) + 1) + (k - 1)*width
        ax.bar(x, counts, width, label=str(faces))
    ax.set_title('Faces')
    ax.legend(fontsize='small')
    total = multiply(trio)
    standard = power(die_polynomial(sides), 3)
    ax2.stem(range(3, 3 + len(total)), total, label='Trio', basefmt='')
    ax2.plot(range(3, 3 + len(standard)), standard, 'tab:red', label=f'3d{sides}')
    ax2.set_title('Distribution of the sum')
    ax2.legend()
    return fig

def main(argv: list[str]|None = None, directory: str = RESULTS_DIR) -> str:
    '''
    Runs the search for the side count given on the command line and writes
    the report. Returns the path of the report.
    '''
    args = sys.argv[1:] if argv is None else argv
    sides = parse_sides(args)
    want_plot = '--plot' in args
    if want_plot:
        start_plt_import()
    try:
        found = run(sides)
    except FactorisationError:
        print(f'Factorisation step failed for sides={sides}')
        traceback.print_exc()
        sys.exit(1)
    path = report_path(sides, directory)
    try:
        write_report(path, report_lines(found))
    except ReportError:
        print(f'Unable to write file {path}')
        traceback.print_exc()
        sys.exit(1)
    print(f'{len(found)} solutions written to {path}')
    if want_plot:
        trio = first_nonstandard(found, sides)
        if trio is None:
            print('Nothing to plot.')
        else:
            plot(trio, sides)
            print('Plotting in other window. That window must be closed to continue.')
            plt.show() # type: ignore
    return path

if __name__ == '__main__':
    main()
