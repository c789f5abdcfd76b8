'''
Searches a factor pool for ways of splitting it between three dice.

Each die gets a group of factors, and the product of a group is that die's
generating polynomial. A split is kept only if all three products are valid
dice with the right number of sides.
'''
from concurrent.futures import ThreadPoolExecutor, as_completed
from math import ceil
from typing import Iterable, Iterator
import threading
from poly import Polynomial, at_one, is_valid_die, multiply

PRINT_PROGRESS = [True]

Trio = tuple[Polynomial, Polynomial, Polynomial]

def canonical(trio: Iterable[Polynomial]) -> Trio:
    '''
    Sorts the three polynomials of a trio so that every ordering of the same
    three dice gives the same tuple.
    '''
    a, b, c = sorted(tuple(p) for p in trio)
    return (a, b, c)

class solution_set:
    '''
    The distinct trios found so far. Safe to share between threads: checking
    for a trio and adding it happen under one lock.
    The discovery index handed out by add() depends on thread scheduling, so
    it's only good for progress messages.
    '''
    def __init__(self):
        self._lock = threading.Lock()
        self._found: set[Trio] = set()
        self.raw_count = 0

    def add(self, trio: Iterable[Polynomial], sizes: tuple[int, int, int]|None = None) -> int|None:
        '''
        Adds a valid trio. Returns its discovery index if it's new, None if an
        equivalent trio was already present.
        sizes (optional): The number of factors in each group, for progress output.
        '''
        key = canonical(trio)
        with self._lock:
            self.raw_count += 1
            if key in self._found:
                return None
            self._found.add(key)
            index = len(self._found)
            if PRINT_PROGRESS[0] and sizes is not None:
                print(f'{index}: {sizes[0]},{sizes[1]},{sizes[2]}')
            return index

    def __contains__(self, trio) -> bool:
        key = canonical(trio)
        with self._lock:
            return key in self._found

    def __len__(self) -> int:
        with self._lock:
            return len(self._found)

    def __iter__(self) -> Iterator[Trio]:
        with self._lock:
            return iter(list(self._found))

def pruned_combinations(indices: list[int]|tuple[int, ...], size: int,
                        weights: list[int], target: int) -> Iterator[tuple[int, ...]]:
    '''
    Yields every size-element combination of indices, in the same order as
    itertools.combinations, whose weights multiply to exactly target.
    A partial combination is abandoned as soon as its product can't divide
    target, since the weights are integers and multiplying more of them in
    can't fix that.
    '''
    n = len(indices)
    chosen: list[int] = []

    def grow(start: int, product: int) -> Iterator[tuple[int, ...]]:
        if len(chosen) == size:
            if product == target:
                yield tuple(chosen)
            return
        for k in range(start, n - (size - len(chosen)) + 1):
            p = product*weights[indices[k]]
            if p == 0 or target % p != 0:
                continue
            chosen.append(indices[k])
            yield from grow(k + 1, p)
            chosen.pop()

    if 0 <= size <= n:
        yield from grow(0, 1)

def _branch(pool: list[Polynomial], weights: list[int], sides: int,
            a: tuple[int, ...], found: solution_set) -> int:
    '''
    Internal function. Tries every B that goes with a fixed A, with C being
    whatever is left. Returns the number of valid trios handed to found.
    '''
    a_poly = multiply(pool[i] for i in a)
    if not is_valid_die(a_poly, sides):
        return 0
    used = set(a)
    rest = [i for i in range(len(pool)) if i not in used]
    hits = 0
    for b_size in range(1, ceil(len(rest)/2) + 1):
        for b in pruned_combinations(rest, b_size, weights, sides):
            b_poly = multiply(pool[i] for i in b)
            if not is_valid_die(b_poly, sides):
                continue
            in_b = set(b)
            c = [i for i in rest if i not in in_b]
            c_poly = multiply(pool[i] for i in c)
            if not is_valid_die(c_poly, sides):
                continue
            found.add((a_poly, b_poly, c_poly), (len(a), len(b), len(c)))
            hits += 1
    return hits

def search(pool: list[Polynomial], sides: int, workers: int|None = None,
           found: solution_set|None = None) -> solution_set:
    '''
    Finds every way of splitting pool into three groups A, B, C whose products
    are all valid dice with the given number of sides.
    pool: The factor pool, see factors.build_pool
    sides: The number of sides on each die
    workers (optional): Number of threads, defaults to the ThreadPoolExecutor default
    found (optional): A solution_set to add to, a new one is made otherwise
    Returns the solution_set.

    A and B are picked with pruned_combinations, so only groups whose values
    at x=1 multiply to sides are ever convolved. C is always the leftovers.
    Each surviving A is its own task in the thread pool.
    '''
    if sides < 1:
        raise ValueError('Dice need at least one side')
    if found is None:
        found = solution_set()
    n = len(pool)
    if n == 0:
        return found
    weights = [at_one(f) for f in pool]
    everything = tuple(range(n))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = []
        for a_size in range(0, ceil(n/3) + 1):
            for a in pruned_combinations(everything, a_size, weights, sides):
                futures.append(executor.submit(_branch, pool, weights, sides, a, found))
        for future in as_completed(futures):
            # re-raises anything that went wrong in a worker
            future.result()
    return found
