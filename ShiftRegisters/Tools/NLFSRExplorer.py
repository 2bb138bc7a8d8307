from multiprocessing import Pool

from ShiftRegisters.NLFSR import NLFSR

# AND mask bit j switches on the product of cells j and j+1
def adjacent_ands(and_mask):
    return [(j, j + 1) for j in range(and_mask.bit_length()) if (and_mask >> j) & 1]

def explorer_seed(n):
    return "0" * (n - 1) + "1"

# runs in the worker processes: only ints cross the process boundary
def _classify(args):
    n, tap_mask, maximal = args
    matches = []
    for and_mask in range(1, 2**(n - 1)):
        nlfsr = NLFSR(n, tap_mask, adjacent_ands(and_mask), explorer_seed(n))
        if nlfsr.isMaximal() == maximal:
            matches.append(and_mask)
    return matches

def find_all(n, maximal = True, processes = None, verbose = False):
    """
    Every n-cell NLFSR built from a nonempty set of linear taps and a nonempty
    set of adjacent-cell AND terms, seeded with 0...01, that is maximal
    (maximal = True) or not maximal (maximal = False).

    Results are ordered by tap mask, then by AND mask. With processes > 1 the
    tap masks are split across a multiprocessing pool; the output is the same.
    """
    if type(n) != int or n < 2:
        raise ValueError(f"An adjacent-AND register needs at least 2 cells, not {n!r}")

    jobs = [(n, tap_mask, maximal) for tap_mask in range(1, 2**n)]

    if processes is not None and processes > 1:
        with Pool(processes) as pool:
            chunksize = max(1, len(jobs) // (4 * processes))
            classified = pool.map(_classify, jobs, chunksize)
    else:
        classified = []
        for job in jobs:
            if verbose: print(f"\rTap Mask: {job[1]}/{2**n - 1}", end='')
            classified.append(_classify(job))

    results = []
    for (_, tap_mask, _), and_masks in zip(jobs, classified):
        for and_mask in and_masks:
            results.append(NLFSR(n, tap_mask, adjacent_ands(and_mask), explorer_seed(n)))

    if verbose:
        print(f"\rFound {len(results)} {'maximal' if maximal else 'non-maximal'} registers")
    return results
