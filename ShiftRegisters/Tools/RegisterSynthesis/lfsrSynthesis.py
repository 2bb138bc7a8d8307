import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from ShiftRegisters.BitAlgebra import bits_from
from ShiftRegisters.Recurrence import LinearRecurrence
from ShiftRegisters.Tools.GaussJordan import solve_gf2

def linear_synthesis(seq, verbose = False):
    """
    Shortest LFSR recurrence for seq, found by solving n x n systems over GF(2)
    for n = 1, 2, ... up to len(seq) / 2.

    Returns the empty recurrence for a sequence with no 1 bits, and None when
    no length up to the bound both solves uniquely and reproduces the rest of
    the sequence. O(n^4) overall.
    """
    seq = bits_from(seq)
    N = len(seq)

    # no CV can produce a 1 from a run of 0s, so skip lengths up to the first 1
    if 1 not in seq:
        return LinearRecurrence(())
    first_one = seq.index(1)

    arr = np.array(seq, dtype=np.uint8)
    for n in range(first_one + 1, N // 2 + 1):
        if verbose: print(f"\rSolving Length: {n}/{N // 2}", end='')

        # row i: [S_i ... S_(i+n-1) | S_(i+n)]
        matrix = np.empty((n, n + 1), dtype=np.uint8)
        matrix[:, :n] = sliding_window_view(arr, n)[:n]
        matrix[:, n] = arr[n:2*n]

        solution = solve_gf2(matrix)
        if solution is None:
            continue

        # unknown j multiplies cell j, so c_1 is the last one
        candidate = LinearRecurrence(solution[::-1])
        if candidate.verify(seq, 2*n):
            if verbose: print()
            return candidate

    if verbose: print()
    return None
