import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from ShiftRegisters.BitAlgebra import bits_from
from ShiftRegisters.Recurrence import NonlinearRecurrence
from ShiftRegisters.Tools.GaussJordan import solve_gf2

def adjacent_and_synthesis(seq, verbose = False):
    """
    Shortest adjacent-AND NLFSR for seq: feedback built from linear taps plus
    products of neighbouring cells (x_j.x_(j+1)).

    An n-cell candidate has 2n-1 unknowns (n taps, n-1 products), so it needs
    3n-1 bits; lengths are tried up to (len(seq) + 1) / 3.

    Returns the empty recurrence for a sequence with no 1 bits and None when
    nothing verifies. None does NOT prove that no adjacent-AND register
    produces seq: the equations come from a single orbit and can be rank
    deficient even for the true register (e.g. x0 + x1 + x1.x2 + x2.x3 seeded
    with 0001), in which case captures from other seeds are needed. Products
    of non-adjacent cells or of more than two cells are never found.
    """
    seq = bits_from(seq)
    N = len(seq)

    if 1 not in seq:
        return NonlinearRecurrence((), ())
    first_one = seq.index(1)

    arr = np.array(seq, dtype=np.uint8)
    for n in range(first_one + 1, (N + 1) // 3 + 1):
        if verbose: print(f"\rSolving Length: {n}/{(N + 1) // 3}", end='')

        # row i: [S_i ... S_(i+n-1), S_i.S_(i+1) ... S_(i+n-2).S_(i+n-1) | S_(i+n)]
        equations = 2*n - 1
        windows = sliding_window_view(arr, n)[:equations]
        matrix = np.empty((equations, equations + 1), dtype=np.uint8)
        matrix[:, :n] = windows
        matrix[:, n:equations] = windows[:, :-1] & windows[:, 1:]
        matrix[:, equations] = arr[n:n + equations]

        solution = solve_gf2(matrix)
        if solution is None:
            continue

        candidate = NonlinearRecurrence(solution[:n][::-1], solution[n:][::-1])
        if candidate.verify(seq, 3*n - 1):
            if verbose: print()
            return candidate

    if verbose: print()
    return None
