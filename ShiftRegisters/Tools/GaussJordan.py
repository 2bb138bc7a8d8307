import numpy as np
from numba import njit

# reduces an augmented GF(2) matrix [A|B] in place and returns the number of
# pivots found among the columns of A.
@njit
def gauss_jordan(matrix):
    rows, cols = matrix.shape
    p_row = 0

    for p_col in range(cols - 1):
        if p_row == rows:
            break

        # find a row with a 1 in the pivot column
        pivot = -1
        for i in range(p_row, rows):
            if matrix[i, p_col]:
                pivot = i
                break
        if pivot == -1:
            continue

        # swap it into place
        if pivot != p_row:
            for c in range(cols):
                tmp = matrix[p_row, c]
                matrix[p_row, c] = matrix[pivot, c]
                matrix[pivot, c] = tmp

        # eliminate the column from every other row
        for i in range(rows):
            if i != p_row and matrix[i, p_col]:
                for c in range(cols):
                    matrix[i, c] ^= matrix[p_row, c]

        p_row += 1

    return p_row

def is_identity(matrix):
    n = matrix.shape[0]
    return np.array_equal(matrix[:, :n], np.eye(n, dtype=np.uint8))

# solves a square system AX = B; None unless the solution is unique
def solve_gf2(matrix):
    matrix = np.array(matrix, dtype=np.uint8)
    gauss_jordan(matrix)
    if not is_identity(matrix):
        return None
    return matrix[:, -1].copy()
