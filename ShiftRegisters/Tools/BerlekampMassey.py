from ShiftRegisters.BitAlgebra import bits_from
from ShiftRegisters.Recurrence import LinearRecurrence

# GF(2) specialization: the only nonzero discrepancy is 1, so the usual
# d/b scaling of the correction term disappears.
# yields (n, L, connection polynomial) after bit n has been absorbed.
def berlekamp_massey_iterator(seq):
    seq = bits_from(seq)
    #N = total number of bits to process
    N = len(seq)

    # current connection polynomial guess (c[0] = 1)
    curr_guess = [1] + [0 for i in range(N)]
    # guess before the last length change
    prev_guess = [1] + [0 for i in range(N)]

    # L = current linear complexity
    L = 0
    # m = steps since the last length change
    m = 1

    #n = index of bit we are correcting.
    for n in range(N):

        # calculate discrepancy from LFSR frame
        d = seq[n]
        for i in range(1, L+1):
            d ^= (curr_guess[i] & seq[n-i])

        if d:
            #curr_guess = curr_guess + (x**m * prev_guess)
            temp = curr_guess[:]
            for i in range(m, N+1):
                curr_guess[i] ^= prev_guess[i - m]

            #if 2L <= n, the length has to grow
            if 2*L <= n:
                L = n + 1 - L
                prev_guess = temp
                m = 0
        m += 1

        yield n, L, curr_guess

def berlekamp_massey(seq):
    L, guess = 0, [1]
    for _, L, guess in berlekamp_massey_iterator(seq):
        pass
    return LinearRecurrence(guess[1:L+1])

# (index, linear complexity) at every point where the complexity jumps
def linear_complexity_profile(seq):
    Ls = []
    prev_L = 0
    for n, L, _ in berlekamp_massey_iterator(seq):
        if L != prev_L:
            Ls.append((n, L))
            prev_L = L
    return Ls
