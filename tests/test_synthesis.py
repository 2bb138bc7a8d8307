"""
Unit tests for register synthesis by solving GF(2) linear systems.

Tests:
- Gauss-Jordan elimination
- Linear synthesis agrees with Berlekamp-Massey when the sequence is long enough
- Adjacent-AND synthesis, including the single-orbit failure case
"""

import numpy as np
import pytest

from ShiftRegisters.LFSR import LFSR
from ShiftRegisters.NLFSR import NLFSR
from ShiftRegisters.Recurrence import LinearRecurrence, NonlinearRecurrence
from ShiftRegisters.Tools.BerlekampMassey import berlekamp_massey
from ShiftRegisters.Tools.GaussJordan import gauss_jordan, solve_gf2
from ShiftRegisters.Tools.RegisterSynthesis.lfsrSynthesis import linear_synthesis
from ShiftRegisters.Tools.RegisterSynthesis.nlfsrSynthesis import adjacent_and_synthesis


class TestGaussJordan:

    def test_unique_solution(self):
        # x0 + x1 = 1, x1 = 1  ->  x0 = 0, x1 = 1
        matrix = np.array([[1, 1, 1], [0, 1, 1]], dtype=np.uint8)
        assert list(solve_gf2(matrix)) == [0, 1]

    def test_singular(self):
        matrix = np.array([[1, 1, 0], [1, 1, 0]], dtype=np.uint8)
        assert solve_gf2(matrix) is None

    def test_rank(self):
        matrix = np.array([[1, 0, 1, 0], [0, 1, 1, 1], [1, 1, 0, 1]], dtype=np.uint8)
        assert gauss_jordan(matrix) == 2

    def test_input_untouched(self):
        matrix = np.array([[0, 1, 1], [1, 0, 0]], dtype=np.uint8)
        solve_gf2(matrix)
        assert matrix.tolist() == [[0, 1, 1], [1, 0, 0]]


LONG_ENOUGH = [
    "0101000010010110",
    "111101011001000",
    "010110110101100101",
    "010011011000",
    "00010011",
]


class TestLinearSynthesis:

    @pytest.mark.parametrize("seq", LONG_ENOUGH)
    def test_matches_berlekamp_massey(self, seq):
        assert linear_synthesis(seq) == berlekamp_massey(seq)

    def test_rebuilt_register(self):
        recurrence = linear_synthesis("0101000010010110")
        assert recurrence.coefficients == (0, 0, 1, 0, 1)
        lfsr = LFSR.fromRecurrence(recurrence, "0101000010010110")
        assert lfsr.generate(16) == "0101000010010110"

    def test_all_zero(self):
        assert linear_synthesis("000000") == LinearRecurrence(())

    def test_empty(self):
        assert linear_synthesis("") == LinearRecurrence(())

    def test_too_short(self):
        """Linear complexity 4 needs 8 bits."""
        assert linear_synthesis("0001") is None

    def test_verbose(self, capsys):
        linear_synthesis("0101000010010110", verbose=True)
        assert "Solving Length" in capsys.readouterr().out


# x0 + x1 + x1.x2 + x2.x3 seeded with 0010
ADJACENT_AND_BITS = "01001111010"


class TestAdjacentAndSynthesis:

    def test_recovers_register(self):
        recurrence = adjacent_and_synthesis(ADJACENT_AND_BITS)
        assert recurrence == NonlinearRecurrence((0, 0, 1, 1), (1, 1, 0))
        assert recurrence.andTerms() == [(1, 2), (2, 3)]
        assert recurrence.feedbackFunction() == "x0 + x1 + x1.x2 + x2.x3"

    def test_source_sequence(self):
        nlfsr = NLFSR(4, [0, 1], [(1, 2), (2, 3)], "0010")
        assert nlfsr.generate(11) == ADJACENT_AND_BITS

    def test_from_seq(self):
        nlfsr = NLFSR.fromSeq(ADJACENT_AND_BITS)
        assert nlfsr.size == 4
        assert nlfsr.feedbackFunction() == "x0 + x1 + x1.x2 + x2.x3"
        assert nlfsr.state() == "0010"
        assert nlfsr.generate(11) == ADJACENT_AND_BITS

    def test_rank_deficient_orbit(self):
        """
        The same register seeded with 0001 yields equations that never pin
        down a unique solution, so nothing is found.
        """
        bits = NLFSR(4, [0, 1], [(1, 2), (2, 3)], "0001").generate(11)
        assert bits == "10001001111"
        assert adjacent_and_synthesis(bits) is None
        assert NLFSR.fromSeq(bits) is None

    def test_all_zero(self):
        assert adjacent_and_synthesis("00000000") == NonlinearRecurrence((), ())

    def test_predict(self):
        recurrence = NonlinearRecurrence((0, 0, 1, 1), (1, 1, 0))
        seq = [int(b) for b in ADJACENT_AND_BITS]
        assert recurrence.verify(seq, 4)
