"""Property-based tests for the register engines and synthesizers.

Key properties verified:
- Duality: a Fibonacci LFSR and its Galois conversion emit the same bits,
  and registers with no Galois twin are refused instead of mis-converted.
- Period bound: no register without a constant term exceeds 2^n - 1.
- Agreement: equation-system synthesis equals Berlekamp-Massey once N >= 2L.
- Recovery: a rebuilt register regenerates its input sequence.
"""

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from ShiftRegisters.Exceptions import InvalidConstruction, InvalidTap
from ShiftRegisters.LFSR import LFSR, Configuration
from ShiftRegisters.NLFSR import NLFSR
from ShiftRegisters.Tools.BerlekampMassey import berlekamp_massey
from ShiftRegisters.Tools.RegisterSynthesis.lfsrSynthesis import linear_synthesis


@st.composite
def fibonacci_lfsrs(draw, max_length=8):
    n = draw(st.integers(min_value=2, max_value=max_length))
    taps = draw(st.sets(st.integers(min_value=1, max_value=n - 1)))
    seed = draw(st.text(alphabet="01", min_size=n, max_size=n))
    # cell 0 is always tapped in both configurations
    return LFSR(n, sorted(taps | {0}), seed)


@st.composite
def adjacent_and_nlfsrs(draw, max_length=6):
    n = draw(st.integers(min_value=2, max_value=max_length))
    taps = draw(st.sets(st.integers(min_value=0, max_value=n - 1)))
    pairs = draw(st.sets(st.integers(min_value=0, max_value=n - 2)))
    seed = draw(st.text(alphabet="01", min_size=n, max_size=n))
    return NLFSR(n, sorted(taps), [(j, j + 1) for j in sorted(pairs)], seed)


binary_sequences = st.lists(st.integers(min_value=0, max_value=1), max_size=40)


@settings(max_examples=60, deadline=None)
@given(fibonacci_lfsrs())
def test_conversion_preserves_output(lfsr):
    bits = 2**lfsr.size - 1
    galois = lfsr.convert()
    assert galois.generate(bits) == lfsr.generate(bits)


@settings(max_examples=60, deadline=None)
@given(fibonacci_lfsrs())
def test_double_conversion_preserves_output(lfsr):
    bits = 2**lfsr.size - 1
    back = lfsr.convert().convert()
    assert back.taps == lfsr.taps
    assert back.generate(bits) == lfsr.generate(bits)


@settings(max_examples=60, deadline=None)
@given(adjacent_and_nlfsrs())
def test_period_bound(nlfsr):
    state = nlfsr.state()
    period = nlfsr.period()
    assert 1 <= period <= 2**nlfsr.size - 1
    assert nlfsr.isMaximal() == (period == 2**nlfsr.size - 1)
    assert nlfsr.state() == state


@settings(max_examples=60, deadline=None)
@given(fibonacci_lfsrs())
def test_lfsr_period_bound(lfsr):
    assert lfsr.period() <= 2**lfsr.size - 1


@settings(max_examples=100, deadline=None)
@given(binary_sequences)
def test_linear_synthesis_matches_berlekamp_massey(seq):
    expected = berlekamp_massey(seq)
    assume(len(seq) >= 2 * len(expected))
    assert linear_synthesis(seq) == expected


@settings(max_examples=100, deadline=None)
@given(binary_sequences)
def test_rebuilt_lfsr_regenerates_sequence(seq):
    assume(1 in seq)
    lfsr = LFSR.fromSeq(seq)
    assert lfsr.generate(len(seq)) == "".join(str(b) for b in seq)


@settings(max_examples=60, deadline=None)
@given(st.integers(min_value=2, max_value=8).flatmap(
    lambda n: st.tuples(
        st.just(n),
        st.sets(st.integers(min_value=0, max_value=n - 1)),
        st.text(alphabet="01", min_size=n, max_size=n),
    )
))
def test_conversion_never_changes_output(case):
    n, taps, seed = case
    lfsr = LFSR(n, sorted(taps), seed)
    if 0 not in taps:
        with pytest.raises(InvalidTap):
            lfsr.convert()
        return
    bits = 2**n - 1
    assert lfsr.convert().generate(bits) == lfsr.generate(bits)


@settings(max_examples=100, deadline=None)
@given(binary_sequences)
def test_galois_from_seq_regenerates_or_refuses(seq):
    assume(1 in seq)
    try:
        lfsr = LFSR.fromSeq(seq, Configuration.GALOIS)
    except InvalidConstruction:
        assert berlekamp_massey(seq).coefficients[-1] == 0
        return
    assert lfsr.generate(len(seq)) == "".join(str(b) for b in seq)
