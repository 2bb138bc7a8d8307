from ShiftRegisters.BitAlgebra import (
    and_terms, bits_from, cell_of, coefficient_vector, feedback_function,
    parity, parse_catalog_line, set_cell, tap_locations, tap_vector
)
from ShiftRegisters.FeedbackRegister import FeedbackRegister
from ShiftRegisters.Tools.RegisterSynthesis.nlfsrSynthesis import adjacent_and_synthesis

class NLFSR(FeedbackRegister):
    """
    Fibonacci NLFSR: f = XOR of the tapped cells XOR the product of each AND
    term, evaluated on the state before it shifts. Any number of AND terms of
    any arity (>= 2 cells) is supported.
    """

    def __init__(self, length, taps, ands, seed):
        super().__init__(length, seed)
        self.taps = tap_vector(length, taps)
        self.ands = and_terms(length, ands)

    # eg. NLFSR.fromCatalog(4, "0,1,(1,2),(2,3)", "0001")
    @classmethod
    def fromCatalog(cls, length, line, seed):
        taps, ands = parse_catalog_line(line)
        return cls(length, taps, ands, seed)

    # the shortest adjacent-AND register regenerating seq, None if none was found
    @classmethod
    def fromSeq(cls, seq):
        seq = bits_from(seq)
        recurrence = adjacent_and_synthesis(seq)
        if recurrence is None:
            return None
        return cls(len(recurrence), recurrence.taps(), recurrence.andTerms(), recurrence.seed(seq))

    def __str__(self):
        return (
            f"N: {self.size}, P: {self.period()}, "
            f"f: {self.feedbackFunction()}, State: {self.state()}"
        )

    def __repr__(self):
        return f"NLFSR({self.size}, {tap_locations(self.taps)}, {list(self.ands)}, '{self.state()}')"

    def coefficients(self): return coefficient_vector(self.taps)

    def feedbackFunction(self):
        return feedback_function(self.coefficients(), self.ands)

    def isAdjacentAnd(self):
        return all(len(term) == 2 and abs(term[0] - term[1]) == 1 for term in self.ands)


    #CLOCKING:
    def _feedback(self):
        feedback = parity(self._state & self.taps)
        for term in self.ands:
            feedback ^= int(all(cell_of(self._state, idx) for idx in term))
        return feedback

    def step(self):
        output = cell_of(self._state, 0)
        feedback = self._feedback()
        self._state.shift_right(1)
        set_cell(self._state, self.size - 1, feedback)
        return output
