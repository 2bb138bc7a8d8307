from dataclasses import dataclass

from ShiftRegisters.BitAlgebra import (
    bits_to_str, characteristic_polynomial, feedback_function
)

@dataclass(frozen=True)
class LinearRecurrence:
    """
    S_i = c_1*S_(i-1) + ... + c_L*S_(i-L) over GF(2).

    coefficients holds (c_1, ..., c_L); its length is the linear
    complexity found by the synthesizer. An empty recurrence (L = 0)
    describes the all-zero sequence.
    """
    coefficients: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "coefficients", tuple(int(c) for c in self.coefficients))

    def __len__(self): return len(self.coefficients)

    # Fibonacci cell locations: c_j taps cell L-j
    def taps(self):
        L = len(self)
        return [L - 1 - i for i, c in enumerate(self.coefficients) if c]

    def polynomial(self):
        return characteristic_polynomial(self.coefficients)

    # the Fibonacci state is the first L outputs, last output in the top cell
    def seed(self, seq):
        return bits_to_str(seq[:len(self)][::-1])

    def predict(self, seq, i):
        out = 0
        for j, c in enumerate(self.coefficients):
            out ^= c & seq[i - j - 1]
        return out

    # checks every bit from start onwards
    def verify(self, seq, start):
        return all(self.predict(seq, i) == seq[i] for i in range(start, len(seq)))


@dataclass(frozen=True)
class NonlinearRecurrence:
    """
    A linear recurrence plus products of adjacent cells.

    ands has L-1 entries ordered like the coefficients (top first):
    ands[j] switches on the product of cells L-2-j and L-1-j.
    """
    coefficients: tuple = ()
    ands: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "coefficients", tuple(int(c) for c in self.coefficients))
        object.__setattr__(self, "ands", tuple(int(a) for a in self.ands))

    def __len__(self): return len(self.coefficients)

    def taps(self):
        L = len(self)
        return [L - 1 - i for i, c in enumerate(self.coefficients) if c]

    # AND terms as cell pairs, lowest cells first
    def andTerms(self):
        L = len(self)
        return [(L - 2 - j, L - 1 - j) for j in range(len(self.ands) - 1, -1, -1) if self.ands[j]]

    def feedbackFunction(self):
        return feedback_function(self.coefficients, self.andTerms())

    def seed(self, seq):
        return bits_to_str(seq[:len(self)][::-1])

    def predict(self, seq, i):
        out = 0
        for j, c in enumerate(self.coefficients):
            s_in = seq[i - j - 1]
            out ^= c & s_in
            if j < len(self.ands):
                out ^= self.ands[j] & s_in & seq[i - j - 2]
        return out

    def verify(self, seq, start):
        return all(self.predict(seq, i) == seq[i] for i in range(start, len(seq)))
