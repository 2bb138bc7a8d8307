from copy import copy
from enum import Enum

import galois

from ShiftRegisters.BitAlgebra import (
    bits_from, cell_of, characteristic_polynomial, coefficient_vector,
    convert_taps, parity, set_cell, tap_locations, tap_vector
)
from ShiftRegisters.Exceptions import InvalidConstruction, InvalidTap
from ShiftRegisters.FeedbackRegister import FeedbackRegister
from ShiftRegisters.Tools.BerlekampMassey import berlekamp_massey

class Configuration(Enum):
    FIBONACCI = "Fibonacci"
    GALOIS = "Galois"

# accepts a Configuration or its value, eg. "Galois"
def configuration_of(tag):
    try:
        return Configuration(tag)
    except ValueError:
        raise InvalidConstruction(f"Unknown configuration {tag!r}") from None


class Cell(Enum):
    """Scratch register value while converting a Fibonacci seed to Galois."""
    ZERO = 0
    ONE = 1
    UNKNOWN = 2
    NEGATED_UNKNOWN = 3

    @classmethod
    def known(cls, bit):
        return cls.ONE if bit else cls.ZERO

    def toggled(self):
        return _TOGGLED[self]

_TOGGLED = {
    Cell.ZERO: Cell.ONE,
    Cell.ONE: Cell.ZERO,
    Cell.UNKNOWN: Cell.NEGATED_UNKNOWN,
    Cell.NEGATED_UNKNOWN: Cell.UNKNOWN,
}


class LFSR(FeedbackRegister):
    """
    Linear feedback shift register in Fibonacci or Galois form.

    Cells are numbered from the right and the output is taken from cell 0.
    In both forms cell 0 is always part of the feedback; Galois taps mark the
    cells that are XORed with the output bit before moving one cell down.
    """

    def __init__(self, length, taps, seed, configuration = Configuration.FIBONACCI):
        super().__init__(length, seed)
        self.taps = tap_vector(length, taps)
        self.configuration = configuration_of(configuration)

    def __str__(self):
        return (
            f"{self.configuration.value} config., N = {self.size}, "
            f"P*(x) = {self.polynomial()}, State = {self.state()}"
        )

    def __repr__(self):
        return (
            f"LFSR({self.size}, {tap_locations(self.taps)}, "
            f"'{self.state()}', Configuration.{self.configuration.name})"
        )

    def coefficients(self): return coefficient_vector(self.taps)

    def polynomial(self): return characteristic_polynomial(self.coefficients())

    def isPrimitive(self):
        poly = galois.Poly([1] + self.coefficients(), field=galois.GF(2))
        return poly.is_primitive()


    #CLOCKING:
    def step(self):
        if self.configuration is Configuration.FIBONACCI:
            return self._fibonacci_step()
        return self._galois_step()

    def _fibonacci_step(self):
        output = cell_of(self._state, 0)
        # feedback uses the tapped cells before shifting
        feedback = parity(self._state & self.taps)
        self._state.shift_right(1)
        set_cell(self._state, self.size - 1, feedback)
        return output

    def _galois_step(self):
        output = cell_of(self._state, 0)
        if output:
            self._state = self._state ^ self.taps
        self._state.shift_right(1)
        # no tap is stored for the top cell, it receives the output directly
        if output:
            set_cell(self._state, self.size - 1, 1)
        return output


    #CONFIGURATION CONVERSION:
    # returns the register in the other configuration, generating the same
    # keystream from the current state with no time offset
    def convert(self):
        # without a cell 0 tap the Fibonacci register has no Galois twin of
        # the same length
        if self.configuration is Configuration.FIBONACCI and not cell_of(self.taps, 0):
            raise InvalidTap(
                f"Fibonacci taps {tap_locations(self.taps)} do not include cell 0, "
                f"no equivalent Galois register exists"
            )
        other_taps = convert_taps(self.taps)

        if self.configuration is Configuration.FIBONACCI:
            seed = self._galois_seed(other_taps)
            return LFSR(self.size, other_taps, seed, Configuration.GALOIS)

        # a Fibonacci state is the next n outputs, last output in the top cell
        seed = copy(self).generate(self.size)[::-1]
        return LFSR(self.size, other_taps, seed, Configuration.FIBONACCI)

    def _galois_seed(self, galois_taps):
        n = self.size
        # the next n outputs of a Fibonacci LFSR are its cells 0..n-1.
        # the scratch register follows the Galois taps while its top cells
        # still depend on outputs that have not been seen yet.
        scratch = [Cell.UNKNOWN] * n
        seed = []
        for t in range(n):
            output = cell_of(self._state, t)
            if scratch[n - 1] is Cell.NEGATED_UNKNOWN:
                seed.append(output ^ 1)
            else:
                seed.append(output)

            # rotate right; with output 1 the tapped cells are toggled
            for j in range(n - 1, 0, -1):
                prv = scratch[j - 1]
                if output and cell_of(galois_taps, n - j):
                    scratch[j] = prv.toggled()
                else:
                    scratch[j] = prv
            scratch[0] = Cell.known(output)

        # seed[t] is cell t
        return "".join(str(bit) for bit in reversed(seed))


    #SYNTHESIS:
    @classmethod
    def fromRecurrence(cls, recurrence, seq):
        seq = bits_from(seq)
        return cls(len(recurrence), recurrence.taps(), recurrence.seed(seq))

    # the shortest register regenerating seq (berlekamp-massey)
    @classmethod
    def fromSeq(cls, seq, configuration = Configuration.FIBONACCI):
        seq = bits_from(seq)
        recurrence = berlekamp_massey(seq)
        if configuration_of(configuration) is Configuration.GALOIS:
            # c_L = 0 leaves cell 0 untapped
            if recurrence.coefficients and recurrence.coefficients[-1] == 0:
                raise InvalidConstruction(
                    f"Recurrence {list(recurrence.coefficients)} has c_L = 0, "
                    f"no Galois register of length {len(recurrence)} regenerates the sequence"
                )
            return cls.fromRecurrence(recurrence, seq).convert()
        return cls.fromRecurrence(recurrence, seq)
