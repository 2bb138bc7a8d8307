from BitVector import BitVector

from ShiftRegisters.BitAlgebra import cell_of, maximum_period
from ShiftRegisters.Exceptions import InvalidConstruction, InvalidSeed

class FeedbackRegister:
    """
    Shared state handling for shift registers that output cell 0.

    Subclasses provide step(); everything else (seeding, cell access,
    keystream generation, the period probe) lives here. The register is
    not thread safe: callers sharing one instance must synchronize.
    """

    #INITIALIZATION/DATA:
    def __init__(self, length, seed):
        if type(length) != int or length < 1:
            raise InvalidConstruction(f"Register length must be a positive integer, not {length!r}")
        self.size = length

        # set seed, then state to seed
        self._seed = self._seed_vector(seed)
        self._state = self._seed.deep_copy()

        # None until the first period() call
        self._period = None

    def __len__(self): return self.size

    # seeds are read like the state string: cell n-1 first
    def _seed_vector(self, seed):
        if isinstance(seed, BitVector):
            if len(seed) != self.size:
                raise InvalidSeed(f"Seed has {len(seed)} bits, expected {self.size}")
            return seed.deep_copy()

        if isinstance(seed, int) and not isinstance(seed, bool):
            if seed < 0 or seed >> self.size:
                raise InvalidSeed(f"Seed {seed} does not fit in {self.size} bits")
            return BitVector(intVal = seed, size = self.size)

        if isinstance(seed, str):
            if len(seed) != self.size:
                raise InvalidSeed(f"Seed '{seed}' has {len(seed)} bits, expected {self.size}")
            if set(seed) - {'0', '1'}:
                raise InvalidSeed(f"Seed '{seed}' contains a non-binary symbol")
            return BitVector(bitstring = seed)

        try:
            bits = list(seed)
        except TypeError:
            raise TypeError(f"Cannot build a seed from {type(seed).__name__}") from None
        if len(bits) != self.size:
            raise InvalidSeed(f"Seed has {len(bits)} bits, expected {self.size}")
        if any(b not in (0, 1) for b in bits):
            raise InvalidSeed(f"Seed {bits} contains a non-binary symbol")
        return BitVector(bitlist = [int(b) for b in bits])

    def getSeed(self): return str(self._seed)

    def reset(self):
        self._state = self._seed.deep_copy()
        self._period = None

    def setState(self, state):
        self._state = self._seed_vector(state)
        # a new state may sit on another orbit
        self._period = None


    #TYPE CONVERSIONS / CASTING:
    def __int__(self): return int(self._state)

    def state(self): return str(self._state)

    def __copy__(self):
        new_obj = object.__new__(type(self))
        new_obj.__dict__ = self.__dict__.copy()
        new_obj._state = self._state.deep_copy()
        return new_obj


    #STATE ACCESS:
    def bitAt(self, idx):
        if not 0 <= idx < self.size:
            raise IndexError(f"Cell {idx} is outside [0, {self.size})")
        return cell_of(self._state, idx)

    def __getitem__(self, idx): return self.bitAt(idx)


    #CLOCKING AND RUNNING THE REGISTER:
    # provided by each register type
    def step(self):
        raise NotImplementedError

    # yields output bits, forever if no limit is given
    def run(self, limit = None):
        if limit is None:
            while True:
                yield self.step()
        else:
            for _ in range(limit):
                yield self.step()

    def generate(self, k):
        return "".join(str(bit) for bit in self.run(k))


    #DIAGNOSTIC AND EXTRA INFO:
    # cycle length of the orbit reached from the current state.
    # the state is restored afterwards, even when the current state is
    # not itself on the cycle (a -> b -> c -> b).
    def period(self, lim = None):
        if self._period is not None:
            return self._period

        saved_state = self._state.deep_copy()
        seen = {}
        count = 0
        try:
            while int(self._state) not in seen:
                if lim is not None and count > lim:
                    return None
                seen[int(self._state)] = count
                self.step()
                count += 1
            self._period = count - seen[int(self._state)]
        finally:
            self._state = saved_state
        return self._period

    getPeriod = period

    def isMaximal(self):
        return self.period() == maximum_period(self.size)
