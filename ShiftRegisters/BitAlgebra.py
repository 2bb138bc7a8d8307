from BitVector import BitVector
import re

from ShiftRegisters.Exceptions import InvalidTap

# Cell numbering starts from the right: cell 0 is the output cell and is
# stored in the last BitVector position, so str(vector) is the fixed-width
# state with cell n-1 first.

#BIT ACCESS:
def cell_of(vector, idx):
    return vector[len(vector) - 1 - idx]

def set_cell(vector, idx, val):
    vector[len(vector) - 1 - idx] = val

def parity(vector):
    return vector.count_bits() % 2

def maximum_period(n):
    return 2**n - 1


#SEQUENCES:
# accepts '0101' strings or any iterable of 0/1 (bools included)
def bits_from(seq):
    if isinstance(seq, BitVector):
        return [int(b) for b in seq]

    bits = []
    for symbol in seq:
        if symbol in ('0', '1'):
            bits.append(int(symbol))
        elif symbol in (0, 1) and not isinstance(symbol, str):
            bits.append(int(symbol))
        else:
            raise ValueError(f"Expected a binary symbol, but got {symbol!r}")
    return bits

def bits_to_str(bits):
    return "".join(str(b) for b in bits)


#TAP MASKS:
def tap_vector(length, taps):
    # int mask: bit i set <=> cell i tapped
    if isinstance(taps, BitVector):
        if len(taps) != length:
            raise InvalidTap(f"Tap mask has width {len(taps)}, expected {length}")
        return taps.deep_copy()

    if isinstance(taps, int) and not isinstance(taps, bool):
        if taps < 0 or taps >> length:
            raise InvalidTap(f"Tap mask {taps:b} does not fit in {length} cells")
        return BitVector(intVal = taps, size = length)

    mask = BitVector(size = length)
    for idx in taps:
        if type(idx) != int:
            raise TypeError(f"Tap locations must be integers, but got {idx!r}")
        if not 0 <= idx < length:
            raise InvalidTap(f"Tap location {idx} is outside [0, {length})")
        set_cell(mask, idx, 1)
    return mask

def tap_locations(mask):
    return [idx for idx in range(len(mask)) if cell_of(mask, idx)]

def and_terms(length, ands):
    terms = []
    for term in ands:
        term = tuple(term)
        if len(term) < 2 or len(set(term)) != len(term):
            raise InvalidTap(f"AND term {term} needs at least 2 distinct cells")
        for idx in term:
            if type(idx) != int:
                raise TypeError(f"AND inputs must be integers, but got {idx!r}")
            if not 0 <= idx < length:
                raise InvalidTap(f"AND input {idx} is outside [0, {length})")
        terms.append(term)
    return tuple(terms)

# maps the taps of one LFSR configuration onto the other:
#   input taps:                   0001 1101
#   after reversal:               1011 1000
#   shift-left 1 location:      1 0111 0000
#   drop bit n, set bit 0:        0111 0001
def convert_taps(mask):
    other = mask.reverse()
    other.shift_left(1)
    set_cell(other, 0, 1)
    return other

# [c_1, ..., c_n] with c_1 at the top cell
def coefficient_vector(mask):
    return [int(b) for b in mask]


#TEXT RENDERING:
# eg. cv: [1,1,0,0,0,1] --> x^6 + x^5 + x^4 + 1
def characteristic_polynomial(cv):
    n = len(cv)
    outstr = f"x^{n}"
    for i, c in enumerate(cv):
        if c:
            exponent = n - (i + 1)
            if exponent == 0:
                outstr += " + 1"
            else:
                outstr += " + x"
                if exponent > 1:
                    outstr += f"^{exponent}"
    return outstr

# eg. cv: [0,0,1,1], ands: [(1,2),(2,3)] --> x0 + x1 + x1.x2 + x2.x3
def feedback_function(cv, ands):
    n = len(cv)
    terms = [f"x{n - (i + 1)}" for i in range(n - 1, -1, -1) if cv[i]]
    for term in ands:
        terms.append(".".join(f"x{idx}" for idx in term))
    return " + ".join(terms)

# a catalog line lists linear taps, then parenthesized AND terms:
# "0,1,(1,2),(2,3)" --> ([0, 1], [(1, 2), (2, 3)])
_AND_TERM = re.compile(r"\(([^()]*)\)")

def parse_catalog_line(line):
    ands = []
    for group in _AND_TERM.findall(line):
        ands.append(tuple(int(idx) for idx in group.split(",") if idx.strip()))

    linear_part = _AND_TERM.sub("", line)
    taps = [int(idx) for idx in linear_part.split(",") if idx.strip()]
    return taps, ands


#ASCII / KEYSTREAM HELPERS:
# 8 bits per character, most significant bit first
def text_to_bits(text):
    bits = ""
    for ch in text:
        if ord(ch) > 0xFF:
            raise ValueError(f"Character {ch!r} does not fit in 8 bits")
        bits += format(ord(ch), "08b")
    return bits

def bits_to_text(bits):
    if len(bits) % 8:
        raise ValueError(f"Bit string length {len(bits)} is not a multiple of 8")
    return "".join(chr(int(bits[i:i+8], 2)) for i in range(0, len(bits), 8))

def bits_to_hex(bits):
    return "".join(format(int(bits[i:i+8], 2), "02x") for i in range(0, len(bits), 8))

def xor_bits(a, b):
    if len(a) != len(b):
        raise ValueError(f"Cannot XOR bit strings of lengths {len(a)} and {len(b)}")
    return "".join(str(int(x) ^ int(y)) for x, y in zip(a, b))
