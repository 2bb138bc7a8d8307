from ShiftRegisters.BitAlgebra import bits_to_text, text_to_bits, xor_bits
from ShiftRegisters.LFSR import LFSR
from ShiftRegisters.Tools.BerlekampMassey import berlekamp_massey

# XORs the plaintext with the register's keystream; the register is advanced
def encrypt(plaintext, register):
    bits = text_to_bits(plaintext)
    return xor_bits(bits, register.generate(len(bits)))

def recover_register(cipher_bits, known_plaintext):
    """
    Rebuilds the keystream generator of an LFSR stream cipher from a known
    plaintext prefix: the prefix XOR the matching ciphertext is the start of
    the keystream, and berlekamp-massey finds the shortest LFSR producing it.

    The register is only guaranteed to be the real one when the prefix holds
    at least 2L bits, L being the linear complexity of the keystream.
    Returns None when the known keystream is all zeros.
    """
    known_bits = text_to_bits(known_plaintext)
    if len(known_bits) > len(cipher_bits):
        raise ValueError(
            f"Known plaintext has {len(known_bits)} bits but the ciphertext only {len(cipher_bits)}"
        )

    keystream_start = xor_bits(known_bits, cipher_bits[:len(known_bits)])
    recurrence = berlekamp_massey(keystream_start)
    if len(recurrence) == 0:
        return None
    return LFSR.fromRecurrence(recurrence, keystream_start)

def known_plaintext_attack(cipher_bits, known_plaintext, verbose = False):
    register = recover_register(cipher_bits, known_plaintext)

    if register is None:
        keystream = "0" * len(cipher_bits)
    else:
        if verbose: print(f"Recovered LFSR: {register}")
        keystream = register.generate(len(cipher_bits))

    return bits_to_text(xor_bits(keystream, cipher_bits))
