from params import BIGINT_WIDTH_WORDS, SOLINAS_C, WORD_BITS, WORD_MASK  # primitive width + checksum modulus shape
from words import int_to_words, words_to_int  # word <-> int conversion


def mulmod(x, y, m):  # Atomic x * y mod m over BIGINT_WIDTH_WORDS-word operands.
    for v in (x, y, m):
        if len(v) != BIGINT_WIDTH_WORDS:
            raise ValueError(f"mulmod operands must be {BIGINT_WIDTH_WORDS} words")
    mod = words_to_int(m)
    if mod == 0:
        raise ValueError("mulmod modulus must be nonzero")
    return int_to_words((words_to_int(x) * words_to_int(y)) % mod, BIGINT_WIDTH_WORDS)


class SolinasModulus:  # Prime of the special form 2^BITS - C with a one-word C.
    BITS = BIGINT_WIDTH_WORDS * WORD_BITS  # 2^BITS is congruent to C

    def __init_subclass__(cls):  # Precompute the integer and word forms for each subclass.
        if "C" not in cls.__dict__:
            return
        c = cls.C
        if not 0 < c <= WORD_MASK:
            raise ValueError("C must fit in one nonzero word")
        if cls.BITS != BIGINT_WIDTH_WORDS * WORD_BITS:
            raise ValueError("BITS must match the mulmod primitive width")
        cls.MODULUS = (1 << cls.BITS) - c
        if cls.MODULUS % 2 == 0:
            raise ValueError("MODULUS must be odd")
        cls.WORDS = tuple(int_to_words(cls.MODULUS, BIGINT_WIDTH_WORDS))
        cls.C_WORDS = tuple(int_to_words(c, BIGINT_WIDTH_WORDS))

    one = classmethod(lambda cls: [1] + [0] * (BIGINT_WIDTH_WORDS - 1))  # multiplicative identity

    @classmethod
    def mul(cls, x, y):  # x * y mod MODULUS.
        return mulmod(x, y, list(cls.WORDS))

    @classmethod
    def from_int(cls, x):  # Canonical residue of an int in word form.
        return int_to_words(int(x) % cls.MODULUS, BIGINT_WIDTH_WORDS)


class ChecksumModulus(SolinasModulus):  # p = 2^256 - 189, used only for the randomized identity check.
    C = SOLINAS_C
