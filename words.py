"""Fixed-width 32-bit word arithmetic over little-endian word lists.

Multi-precision values are plain ``list[int]`` of 32-bit words, least significant
word first. Every carry and borrow is returned to the caller; nothing here drops
one on the floor.
"""

from params import WORD_BITS, WORD_MASK  # narrow word width + mask


def add32_and_overflow(a, b, carry):  # (carry_out, a + b + carry mod 2^32)
    v = a + b + carry
    return v >> WORD_BITS, v & WORD_MASK


def add_small(accm, new):  # In-place accm += new (len(new) <= len(accm)); returns the carry out.
    if len(new) > len(accm):
        raise ValueError("addend wider than accumulator")
    carry = 0
    for i in range(len(new)):
        carry, accm[i] = add32_and_overflow(accm[i], new[i], carry)
    for i in range(len(new), len(accm)):
        if not carry:
            break
        carry, accm[i] = add32_and_overflow(accm[i], carry, 0)
    return carry


def sub_with_borrow(a, b, borrow):  # (a - b - borrow mod 2^32, borrow_out)
    res = a + (1 << WORD_BITS) - b - borrow
    return res & WORD_MASK, 1 - (res >> WORD_BITS)


def sub_and_borrow(accu, new):  # In-place accu -= new over equal widths; returns the borrow out.
    if len(accu) != len(new):
        raise ValueError("subtraction operands must have equal width")
    borrow = 0
    for i in range(len(accu)):
        accu[i], borrow = sub_with_borrow(accu[i], new[i], borrow)
    return borrow


def words_from_bytes(data):  # Little-endian bytes -> 32-bit words.
    data = bytes(data)
    if len(data) % 4 != 0:
        raise ValueError("byte length must be a multiple of 4")
    return [int.from_bytes(data[i : i + 4], "little") for i in range(0, len(data), 4)]


def words_to_bytes(words):  # 32-bit words -> little-endian bytes.
    return b"".join(int(w).to_bytes(4, "little") for w in words)


def words_to_int(words):
    return sum(int(w) << (WORD_BITS * i) for i, w in enumerate(words))


def int_to_words(x, n):  # Non-negative int -> exactly n words.
    x = int(x)
    if x < 0 or x.bit_length() > n * WORD_BITS:
        raise ValueError(f"value does not fit in {n} words")
    return [(x >> (WORD_BITS * i)) & WORD_MASK for i in range(n)]


def zero_extend(words, n):  # Right-pad with zero words up to n.
    if len(words) > n:
        raise ValueError(f"cannot zero-extend {len(words)} words to {n}")
    return list(words) + [0] * (n - len(words))


def chunk(words, size):  # Split into consecutive groups of `size` words.
    if len(words) % size != 0:
        raise ValueError("word count is not a multiple of the chunk size")
    return [list(words[i : i + size]) for i in range(0, len(words), size)]


def is_zero(words):
    return not any(words)
