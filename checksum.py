"""Polynomial checksums of limb sequences at a Fiat-Shamir point.

A limb sequence ``x_0, ..., x_{n-1}`` is read as the polynomial ``sum x_i * z^i``
and evaluated mod the checksum modulus ``p = 2^256 - C``. Each term is produced
by the mulmod primitive and summed into a 9-word accumulator; the extra word
absorbs the overflow of up to 2^32 additions and is folded back in afterwards
using ``2^256 = C (mod p)``.
"""

from field import ChecksumModulus  # checksum modulus p + mulmod
from params import ACCUMULATOR_WORDS, BIGINT_WIDTH_WORDS  # accumulator / field-element widths
from words import add_small, sub_and_borrow, zero_extend  # carry-safe word arithmetic


def power_ladder(z, count, modulus=ChecksumModulus):  # [z^0, z^1, ..., z^(count-1)] mod p.
    count = int(count)
    if count < 1:
        raise ValueError("power ladder needs at least one entry")
    z = zero_extend(z, BIGINT_WIDTH_WORDS)
    out = [modulus.one()]
    if count > 1:
        out.append(list(z))
    for _ in range(2, count):
        out.append(modulus.mul(out[-1], z))
    return out


def accumulate(limbs, ladder, modulus=ChecksumModulus):  # Raw 9-word sum of limb_i * z^i mod p (not reduced).
    limbs = list(limbs)
    if len(ladder) < len(limbs):
        raise ValueError("power ladder shorter than limb sequence")
    acc = [0] * ACCUMULATOR_WORDS
    for limb, zi in zip(limbs, ladder):
        term = modulus.mul(zero_extend(limb, BIGINT_WIDTH_WORDS), zi)
        if add_small(acc, term):
            raise RuntimeError("checksum accumulator overflowed its headroom word")
    return acc


def reduce_accumulator(acc, modulus=ChecksumModulus):  # Fold the overflow word back in; return 8 words < p.
    if len(acc) != ACCUMULATOR_WORDS:
        raise ValueError(f"accumulator must be {ACCUMULATOR_WORDS} words")
    acc = list(acc)
    while acc[-1] != 0:
        # w * 2^256 = w * C (mod p); w and C are one word each so the product fits in two.
        reducer = [acc[-1]] + [0] * (BIGINT_WIDTH_WORDS - 1)
        acc[-1] = 0
        folded = modulus.mul(reducer, list(modulus.C_WORDS))
        if add_small(acc, folded[:2]):
            raise RuntimeError("checksum reduction overflowed")
    out = acc[:BIGINT_WIDTH_WORDS]
    trial = list(out)
    if not sub_and_borrow(trial, list(modulus.WORDS)):  # value in [p, 2^256)
        out = trial
    return out


def checksum(limbs, ladder, modulus=ChecksumModulus):  # Reduced checksum of a limb sequence.
    return reduce_accumulator(accumulate(limbs, ladder, modulus), modulus)
