from errors import CanonicalizationOverflow, MagnitudeInconsistency  # terminal rejections
from params import BIGINT_WIDTH_WORDS, DEFAULT_PARAMS  # slot window width + default layout
from words import add_small, is_zero, sub_and_borrow, zero_extend  # carry/borrow-propagating word ops


def canonicalize(slots, params=DEFAULT_PARAMS):  # Carry-propagate long-form slots into canonical words.
    slots = list(slots)
    lw = params.limb_words
    if len(slots) != params.num_slots:
        raise ValueError(f"expected {params.num_slots} slots, got {len(slots)}")
    out = [0] * params.canonical_words
    carry = [0] * params.carry_words
    for i, slot in enumerate(slots):
        cur = zero_extend(slot, BIGINT_WIDTH_WORDS)
        if i != 0 and add_small(cur, carry):
            raise CanonicalizationOverflow(f"carry into slot {i} overflowed the window")
        out[i * lw : (i + 1) * lw] = cur[:lw]
        carry = cur[lw:]
    if not is_zero(carry):
        raise CanonicalizationOverflow("carry out of the last slot exceeds the canonical width")
    return out


def subtract_exact(c_canon, kn_canon, result_words):  # D = C - KN; returns the low result_words words.
    d = list(c_canon)
    borrow = sub_and_borrow(d, list(kn_canon))
    if borrow:
        raise MagnitudeInconsistency("C - KN borrowed out (C < KN)")
    if not is_zero(d[result_words:]):
        raise MagnitudeInconsistency("C - KN has nonzero words above the result width")
    return d[:result_words]


def final_reduce(d, n_words):  # One trial subtraction of N; the result must land in [0, N).
    d = list(d)
    if len(n_words) != len(d):
        raise ValueError("remainder and modulus must have equal width")
    u = list(d)
    if not sub_and_borrow(u, list(n_words)):  # D >= N
        d = u
    check = list(d)
    if not sub_and_borrow(check, list(n_words)):
        raise MagnitudeInconsistency("C - KN is not below 2N")
    return d
