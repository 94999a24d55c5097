import random  # seeded operand sampling

from params import DEFAULT_PARAMS, WORD_BITS  # layout + word width
from witness import Witness  # bundle container


def operand_bytes(x, params=DEFAULT_PARAMS):  # Operand int -> fixed-length little-endian bytes.
    x = int(x)
    if x < 0:
        raise ValueError("operands must be non-negative")
    try:
        return x.to_bytes(params.operand_bytes, "little")
    except OverflowError:
        raise ValueError(f"operand does not fit in {params.operand_bytes} bytes") from None


def operand_limb_ints(x, params=DEFAULT_PARAMS):  # Operand int -> W limb ints.
    bits = params.limb_words * WORD_BITS
    data = operand_bytes(x, params)
    step = bits // 8
    return [int.from_bytes(data[i : i + step], "little") for i in range(0, len(data), step)]


def long_form_product(x, y, params=DEFAULT_PARAMS):  # Unreduced schoolbook x*y over limbs, as slot bytes.
    xl, yl = operand_limb_ints(x, params), operand_limb_ints(y, params)
    slots = [0] * params.num_slots
    for i, xi in enumerate(xl):
        for j, yj in enumerate(yl):
            slots[i + j] += xi * yj
    slot_bytes = params.slot_words * WORD_BITS // 8
    return b"".join(s.to_bytes(slot_bytes, "little") for s in slots)


def generate_witness(a, b, params=DEFAULT_PARAMS):  # Honest witness for a*b mod params.modulus.
    n = params.modulus
    k = (int(a) * int(b)) // n
    return Witness(
        a=operand_bytes(a, params),
        b=operand_bytes(b, params),
        long_form_c=long_form_product(a, b, params),
        k=operand_bytes(k, params),
        long_form_kn=long_form_product(k, n, params),
    )


def random_witness(seed, params=DEFAULT_PARAMS, bits=2048):  # Seeded random operands of `bits` bits.
    rng = random.Random(seed)
    a = rng.getrandbits(bits)
    b = rng.getrandbits(bits)
    return a, b, generate_witness(a, b, params)
