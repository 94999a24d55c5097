from dataclasses import dataclass, replace  # frozen parameter container

WORD_BITS = 32  # narrow word width
WORD_MASK = (1 << WORD_BITS) - 1  # low-32-bit mask

OPERAND_LIMBS = 22  # 96-bit limbs per operand (A, B, K, N)
LIMB_WORDS = 3  # narrow words per operand limb
NUM_SLOTS = 2 * OPERAND_LIMBS - 1  # slots per long-form product (43)
SLOT_WORDS = 7  # narrow words per 224-bit long-form slot

BIGINT_WIDTH_WORDS = 8  # width of the mulmod primitive (256 bits)
ACCUMULATOR_WORDS = BIGINT_WIDTH_WORDS + 1  # checksum accumulator with one overflow word
CARRY_WORDS = BIGINT_WIDTH_WORDS - LIMB_WORDS  # canonicalization carry register
CANONICAL_WORDS = NUM_SLOTS * LIMB_WORDS  # canonical form of a long-form product (129)
RESULT_WORDS = 64  # width of N and of the remainder (2048 bits)

SOLINAS_C = 189  # checksum modulus is 2^256 - 189
DOMAIN_TAG = b"RISC Zero RSA Gadget"  # Fiat-Shamir domain separation tag

# Fixed 2048-bit RSA modulus, little-endian 32-bit words (two zero words pad it to 22 limbs).
N_WORDS = (
    3493812455, 3529997461, 710143587, 2792692495, 1885047707, 3553628773, 2204079629, 699911535,
    3275286756, 2670964040, 380836659, 1539088076, 257233178, 102057303, 3498423094, 347591143,
    118634769, 2922120165, 4044052678, 3306267357, 3299705609, 2232715160, 2567218027, 57867452,
    3266166781, 2351768864, 296981719, 1570354344, 4098249795, 2000361393, 1479034620, 3336008768,
    2938032753, 3528598023, 1304193507, 121827407, 514584826, 1603753032, 1664712145, 3527467765,
    2821704060, 729040642, 2110748820, 3709644666, 4149792411, 1565350608, 3206857463, 792901230,
    3569404149, 1620994961, 33783729, 1281610576, 468794176, 1193160222, 3636051391, 2450661453,
    4242348214, 2150858390, 1813504491, 305305593, 1673370015, 1864962247, 2629885700, 2947918631,
    0, 0,
)
N = sum(w << (WORD_BITS * i) for i, w in enumerate(N_WORDS))  # real modulus as an int


@dataclass(frozen=True)
class VerifierParams:  # Real modulus plus the fixed witness layout.
    modulus: int = N  # real modulus N
    operand_limbs: int = OPERAND_LIMBS
    limb_words: int = LIMB_WORDS
    slot_words: int = SLOT_WORDS
    result_words: int = RESULT_WORDS
    domain_tag: bytes = DOMAIN_TAG

    def __post_init__(self):  # Layouts that break the overflow bounds never reach a verifier.
        self.check_headroom()

    @property
    def num_slots(self) -> int:  # 2W - 1 slots per long-form product.
        return 2 * self.operand_limbs - 1

    @property
    def operand_words(self) -> int:  # narrow words per operand
        return self.operand_limbs * self.limb_words

    @property
    def long_form_words(self) -> int:  # narrow words per long-form product
        return self.num_slots * self.slot_words

    @property
    def carry_words(self) -> int:  # canonicalization carry register: slot window minus emitted limb
        return BIGINT_WIDTH_WORDS - self.limb_words

    @property
    def canonical_words(self) -> int:  # narrow words of a canonicalized long-form product
        return self.num_slots * self.limb_words

    @property
    def operand_bytes(self) -> int:
        return self.operand_words * WORD_BITS // 8

    @property
    def long_form_bytes(self) -> int:
        return self.long_form_words * WORD_BITS // 8

    @property
    def witness_bytes(self) -> int:  # A, B, C, K, KN
        return 3 * self.operand_bytes + 2 * self.long_form_bytes

    @property
    def modulus_words(self) -> list[int]:  # N as operand-width little-endian words.
        return [(self.modulus >> (WORD_BITS * i)) & WORD_MASK for i in range(self.operand_words)]

    def with_modulus(self, n: int) -> "VerifierParams":  # Same layout, different real modulus.
        return replace(self, modulus=int(n))

    def check_headroom(self):  # Re-derive overflow bounds for this layout; raise ValueError if they fail.
        limb_bits = self.limb_words * WORD_BITS
        slot_bits = self.slot_words * WORD_BITS
        log_w = (self.operand_limbs - 1).bit_length()  # ceil(log2 W)
        if slot_bits <= log_w + 2 * limb_bits:
            raise ValueError("slot width cannot hold a sum of W limb products")
        if self.limb_words > BIGINT_WIDTH_WORDS or self.slot_words >= BIGINT_WIDTH_WORDS:
            raise ValueError("limbs and slots must zero-extend into the mulmod width")
        if self.num_slots.bit_length() > WORD_BITS:
            raise ValueError("accumulator overflow word cannot hold the slot count")
        if self.modulus <= 0:
            raise ValueError("modulus must be positive")
        if self.modulus.bit_length() > min(self.result_words, self.operand_words) * WORD_BITS:
            raise ValueError("modulus does not fit the result width")
        if 2 * self.result_words > self.canonical_words:
            raise ValueError("canonical width cannot hold a double-width product")


DEFAULT_PARAMS = VerifierParams()  # fixed 2048-bit modulus, 22 x 96-bit limbs
