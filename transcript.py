import hashlib  # sha256 hash primitive

from field import ChecksumModulus  # challenge lives in the checksum field
from params import BIGINT_WIDTH_WORDS, DEFAULT_PARAMS  # field-element width + default layout
from words import int_to_words  # reduced challenge -> words


class Sha256Transcript:  # Fiat-Shamir hasher: SHA-256 over a domain tag followed by raw witness bytes.
    def __init__(self, label):  # Seed the hash with the domain separation tag.
        label_b = label.encode() if isinstance(label, str) else bytes(label)
        if not label_b:
            raise ValueError("domain tag must be non-empty")
        self.h = hashlib.sha256(label_b)

    new = classmethod(lambda cls, label: cls(label))  # constructor alias

    def copy(self):  # Independent clone for tests/debugging.
        t = object.__new__(type(self))
        t.h = self.h.copy()
        return t

    def append_bytes(self, data):  # Absorb raw bytes; the wire order is fixed so no length prefix.
        self.h.update(bytes(data))

    def digest(self):
        return self.h.digest()

    def state_hex(self):  # Hex digest of everything absorbed so far (debugging aid).
        return self.h.hexdigest()

    def challenge_int(self, modulus=ChecksumModulus):  # First field-sized digest chunk (LE) reduced mod p.
        chunk = self.digest()[: BIGINT_WIDTH_WORDS * 4]
        return int.from_bytes(chunk, "little") % modulus.MODULUS

    def challenge_words(self, modulus=ChecksumModulus):  # Challenge as BIGINT_WIDTH_WORDS little-endian words.
        return int_to_words(self.challenge_int(modulus), BIGINT_WIDTH_WORDS)


def derive_challenge(witness, params=DEFAULT_PARAMS, modulus=ChecksumModulus):  # z = H(tag || A || B || C || K || KN) mod p.
    t = Sha256Transcript.new(params.domain_tag)
    t.append_bytes(witness.a)
    t.append_bytes(witness.b)
    t.append_bytes(witness.long_form_c)
    t.append_bytes(witness.k)
    t.append_bytes(witness.long_form_kn)
    return t.challenge_words(modulus)
