"""Witness bundle for one long-form modular multiplication.

Wire layout (little-endian, fixed order, 3200 bytes with the default params)::

    a             264 bytes   22 limbs x 96 bits
    b             264 bytes   22 limbs x 96 bits
    long_form_c  1204 bytes   43 slots x 224 bits, unreduced schoolbook A*B
    k             264 bytes   22 limbs x 96 bits, floor(A*B / N)
    long_form_kn 1204 bytes   43 slots x 224 bits, unreduced schoolbook K*N

The challenge hash absorbs the fields in exactly this order.
"""

from dataclasses import dataclass, fields, replace  # frozen bundle container

from errors import MalformedWitness  # length violations
from params import DEFAULT_PARAMS  # default layout
from words import chunk, words_from_bytes  # byte -> word views

OPERAND_FIELDS = ("a", "b", "k")  # fields laid out as operands
LONG_FORM_FIELDS = ("long_form_c", "long_form_kn")  # fields laid out as long-form products


@dataclass(frozen=True)
class Witness:  # Producer-supplied claim: A, B, C = A*B (long form), K, KN = K*N (long form).
    a: bytes
    b: bytes
    long_form_c: bytes
    k: bytes
    long_form_kn: bytes

    @staticmethod
    def field_len(name, params=DEFAULT_PARAMS):  # Declared byte length of a field.
        return params.operand_bytes if name in OPERAND_FIELDS else params.long_form_bytes

    def validate(self, params=DEFAULT_PARAMS):  # Raise MalformedWitness on any wrong length.
        for f in fields(self):
            got = len(getattr(self, f.name))
            want = self.field_len(f.name, params)
            if got != want:
                raise MalformedWitness(f"{f.name}: expected {want} bytes, got {got}")
        return self

    @classmethod
    def from_bytes(cls, blob, params=DEFAULT_PARAMS):  # Split a serialized bundle in wire order.
        blob = bytes(blob)
        if len(blob) != params.witness_bytes:
            raise MalformedWitness(f"bundle: expected {params.witness_bytes} bytes, got {len(blob)}")
        parts = {}
        off = 0
        for f in fields(cls):
            n = cls.field_len(f.name, params)
            parts[f.name] = blob[off : off + n]
            off += n
        return cls(**parts)

    def to_bytes(self):
        return b"".join(getattr(self, f.name) for f in fields(self))

    def with_field(self, name, data):  # Copy with one field replaced.
        return replace(self, **{name: bytes(data)})

    def operand_limbs(self, name, params=DEFAULT_PARAMS):  # Operand as W groups of limb_words words.
        if name not in OPERAND_FIELDS:
            raise ValueError(f"{name!r} is not an operand field")
        return chunk(words_from_bytes(getattr(self, name)), params.limb_words)

    def slots(self, name, params=DEFAULT_PARAMS):  # Long-form product as L groups of slot_words words.
        if name not in LONG_FORM_FIELDS:
            raise ValueError(f"{name!r} is not a long-form field")
        return chunk(words_from_bytes(getattr(self, name)), params.slot_words)
