import pathlib  # locate repo root
import random  # deterministic PRNG for test cases
import sys  # adjust import path for local modules
import unittest  # unit test framework

ROOT = pathlib.Path(__file__).resolve().parents[1]  # repo root
sys.path.insert(0, str(ROOT))  # allow `import witness`

from errors import MalformedWitness  # length violations
from params import CANONICAL_WORDS, CARRY_WORDS, DEFAULT_PARAMS, N, NUM_SLOTS, VerifierParams  # layout + fixed modulus
from witness import Witness  # bundle codec
from witness_gen import generate_witness, long_form_product, operand_bytes, random_witness  # reference producer
from words import words_from_bytes, words_to_int  # int views


class WitnessLayoutTests(unittest.TestCase):  # Fixed byte layout of the bundle.
    def test_declared_sizes(self):
        p = DEFAULT_PARAMS
        self.assertEqual(p.operand_bytes, 264)
        self.assertEqual(p.long_form_bytes, 1204)
        self.assertEqual(p.witness_bytes, 3200)
        self.assertEqual(p.num_slots, NUM_SLOTS)
        self.assertEqual(NUM_SLOTS, 43)
        self.assertEqual(CARRY_WORDS, 5)
        self.assertEqual(p.canonical_words, CANONICAL_WORDS)
        self.assertEqual(CANONICAL_WORDS, 129)

    def test_bundle_split_follows_wire_order(self):
        _, _, w = random_witness(0)
        blob = w.to_bytes()
        self.assertEqual(len(blob), 3200)
        self.assertEqual(blob[:264], w.a)
        self.assertEqual(blob[528:1732], w.long_form_c)
        self.assertEqual(blob[1732:1996], w.k)
        self.assertEqual(Witness.from_bytes(blob), w)

    def test_wrong_bundle_length(self):
        with self.assertRaises(MalformedWitness):
            Witness.from_bytes(b"\x00" * 3199)

    def test_validate_flags_each_field(self):
        _, _, w = random_witness(1)
        self.assertIs(w.validate(), w)
        for name in ("a", "b", "long_form_c", "k", "long_form_kn"):
            short = w.with_field(name, getattr(w, name)[:-4])
            with self.assertRaises(MalformedWitness) as cm:
                short.validate()
            self.assertIn(name, str(cm.exception))

    def test_word_views(self):
        _, _, w = random_witness(2)
        limbs = w.operand_limbs("a")
        self.assertEqual((len(limbs), len(limbs[0])), (22, 3))
        slots = w.slots("long_form_kn")
        self.assertEqual((len(slots), len(slots[0])), (43, 7))
        with self.assertRaises(ValueError):
            w.operand_limbs("long_form_c")
        with self.assertRaises(ValueError):
            w.slots("k")


class WitnessGenTests(unittest.TestCase):  # Host-side reference producer.
    def test_long_form_slots_evaluate_to_product(self):
        rng = random.Random(3)
        a, b = rng.getrandbits(2048), rng.getrandbits(2048)
        slots = words_from_bytes(long_form_product(a, b))
        total = sum(words_to_int(slots[i * 7 : i * 7 + 7]) << (96 * i) for i in range(43))
        self.assertEqual(total, a * b)

    def test_quotient_is_floor(self):
        a, b, w = random_witness(4)
        self.assertEqual(int.from_bytes(w.k, "little"), (a * b) // N)

    def test_operand_too_large(self):
        with self.assertRaises(ValueError):
            operand_bytes(1 << 2112)
        with self.assertRaises(ValueError):
            operand_bytes(-1)

    def test_small_modulus_params(self):
        p = DEFAULT_PARAMS.with_modulus(1000003)
        w = generate_witness(999999, 123456, p)
        self.assertEqual(int.from_bytes(w.k, "little"), (999999 * 123456) // 1000003)


class ParamsTests(unittest.TestCase):  # Headroom bounds are re-derived, not assumed.
    def test_default_headroom_holds(self):
        DEFAULT_PARAMS.check_headroom()
        self.assertEqual(N.bit_length(), 2048)

    def test_narrow_slots_rejected(self):
        with self.assertRaises(ValueError):
            VerifierParams(slot_words=6)

    def test_direct_construction_is_checked(self):  # Bad layouts fail at construction, not mid-verification.
        with self.assertRaises(ValueError):
            VerifierParams(modulus=(1 << 2048) + 1)
        with self.assertRaises(ValueError):
            VerifierParams(result_words=65)
        with self.assertRaises(ValueError):
            VerifierParams(limb_words=9)
        self.assertEqual(DEFAULT_PARAMS.carry_words, CARRY_WORDS)

    def test_bad_moduli_rejected(self):
        with self.assertRaises(ValueError):
            DEFAULT_PARAMS.with_modulus(0)
        with self.assertRaises(ValueError):
            DEFAULT_PARAMS.with_modulus(1 << 2048)


if __name__ == "__main__":
    unittest.main()
