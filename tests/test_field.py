import random
import pathlib
import sys
import unittest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
from field import ChecksumModulus, SolinasModulus, mulmod
from words import int_to_words, words_to_int


class FieldTests(unittest.TestCase):
    def test_checksum_modulus_shape(self):
        p = ChecksumModulus.MODULUS
        self.assertEqual(p, (1 << 256) - 189)
        self.assertEqual(words_to_int(ChecksumModulus.WORDS), p)
        self.assertEqual(words_to_int(ChecksumModulus.C_WORDS), 189)
        self.assertEqual((1 << 256) % p, 189)

    def test_mulmod_matches_int(self):
        p = ChecksumModulus.MODULUS
        rng = random.Random(0)
        for _ in range(64):
            a, b = rng.randrange(0, p), rng.randrange(0, p)
            x, y = int_to_words(a, 8), int_to_words(b, 8)
            self.assertEqual(words_to_int(ChecksumModulus.mul(x, y)), (a * b) % p)
            self.assertEqual(ChecksumModulus.from_int(a * b), ChecksumModulus.mul(x, y))
        self.assertEqual(words_to_int(ChecksumModulus.one()), 1)

    def test_mulmod_rejects_bad_widths(self):
        one = [1] + [0] * 7
        with self.assertRaises(ValueError):
            mulmod([1], one, list(ChecksumModulus.WORDS))
        with self.assertRaises(ValueError):
            mulmod(one, one, [0] * 8)

    def test_subclass_validation(self):
        with self.assertRaises(ValueError):
            type("Even", (SolinasModulus,), {"C": 2})
        with self.assertRaises(ValueError):
            type("Wide", (SolinasModulus,), {"C": 1 << 32})


if __name__ == "__main__":
    unittest.main()
