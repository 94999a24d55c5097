import logging  # stage progress + rejections
from concurrent.futures import ThreadPoolExecutor  # optional parallel checksum evaluation
from dataclasses import dataclass  # result container

from canonical import canonicalize, final_reduce, subtract_exact  # exact reconciliation
from checksum import checksum, power_ladder  # randomized polynomial checksums
from errors import ChecksumMismatch, MulModVerifyError  # terminal rejections
from field import ChecksumModulus  # checksum modulus p
from params import DEFAULT_PARAMS  # fixed modulus + layout
from perf_trace import NullTrace  # default no-op tracer
from transcript import derive_challenge  # Fiat-Shamir challenge
from words import chunk, words_to_int  # limb views + remainder decoding

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerificationResult:  # Accept-with-remainder or reject-with-reason.
    accepted: bool
    remainder: int | None = None
    reason: str | None = None
    error: MulModVerifyError | None = None


class MulModVerifier:  # Verifies one witness for A*B mod N in O(limbs) mulmod calls.
    def __init__(self, witness, params=DEFAULT_PARAMS, *, workers=None, tracer=None, modulus=ChecksumModulus):
        self.witness = witness
        self.params = params
        self.workers = workers
        self.tracer = tracer if tracer is not None else NullTrace()
        self.modulus = modulus
        self.n_limbs = chunk(params.modulus_words, params.limb_words)  # fixed, not transmitted

    def derive_challenge(self):  # z = H(tag || A || B || C || K || KN) mod p.
        with self.tracer.timer("Hashing"):
            return derive_challenge(self.witness, self.params, self.modulus)

    def compute_ladder(self, z):  # z^0 .. z^(L-1), shared read-only by all six checksums.
        with self.tracer.timer("Compute z"):
            return power_ladder(z, self.params.num_slots, self.modulus)

    def checksum_inputs(self):  # name -> limb sequence for the six evaluations.
        w, p = self.witness, self.params
        return {
            "a": w.operand_limbs("a", p),
            "b": w.operand_limbs("b", p),
            "k": w.operand_limbs("k", p),
            "n": self.n_limbs,
            "c": w.slots("long_form_c", p),
            "kn": w.slots("long_form_kn", p),
        }

    def compute_checksums(self, ladder):  # Reduced checksum per name; evaluations are independent.
        inputs = self.checksum_inputs()
        with self.tracer.timer("Compute checksums"):
            if self.workers is None or self.workers <= 1:
                return {name: checksum(limbs, ladder, self.modulus) for name, limbs in inputs.items()}
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = {name: executor.submit(checksum, limbs, ladder, self.modulus) for name, limbs in inputs.items()}
                return {name: f.result() for name, f in futures.items()}

    def check_identities(self, cs):  # cs(A)*cs(B) == cs(C) and cs(K)*cs(N) == cs(KN) mod p.
        with self.tracer.timer("Check identities"):
            if self.modulus.mul(cs["a"], cs["b"]) != cs["c"]:
                raise ChecksumMismatch("multiplication verification failed: A*B != C")
            if self.modulus.mul(cs["k"], cs["n"]) != cs["kn"]:
                raise ChecksumMismatch("multiplication verification failed: K*N != KN")

    def reconcile(self):  # Canonicalize C and KN, subtract exactly, reduce once by N.
        w, p = self.witness, self.params
        with self.tracer.timer("Canonicalize c, kn"):
            c_canon = canonicalize(w.slots("long_form_c", p), p)
            kn_canon = canonicalize(w.slots("long_form_kn", p), p)
        with self.tracer.timer("Compute c - kn"):
            d = subtract_exact(c_canon, kn_canon, p.result_words)
        with self.tracer.timer("Final reduction"):
            return final_reduce(d, p.modulus_words[: p.result_words])

    def verify(self):  # Remainder A*B mod N as an int; raises MulModVerifyError on rejection.
        self.witness.validate(self.params)
        z = self.derive_challenge()
        logger.debug("challenge z = %#x", words_to_int(z))
        ladder = self.compute_ladder(z)
        cs = self.compute_checksums(ladder)
        self.check_identities(cs)
        logger.debug("checksum identities hold")
        remainder = words_to_int(self.reconcile())
        logger.debug("remainder has %d bits", remainder.bit_length())
        return remainder


def verify_witness(witness, params=DEFAULT_PARAMS, **kwargs):  # Single caller-visible accept/reject result.
    try:
        remainder = MulModVerifier(witness, params, **kwargs).verify()
    except MulModVerifyError as e:
        logger.info("witness rejected: %s (%s)", e.reason, e)
        return VerificationResult(accepted=False, reason=e.reason, error=e)
    return VerificationResult(accepted=True, remainder=remainder)
