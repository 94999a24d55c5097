class MulModVerifyError(Exception):  # Raised on any terminal rejection of a multiplication witness.
    reason = "verification failed"


class MalformedWitness(MulModVerifyError):  # A witness field has the wrong declared length.
    reason = "malformed witness"


class ChecksumMismatch(MulModVerifyError):  # A checksum identity failed at the random challenge.
    reason = "multiplication verification failed"


class CanonicalizationOverflow(MulModVerifyError):  # Carry propagation ran past the canonical width.
    reason = "canonicalization overflow"


class MagnitudeInconsistency(MulModVerifyError):  # C - KN is negative, too wide, or not reducible below N.
    reason = "magnitude inconsistency"
