# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password comparison against encoded hashes of several schemes."""

from ._argon2 import (
    ARGON2_VERSION,
    Argon2Params,
    compare_argon2i,
    compare_argon2id,
    decode_argon2_hash,
)
from ._bcrypt import BCRYPT_MAX_PASSWORD_LENGTH, compare_bcrypt
from ._pbkdf2 import (
    SUPPORTED_DIGESTS,
    Pbkdf2Params,
    compare_pbkdf2,
    decode_pbkdf2_hash,
)
from ._scrypt import (
    DEFAULT_SCRYPT_MAX_MEMORY,
    ScryptParams,
    compare_scrypt,
    decode_scrypt_hash,
)
from ._ssha import (
    PasslibSaltedDigestValidator,
    compare_ssha,
    compare_ssha256,
    compare_ssha512,
)
from .classifier import SchemeTag, classify, is_valid_hash_format
from .dispatcher import (
    COMPARATORS,
    HashComparator,
    acompare,
    compare,
    get_comparator,
)
from .errors import (
    ComputationError,
    ErrorKind,
    HashCompareError,
    IncompatibleVersionError,
    MalformedEncodingError,
    MismatchError,
    PasswordTooLongError,
    UnknownSchemeError,
    UnsupportedDigestAlgorithmError,
)
from .protocol import Comparator, SaltedDigestValidator

__all__ = [
    "ARGON2_VERSION",
    "BCRYPT_MAX_PASSWORD_LENGTH",
    "COMPARATORS",
    "DEFAULT_SCRYPT_MAX_MEMORY",
    "SUPPORTED_DIGESTS",
    "Argon2Params",
    "Comparator",
    "ComputationError",
    "ErrorKind",
    "HashCompareError",
    "HashComparator",
    "IncompatibleVersionError",
    "MalformedEncodingError",
    "MismatchError",
    "PasswordTooLongError",
    "PasslibSaltedDigestValidator",
    "Pbkdf2Params",
    "SaltedDigestValidator",
    "SchemeTag",
    "ScryptParams",
    "UnknownSchemeError",
    "UnsupportedDigestAlgorithmError",
    "acompare",
    "classify",
    "compare",
    "compare_argon2i",
    "compare_argon2id",
    "compare_bcrypt",
    "compare_pbkdf2",
    "compare_scrypt",
    "compare_ssha",
    "compare_ssha256",
    "compare_ssha512",
    "decode_argon2_hash",
    "decode_pbkdf2_hash",
    "decode_scrypt_hash",
    "get_comparator",
    "is_valid_hash_format",
]
