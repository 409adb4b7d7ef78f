"""The textbook RSA primitives: encryption and decryption of a single integer.

Both are plain modular exponentiations and hold no state. Range checking of the message representative is left to
the key objects in `textbookrsa.keys`.

Typical usage example:

    c = encrypt(2, 3, 55)  # 8
    m = decrypt(c, 27, 55)  # 2
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from textbookrsa.arith import mod_pow


def encrypt(message: int, e: int, n: int) -> int:
    """Encrypt an int-marshalled message with the public exponent `e` and modulus `n`."""
    return mod_pow(message, e, n)


def decrypt(ciphertext: int, d: int, n: int) -> int:
    """Decrypt a ciphertext with the private exponent `d` and modulus `n`."""
    return mod_pow(ciphertext, d, n)
