"""The Command Line Interface for the textbook RSA walkthrough.

Runs the whole textbook construction once and prints every intermediate value: the primes, the totient, both keys,
the message, its ciphertext and the recovered plaintext. With no arguments it reproduces the classroom demo; the
optional flags only change the inputs.

Typical usage example:

    textbookrsa
    OR
    python -m textbookrsa --seed 7 --message 5
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import random
import sys
import typing
import warnings

import textbookrsa
from textbookrsa import primes


def decimal_digits(text: str) -> str:
    """Accept only ASCII decimal digits, so the plaintext always parses as an int."""
    if not text or not (text.isascii() and text.isdecimal()):
        raise argparse.ArgumentTypeError(f"message must consist of decimal digits 0-9, got {text!r}")
    return text


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Callable = str
    choices: list[str] | None = None
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "bound":
        HelpData(
            description="Exclusive upper bound for the random prime draw.",
            format=int,
            default=primes.DEFAULT_BOUND,
        ),
    "message":
        HelpData(
            description="Plaintext to encrypt, written as decimal digits.",
            format=decimal_digits,
            default="2",
        ),
    "seed":
        HelpData(
            description="Seed for reproducible prime draws. Unseeded draws use the system generator.",
            format=int,
        ),
    "source":
        HelpData(
            description="Prime source to draw from.",
            choices=["sieve", "probable"],
            default="sieve",
        ),
}

sources: dict[str, typing.Type[primes.PrimeSource]] = {
    "sieve": primes.SievePrimeSource,
    "probable": primes.ProbablePrimeSource,
}

corep = argparse.ArgumentParser(prog="textbookrsa", description="Walk through textbook RSA on a single number.")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {textbookrsa.__version__}")
corep.add_argument("--bound",
                   "-b",
                   type=help_dict["bound"].format,
                   default=help_dict["bound"].default,
                   help=help_dict["bound"].description)
corep.add_argument("--message",
                   "-m",
                   type=help_dict["message"].format,
                   default=help_dict["message"].default,
                   help=help_dict["message"].description)
corep.add_argument("--seed", "-s", type=help_dict["seed"].format, help=help_dict["seed"].description)
corep.add_argument("--source",
                   choices=help_dict["source"].choices,
                   default=help_dict["source"].default,
                   help=help_dict["source"].description)
corep.add_argument("--hide-private", action="store_true", help="Do not print the private key.")


def run(args: argparse.Namespace, prntr: typing.Callable = print) -> int:
    """Perform the walkthrough, printing through `prntr`.

    Returns:
        The recovered plaintext.
    """
    rng = random.Random(args.seed) if args.seed is not None else None
    source = sources[args.source](rng)
    p, q = textbookrsa.generate_primes(args.bound, source)
    prntr(f"p : {p}")
    prntr(f"q : {q}")
    pair = textbookrsa.derive(p, q)
    prntr(f"phi(n) = {pair.totient}")
    prntr(f"e = {pair.e}")
    prntr(f"n = {pair.n}")
    prntr(f"Public Key  : n={pair.n}, e={pair.e}")
    if not args.hide_private:
        warnings.warn("Printing the private key is for demonstration only!", RuntimeWarning)
        prntr(f"Private Key : n={pair.n}, d={pair.d}")

    msg_int = int(args.message)
    enc = pair.public.encrypt(msg_int)
    dec = pair.private.decrypt(enc)
    prntr(f"msg as txt: {args.message}")
    prntr(f"msg as num: {msg_int}")
    prntr(f"enc as num: {enc}")
    prntr(f"{msg_int} ^ {pair.e} mod {pair.n} = {enc}")
    prntr(f"dec as num: {dec}")
    prntr(f"{enc} ^ {pair.d if not args.hide_private else 'd'} mod {pair.n} = {dec}")
    return dec


def main(argv: list[str] | None = None) -> None:
    """Entry point. Any arithmetic failure aborts the run with exit code 1."""
    args = corep.parse_args(argv)
    try:
        run(args)
    except textbookrsa.RSAError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
