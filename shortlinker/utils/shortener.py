"""Shortcode generation utility

Functions:
    generate_shortcode(length=8, alphabet='abc...xyz0123456789'):
        Generate a random short code suitable for use as a URL slug.

Example:
    >>> from shortlinker.utils import generate_shortcode
    >>> generate_shortcode()
    'q0v7k2ma'
"""

import secrets

from shortlinker.constants import Shortcode


def generate_shortcode(length: int = Shortcode.LENGTH, alphabet: str = Shortcode.ALPHABET) -> str:
    """Generate a random short code.

    Every character is drawn independently and uniformly from `alphabet` using
    the `secrets` CSPRNG, so codes are not predictable from previously issued
    ones. With the default 8 characters over 36 symbols the keyspace holds
    36**8 (~2.8e12) codes.

    Args:
        length (int, optional):
            Number of characters. Defaults to 8.

        alphabet (str, optional):
            Symbols to draw from. Defaults to lowercase letters and digits.

    Returns:
        str: A random short code.

    NOTE:
        - Random codes can collide. Uniqueness is enforced by the data store on
          insert; callers are expected to retry with a fresh code.
    """
    if not isinstance(length, int):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    if not isinstance(alphabet, str):
        raise TypeError(f'Alphabet must be of type string (given type: {type(alphabet)}).')
    if len(set(alphabet)) < 2:
        raise ValueError(f'Alphabet must contain at least two distinct symbols (given value: {alphabet!r}).')

    return ''.join(secrets.choice(alphabet) for _ in range(length))
