"""Unit tests for the generate_shortcode function in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures the default output is an 8-character string over [a-z0-9].

2. Custom length and alphabet

3. Randomness sanity
   - Consecutive calls produce distinct codes.
   - Every alphabet symbol shows up over a large sample.

4. Error handling
   - Ensures invalid length and alphabet values raise appropriate exceptions.
"""

import re
import string

import pytest

from shortlinker.utils import generate_shortcode


# -------------------------------
# 1. Basic functionality
# -------------------------------


def test_generate_shortcode_defaults():
    result = generate_shortcode()
    assert isinstance(result, str)
    assert re.fullmatch(r'[a-z0-9]{8}', result)


# -------------------------------
# 2. Custom length and alphabet
# -------------------------------


@pytest.mark.parametrize('length', [1, 6, 12, 64])
def test_generate_shortcode_respects_length(length):
    assert len(generate_shortcode(length=length)) == length


def test_generate_shortcode_respects_alphabet():
    result = generate_shortcode(length=50, alphabet='01')
    assert set(result) <= {'0', '1'}


# -------------------------------
# 3. Randomness sanity
# -------------------------------


def test_generate_shortcode_is_not_repeating():
    codes = {generate_shortcode() for _ in range(1000)}
    assert len(codes) == 1000


def test_generate_shortcode_covers_alphabet():
    sample = ''.join(generate_shortcode() for _ in range(2000))
    assert set(sample) == set(string.ascii_lowercase + string.digits)


# -------------------------------
# 4. Error handling
# -------------------------------


@pytest.mark.parametrize('length', ['8', 8.0, None])
def test_invalid_length_type(length):
    with pytest.raises(TypeError):
        generate_shortcode(length=length)


@pytest.mark.parametrize('length', [0, -1])
def test_invalid_length_value(length):
    with pytest.raises(ValueError):
        generate_shortcode(length=length)


def test_invalid_alphabet_type():
    with pytest.raises(TypeError):
        generate_shortcode(alphabet=['a', 'b'])


@pytest.mark.parametrize('alphabet', ['', 'a', 'aaaa'])
def test_invalid_alphabet_value(alphabet):
    with pytest.raises(ValueError):
        generate_shortcode(alphabet=alphabet)
