import re
import random
import itertools

import pytest

from passgen import pwgen
from passgen.pwgen import PasswordOptions, ConstraintUnsatisfiable
from passgen.charsets import LOWERCASE, UPPERCASE, DIGITS, SYMBOLS, WORDS

from .expect import FixedRandom

all_flags = list(itertools.product((False, True), repeat=2))
rounds = 50


def _fragments(pw):
    """Split memorable password to word fragments."""
    return [f for f in re.split(r'[-_.!]', pw.rstrip(DIGITS)) if f]


def _is_word_fragment(fragment):
    fragment = fragment.lower()
    return any(w.startswith(fragment) or fragment.startswith(w) for w in WORDS)


class TestRandomPassword:

    @pytest.mark.parametrize('numbers,symbols', all_flags)
    @pytest.mark.parametrize('length', [8, 9, 16, 33, 64])
    def test_length_and_classes(self, length, numbers, symbols):
        options = PasswordOptions(length, numbers, symbols)
        allowed = LOWERCASE + UPPERCASE + (DIGITS if numbers else '') + (SYMBOLS if symbols else '')
        for _ in range(rounds):
            pw = pwgen.generate_random_password(options)
            assert len(pw) == length
            assert any(c in LOWERCASE for c in pw), "At least one lowercase"
            assert any(c in UPPERCASE for c in pw), "At least one uppercase"
            if numbers:
                assert any(c in DIGITS for c in pw), "At least one digit"
            if symbols:
                assert any(c in SYMBOLS for c in pw), "At least one symbol"
            assert all(c in allowed for c in pw), "Only allowed characters"

    def test_example(self):
        pw = pwgen.generate_random_password(PasswordOptions(12, True, False))
        assert re.fullmatch(r'[A-Za-z0-9]{12}', pw)
        assert any(c.isdigit() for c in pw)
        assert any(c.isupper() for c in pw)
        assert any(c.islower() for c in pw)

    def test_fixed_random(self):
        # all picks take the first character, shuffle always swaps with index 0
        pw = pwgen.generate_random_password(PasswordOptions(8, True, True), FixedRandom(0.0))
        assert pw == "A0!aaaaa"
        pw = pwgen.generate_random_password(PasswordOptions(5, False, False), FixedRandom(0.0))
        assert pw == "Aaaaa"

    def test_reproducible(self):
        options = PasswordOptions(20, True, True)
        pw1 = pwgen.generate_random_password(options, random.Random(1234))
        pw2 = pwgen.generate_random_password(options, random.Random(1234))
        assert pw1 == pw2

    def test_shortest(self):
        assert len(pwgen.generate_random_password(PasswordOptions(2, False, False))) == 2
        assert len(pwgen.generate_random_password(PasswordOptions(4, True, True))) == 4

    @pytest.mark.parametrize('length,numbers,symbols', [
        (1, False, False),
        (2, True, False),
        (3, True, True),
    ])
    def test_too_short(self, length, numbers, symbols):
        with pytest.raises(ConstraintUnsatisfiable):
            pwgen.generate_random_password(PasswordOptions(length, numbers, symbols))


class TestMemorablePassword:

    @pytest.mark.parametrize('numbers,symbols', all_flags)
    @pytest.mark.parametrize('length', [8, 10, 12, 16, 24, 40, 64])
    def test_length(self, length, numbers, symbols):
        options = PasswordOptions(length, numbers, symbols)
        for _ in range(rounds):
            pw = pwgen.generate_memorable_password(options)
            assert len(pw) == length
            assert all(c in LOWERCASE + UPPERCASE + DIGITS + SYMBOLS for c in pw)

    @pytest.mark.parametrize('numbers,symbols', all_flags)
    @pytest.mark.parametrize('length', [16, 20, 32, 64])
    def test_words(self, length, numbers, symbols):
        options = PasswordOptions(length, numbers, symbols)
        for _ in range(rounds):
            pw = pwgen.generate_memorable_password(options)
            fragments = _fragments(pw)
            assert len(fragments) >= 2, pw
            assert all(_is_word_fragment(f) for f in fragments), pw
            # capitalized first word
            first = fragments[0]
            assert first[0].isupper()
            assert first[1:].islower()
            if not symbols:
                assert not any(c in '_.!' for c in pw)

    def test_example(self):
        pw = pwgen.generate_memorable_password(PasswordOptions(20, False, False))
        assert len(pw) == 20
        assert re.fullmatch(r'[A-Z][a-z]+(-[a-z]+)+-?[a-z]*', pw)

    def test_fixed_random(self):
        pw = pwgen.generate_memorable_password(PasswordOptions(20, False, False), FixedRandom(0.0))
        assert pw == "Apple-appleaaaaaaaaa"
        pw = pwgen.generate_memorable_password(PasswordOptions(20, True, False), FixedRandom(0.0))
        assert pw == "Apple-apple000000000"
        # "zephyr" is the last word, "!" is the last separator
        pw = pwgen.generate_memorable_password(PasswordOptions(24, True, True), FixedRandom(0.99))
        assert pw == "Zephyr!zephyr!zephyr9999"

    def test_shorter_word_and_pair(self):
        rng = FixedRandom(
            0.15,    # "lighthouse" doesn't fit
            0.0,     # try shorter "apple", fits, but it's a single word
            0.7039,  # pair: "dawn"
            0.0,     # "apple" doesn't fit after "dawn"
            0.888,   # "reef" fits
            0.5,     # separator
        )
        pw = pwgen.generate_memorable_password(PasswordOptions(9, False, False), rng)
        assert pw == "Dawn-reef"
        assert rng.calls == 6

    def test_pair_overflow_is_truncated(self):
        # no pair of words fits, re-rolling is bounded by the word count
        rng = FixedRandom(0.15)  # always "lighthouse"
        pw = pwgen.generate_memorable_password(PasswordOptions(8, True, True), rng)
        assert pw == "Lighthou"

    def test_reproducible(self):
        options = PasswordOptions(30, True, True)
        pw1 = pwgen.generate_memorable_password(options, random.Random(42))
        pw2 = pwgen.generate_memorable_password(options, random.Random(42))
        assert pw1 == pw2

    @pytest.mark.parametrize('length', [1, 2, 5])
    def test_tiny(self, length):
        pw = pwgen.generate_memorable_password(PasswordOptions(length, True, True))
        assert len(pw) == length
        assert pw[0].isupper()

    def test_invalid_length(self):
        with pytest.raises(ConstraintUnsatisfiable):
            pwgen.generate_memorable_password(PasswordOptions(0))
        with pytest.raises(ConstraintUnsatisfiable):
            pwgen.generate_memorable_password(PasswordOptions('16'))


@pytest.mark.parametrize('mode', pwgen.MODES)
def test_boundary(mode):
    pw = pwgen.generate_password(PasswordOptions(8, True, True), mode)
    assert len(pw) == 8


def test_generate_password_mode():
    options = PasswordOptions(16, False, False)
    assert pwgen.generate_password(options, pwgen.RANDOM, FixedRandom(0.0)) == \
        pwgen.generate_random_password(options, FixedRandom(0.0))
    assert pwgen.generate_password(options, pwgen.MEMORABLE, FixedRandom(0.0)) == \
        pwgen.generate_memorable_password(options, FixedRandom(0.0))
    with pytest.raises(ValueError):
        pwgen.generate_password(options, 'pronounceable')


def test_default_options():
    options = PasswordOptions()
    assert options.length == pwgen.DEFAULT_LENGTH
    assert options.include_numbers
    assert options.include_symbols
    assert pwgen.DEFAULT_MODE == pwgen.MEMORABLE
