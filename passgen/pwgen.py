# pwgen
# (random and memorable password generator)
#

import logging
from typing import NamedTuple
from random import SystemRandom

from .charsets import (LOWERCASE, UPPERCASE, DIGITS, SYMBOLS,
                       SEPARATORS, PLAIN_SEPARATORS, WORDS)

random = SystemRandom()
log = logging.getLogger(__name__)

RANDOM = 'random'
MEMORABLE = 'memorable'
MODES = (RANDOM, MEMORABLE)

DEFAULT_MODE = MEMORABLE
DEFAULT_LENGTH = 24
MIN_LENGTH = 8
MAX_LENGTH = 64

# Word packing heuristic: ~6 letters per word plus one separator
AVG_WORD_LENGTH = 6
SEPARATOR_LENGTH = 1
NUMERIC_RESERVE = 2


class ConstraintUnsatisfiable(ValueError):

    """Requested length can't hold the mandatory characters."""


class PasswordOptions(NamedTuple):
    length: int = DEFAULT_LENGTH
    include_numbers: bool = True
    include_symbols: bool = True


def _choice(rng, seq):
    """Pick an item from `seq` using a single ``rng.random()`` draw."""
    return seq[int(rng.random() * len(seq))]


def _shuffle(rng, items: list):
    """Fisher-Yates shuffle in place."""
    for i in range(len(items) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        items[i], items[j] = items[j], items[i]


def _check_length(length) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise ConstraintUnsatisfiable(f"Password length must be an integer, got {length!r}.")
    if length < 1:
        raise ConstraintUnsatisfiable(f"Password length must be at least 1, got {length}.")
    return length


def generate_random_password(options: PasswordOptions, rng=None) -> str:
    """Generate random password from letters and optionally digits and symbols.

    At least one lowercase and one uppercase letter is always included,
    as well as one digit and one symbol when enabled. The result is shuffled,
    so these are not found at predictable positions.

    :param options: Length and enabled character classes
    :param rng: Source of randomness, any object with ``random()`` method
                returning float in [0, 1). Default is :class:`SystemRandom`.
    :raises ConstraintUnsatisfiable: Length is too small to include
                                     one character of each enabled class.

    """
    rng = rng or random
    length = _check_length(options.length)
    charset = LOWERCASE + UPPERCASE
    if options.include_numbers:
        charset += DIGITS
    if options.include_symbols:
        charset += SYMBOLS

    mandatory = [LOWERCASE, UPPERCASE]
    if options.include_numbers:
        mandatory.append(DIGITS)
    if options.include_symbols:
        mandatory.append(SYMBOLS)
    if length < len(mandatory):
        raise ConstraintUnsatisfiable(
            f"Password length {length} is too short, "
            f"at least {len(mandatory)} characters are required.")

    chars = [_choice(rng, cls) for cls in mandatory]
    while len(chars) < length:
        chars.append(_choice(rng, charset))
    _shuffle(rng, chars)
    return ''.join(chars)


def _pack_words(rng, budget: int) -> list:
    """Greedily choose random words fitting into `budget` characters.

    One separator is counted between each pair of words. When a word
    doesn't fit, a single shorter word is tried and packing stops.

    """
    max_words = max(2, budget // (AVG_WORD_LENGTH + SEPARATOR_LENGTH))
    words = []
    current_length = 0
    while len(words) < max_words and current_length < budget - 2:
        word = _choice(rng, WORDS)
        separator_length = SEPARATOR_LENGTH if words else 0
        if current_length + separator_length + len(word) <= budget - 1:
            words.append(word)
            current_length += separator_length + len(word)
            continue
        # Try a shorter word, then give up
        short_words = [w for w in WORDS if len(w) <= len(word) - 2]
        if short_words:
            word = _choice(rng, short_words)
            if current_length + separator_length + len(word) <= budget - 1:
                words.append(word)
                current_length += separator_length + len(word)
        break
    return words


def _pick_pair(rng, budget: int) -> list:
    """Choose two random words, preferably fitting into `budget`."""
    first = _choice(rng, WORDS)
    second = _choice(rng, WORDS)
    attempts = 0
    while (len(first) + SEPARATOR_LENGTH + len(second) > budget
           and len(WORDS) > 1 and attempts < len(WORDS)):
        second = _choice(rng, WORDS)
        attempts += 1
    return [first, second]


def generate_memorable_password(options: PasswordOptions, rng=None) -> str:
    """Generate memorable password made of dictionary words.

    The words are joined by separators (only hyphens unless symbols
    are enabled), the first word is capitalized and up to two digits
    are appended when numbers are enabled.

    The result always has exactly `options.length` characters.
    It's truncated (possibly in the middle of a word) or padded
    by random digits or lowercase letters to achieve that.

    """
    rng = rng or random
    length = _check_length(options.length)
    numeric_reserve = NUMERIC_RESERVE if options.include_numbers else 0
    budget = length - numeric_reserve

    words = _pack_words(rng, budget)
    if len(words) < 2:
        words = _pick_pair(rng, budget)
        log.debug("Packed less than two words, using pair %r", words)

    separators = SEPARATORS if options.include_symbols else PLAIN_SEPARATORS
    password = words[0][:1].upper() + words[0][1:]
    for word in words[1:]:
        password += _choice(rng, separators) + word

    if options.include_numbers and len(password) < length:
        num_digits = min(NUMERIC_RESERVE, length - len(password))
        number = int(rng.random() * 10 ** num_digits)
        password += str(number).zfill(num_digits)

    if len(password) > length:
        log.debug("Truncating %d characters", len(password) - length)
        password = password[:length]
    elif len(password) < length:
        log.debug("Padding %d characters", length - len(password))
        padding = DIGITS if options.include_numbers else LOWERCASE
        while len(password) < length:
            password += _choice(rng, padding)
    return password


def generate_password(options: PasswordOptions, mode: str = RANDOM, rng=None) -> str:
    """Generate password using generator selected by `mode`."""
    if mode == RANDOM:
        return generate_random_password(options, rng)
    if mode == MEMORABLE:
        return generate_memorable_password(options, rng)
    raise ValueError(f"Unknown mode {mode!r}, expected one of: {', '.join(MODES)}")
