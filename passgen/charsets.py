# charsets
# (character classes and word list)
#

LOWERCASE = 'abcdefghijklmnopqrstuvwxyz'
UPPERCASE = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
DIGITS = '0123456789'
SYMBOLS = '!@#$%^&*()_+-=[]{}|;:,.<>?'

# Word separators for memorable passwords
SEPARATORS = ('-', '_', '.', '!')
PLAIN_SEPARATORS = ('-',)

CHARACTER_CLASSES = {
    'lowercase': LOWERCASE,
    'uppercase': UPPERCASE,
    'digits': DIGITS,
    'symbols': SYMBOLS,
}

# Common, easy-to-remember words.
# Order matters for reproducible output, "lighthouse" is listed twice.
WORDS = (
    'apple', 'banana', 'cherry', 'dolphin', 'elephant', 'forest', 'guitar',
    'honey', 'island', 'jelly', 'kangaroo', 'lighthouse', 'mountain', 'ocean',
    'penguin', 'quasar', 'rainbow', 'sunset', 'tiger', 'umbrella', 'volcano',
    'waterfall', 'xylophone', 'yacht', 'zebra', 'adventure', 'butterfly',
    'crystal', 'diamond', 'eclipse', 'firefly', 'galaxy', 'horizon',
    'infinity', 'journey', 'kingdom', 'lighthouse', 'midnight', 'nebula',
    'orchard', 'paradise', 'quest', 'river', 'sapphire', 'thunder',
    'universe', 'vortex', 'whisper', 'xenon', 'zenith', 'archer', 'breeze',
    'castle', 'dawn', 'echo', 'falcon', 'glacier', 'harvest', 'ivory', 'jade',
    'knight', 'lantern', 'meadow', 'nectar', 'oasis', 'phoenix', 'quartz',
    'reef', 'shadow', 'temple', 'unison', 'valley', 'willow', 'xerox',
    'yogurt', 'zephyr',
)


def classify(ch: str):
    """Return name of the character class containing `ch`, or None.

    Classes are tested in order, so '-' is reported as a symbol.

    """
    for name, chars in CHARACTER_CLASSES.items():
        if ch in chars:
            return name
    return None
