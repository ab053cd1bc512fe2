# BaseUI, GeneratorUI
# (generator options and basic commands)
#

from pathlib import Path

from blessed import Terminal
import pyperclip

from . import pwgen
from .pwgen import PasswordOptions, ConstraintUnsatisfiable
from .charsets import classify

DATA_DIR = Path('~/.passgen')

SWITCH_ON = ('on', 'yes', 'y', 'true', '1')
SWITCH_OFF = ('off', 'no', 'n', 'false', '0')

# Terminal style by character class, lowercase letters are not styled
CLASS_STYLES = {
    'uppercase': 'bold',
    'digits': 'bright_blue',
    'symbols': 'bright_yellow',
}


def parse_switch(value: str) -> bool:
    """Convert on/off text to bool. Raises ValueError for anything else."""
    value = value.strip().lower()
    if value in SWITCH_ON:
        return True
    if value in SWITCH_OFF:
        return False
    raise ValueError(f"Expected 'on' or 'off', got {value!r}.")


def highlight(password: str, term: Terminal) -> str:
    """Color `password` characters by their class."""
    output = ''
    for ch in password:
        style = CLASS_STYLES.get(classify(ch))
        output += getattr(term, style)(ch) if style else ch
    return output


class BaseUI:

    #################
    # Other Utility #
    #################

    def _copy(self, text):
        """Wraps copy-to-clipboard function to allow overriding."""
        pyperclip.copy(text)

    def _input(self, prompt):
        """Wraps input function to allow overriding."""
        return input(prompt)

    def _ask_yesno(self, prompt) -> bool:
        """Ask `prompt` [Y/n], return answer as bool"""
        ans = self._input(prompt + " [Y/n] ")
        return len(ans) == 0 or ans.lower()[0] == 'y'


class GeneratorUI(BaseUI):

    """UI commands for tuning generator options.

    Any change of options generates and prints a new password,
    so the user always sees a password matching the current options.

    """

    def __init__(self, options=None, mode=pwgen.DEFAULT_MODE, rng=None):
        self._options = options or PasswordOptions()
        self._mode = mode
        self._rng = rng
        self._password = None
        self._term = None

    @property
    def options(self) -> PasswordOptions:
        return self._options

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def password(self):
        """Last generated password or None."""
        return self._password

    def regenerate(self) -> bool:
        """Generate new password with current options.

        Prints the reason and returns False when the options can't be met.

        """
        try:
            self._password = pwgen.generate_password(self._options, self._mode, self._rng)
        except ConstraintUnsatisfiable as e:
            self._password = None
            print(e)
            return False
        return True

    def cmd_length(self, length=None):
        """Set password length or print current length

        Recommended length is between 8 and 64 characters,
        other values must be confirmed.

        """
        if length is None:
            print(self._options.length)
            return
        try:
            length = int(length)
        except ValueError:
            return print("Invalid length:", length)
        if not pwgen.MIN_LENGTH <= length <= pwgen.MAX_LENGTH:
            if not self._ask_yesno(f"Length {length} is outside of recommended range "
                                   f"{pwgen.MIN_LENGTH}..{pwgen.MAX_LENGTH}. Continue?"):
                return
        self._update(length=length)

    def cmd_numbers(self, switch=None):
        """Include digits (on/off, toggle without argument)"""
        self._toggle('include_numbers', switch)

    def cmd_symbols(self, switch=None):
        """Include symbols (on/off, toggle without argument)

        In memorable mode, symbols are used only as word separators.

        """
        self._toggle('include_symbols', switch)

    def cmd_mode(self, mode=None):
        """Select generator mode or print current mode

        Modes:

        * ``random`` (random letters, digits and symbols)
        * ``memorable`` (dictionary words joined by separators)

        """
        if mode is None:
            print(self._mode)
            return
        candidates = [m for m in pwgen.MODES if m.startswith(mode.lower())]
        if len(candidates) != 1:
            return print("Unknown mode:", mode)
        self._mode = candidates[0]
        if self.regenerate():
            self.cmd_print()

    def cmd_generate(self, count=1) -> bool:
        """Generate and print new password(s)

        The last of the generated passwords becomes current.

        """
        try:
            count = int(count)
        except ValueError:
            print("Invalid count:", count)
            return False
        for _ in range(count):
            if not self.regenerate():
                return False
            self.cmd_print()
        return True

    def cmd_print(self):
        """Print current password"""
        if self._password is None:
            return print("No password.")
        if self._term is None:
            self._term = Terminal()
        print(highlight(self._password, self._term))

    def cmd_copy(self):
        """Copy current password to clipboard"""
        if self._password is None:
            return print("No password.")
        try:
            self._copy(self._password)
        except pyperclip.PyperclipException as e:
            return print("Copy failed:", e)
        print("Copied to clipboard.")

    def cmd_options(self):
        """Print current generator options"""
        def fmt(flag):
            return 'on' if flag else 'off'
        print(f"mode: {self._mode}, length: {self._options.length}, "
              f"numbers: {fmt(self._options.include_numbers)}, "
              f"symbols: {fmt(self._options.include_symbols)}")

    def _toggle(self, field, switch):
        if switch is None:
            value = not getattr(self._options, field)
        else:
            try:
                value = parse_switch(switch)
            except ValueError as e:
                return print(e)
        self._update(**{field: value})

    def _update(self, **changes):
        self._options = self._options._replace(**changes)
        if self.regenerate():
            self.cmd_print()
