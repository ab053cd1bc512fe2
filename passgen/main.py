import sys
import argparse
import configparser
import logging
from pathlib import Path

from . import pwgen, shell, ui
from .pwgen import PasswordOptions

log = logging.getLogger(__name__)


class Config:

    """Generator defaults loaded from INI file.

    All keys are optional and belong to section ``[passgen]``::

        [passgen]
        mode = random
        length = 20
        numbers = on
        symbols = off
        count = 5

    """

    def __init__(self, config_file):
        self._values = {}
        self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        log.debug("Loading config %r", str(config_file))
        config = configparser.ConfigParser()
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != 'passgen':
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                try:
                    if key in ('length', 'count'):
                        self._values[key] = section.getint(key)
                    elif key in ('numbers', 'symbols'):
                        self._values[key] = section.getboolean(key)
                    elif key == 'mode':
                        if section[key] not in pwgen.MODES:
                            raise ValueError(f"Unknown mode {section[key]!r}")
                        self._values[key] = section[key]
                    else:
                        print(f"WARNING: unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
                except ValueError as e:
                    print(f"WARNING: invalid value of [{section.name!r}] {key!r} in config "
                          f"{str(config_file)!r}: {e}")

    def _get(self, key, override, default):
        if override is not None:
            return override
        return self._values.get(key, default)

    def options(self, length=None, numbers=None, symbols=None) -> PasswordOptions:
        """Build generator options, arguments override config values."""
        defaults = PasswordOptions()
        return PasswordOptions(
            length=self._get('length', length, defaults.length),
            include_numbers=self._get('numbers', numbers, defaults.include_numbers),
            include_symbols=self._get('symbols', symbols, defaults.include_symbols))

    def mode(self, override=None) -> str:
        return self._get('mode', override, pwgen.DEFAULT_MODE)

    def count(self, override=None) -> int:
        return self._get('count', override, 1)


def run_gen(config_file, length, numbers, symbols, mode, count, copy):
    cfg = Config(config_file)
    gen_ui = ui.GeneratorUI(cfg.options(length, numbers, symbols), cfg.mode(mode))
    if not gen_ui.cmd_generate(cfg.count(count)):
        return 1
    if copy:
        gen_ui.cmd_copy()
    return 0


def run_shell(config_file, length, numbers, symbols, mode):
    cfg = Config(config_file)
    shell_ui = shell.ShellUI(cfg.options(length, numbers, symbols), cfg.mode(mode))
    shell_ui.start()
    return 0


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="passgen",
                                 description="Random and memorable password generator",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('-v', '--verbose', action='store_true',
                    help="print debug messages")

    # Sub-commands
    sp = ap.add_subparsers()
    ap_gen = sp.add_parser("gen", aliases=['g'],
                           help="generate password(s) and print them (default)")
    ap_gen.set_defaults(func=run_gen)
    ap_shell = sp.add_parser("shell", aliases=['sh'],
                             help="start shell for tuning the options interactively")
    ap_shell.set_defaults(func=run_shell)

    for subparser in (ap_gen, ap_shell):
        subparser.add_argument('-c', '--config', dest='config_file',
                               default=ui.DATA_DIR / 'passgen.conf',
                               help="config file (default: %(default)s)")
        subparser.add_argument('-l', '--length', dest='length', type=int,
                               help=f"password length (default: {pwgen.DEFAULT_LENGTH})")
        mode_grp = subparser.add_mutually_exclusive_group()
        mode_grp.add_argument('-m', '--memorable', dest='mode', action='store_const',
                              const=pwgen.MEMORABLE,
                              help="generate memorable password from words (default)")
        mode_grp.add_argument('-r', '--random', dest='mode', action='store_const',
                              const=pwgen.RANDOM,
                              help="generate random password")
        for name, short, what in (('numbers', '-n', "digits"),
                                  ('symbols', '-s', "symbols")):
            grp = subparser.add_mutually_exclusive_group()
            grp.add_argument(short, f'--{name}', dest=name, action='store_const', const=True,
                             help=f"include {what} (default)")
            grp.add_argument(f'--no-{name}', dest=name, action='store_const', const=False,
                             help=f"do not include {what}")

    ap_gen.add_argument('-N', '--count', dest='count', type=int,
                        help="number of passwords to generate (default: 1)")
    ap_gen.add_argument('--copy', action='store_true',
                        help="copy the (last) password to clipboard")

    args = ap.parse_args(args=argv)

    if 'func' not in args:
        ap_gen.parse_args(args=[], namespace=args)

    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit code
    """
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(levelname)s %(name)s: %(message)s')
    run_func = args.func
    delattr(args, 'func')
    delattr(args, 'verbose')
    return run_func(**vars(args))


if __name__ == '__main__':
    sys.exit(main())
