# ShellUI
# (shell-like user interface)
#

import textwrap
from inspect import signature

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.completion import WordCompleter, NestedCompleter

from .ui import GeneratorUI
from . import pwgen


class BaseInput:

    def __init__(self, placeholder=None):
        self._session = PromptSession(
            complete_while_typing=True,
            placeholder=FormattedText([('bold ansiblack', placeholder)]) if placeholder else None
        )
        self._completer = None

    def input(self, prompt):
        """Input with completion and history."""
        return self._session.prompt(FormattedText([('bold', prompt)]),
                                    completer=self._completer)


class NestedOptions(dict):

    """A fake dictionary that supports partial keys.

    `get(key)` returns value also for `key` that is not contained in dict, but:
    * is a prefix of another key
    * is unique prefix, i.e. only a single key matches

    This is used to persuade NestedCompleter to allow prefix shortcuts.

    """

    def __init__(self, options):
        dict.__init__(self, {k: None for k in options})

    def get(self, key, default=None):
        candidates = tuple(k for k in self.keys() if k.startswith(key.lower()))
        if len(candidates) == 1:
            return self[candidates[0]]
        return default


class ShellInput(BaseInput):

    def __init__(self, commands):
        BaseInput.__init__(self, placeholder='# help')
        completions = NestedOptions(commands)
        switches = WordCompleter(['on', 'off'])
        completions['numbers'] = switches
        completions['symbols'] = switches
        completions['mode'] = WordCompleter(list(pwgen.MODES))
        completions['help'] = WordCompleter(list(commands))
        self._completer = NestedCompleter(completions)


class ShellUI(GeneratorUI):

    """Shell allows user type and execute commands.

    Uses prompt_toolkit for tab-completion and history.

    The entry point is :meth:`start`.

    """

    def __init__(self, options=None, mode=pwgen.DEFAULT_MODE, rng=None):
        super().__init__(options, mode, rng)
        self._commands = []
        self._command_map = {}  # name: (func, params)
        self._fill_commands()
        self._quit = False

    def start(self):
        """Start the shell. Returns when done."""
        self.cmd_options()
        if self.regenerate():
            self.cmd_print()
        try:
            self.mainloop()
        except (KeyboardInterrupt, EOFError):
            # Ctrl-C, Ctrl-D
            pass

    def mainloop(self):
        """The main loop."""
        session = ShellInput(self._commands)
        while not self._quit:
            cmdline = session.input("> ")
            if not cmdline.strip():
                continue
            command, *args = cmdline.split(None, 1)
            func = None
            params = []
            if command in self._commands:
                func, params = self._command_map[command]
            else:
                filtered = self._filter_commands(command)
                if len(filtered) == 1:
                    func, params = self._command_map[filtered[0]]
            if func:
                try:
                    if len(params) > 1 and len(args):
                        args = args[0].split(None, len(params)-1)
                    func(*args)
                except KeyboardInterrupt:
                    print("^C")
                except TypeError as e:
                    print(e)
            else:
                print("Unknown command. Try 'help'.")

    def cmd_quit(self):
        """Quit the shell"""
        self._quit = True

    def cmd_help(self, command=None):
        """Print list of all commands or full help for a command"""
        filtered_commands = []
        if command:
            filtered_commands = self._filter_commands(command)
            if len(filtered_commands) == 0:
                print("Not found.")
                return
            if len(filtered_commands) == 1:
                command = filtered_commands[0]
                self._print_help(command, full=True)
                return
        for command in (filtered_commands or self._commands):
            self._print_help(command)

    def _fill_commands(self):
        """Gather all commands and their signatures into `_command_map`.

        Commands are all methods beginning with prefix 'cmd_'.

        """
        self._commands = [name[4:] for name in dir(self)
                          if name.startswith('cmd_')]
        for command in self._commands:
            func = getattr(self, 'cmd_' + command)
            params = list(signature(func).parameters.values())
            self._command_map[command] = (func, params)

    def _filter_commands(self, start_text):
        return sorted(name for name in self._commands
                      if name.startswith(start_text))

    def _input(self, prompt=None):
        """Override input function to add some convenience."""
        return BaseInput().input(prompt)

    def _print_help(self, command, full=False):
        """Print help text for a `command` as found in docstring.

        Prints only one-line summary by default.
        Enable `full` to print full help text.

        """
        func, params = self._command_map[command]
        params_str = ' '.join(
            ('%s' if p.default == p.empty else '[%s]') % p.name
            for p in params)
        docstring = func.__doc__ + '\n'
        docshort, docrest = docstring.split('\n', 1)
        print(command.ljust(10),
              params_str.ljust(12),
              docshort.strip())
        if full and docrest:
            print('\n', textwrap.dedent(docrest).strip(), sep='')
