"""Handles interactive/command-line mode for the interpreter. Uses cmd as backend."""

import cmd
import os

from lcinterp.version import VERSION


class Shell(cmd.Cmd):
    """Lambda calculus interpreter shell. Only lines starting with ':' are commands, everything else is a λ-term."""
    intro = ("Lambda Calculus Interpreter\n"
             f"Version: {VERSION}\n"
             "Type :help or :h for help and information on commands")
    prompt = "λ> "
    ALIASES = {"q": "quit", "h": "help", "cls": "clear"}
    HELP_FILE = os.path.join(os.path.dirname(__file__), "help.txt")
    CLEAR = "\x1b[2J\x1b[0;0H"

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def parseline(self, line):
        """Returns (command, arg, line). command is None for λ-terms, which are handled by default."""
        line = line.strip()
        if line == "EOF":
            return "EOF", "", line
        elif not line.startswith(":"):
            return None, None, line

        command, __, arg = line[1:].partition(" ")
        return Shell.ALIASES.get(command, command), arg.strip(), line

    def default(self, line):
        """Evaluates a λ-term."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line = self.sess.preprocess_line(line)
            if not line:
                return

            self.sess.add(line, self.line_num)
            self.sess.run()

            if self.sess.results:
                print(self.sess.pop())

    def do_help(self, arg):
        """Doesnt return docs, but rather the contents of help.txt."""
        with open(Shell.HELP_FILE, "r", encoding="utf-8") as file:
            print(file.read(), end="")

    def do_clear(self, arg):
        """Clears the screen and goes back to the top."""
        print(Shell.CLEAR, end="")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_quit(arg)

    def do_quit(self, arg):
        """Exits interpreter."""
        return True
