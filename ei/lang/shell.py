"""Handles interactive/command-line mode for the Ei interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Ei interpreter shell."""
    intro = "The Ei programming language :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self._tmp_line = ""

    def default(self, line):
        """Executes arbitrary Ei statements."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            line, add_to_prev = self.sess.preprocess_line(line, self._tmp_line)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
            else:
                self._tmp_line = ""
                self.prompt = self._tmp_prompt

                self.sess.add(line)
                self.sess.run()

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        self.stdout.write(
            "Welcome to the Ei interpreter!\n\n"
            "Ei is the larval form of a dependently-typed scripting language. For now, a \n"
            "program is a list of statements, each a string or a function call followed \n"
            "by ';'.\n\n"
            "Try it out by typing 'print_ln(\"hello\");'. This will call the native \n"
            "function 'print_ln', printing 'hello'.\n")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
