"""Session control for the interpreter: evaluates expressions either in command-line mode or file interpretation
mode.
"""

from lcinterp.lang.error import GenericException
from lcinterp.pure.lexical import parse, preprocess
from lcinterp.pure.reducer import NormalOrderReducer, StepLimitExceeded


class Session:
    """Governs an interpreter session: expressions are queued with add and evaluated with run."""
    SH_FILE = "<in>"    # command-line interpreter filename
    MAX_STEPS = 10000   # beta contractions allowed per expression

    def __init__(self, error_handler, path=SH_FILE, cmd_line=True, max_steps=MAX_STEPS):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path            # used for error messages
        self.cmd_line = cmd_line    # whether or not in command-line mode
        self.max_steps = max_steps  # None means reduce until a normal form is found

        self.to_exec = {}   # dict of line num: expr to evaluate
        self.results = []   # echoed results not yet consumed by pop

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r", encoding="utf-8") as file:
                    for line_num, line in enumerate(file):
                        line = Session.preprocess_line(line)
                        if line:
                            self.add(line, line_num + 1)
            except OSError:
                raise GenericException("'{}' could not be opened", path)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line):
        """Collapses whitespace in a line from a file or command-line. Must be called before calling add."""
        return preprocess(line)

    def evaluate(self, expr):
        """Parses and normalizes expr, returning '<expr> = <normal form>'."""
        term = parse(expr)
        reducer = NormalOrderReducer(term, self.max_steps, self.error_handler)
        return f"{term} = {reducer.beta_reduce()}"

    def add(self, expr, line_num):
        """Queues expr for evaluation. Evaluation is lazy and is delayed until run is called."""
        self.to_exec[line_num] = expr

    def run(self):
        """Evaluates every queued expression in order. In file mode results are printed as soon as they are
        available, otherwise they are kept in self.results.
        """
        for line_num, expr in list(self.to_exec.items()):
            del self.to_exec[line_num]

            with self.error_handler:
                self.error_handler.register_line(self.path, expr, line_num)  # in case error is raised
                try:
                    result = self.evaluate(expr)
                except StepLimitExceeded as error:
                    self.error_handler.warn("'{}' has no beta-normal form within {} steps", [expr, str(error.steps)])
                    result = None
                self.error_handler.remove_line(self.path)

                if result is None:
                    continue
                if self.cmd_line:
                    self.results.append(result)
                else:
                    print(result)

    def pop(self):
        """Returns and removes the oldest result."""
        return self.results.pop(0)
