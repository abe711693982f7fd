from __future__ import annotations

import logging
import sys
from typing import Literal, TextIO

from liswat import LispValue
from liswat import config
from liswat.builtin.env_builtin import register
from liswat.builtin.macro_builtin import register as register_macros
from liswat.evaluation.evaluator import evaluate
from liswat.evaluation.expander import expand
from liswat.printer import stringify
from liswat.reader.lexer import lex
from liswat.reader.parser import TokenStream
from liswat.types.environment import Environment
from liswat.types.macro_environment import MacroEnvironment
from liswat.types.nil import Nil
from liswat.types.symbol import EOF_OBJECT

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading, expanding and evaluating liswat code.
    Maintains an Environment and MacroEnvironment across calls, so
    definitions and macros from one call are visible to the next.

    Evaluation recurses on the Python stack and each nested liswat call
    takes several Python frames. With the default LISWAT_RECURSION_LIMIT
    of 10000 non-tail recursion is good for roughly 1500 levels; past the
    limit Python's RecursionError propagates to the caller.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        stdout: TextIO | None = None,
    ):
        limit = config.get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()
        register(self.env, stdout)

        self.macros: MacroEnvironment = MacroEnvironment()
        register_macros(self.macros)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude()
        elif prelude:
            self.eval_prelude(prelude)

    def load_prelude(self) -> None:
        """Evaluate each configured prelude file that exists, in order."""
        for path in config.get_prelude_files():
            if not path.exists():
                logger.warning("prelude file not found: %s", path)
                continue
            logger.debug("loading prelude %s", path)
            self.eval_prelude(path.read_text(encoding='utf-8'))

    def eval_prelude(self, code: str) -> None:
        self.interpret(code)

    def interpret(self, code: str) -> LispValue:
        """Read, expand and evaluate each form of `code` in turn.

        Forms are read one at a time, so a form is evaluated before the text
        after it is tokenized. Returns the value of the last form, or () when
        there are none. The first error is raised and stops processing; forms
        before it have already taken effect.
        """
        stream = TokenStream(lex(code))
        result: LispValue = Nil
        while (expr := stream.parse_expr()) is not EOF_OBJECT:
            expanded = expand(expr, self.env, self.macros, toplevel=True)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("read %s => %s", stringify(expr), stringify(expanded))
            result = evaluate(expanded, self.env)
        return result


def interpret(code: str) -> LispValue:
    """Evaluate `code` in a fresh Interpreter and return the last value."""
    return Interpreter().interpret(code)
