"""Builtin macro transformers for liswat (implemented in Python).

Transformers receive the unevaluated operand list of the macro call (a Pair,
or Nil) and return the replacement form, which the expander expands again.
"""

from liswat import SExpression
from liswat.errors import LiswatSyntaxError
from liswat.printer import stringify
from liswat.types.lambda_fn import Primitive
from liswat.types.macro_environment import MacroEnvironment
from liswat.types.nil import Nil
from liswat.types.pair import Pair, is_list, list_from, new_list
from liswat.types.symbol import BEGIN, IF, LAMBDA, Symbol

LET = Symbol("let")
LET_STAR = Symbol("let*")
AND = Symbol("and")
ELSE = Symbol("else")
# Contains a space, so no program text can read as this symbol
COND_TEST = Symbol("cond test")


def _bindings(name: str, bindings: SExpression) -> list[tuple[Symbol, SExpression]]:
    if not is_list(bindings):
        raise LiswatSyntaxError(f"{name} bindings must be a list: {stringify(bindings)}")
    result = []
    for b in bindings:
        if not isinstance(b, Pair) or len(b) != 2 or not b.is_proper() or not isinstance(b.first, Symbol):
            raise LiswatSyntaxError(f"{name} binding must be (name value): {stringify(b)}")
        result.append((b.first, b.second()))
    return result


def let_macro(args: SExpression) -> SExpression:
    """
    (let ((var1 val1) (var2 val2) ...) body...)
    => ((lambda (var1 var2 ...) body...) val1 val2 ...)
    """
    if len(args) < 2:
        raise LiswatSyntaxError(f"let requires bindings and a body: {stringify(args)}")
    pairs = _bindings("let", args.first)
    params = list_from(var for var, _ in pairs)
    fn = Pair(LAMBDA, Pair(params, args.rest))
    return Pair(fn, list_from(val for _, val in pairs))


def let_star_macro(args: SExpression) -> SExpression:
    """
    (let* ((v1 e1) (v2 e2) ...) body...)
    => (let ((v1 e1)) (let* ((v2 e2) ...) body...))
    With no bindings left it becomes a plain let.
    """
    if len(args) < 2:
        raise LiswatSyntaxError(f"let* requires bindings and a body: {stringify(args)}")
    pairs = _bindings("let*", args.first)
    if len(pairs) <= 1:
        return Pair(LET, args)
    first = args.first.first
    inner = Pair(LET_STAR, Pair(args.first.rest, args.rest))
    return new_list(LET, new_list(first), inner)


def cond_macro(args: SExpression) -> SExpression:
    """
    (cond (test expr...) ... (else expr...))
    => (if test (begin expr...) (cond ...))

    A clause with no expressions yields the value of its test. With no
    matching clause the result is ().
    """
    if args is Nil:
        return Nil
    clause = args.first
    if not isinstance(clause, Pair) or not clause.is_proper():
        raise LiswatSyntaxError(f"cond clause must be a list: {stringify(clause)}")
    test, body = clause.first, clause.rest
    rest = Pair(Symbol("cond"), args.rest)

    if test == ELSE:
        if args.rest is not Nil:
            raise LiswatSyntaxError(f"else must be the last cond clause: {stringify(args)}")
        return Pair(BEGIN, body) if body is not Nil else Nil

    if body is Nil:
        # ((lambda (t) (if t t (cond ...))) test)
        check = new_list(IF, COND_TEST, COND_TEST, rest)
        return new_list(new_list(LAMBDA, new_list(COND_TEST), check), test)
    return new_list(IF, test, Pair(BEGIN, body), rest)


def and_macro(args: SExpression) -> SExpression:
    """
    (and) => #t
    (and x) => x
    (and x y ...) => (if x (and y ...) #f)
    """
    if args is Nil:
        return True
    if args.rest is Nil:
        return args.first
    return new_list(IF, args.first, Pair(AND, args.rest), False)


def register(macro_env: MacroEnvironment) -> None:
    """Register builtin macros in the provided MacroEnvironment."""
    macro_env.define_macro(LET, Primitive("let", let_macro))
    macro_env.define_macro(LET_STAR, Primitive("let*", let_star_macro))
    macro_env.define_macro(Symbol("cond"), Primitive("cond", cond_macro))
    macro_env.define_macro(AND, Primitive("and", and_macro))
