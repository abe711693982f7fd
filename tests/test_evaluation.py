import pytest

from liswat import interpret, stringify
from liswat.errors import (
    ErrorKind,
    LiswatArityError,
    LiswatError,
    LiswatLexError,
    LiswatNotApplicable,
    LiswatNumberRange,
    LiswatSyntaxError,
    LiswatTypeError,
    LiswatUndefinedVariable,
)
from liswat.evaluation.evaluator import evaluate
from liswat.reader.parser import parse
from liswat.types.environment import Environment
from liswat.types.lambda_fn import Lambda
from liswat.types.nil import Nil
from liswat.types.symbol import Symbol


# -----------------------------------------------------
# Core forms through the full pipeline
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", "1"),
        ("(if #f 1 2)", "2"),
        ("(if #f 1)", "()"),
        ("(if '() 1 2)", "1"),
        ("(if 0 1 2)", "1"),
        ("(begin (define foo 123) (set! foo 456) foo)", "456"),
        ("(begin (define foo 123) foo)", "123"),
        ("(begin (define foo (quote foo)) foo)", "foo"),
        ("(define fun (lambda (x) (if x 'foo 'bar)))\n(fun #t)\n", "foo"),
        ("(define fun (lambda (x) (if x 'foo 'bar)))\n(fun #f)\n", "bar"),
        ("(quote abc)", "abc"),
        ("'(1 (2 . 3) #(4))", "(1 (2 . 3) #(4))"),
        ("(begin)", "()"),
        ("(define x 1)", "()"),
        ("", "()"),
        ("1 2 3", "3"),
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 '())", "(1)"),
        ("(append '(1 2) '(3) '() '(4 5))", "(1 2 3 4 5)"),
        ("(append '(1) 2)", "(1 . 2)"),
        ("(append)", "()"),
        ("(define x 2) `(1 ,x ,@(list 3 4) 5)", "(1 2 3 4 5)"),
        ("`(1 . ,(+ 1 1))", "(1 . 2)"),
        ("((lambda () 7))", "7"),
        ("((lambda args args) 1 2 3)", "(1 2 3)"),
        ("(define (f . args) args) (f)", "()"),
        ("(define (add a b) (+ a b)) (add 2 3)", "5"),
        ("(define (f) 1 2 3) (f)", "3"),
    ],
)
def test_interpret(source, expected):
    assert stringify(interpret(source)) == expected


def test_if_no_alternate_returns_nil():
    assert interpret("(if #f 1)") is Nil


def test_quoted_keyword_is_not_applicable():
    with pytest.raises(LiswatNotApplicable) as excinfo:
        interpret("((quote if) #f 1 2)")
    assert "is not applicable" in str(excinfo.value)
    assert excinfo.value.kind is ErrorKind.NOT_APPLICABLE


@pytest.mark.parametrize(
    "source,error,message",
    [
        ("(1 2 3)", LiswatNotApplicable, "1 is not applicable"),
        ('("f")', LiswatNotApplicable, '"f" is not applicable'),
        ("undefined-thing", LiswatUndefinedVariable, "undefined variable: undefined-thing"),
        ("(set! nope 1)", LiswatUndefinedVariable, "nope"),
        ("if", LiswatSyntaxError, "syntactic keyword used as a variable"),
        ("(list cons)", LiswatSyntaxError, "syntactic keyword used as a variable"),
        ("((lambda (x) x))", LiswatArityError, "expected 1 argument(s) but got 0"),
        ("((lambda (x) x) 1 2)", LiswatArityError, "expected 1 argument(s) but got 2"),
        ("((lambda (a b) a) 1)", LiswatArityError, "expected 2 argument(s) but got 1"),
        ("((lambda (a . rest) rest) 1 2 3)", LiswatSyntaxError, "lambda arguments must be symbols"),
        ("(define (f a . rest) rest) (f 1)", LiswatSyntaxError, "lambda arguments must be symbols"),
        ("((lambda (if) 1) 5)", LiswatSyntaxError, "lambda arguments must be symbols"),
        ("(lambda (if) if)", LiswatSyntaxError, "lambda arguments must be symbols"),
        ("(append 1 '(2))", LiswatTypeError, "append requires proper lists"),
        ("(cons 1)", LiswatSyntaxError, "cons requires 2 arguments"),
        ("(1 2", LiswatLexError, "unexpected EOF in list"),
        ("(if)", LiswatSyntaxError, "if too many/few arguments"),
    ],
)
def test_interpret_errors(source, error, message):
    with pytest.raises(error) as excinfo:
        interpret(source)
    assert message in str(excinfo.value)


def test_errors_share_base_class():
    with pytest.raises(LiswatError):
        interpret("(car 1)")


def test_division_by_zero_propagates():
    with pytest.raises(ZeroDivisionError):
        interpret("(/ 1 0)")


def test_forms_before_an_error_take_effect(bare):
    with pytest.raises(LiswatUndefinedVariable):
        bare.interpret("(define a 1) (define b 2) oops (define c 3)")
    assert bare.env.find(Symbol("a")) == 1
    assert bare.env.find(Symbol("b")) == 2
    assert bare.env.find(Symbol("c")) is None


def test_forms_are_evaluated_before_later_text_is_read(bare):
    # the define runs before the reader reaches the malformed token
    with pytest.raises(LiswatLexError):
        bare.interpret("(define a 1) 0a")
    assert bare.env.find(Symbol("a")) == 1


def test_definitions_persist_across_calls(bare):
    bare.interpret("(define (square x) (* x x))")
    assert bare.interpret("(square 12)") == 144


def test_module_interpret_uses_fresh_interpreter():
    interpret("(define leaked 1)")
    with pytest.raises(LiswatUndefinedVariable):
        interpret("leaked")


# -----------------------------------------------------
# Closures and environments
# -----------------------------------------------------

def test_closure_captures_frame(bare):
    bare.interpret("""
        (define (make-counter)
          (define n 0)
          (lambda () (set! n (+ n 1)) n))
        (define c1 (make-counter))
        (define c2 (make-counter))
        (c1) (c1)
    """)
    assert bare.interpret("(c1)") == 3
    assert bare.interpret("(c2)") == 1


def test_closures_share_a_frame(bare):
    bare.interpret("""
        (define (make-cell v)
          (cons (lambda () v) (lambda (x) (set! v x))))
        (define cell (make-cell 1))
    """)
    bare.interpret("((cdr cell) 42)")
    assert bare.interpret("((car cell))") == 42


def test_lexical_scope(bare):
    bare.interpret("(define x 'global) (define (get-x) x)")
    assert bare.interpret("((lambda (x) (get-x)) 'local)") == Symbol("global")


def test_define_inside_lambda_is_local(bare):
    bare.interpret("(define x 1) (define (f) (define x 2) x)")
    assert bare.interpret("(f)") == 2
    assert bare.interpret("x") == 1


def test_recursion(bare):
    bare.interpret("(define (fact n) (if (<= n 1) 1 (* n (fact (- n 1)))))")
    assert bare.interpret("(fact 20)") == 2432902008176640000
    with pytest.raises(LiswatNumberRange, match=r"integer overflow in \*"):
        bare.interpret("(fact 21)")


def test_deep_recursion(bare):
    bare.interpret("(define (count n) (if (= n 0) 0 (+ 1 (count (- n 1)))))")
    assert bare.interpret("(count 500)") == 500


def test_recursion_past_the_limit_raises(bare):
    bare.interpret("(define (count n) (if (= n 0) 0 (+ 1 (count (- n 1)))))")
    with pytest.raises(RecursionError):
        bare.interpret("(count 100000)")


def test_shared_structure(bare):
    bare.interpret("(define a '(1 2)) (define b (cons 0 a)) (set-car! a 10)")
    assert stringify(bare.interpret("b")) == "(0 10 2)"
    # append copies all but the last list
    bare.interpret("(define c (append a a))")
    bare.interpret("(set-car! a 99)")
    assert stringify(bare.interpret("c")) == "(10 2 99 2)"


# -----------------------------------------------------
# The evaluator on its own
# -----------------------------------------------------

@pytest.fixture
def env():
    env = Environment()
    env.define(Symbol("x"), 42)
    return env


def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate("hello", env) == "hello"
    assert evaluate(True, env) is True
    assert evaluate(Nil, env) is Nil
    assert evaluate([1, 2], env) == [1, 2]


def test_symbol_lookup(env):
    assert evaluate(Symbol("x"), env) == 42
    with pytest.raises(LiswatUndefinedVariable):
        evaluate(Symbol("z"), env)


def test_lambda_value(env):
    fn = evaluate(parse("(lambda (a) x)"), env)
    assert isinstance(fn, Lambda)
    assert fn.env is env
    assert stringify(fn.params) == "(a)"


@pytest.mark.parametrize(
    "source,message",
    [
        ("(quasiquote x)", "quasiquote must be expanded"),
        ("(unquote x)", "unquote not valid outside of quasiquote"),
        ("(unquote-splicing x)", "unquote-splicing not valid outside of quasiquote"),
        ("(define-syntax m x)", "define-syntax only allowed at top level"),
        ("(set! 1 2)", "can only set! a symbol"),
        ("(define 1 2)", "can define only a symbol"),
        ("(quote)", "quote requires datum"),
        ("(lambda (x))", "lambda requires 2+ arguments"),
    ],
)
def test_unexpanded_forms_fail_in_evaluator(env, source, message):
    with pytest.raises(LiswatSyntaxError) as excinfo:
        evaluate(parse(source), env)
    assert message in str(excinfo.value)


def test_unexpanded_dotted_parameters_fail_when_called(env):
    fn = evaluate(parse("(lambda (a . b) a)"), env)
    with pytest.raises(LiswatSyntaxError, match="lambda arguments must be symbols"):
        fn.extend_env(parse("(1 2)"))



def test_unexpanded_if_without_alternate(env):
    assert evaluate(parse("(if #f 1)"), env) is Nil
