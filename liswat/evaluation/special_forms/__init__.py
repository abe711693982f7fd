"""Registry of core forms for the liswat evaluator.

Maps keyword Symbols to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary procedure
application. Every handler takes (tail, env, evaluate_fn), where tail is the
unevaluated list of operands.
"""

from liswat.types.symbol import (
    APPEND,
    BEGIN,
    CONS,
    DEFINE,
    DEFINE_SYNTAX,
    IF,
    LAMBDA,
    QUASIQUOTE,
    QUOTE,
    SET,
    UNQUOTE,
    UNQUOTE_SPLICING,
)
from liswat.evaluation.special_forms.quote_forms import (
    quote_form,
    quasiquote_form,
    unquote_form,
    unquote_splice_form,
)
from liswat.evaluation.special_forms.if_form import if_form
from liswat.evaluation.special_forms.define_form import define_form, define_syntax_form
from liswat.evaluation.special_forms.set_form import set_form
from liswat.evaluation.special_forms.lambda_form import lambda_form
from liswat.evaluation.special_forms.begin_form import begin_form
from liswat.evaluation.special_forms.list_forms import append_form, cons_form

SPECIAL_FORMS = {
    QUOTE: quote_form,
    QUASIQUOTE: quasiquote_form,
    UNQUOTE: unquote_form,
    UNQUOTE_SPLICING: unquote_splice_form,
    IF: if_form,
    DEFINE: define_form,
    DEFINE_SYNTAX: define_syntax_form,
    SET: set_form,
    LAMBDA: lambda_form,
    BEGIN: begin_form,
    CONS: cons_form,
    APPEND: append_form,
}
