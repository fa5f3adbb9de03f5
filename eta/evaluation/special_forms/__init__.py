"""Registry of special forms for the Eta evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application, so
the head symbol of a special form is never looked up as a value.
"""

from eta.types.symbol import Symbol
from eta.evaluation.special_forms.define_form import define_form
from eta.evaluation.special_forms.lambda_form import lambda_form
from eta.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("def"): define_form,
    Symbol("func"): lambda_form,
    Symbol("lambda"): lambda_form,
    Symbol("if"): if_form,
}
