"""Registry of special forms for the lispcell evaluator.

Maps Symbols to handlers that receive their operands unevaluated. The
evaluator consults this table before resolving the head symbol; every other
form with controlled evaluation (if, define, ...) is an ordinary builtin.
"""

from lispcell.types.symbol import Symbol
from lispcell.evaluation.special_forms.quote_form import quote_form
from lispcell.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("lambda"): lambda_form,
}
