"""Registry of special forms for the Iota evaluator.

Maps Symbols to handler functions that implement non-standard evaluation
rules. Handlers are called as ``handler(args, env, evaluate_fn)`` with the
raw argument expressions. `iota.builtin.env_builtin.register` binds each one
into the global environment as a SPECIAL_FORM Builtin.
"""

from iota.types.symbol import Symbol
from iota.evaluation.special_forms.quote_form import quote_form
from iota.evaluation.special_forms.fn_form import fn_form
from iota.evaluation.special_forms.define_form import define_form
from iota.evaluation.special_forms.if_form import if_form
from iota.evaluation.special_forms.apply_form import apply_form
from iota.evaluation.special_forms.predicate_forms import number_p_form, symbol_p_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("fn"): fn_form,
    Symbol("def"): define_form,
    Symbol("if"): if_form,
    Symbol("apply"): apply_form,
    Symbol("number?"): number_p_form,
    Symbol("symbol?"): symbol_p_form,
}
