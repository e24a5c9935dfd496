"""Special forms for the lispy evaluator.

Maps Symbols to native procedures that control their own operand evaluation.
The evaluator does not consult this table: `register` installs it into the
root environment, where these entries are looked up like any other binding.
"""

from lispy.types.symbol import Symbol
from lispy.evaluation.special_forms.quote_forms import quote_form
from lispy.evaluation.special_forms.if_form import if_form
from lispy.evaluation.special_forms.define_form import define_form
from lispy.evaluation.special_forms.set_form import set_form, setq_form
from lispy.evaluation.special_forms.lambda_form import lambda_form
from lispy.evaluation.special_forms.eval_form import eval_form
from lispy.evaluation.special_forms.env_form import env_form
from lispy.evaluation.special_forms.progn_form import progn_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("setq"): setq_form,
    Symbol("lambda"): lambda_form,
    Symbol("eval"): eval_form,
    Symbol("env"): env_form,
    Symbol("progn"): progn_form,
    Symbol("begin"): progn_form,
}
