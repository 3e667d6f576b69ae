"""Registry of special forms for the tinylisp evaluator.

Special forms are a closed set, recognised by the name of the head symbol
before any binding is consulted. The evaluator checks this table before
ordinary function application.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.special_forms.quote_form import quote_form
from tinylisp.evaluation.special_forms.if_form import if_form
from tinylisp.evaluation.special_forms.lambda_form import lambda_form
from tinylisp.evaluation.special_forms.defun_form import defun_form


class SpecialForm(Enum):
    QUOTE = "quote"
    IF = "if"
    LAMBDA = "lambda"
    DEFUN = "defun"


# Dispatch order matches declaration order above.
SPECIAL_FORMS = {
    SpecialForm.QUOTE: quote_form,
    SpecialForm.IF: if_form,
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.DEFUN: defun_form,
}

_BY_NAME = {form.value: form for form in SpecialForm}


def special_form_for(head) -> Optional[SpecialForm]:
    """Return the special form named by `head`, or None for an application."""
    if isinstance(head, Symbol):
        return _BY_NAME.get(head.name)
    return None
