"""Generate inflected and derived surface forms of German nouns."""

from german_forms.data.noun_rules import DEFAULT_RULES
from german_forms.enums import FormOrigin
from german_forms.forms import FormsResult, get_forms
from german_forms.rules import RuleData, load_rule_data
from german_forms.stem import stem

__all__ = [
    "DEFAULT_RULES",
    "FormOrigin",
    "FormsResult",
    "RuleData",
    "get_forms",
    "load_rule_data",
    "stem",
]
