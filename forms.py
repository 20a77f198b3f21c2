"""
Form rules for the calculator page.

Field validation lives here as a plain table so the page and the tests share
one source of truth; the calculator itself only ever sees a MetricsInput.
"""

import re
from typing import Dict, List, Mapping, Optional, Tuple

from models import Gender, MetricsInput

FIELDS = ("gender", "age", "height", "weight", "activity", "goal")

INTEGER = r"[0-9]+"
DECIMAL = r"[0-9]+[.,]*[0-9]*"

# field -> (required, pattern)
FIELD_RULES: Dict[str, Tuple[bool, Optional[str]]] = {
    "gender": (False, "|".join(g.value for g in Gender)),
    "age": (True, INTEGER),
    "height": (True, INTEGER),
    "weight": (True, DECIMAL),
    "activity": (True, None),
    "goal": (True, DECIMAL),
}

VALIDATION_MESSAGES: Dict[str, Dict[str, str]] = {
    "gender": {"pattern": "Choose woman or man"},
    "age": {"required": "Enter age", "pattern": "Only numbers"},
    "height": {"required": "Enter height", "pattern": "Only numbers"},
    "weight": {"required": "Enter weight", "pattern": "Only numbers"},
    "activity": {"required": "Enter activity"},
    "goal": {"required": "Enter goal", "pattern": "Only numbers"},
}

# (label, "<multiplier>,<extra water per week in US fl oz>")
ACTIVITY_OPTIONS: List[Tuple[str, str]] = [
    ("Sedentary (little or no exercise)", "1.2,0"),
    ("Lightly active (1-3 days/week)", "1.375,36"),
    ("Moderately active (3-5 days/week)", "1.55,72"),
    ("Very active (6-7 days/week)", "1.725,108"),
    ("Extremely active (physical job or 2x training)", "1.9,144"),
]


class FormError(ValueError):
    def __init__(self, errors: Dict[str, str]):
        super().__init__(", ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors


def _value(fields: Mapping[str, object], name: str) -> str:
    value = fields.get(name)
    return "" if value is None else str(value).strip()


def _checked(value: object) -> bool:
    return str(value or "").lower() in ("1", "true", "on", "yes")


def resolve_goal(fields: Mapping[str, object]) -> str:
    """The "use current weight" toggle turns the weight into the goal."""
    if _checked(fields.get("use_current_weight")):
        return _value(fields, "weight")
    return _value(fields, "goal")


def normalized_fields(fields: Mapping[str, object]) -> Dict[str, str]:
    values = {name: _value(fields, name) for name in FIELDS}
    values["gender"] = values["gender"] or Gender.WOMAN.value
    values["goal"] = resolve_goal(fields)
    return values


def validate_form(fields: Mapping[str, object]) -> Dict[str, str]:
    """Return one message per failing field; empty when the form is valid."""
    values = normalized_fields(fields)
    errors = {}
    for name, (required, pattern) in FIELD_RULES.items():
        value = values[name]
        messages = VALIDATION_MESSAGES[name]
        if not value:
            if required:
                errors[name] = messages["required"]
            continue
        if pattern and not re.fullmatch(pattern, value):
            errors[name] = messages["pattern"]
    return errors


def build_input(fields: Mapping[str, object]) -> MetricsInput:
    errors = validate_form(fields)
    if errors:
        raise FormError(errors)

    values = normalized_fields(fields)
    return MetricsInput(
        gender=Gender(values["gender"]),
        age=int(values["age"]),
        height=float(values["height"]),
        weight=values["weight"],
        activity_factor=values["activity"],
        goal=values["goal"],
    )
