"""
Recipe payload validation.

The rules are about JSON types, not coercion: ``"2"`` is not a difficulty and
``"true"`` is not a vegetarian flag, so pydantic's lax parsing is not used here.
"""
import math
from numbers import Integral, Real

from recipe_backend.utils.exceptions import ValidationError

RECIPE_FIELDS = ("name", "difficulty", "vegetarian")
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _check_vegetarian(value) -> None:
    if not isinstance(value, bool):
        raise ValidationError("vegetarian field should be boolean")


def _check_name(value) -> None:
    if value is None or value == "":
        raise ValidationError("name field can not be empty")
    if not isinstance(value, str):
        raise ValidationError("name field should be a string")
    if not value.strip():
        raise ValidationError("name field can not be empty")


def _check_difficulty(value) -> None:
    # bool là lớp con của int trong Python
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError("difficulty field should be a number")
    # BSON chỉ lưu được int 64-bit và không có JSON cho inf/nan
    if isinstance(value, Integral):
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValidationError("difficulty field should be a number")
    elif not math.isfinite(value):
        raise ValidationError("difficulty field should be a number")


_CHECKS = (
    ("vegetarian", _check_vegetarian),
    ("name", _check_name),
    ("difficulty", _check_difficulty),
)


def _ensure_object(payload) -> dict:
    # không có body thì coi như {}
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("request body should be a JSON object")
    return {k: v for k, v in payload.items() if k in RECIPE_FIELDS}


def validate_new_recipe(payload) -> dict:
    """
    Validate a create payload and return only the recipe fields.

    Every field is required; a missing field fails with that field's message.
    """
    recipe = _ensure_object(payload)
    for field, check in _CHECKS:
        check(recipe.get(field))
    return recipe


def validate_recipe_update(payload) -> dict:
    """Validate a partial update; only the supplied fields are checked."""
    changes = _ensure_object(payload)
    if not changes:
        raise ValidationError("field should not be empty")
    for field, check in _CHECKS:
        if field in changes:
            check(changes[field])
    return changes
