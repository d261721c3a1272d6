"""Declarative field rules for request bodies.

A rule set maps a field name to an ordered list of (predicate, message)
pairs. Every rule is evaluated, and the messages of the failing ones are
returned in declaration order.
"""

from typing import Any, Callable

from email_validator import EmailNotValidError, validate_email

Predicate = Callable[[Any], bool]
RuleSet = dict[str, list[tuple[Predicate, str]]]


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


USER_RULES: RuleSet = {
    "firstName": [
        (is_present, "Please provide a first name"),
    ],
    "lastName": [
        (is_present, "Please provide a last name"),
    ],
    "emailAddress": [
        (is_present, 'Please provide an "email" address'),
        (is_email, 'Please provide a valid "email" address'),
    ],
    "password": [
        (is_present, "Please provide a password"),
    ],
}

COURSE_RULES: RuleSet = {
    "title": [
        (is_present, "Please provide a title for the course"),
    ],
    "description": [
        (is_present, "Please provide a description for the course"),
    ],
}


def collect_errors(body: dict, rules: RuleSet) -> list[str]:
    errors = []
    for field_name, field_rules in rules.items():
        value = body.get(field_name)
        for predicate, message in field_rules:
            if not predicate(value):
                errors.append(message)
    return errors
