"""
Field rules for review submissions.

Every rule is checked against the payload and all violations are returned
together, so the client can fix every field in one round trip.
"""

import math


def _is_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


class FieldRule:
    def __init__(self, field, kind, minimum=None, maximum=None):
        self.field = field
        self.kind = kind
        self.minimum = minimum
        self.maximum = maximum

    def check(self, payload):
        """Return the violation message for this field, or None."""
        if self.field not in payload:
            return f"{self.field} is required"

        value = payload[self.field]
        if self.kind == "string":
            if not isinstance(value, str):
                return f"{self.field} must be a string"
            return None

        if not _is_number(value):
            return f"{self.field} must be a number"
        if not self.minimum <= value <= self.maximum:
            return f"{self.field} must be between {self.minimum} and {self.maximum}"
        return None


REVIEW_RULES = (
    FieldRule("courseId", "string"),
    FieldRule("semesterId", "string"),
    FieldRule("rating", "number", 1, 5),
    FieldRule("difficulty", "number", 1, 5),
    FieldRule("workload", "number", 1, 100),
    FieldRule("body", "string"),
    FieldRule("username", "string"),
    FieldRule("code", "string"),
)


def validate_review_payload(payload, rules=REVIEW_RULES):
    if not isinstance(payload, dict):
        return ["request body must be a JSON object"]

    errors = []
    for rule in rules:
        message = rule.check(payload)
        if message:
            errors.append(message)
    return errors
