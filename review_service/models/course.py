import re
from enum import Enum

from review_service.errors import CourseCodeError, ValidationError

COURSE_CODE_PATTERN = re.compile(r"^(?P<department>[A-Za-z]+)-(?P<number>.+)$")


class EnrichmentLevel(Enum):
    NONE = "none"        # course fields only
    STATS = "stats"      # rating, difficulty, workload per review
    REVIEWS = "reviews"  # full reviews, body and semester included

    @classmethod
    def parse(cls, value):
        if value is None or value == "":
            return cls.NONE
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(level.value for level in cls)
            raise ValidationError(f"enrichment must be one of: {choices}") from None


def parse_course_code(code):
    """Split a course code such as ``CS-1332`` into ``(department, number)``."""
    match = COURSE_CODE_PATTERN.match(code) if isinstance(code, str) else None
    if not match:
        raise CourseCodeError(code)
    return match.group("department"), match.group("number")


def course_reviews_path(code):
    department, number = parse_course_code(code)
    return f"/courses/{department}-{number}/reviews"
