from review_service.models.course import EnrichmentLevel, parse_course_code
from review_service.models.review import Review
