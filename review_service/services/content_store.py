"""
Content Store Client — Sanity HTTP API
Writes verified reviews and serves the read-only course/semester projections.
"""

import json
import logging

import requests

from review_service.errors import UpstreamError
from review_service.models.course import EnrichmentLevel, parse_course_code

logger = logging.getLogger(__name__)

STATS_REVIEW_FIELDS = """
      "id": _id,
      "created": _createdAt,
      rating,
      difficulty,
      workload
"""

FULL_REVIEW_FIELDS = """
      ...,
      "id": _id,
      "created": _createdAt,
      semester->
"""


def review_projection(enrichment):
    """GROQ pair attaching a course's reviews, newest first."""
    if enrichment == EnrichmentLevel.NONE:
        return ""

    fields = FULL_REVIEW_FIELDS if enrichment == EnrichmentLevel.REVIEWS else STATS_REVIEW_FIELDS
    return f"""
    "reviews": *[_type == 'review' && references(^._id)]{{{fields}}} | order(created desc)
    """


class ContentStoreClient:
    def __init__(self, app=None):
        self.project_id = ""
        self.dataset = "production"
        self.api_version = "2021-10-21"
        self.token = ""
        self.use_cdn = False
        self.timeout = 10.0
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.project_id = app.config["SANITY_PROJECT_ID"]
        self.dataset = app.config["SANITY_DATASET"]
        self.api_version = app.config["SANITY_API_VERSION"]
        self.token = app.config["SANITY_API_TOKEN"]
        self.use_cdn = app.config["SANITY_USE_CDN"]
        self.timeout = app.config["HTTP_TIMEOUT"]

    def _url(self, action, cdn=False):
        host = "apicdn.sanity.io" if cdn else "api.sanity.io"
        return f"https://{self.project_id}.{host}/v{self.api_version}/data/{action}/{self.dataset}"

    def _headers(self):
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def fetch(self, query, params=None):
        """Run a GROQ query and return its ``result``."""
        query_args = {"query": query}
        for name, value in (params or {}).items():
            query_args[f"${name}"] = json.dumps(value)

        try:
            response = requests.get(
                self._url("query", cdn=self.use_cdn),
                params=query_args,
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()["result"]
        except (requests.RequestException, ValueError, KeyError) as e:
            raise UpstreamError(f"Sanity query failed: {e}") from e

    def create_review(self, review):
        payload = {"mutations": [{"create": review.to_document()}]}
        try:
            response = requests.post(
                self._url("mutate"),
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise UpstreamError(f"Sanity mutation failed: {e}") from e

        logger.info("Created review for course %s by %s", review.course_id, review.username)

    # --- Read projections ----------------------------------------------

    def get_course_codes(self):
        query = """
        *[_type == 'course'] {
            "code": department + '-' + number
        }
        """
        return self.fetch(query)

    def get_course_names(self):
        query = """
        *[_type == 'course'] {
            "id": _id,
            "code": department + '-' + number,
            name
        } | order(name)
        """
        return self.fetch(query)

    def get_recent_semesters(self, limit=3):
        query = """
        *[_type == 'semester' && startDate <= now()] {
            ...,
            "id": _id
        } | order(startDate desc)[0...$limit]
        """
        return self.fetch(query, {"limit": limit})

    def get_course(self, code, enrichment=EnrichmentLevel.NONE):
        """Single course by code, or None when nothing matches."""
        department, number = parse_course_code(code)
        query = f"""
        *[_type == 'course' && department == $department && number == $number] {{
            ...,
            "id": _id,
            "created": _createdAt,
            "code": department + "-" + number,
            {review_projection(enrichment)}
        }}[0]
        """
        return self.fetch(query, {"department": department, "number": number})

    def get_courses(self, enrichment=EnrichmentLevel.NONE):
        query = f"""
        *[_type == 'course'] {{
            ...,
            "id": _id,
            "created": _createdAt,
            "code": department + "-" + number,
            {review_projection(enrichment)}
        }}
        """
        return self.fetch(query)
