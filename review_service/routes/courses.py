import logging

from flask import Blueprint, jsonify, request
from sentry_sdk import capture_exception
from werkzeug.exceptions import HTTPException

from review_service.errors import ValidationError
from review_service.extensions import content_store
from review_service.models.course import EnrichmentLevel

logger = logging.getLogger(__name__)

courses_bp = Blueprint('courses', __name__)


@courses_bp.errorhandler(ValidationError)
def handle_validation_error(e):
    return jsonify({'error': str(e)}), e.status_code


@courses_bp.errorhandler(Exception)
def handle_read_error(e):
    if isinstance(e, HTTPException):
        return e
    logger.exception("Content store read failed")
    capture_exception(e)
    return jsonify({'error': 'Error loading courses. Try again later.'}), 500


@courses_bp.route('/courses', methods=['GET'])
def list_courses():
    """
    List all courses
    ---
    tags:
      - Courses
    parameters:
      - name: enrichment
        in: query
        type: string
        enum: [none, stats, reviews]
        default: none
    responses:
      200:
        description: List of courses
      400:
        description: Unknown enrichment level
    """
    enrichment = EnrichmentLevel.parse(request.args.get('enrichment'))
    return jsonify({'data': content_store.get_courses(enrichment)}), 200


@courses_bp.route('/courses/codes', methods=['GET'])
def list_course_codes():
    """
    List every course code
    ---
    tags:
      - Courses
    responses:
      200:
        description: Course codes
    """
    return jsonify({'data': content_store.get_course_codes()}), 200


@courses_bp.route('/courses/names', methods=['GET'])
def list_course_names():
    """
    List course ids, codes and names ordered by name
    ---
    tags:
      - Courses
    responses:
      200:
        description: Course names
    """
    return jsonify({'data': content_store.get_course_names()}), 200


@courses_bp.route('/courses/<code>', methods=['GET'])
def get_course(code):
    """
    Get a single course by code, e.g. CS-1332
    ---
    tags:
      - Courses
    parameters:
      - name: code
        in: path
        type: string
        required: true
      - name: enrichment
        in: query
        type: string
        enum: [none, stats, reviews]
        default: none
    responses:
      200:
        description: Course details
      400:
        description: Malformed course code or enrichment level
      404:
        description: Course not found
    """
    enrichment = EnrichmentLevel.parse(request.args.get('enrichment'))
    course = content_store.get_course(code, enrichment)
    if not course:
        return jsonify({'error': f'Course {code} not found'}), 404
    return jsonify({'data': course}), 200


@courses_bp.route('/semesters/recent', methods=['GET'])
def list_recent_semesters():
    """
    List the most recent semesters that have started
    ---
    tags:
      - Semesters
    parameters:
      - name: limit
        in: query
        type: integer
        default: 3
    responses:
      200:
        description: Semesters, newest first
      400:
        description: Invalid limit
    """
    limit = request.args.get('limit', 3, type=int)
    if limit < 1:
        return jsonify({'error': 'limit must be a positive integer'}), 400
    return jsonify({'data': content_store.get_recent_semesters(limit)}), 200
