import logging

from flask import Blueprint, request, jsonify
from sentry_sdk import capture_exception

from review_service.extensions import content_store, verification_client
from review_service.models import Review
from review_service.validation import validate_review_payload

logger = logging.getLogger(__name__)

reviews_bp = Blueprint('reviews', __name__)

CODE_MISMATCH = "The supplied code doesn't match the code that was sent."


@reviews_bp.route('/reviews', methods=['POST'])
def submit_review():
    """
    Submit a review confirmed by a verification code
    ---
    tags:
      - Reviews
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - courseId
            - semesterId
            - rating
            - difficulty
            - workload
            - body
            - username
            - code
          properties:
            courseId:
              type: string
            semesterId:
              type: string
            rating:
              type: number
              minimum: 1
              maximum: 5
            difficulty:
              type: number
              minimum: 1
              maximum: 5
            workload:
              type: number
              minimum: 1
              maximum: 100
            body:
              type: string
            username:
              type: string
            code:
              type: string
    responses:
      201:
        description: Review created
      400:
        description: Invalid fields or mismatched verification code
      405:
        description: Only POST is accepted
      500:
        description: Verification or content store error
    """
    payload = request.get_json(silent=True)

    errors = validate_review_payload(payload)
    if errors:
        return jsonify({'errors': errors}), 400

    username = payload['username']

    try:
        if not verification_client.does_code_match(username, payload['code']):
            logger.warning("Rejected review from %s: code mismatch", username)
            return jsonify({'errors': [CODE_MISMATCH]}), 400

        content_store.create_review(Review.from_payload(payload))
    except Exception as e:
        logger.exception("Creating review for %s failed", username)
        capture_exception(e)
        return jsonify({'errors': ['Error creating review. Try again later.']}), 500

    return jsonify({}), 201
