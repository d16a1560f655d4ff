import json
import logging

from flask import Blueprint, current_app, request, jsonify
from sentry_sdk import capture_exception

from review_service.extensions import revalidator
from review_service.models.course import course_reviews_path
from review_service.services.webhook_signature import SIGNATURE_HEADER_NAME, is_valid_signature

logger = logging.getLogger(__name__)

webhooks_bp = Blueprint('webhooks', __name__)


@webhooks_bp.route('/webhooks/content', methods=['POST'])
def content_webhook():
    """
    Revalidate a course's review page after Sanity reports a review change
    ---
    tags:
      - Webhooks
    parameters:
      - in: header
        name: sanity-webhook-signature
        type: string
        required: true
    responses:
      200:
        description: Path revalidated
      401:
        description: Missing or invalid signature
      500:
        description: Payload could not be parsed or revalidation failed
    """
    signature = request.headers.get(SIGNATURE_HEADER_NAME)
    if signature is None:
        logger.warning("Content webhook without signature header")
        return jsonify({'error': 'Invalid signature'}), 401

    # Signature covers the exact bytes sent, so read before any parsing
    body = request.get_data(as_text=True)

    if not is_valid_signature(body, signature, current_app.config['SANITY_WEBHOOK_SECRET']):
        logger.warning("Content webhook with invalid signature")
        return jsonify({'error': 'Invalid signature'}), 401

    try:
        payload = json.loads(body)
        revalidator.revalidate(course_reviews_path(payload['course']['code']))
    except Exception as e:
        logger.exception("Revalidating after content webhook failed")
        capture_exception(e)
        return jsonify({'error': 'Error revalidating. Try again later.'}), 500

    return jsonify({'revalidated': True}), 200
