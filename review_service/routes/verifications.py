import logging

from flask import Blueprint, request, jsonify
from sentry_sdk import capture_exception

from review_service.extensions import verification_client
from review_service.services.verification_client import SendCodeResult

logger = logging.getLogger(__name__)

verifications_bp = Blueprint('verifications', __name__)


@verifications_bp.route('/verifications', methods=['POST'])
def send_code():
    """
    Send a verification code to a user
    ---
    tags:
      - Verifications
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - username
          properties:
            username:
              type: string
    responses:
      201:
        description: Code sent
      400:
        description: Missing or invalid username, or too many send attempts
      405:
        description: Only POST is accepted
      500:
        description: Verification provider error
    """
    data = request.get_json(silent=True)
    username = data.get('username') if isinstance(data, dict) else None

    if username is None:
        return jsonify({'error': 'Username required'}), 400

    try:
        result = verification_client.send_code(username)
    except Exception as e:
        logger.exception("Sending verification code to %s failed", username)
        capture_exception(e)
        return jsonify({'error': 'Error generating token. Try again later.'}), 500

    if result == SendCodeResult.SUCCESS:
        return jsonify({}), 201
    if result == SendCodeResult.INVALID_IDENTIFIER:
        return jsonify({'error': 'Invalid username'}), 400

    logger.warning("Verification rate limit hit for %s", username)
    return jsonify({'error': 'Too many send attempts'}), 400
