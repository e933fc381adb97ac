from datetime import datetime, timezone

from flask import Flask, request, jsonify
from werkzeug.exceptions import HTTPException
import logging

from ip_reverser import (
    UNKNOWN,
    ClientAddressHeaders,
    InvalidAddress,
    extract_client_ip,
    normalize_ip,
    reversal,
)
from ip_reverser.config import get_settings

settings = get_settings()

app = Flask(__name__)

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level))
logger = logging.getLogger(__name__)

METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'PATCH']


def client_address_headers():
    """
    Collect the proxy headers and connection address of the current request
    """
    return ClientAddressHeaders(
        forwarded=request.headers.get('X-Forwarded-For'),
        real_ip=request.headers.get('X-Real-IP'),
        remote_addr=request.remote_addr,
    )


def get_client_ip():
    """
    Get the client's real IP address, considering proxy headers
    """
    headers = client_address_headers()
    ip = extract_client_ip(headers)

    if headers.forwarded:
        logger.info(f"Found IP in X-Forwarded-For: {ip}")
    elif headers.real_ip:
        logger.info(f"Found IP in X-Real-IP: {ip}")
    else:
        logger.info(f"Using remote_addr: {ip}")
    return ip


def error_response(message, code, status, details=None):
    error = {'message': message, 'code': code}
    if details is not None:
        error['details'] = details

    response_data = {
        'success': False,
        'error': error,
        'timestamp': datetime.now(timezone.utc).isoformat(),
    }
    return jsonify(response_data), status


def reverse_client_ip(path):
    client_ip = get_client_ip()

    if not client_ip or client_ip == UNKNOWN:
        logger.warning(f"Unable to determine client IP for {path}")
        return error_response(
            'Unable to determine client IP address', 'IP_DETECTION_FAILED', 400
        )

    try:
        record = reversal(client_ip)
    except InvalidAddress:
        logger.warning(f"Detected IP is not valid: {client_ip}")
        return error_response(
            'Detected IP address is not in a valid format',
            'INVALID_DETECTED_IP',
            400,
            details={'detected_ip': client_ip},
        )

    response_data = {
        'original_ip': record.original_ip,
        'reversed_ip': record.reversed_ip,
        'method': request.method,
        'path': path,
        'user_agent': request.headers.get('User-Agent', 'Unknown')
    }

    logger.info(f"Request to {path} from {client_ip} -> Reversed: {record.reversed_ip}")

    return jsonify(response_data), 200


@app.route('/', methods=METHODS)
def handle_request():
    """
    Handle any HTTP request and return the reversed IP
    """
    return reverse_client_ip(request.path)


@app.route('/reverse', methods=['POST'])
def reverse_submitted_ip():
    """
    Reverse the IP address given in the JSON body: {"ip": "1.2.3.4"}
    """
    payload = request.get_json(silent=True) or {}
    ip = payload.get('ip') if isinstance(payload, dict) else None

    if not ip:
        return error_response('IP address is required', 'MISSING_IP', 400)

    try:
        record = reversal(ip)
    except InvalidAddress as e:
        logger.warning(f"Rejected IP {ip!r}: {e.message}")
        return error_response(
            'Invalid IP address format', e.code, 400, details={'provided_ip': ip}
        )

    response_data = dict(
        record.to_dict(),
        request_ip=normalize_ip(get_client_ip()),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )

    logger.info(f"Reversed {record.original_ip} -> {record.reversed_ip}")

    return jsonify(response_data), 201


@app.route('/health', methods=['GET'])
def health_check():
    """
    Health check endpoint for Kubernetes
    """
    return jsonify({'status': 'healthy', 'service': settings.service_name}), 200


@app.route('/<path:path>', methods=METHODS)
def catch_all(path):
    """
    Catch all other paths and still return reversed IP
    """
    return reverse_client_ip(f"/{path}")


@app.errorhandler(Exception)
def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return error_response(e.description, e.name.upper().replace(' ', '_'), e.code)

    logger.exception(f"Error processing request to {request.path}")
    return error_response('Internal server error', 'INTERNAL_ERROR', 500)


if __name__ == '__main__':
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
