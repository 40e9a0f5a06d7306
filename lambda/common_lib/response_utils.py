import json
import logging

logger = logging.getLogger(__name__)

cors_headers = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, Content-MD5, Content-Type, Date, X-Api-Version"
}

response_headers = {
    "Content-Type": "application/json",
    **cors_headers
}

GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."


def safe_json_dumps(data):
    """Serialize a response body, stringifying unknown types"""
    return json.dumps(data, default=str)


def error_response(message, status_code=400):
    logger.info(f"Error response: {message} (status: {status_code})")

    response_body = {
        "success": False,
        "message": message
    }

    return {
        "statusCode": status_code,
        "headers": dict(response_headers),
        "body": safe_json_dumps(response_body)
    }


def success_response(data, success=True, status_code=200):
    response_body = {
        "success": success,
        **data
    }

    return {
        "statusCode": status_code,
        "headers": dict(response_headers),
        "body": safe_json_dumps(response_body)
    }


def preflight_response():
    """CORS preflight: 200 with no body"""
    return {
        "statusCode": 200,
        "headers": dict(cors_headers),
        "body": ""
    }


def method_not_allowed_response():
    return error_response("Method not allowed", 405)


def internal_error_response():
    """Generic 500; the cause is never exposed to the caller"""
    return error_response(GENERIC_ERROR_MESSAGE, 500)
