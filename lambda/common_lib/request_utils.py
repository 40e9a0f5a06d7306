import base64
import json


def get_http_method(event):
    """Return the upper-cased request method for REST (v1) and HTTP (v2) API events"""
    method = event.get('httpMethod')
    if not method:
        method = ((event.get('requestContext') or {}).get('http') or {}).get('method')
    if not method:
        return None
    return str(method).upper()


def get_body(event, default=None):
    """
    Decode the JSON request body

    Returns the default when the body is absent or empty. A body that is not
    valid JSON raises ValueError so the caller can treat it as a malformed request.
    """
    body = event.get('body')
    if body is None or body == '':
        return default
    if isinstance(body, dict):
        # Direct invocation with an already-decoded payload
        return body
    if event.get('isBase64Encoded'):
        body = base64.b64decode(body).decode('utf-8')
    return json.loads(body)


def get_body_object(event):
    """Decoded body as a dict; anything other than a JSON object counts as empty"""
    body = get_body(event, {})
    if not isinstance(body, dict):
        return {}
    return body