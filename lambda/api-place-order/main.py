import logging
import os

import response_utils as resp
import request_utils as req
import validation_utils as valid
import business_logic_utils as biz

# Set up logging
logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())


@biz.handle_business_logic_error
def lambda_handler(event, context):
    """Accept a product order, validate it and confirm with an order number"""
    method = req.get_http_method(event)

    # CORS preflight
    if method == 'OPTIONS':
        return resp.preflight_response()

    if method != 'POST':
        return resp.method_not_allowed_response()

    return place_order(event)


@valid.handle_validation_error
def place_order(event):
    order_request = req.get_body_object(event)

    result = biz.get_order_manager().place_order(order_request)

    return resp.success_response({
        "message": result['message']
    })
