import base64
import json

import boto3
import pytest
from botocore.stub import Stubber

from email_utils import EmailSettings

ORDER_RECORD = {
    'orderNumber': 'FP1700000000123456',
    'date': '2024-03-09 07:05:03',
    'name': 'Ada <b>Obi</b>',
    'phone': '+2348012345678',
    'address': '12 Marina Road, Lagos',
    'product': 'Catfish',
    'quantity': 3.0,
    'notes': 'None',
}

EXPECTED_CORS = {
    'Access-Control-Allow-Credentials': 'true',
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET,OPTIONS,PATCH,DELETE,POST,PUT',
    'Access-Control-Allow-Headers': (
        'X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, '
        'Content-MD5, Content-Type, Date, X-Api-Version'
    ),
}

EMAIL_ENV_VARS = (
    'EMAIL_USER',
    'EMAIL_PASS',
    'EMAIL_TO',
    'EMAIL_ACCESS_KEY_ID',
    'EMAIL_REGION',
    'EMAIL_TIMEOUT_SECONDS',
)


@pytest.fixture(autouse=True)
def clean_email_env(monkeypatch):
    for name in EMAIL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def valid_order():
    return {
        'name': 'Ada Obi',
        'address': '12 Marina Road, Lagos',
        'phone': '+2348012345678',
        'product': 'catfish',
        'quantity': '3',
        'notes': 'Deliver before noon',
    }


@pytest.fixture
def email_settings():
    return EmailSettings(sender='orders@fishparque.test', secret='s3cret', recipient='owner@fishparque.test')


@pytest.fixture
def ses_stub():
    client = boto3.client(
        'ses',
        region_name='us-east-1',
        aws_access_key_id='testing',
        aws_secret_access_key='testing'
    )
    with Stubber(client) as stubber:
        yield client, stubber


def make_event(method='POST', body=None, api_version=1, base64_encoded=False):
    """API Gateway proxy event for the order route"""
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    if base64_encoded and body is not None:
        body = base64.b64encode(body.encode('utf-8')).decode('ascii')

    if api_version == 2:
        event = {
            'version': '2.0',
            'routeKey': f'{method} /api/order',
            'rawPath': '/api/order',
            'headers': {'content-type': 'application/json'},
            'requestContext': {'http': {'method': method, 'path': '/api/order'}},
        }
    else:
        event = {
            'resource': '/api/order',
            'path': '/api/order',
            'httpMethod': method,
            'headers': {'Content-Type': 'application/json'},
            'requestContext': {},
        }
    event['body'] = body
    event['isBase64Encoded'] = base64_encoded
    return event


def response_json(response):
    return json.loads(response['body'])
