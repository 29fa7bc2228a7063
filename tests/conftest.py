from unittest.mock import MagicMock

import pytest


def _make_response(payload, status_code=200):
    """A stand-in for requests.Response carrying the given JSON body."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def ok_payload():
    return {
        'status': 'OK',
        'routes': [{
            'summary': 'I-90 W',
            'copyrights': 'Map data ©2024 Google',
            'legs': [{
                'duration': {'text': '15 mins', 'value': 900},
                'distance': {'text': '10.2 mi', 'value': 16400},
                'steps': [{
                    'html_instructions': '<b>Turn left</b>',
                    'duration': {'text': '1 min', 'value': 40},
                    'distance': {'text': '0.2 mi', 'value': 300},
                }],
            }],
        }],
    }


@pytest.fixture
def make_response():
    return _make_response
