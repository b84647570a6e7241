import base64
import json
import types

import pytest


PULL_REQUEST = {
    'html_url': 'https://github.com/salsaflow/webapp/pull/12',
    'statuses_url': 'https://api.github.com/repos/salsaflow/webapp/statuses/d985a61daddbcd9c05a06d199efc2aeca55e4a19',
}


def encode(data):
    return {'data': base64.b64encode(json.dumps(data).encode())}


def pubsub_context(topic):
    return types.SimpleNamespace(
        event_id='1431897183428751',
        event_type='google.pubsub.topic.publish',
        resource={
            'service': 'pubsub.googleapis.com',
            'name': f'projects/my-project/topics/{topic}',
            'type': 'type.googleapis.com/google.pubsub.v1.PubsubMessage',
        })


@pytest.fixture
def enqueued_data():
    return encode({'pull_request': PULL_REQUEST})


@pytest.fixture
def finished_data():
    return encode({
        'result': 'success',
        'pull_request': PULL_REQUEST,
        'output_url': 'https://cider.example.com/builds/42/output',
    })


@pytest.fixture
def push_data():
    return encode({'result': 'success'})


@pytest.fixture
def malformed_data():
    return {'data': base64.b64encode(b'{"pull_request": ')}
