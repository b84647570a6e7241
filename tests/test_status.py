import pytest
import requests

from cider_github_status import status
from cider_github_status.status import StatusClient, StatusError, StatusUpdate, TokenAuth


URL = 'https://api.github.com/repos/salsaflow/webapp/statuses/d985a61daddbcd9c05a06d199efc2aeca55e4a19'


class MockResponse:
    def __init__(self, status_code):
        self.status_code = status_code


@pytest.fixture
def update():
    return StatusUpdate(
        state='success',
        description='Cider build succeeded!',
        context='Cider',
        target_url='https://cider.example.com/builds/42/output')


def test_payload(update):
    assert update.payload() == {
        'state': 'success',
        'description': 'Cider build succeeded!',
        'context': 'Cider',
        'target_url': 'https://cider.example.com/builds/42/output',
    }


def test_payload_without_target_url():
    update = StatusUpdate(state='pending', description='', context='Cider')

    assert 'target_url' not in update.payload()


def test_invalid_state():
    with pytest.raises(ValueError, match='cancelled'):
        StatusUpdate(state='cancelled', description='', context='Cider')


def test_post(mocker, update):
    mocker.patch('requests.post', return_value=MockResponse(201))
    auth = TokenAuth('s3cr3t')

    StatusClient(auth, timeout=5).post(URL, update)

    status.requests.post.assert_called_once_with(
        URL,
        auth=auth,
        headers={'Accept': 'application/vnd.github.she-hulk-preview+json'},
        json=update.payload(),
        timeout=5)


def test_post_rejected(mocker, update):
    mocker.patch('requests.post', return_value=MockResponse(403))

    with pytest.raises(StatusError, match="HTTP 403 response from POST " + URL):
        StatusClient(TokenAuth('wrong')).post(URL, update)


def test_post_network_error(mocker, update):
    mocker.patch('requests.post', side_effect=requests.ConnectionError('Connection refused'))

    with pytest.raises(requests.RequestException):
        StatusClient(TokenAuth('s3cr3t')).post(URL, update)


def test_token_auth():
    request = requests.Request('POST', URL, auth=TokenAuth('s3cr3t')).prepare()

    assert request.headers['Authorization'] == 'token s3cr3t'
