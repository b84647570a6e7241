import requests


STATES = ('pending', 'success', 'failure', 'error')

# Commit status contexts are still behind a preview media type.
ACCEPT = 'application/vnd.github.she-hulk-preview+json'

DEFAULT_TIMEOUT = 10.0


class StatusError(RuntimeError):
    pass


class TokenAuth(requests.auth.AuthBase):
    def __init__(self, token):
        self.token = token


    def __call__(self, request):
        request.headers['Authorization'] = f'token {self.token}'
        return request


class StatusUpdate:
    def __init__(self, state, description, context, target_url=None):
        if state not in STATES:
            raise ValueError(f"Invalid commit status state {state!r}")

        self.state = state
        self.description = description
        self.context = context
        self.target_url = target_url


    def payload(self):
        payload = {
            'state': self.state,
            'description': self.description,
            'context': self.context,
            }
        if self.target_url is not None:
            payload['target_url'] = self.target_url

        return payload


class StatusClient:
    def __init__(self, auth, timeout=DEFAULT_TIMEOUT):
        self.auth = auth
        self.timeout = timeout


    def post(self, url, update):
        resp = requests.post(
                url,
                auth=self.auth,
                headers={'Accept': ACCEPT},
                json=update.payload(),
                timeout=self.timeout)

        if resp.status_code not in [200, 201]:
            raise StatusError(f"HTTP {resp.status_code} response from POST {url}")

        return resp
