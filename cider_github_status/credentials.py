import os


class MissingCredentials(RuntimeError):
    pass


def github_token():
    token = os.environ.get('GITHUB_TOKEN', '').strip()
    if not token:
        raise MissingCredentials("GITHUB_TOKEN is not set")

    return token
