import functools
import logging
import os

from cider_github_status.credentials import github_token
from cider_github_status.notifier import StatusNotifier
from cider_github_status.product import Product
from cider_github_status.status import DEFAULT_TIMEOUT, StatusClient, TokenAuth
from cider_github_status.subscriber import Subscriber


def log_level():
    level = logging.getLevelName((os.environ.get('LOG_LEVEL') or 'INFO').strip().upper())
    if not isinstance(level, int):
        return logging.INFO

    return level


logging.basicConfig(
        level=log_level(),
        format='%(levelname)s %(name)s: %(message)s')


@functools.lru_cache(maxsize=None)
def create_notifier():
    client = StatusClient(
            TokenAuth(github_token()),
            timeout=float(os.environ.get('STATUS_TIMEOUT') or DEFAULT_TIMEOUT))

    return StatusNotifier(client, Product.from_env())


@functools.lru_cache(maxsize=None)
def create_subscriber():
    subscriber = Subscriber()
    create_notifier().subscribe(subscriber)

    return subscriber


def build_status(event, context):
    """
    Background Cloud Function to be triggered by Pub/Sub.

    Updates pull request status. Triggered by build enqueued and
    build finished messages, told apart by the topic they arrive on.
    """

    create_subscriber().dispatch(event, context)

    return "OK"


def build_enqueued(event, context):
    create_notifier().on_build_enqueued(event)

    return "OK"


def build_finished(event, context):
    create_notifier().on_build_finished(event)

    return "OK"
