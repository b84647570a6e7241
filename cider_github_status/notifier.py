import logging

import requests

from cider_github_status.event import (
    BuildEnqueuedEvent, BuildFinishedEvent, IrrelevantEvent, MalformedEvent, UnknownResult)
from cider_github_status.status import StatusError, StatusUpdate


class StatusNotifier:
    """
    Republishes build events as pull request commit statuses.

    Each handler deals with a single Pub/Sub message and never raises:
    bad messages, builds not triggered by a pull request and failed
    status updates are logged and dropped.
    """

    def __init__(self, client, product, logger=None):
        self.client = client
        self.product = product
        self.logger = logger or logging.getLogger(__name__)


    def subscribe(self, subscriber):
        subscriber.subscribe(self.product.enqueued_topic, self.on_build_enqueued)
        subscriber.subscribe(self.product.finished_topic, self.on_build_finished)


    def on_build_enqueued(self, message):
        try:
            pr = BuildEnqueuedEvent.from_message(message).pull_request
        except MalformedEvent as e:
            self.logger.warning("Dropping ENQUEUED event: %s", e)
            return
        except IrrelevantEvent:
            self.logger.info("ENQUEUED event received, but not a pull request, skipping...")
            return

        self.logger.info("Setting status for %s to PENDING", pr.html_url)
        self.send(pr, StatusUpdate(
            state='pending',
            description=self.product.pending_description,
            context=self.product.context))


    def on_build_finished(self, message):
        try:
            event = BuildFinishedEvent.from_message(message)
        except UnknownResult as e:
            self.logger.error("Dropping FINISHED event: %s", e)
            return
        except MalformedEvent as e:
            self.logger.warning("Dropping FINISHED event: %s", e)
            return
        except IrrelevantEvent:
            self.logger.info("FINISHED event received, but not a pull request, skipping...")
            return

        pr = event.pull_request
        self.logger.info("Setting status for %s to %s", pr.html_url, event.result.upper())
        self.send(pr, StatusUpdate(
            state=event.result,
            description=self.product.describe(event.result, event.error),
            context=self.product.context,
            target_url=event.output_url))


    def send(self, pr, update):
        try:
            self.client.post(pr.statuses_url, update)
        except (StatusError, requests.RequestException) as e:
            self.logger.error("Failed to set status for %s: %s", pr.html_url, e)
