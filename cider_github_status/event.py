from __future__ import annotations

import base64
import binascii
import json
from typing import Literal

import pydantic


class MalformedEvent(Exception):
    pass


class UnknownResult(MalformedEvent):
    def __init__(self, result):
        super().__init__(f"Unknown build result {result!r}")
        self.result = result


class IrrelevantEvent(Exception):
    pass


def decode(message):
    """
    Return the JSON object carried base64-encoded in a Pub/Sub message.
    """

    try:
        decoded = base64.b64decode(message['data'], validate=True).decode('utf-8')
        data = json.loads(decoded)
    except (KeyError, TypeError) as e:
        raise MalformedEvent(f"Message has no data: {e}") from e
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise MalformedEvent(f"Could not decode message data: {e}") from e

    if not isinstance(data, dict):
        raise MalformedEvent(f"Expected a JSON object, got {type(data).__name__}")

    return data


class PullRequest(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore", frozen=True)

    html_url: str
    statuses_url: str


class Event(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore")

    pull_request: PullRequest | None = None

    @classmethod
    def from_message(cls, message):
        """
        Decode and validate a build event.

        Builds not triggered by a pull request raise IrrelevantEvent
        before any other field is looked at.
        """

        data = decode(message)
        if data.get('pull_request') is None:
            raise IrrelevantEvent

        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as e:
            result = data.get('result')
            if isinstance(result, str) and any(
                    err['loc'] == ('result',) and err['type'] == 'literal_error'
                    for err in e.errors()):
                raise UnknownResult(result) from e
            raise MalformedEvent(f"Invalid {cls.__name__}: {e}") from e


class BuildEnqueuedEvent(Event):
    pass


class BuildFinishedEvent(Event):
    result: Literal['success', 'failure', 'error']
    output_url: str | None = None
    error: str = ''

    @pydantic.field_validator('error', mode='before')
    @classmethod
    def null_error(cls, value):
        return '' if value is None else value
