import os

from cider_github_status.event import UnknownResult


PENDING_DESCRIPTION = 'The build is enqueued or running'


class Product:
    """
    The build product a deployment reports statuses for.

    The name labels the status context on GitHub and prefixes the
    topics the product publishes build events on.
    """

    def __init__(self, name):
        self.name = name


    # Shared by pending and finished statuses so the finished one replaces
    # the pending one on GitHub. Older Cider deployments labelled pending
    # statuses "<name> CI".
    @property
    def context(self):
        return self.name


    @property
    def enqueued_topic(self):
        return f'{self.name.lower()}.build.enqueued'


    @property
    def finished_topic(self):
        return f'{self.name.lower()}.build.finished'


    @property
    def pending_description(self):
        return PENDING_DESCRIPTION


    @property
    def descriptions(self):
        return {
            'success': f'{self.name} build succeeded!',
            'failure': f'{self.name} build failed!',
            'error'  : f'{self.name} exploded, oops',
            }


    def describe(self, result, error=''):
        if result not in self.descriptions:
            raise UnknownResult(result)

        if result == 'error' and error:
            return error

        return self.descriptions[result]


    @classmethod
    def from_env(cls):
        return cls(os.environ.get('BUILD_PRODUCT') or 'Cider')
