import logging


logger = logging.getLogger(__name__)


def topic_name(context):
    """
    Extract the topic name from the context of a Pub/Sub-triggered
    Cloud Function, whose resource is either a dict with a 'name' or
    the resource name itself, i.e. projects/<project>/topics/<topic>.
    """

    resource = getattr(context, 'resource', None)
    if isinstance(resource, dict):
        resource = resource.get('name')
    if not resource:
        return None

    return resource.rsplit('/', 1)[-1]


class Subscriber:
    def __init__(self):
        self.handlers = {}


    def subscribe(self, topic, handler):
        self.handlers[topic] = handler


    def dispatch(self, message, context):
        topic = topic_name(context)

        try:
            handler = self.handlers[topic]
        except KeyError:
            logger.warning("Ignoring message from unsubscribed topic %s", topic)
            return

        handler(message)
