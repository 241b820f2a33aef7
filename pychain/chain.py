"""
Build a linked chain of middleware from an ordered list of handlers.

handlers = [Logging(), Auth(), App()]
head = build(handlers)
head(response, request)

Calling a node runs its handler with the next node as the continuation,
so the example above runs Logging -> Auth -> App as long as each one
calls `next`.  The last node is always END, which does nothing.
"""
import logging
logger = logging.getLogger(__name__)


class End(object):
    """Terminal node.  Never calls anything further."""
    def __call__(self, response, request):
        pass

    def __repr__(self):
        return "END"

END = End()


class Middleware(object):
    """
    One link in the chain.

    Nodes are never modified after they're built; changing the handler list
    means building a new chain.
    """
    def __init__(self, handler, next):
        self.handler = handler
        self.next = next

    def __call__(self, response, request):
        self.handler.handle(response, request, self.next)

    def __repr__(self):
        return "Middleware({!r})".format(self.handler)


def build(handlers):
    """Returns the head node of a chain running `handlers` in order"""
    node = END
    for handler in reversed(handlers):
        node = Middleware(handler, node)
    logger.debug("built chain of {} handlers".format(len(handlers)))
    return node


def length(node):
    """Number of handler nodes between `node` and END"""
    n = 0
    while node is not END:
        n += 1
        node = node.next
    return n
