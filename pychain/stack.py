import logging
from wsgiref.simple_server import make_server

from . import chain
from . import common
from . import handlers as _handlers
from . import wsgi
logger = logging.getLogger(__name__)


def validate(handler):
    if handler is None:
        raise ValueError("handler cannot be None")
    if not _handlers.is_handler(handler):
        raise TypeError("{!r} has no handle(response, request, next)".format(
            handler))
    return handler


class Stack(object):
    """
    An ordered stack of handlers that runs as a single WSGI application.

    Handlers are invoked in the order they were added.  Each one decides
    whether the rest of the stack runs by calling (or not calling) `next`.

        stack = Stack(Logging())
        stack.use(Auth())

        @stack.use_handler_func
        def hello(response, request):
            response.write("Hello, World!")

        stack.run(":8080")

    Every change to the handler list rebuilds the whole chain.  Register
    handlers before serving; adding handlers while requests are being
    dispatched from other threads is not supported.

    Dispatch nests a call for every handler that calls `next`, so each one
    costs a few Python stack frames.  Stacks of a few hundred handlers that
    all continue will hit the interpreter's recursion limit.
    """
    def __init__(self, *handlers):
        self._handlers = [validate(handler) for handler in handlers]
        self._chain = chain.build(self._handlers)

    @property
    def handlers(self):
        return tuple(self._handlers)

    def use(self, handler):
        """ Add a handler to the end of the stack """
        self._handlers.append(validate(handler))
        self._chain = chain.build(self._handlers)

    def use_func(self, func):
        """ Add a `func(response, request, next)` handler function """
        self.use(_handlers.HandlerFunc(func))
        return func

    def use_handler(self, capability):
        """
        Add an object with `dispatch(response, request)`.

        The rest of the stack always runs after it.
        """
        self.use(_handlers.wrap(capability))

    def use_handler_func(self, func):
        """ Add a `func(response, request)` that always continues """
        self.use(_handlers.wrap_func(func))
        return func

    def with_handlers(self, *handlers):
        ''' New Stack with this stack's handlers followed by `handlers` '''
        return Stack(*(self._handlers + list(handlers)))

    def dispatch(self, response, request):
        self._chain(response, request)

    def wsgi_application(self, environ, start_response):
        request = wsgi.Request(environ)
        response = wsgi.Response(start_response)
        try:
            self.dispatch(response, request)
        except wsgi.RequestException as exception:
            # Defined failure case - unreadable body
            response.exception(exception)
        except Exception:
            # Unexpected failure type - don't propagate to consumers
            logger.exception("Unhandled exception during {} {}".format(
                request.method, request.path))
            response.headers = wsgi.Headers([])
            response.exception(wsgi.RequestException(wsgi.INTERNAL_ERROR))
        return response.send()

    __call__ = wsgi_application

    def server(self, *addr):
        '''
        Returns a wsgiref server bound to the detected address.

        Port 0 picks a free port; use `server.server_port` to find it.
        '''
        host, port = common.split_address(common.detect_address(*addr))
        return make_server(host, port, self)

    def run(self, *addr):
        httpd = self.server(*addr)
        logger.info("listening on {}:{}".format(*httpd.server_address[:2]))
        httpd.serve_forever()
