"""
Handlers are the links of a middleware chain.

Anything with a `handle(response, request, next)` method is a handler.
`next` is the rest of the chain; call `next(response, request)` to let the
request continue, or don't call it to stop here (ie. failed auth).

    class Timing(Handler):
        def handle(self, response, request, next):
            start = time.time()
            next(response, request)
            response.headers["X-Elapsed"] = str(time.time() - start)

Plain functions can be adapted with HandlerFunc (three arguments) or
wrap_func (two arguments, always continues).
"""


def is_handler(obj):
    return callable(getattr(obj, "handle", None))


class Handler(object):
    """Base handler; passes every request straight through."""
    def handle(self, response, request, next):
        next(response, request)


class HandlerFunc(Handler):
    """
    Adapt `func(response, request, next)` into a Handler.

    Can be used as a decorator:

        @HandlerFunc
        def auth(response, request, next):
            if request.headers.get("Authorization") == TOKEN:
                next(response, request)
            else:
                response.status = 401
    """
    def __init__(self, func):
        self.func = func

    def handle(self, response, request, next):
        self.func(response, request, next)

    def __repr__(self):
        return "HandlerFunc({!r})".format(self.func)


class _Wrapped(Handler):
    def __init__(self, func):
        self.func = func

    def handle(self, response, request, next):
        self.func(response, request)
        next(response, request)

    def __repr__(self):
        return "wrap({!r})".format(self.func)


def wrap(capability):
    """
    Adapt an object with `dispatch(response, request)` into a Handler.

    The rest of the chain always runs after `capability.dispatch` returns.
    Stacks have a `dispatch` method, so one stack can be nested in another.
    """
    return _Wrapped(capability.dispatch)


def wrap_func(func):
    """Adapt `func(response, request)` into a Handler that always continues"""
    return _Wrapped(func)
