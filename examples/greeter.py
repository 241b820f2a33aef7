"""
Greets callers who present the right token.

    $ PORT=9000 python examples/greeter.py
    $ curl -H "Authorization: Bearer hunter2" localhost:9000/?name=Joe
"""
import logging
import time
from urllib.parse import parse_qs

import pychain

TOKEN = "Bearer hunter2"
stack = pychain.Stack()


class Timing(pychain.Handler):
    def handle(self, response, request, next):
        start = time.time()
        next(response, request)
        response.headers["X-Elapsed"] = "{:.4f}".format(time.time() - start)


@stack.use_func
def auth(response, request, next):
    if request.headers.get("Authorization") == TOKEN:
        request.context.user = "admin"
        next(response, request)
    else:
        response.status = 401
        response.json = {"error": "Invalid credentials."}


@stack.use_handler_func
def greet(response, request):
    name = parse_qs(request.query).get("name", ["stranger"])[0]
    response.json = {
        "greeting": "Hello, {}!".format(name),
        "user": request.context.user
    }


# Timing wraps everything else, so it has to run first
app = pychain.Stack(Timing()).with_handlers(*stack.handlers)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run()
