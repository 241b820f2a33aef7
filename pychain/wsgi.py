import http.client
import io
import ujson
from wsgiref.headers import Headers

from . import common


class setter(object):
    """ Write-only property. """
    def __init__(self, func):
        self.func = func

    def __set__(self, obj, value):
        return self.func(obj, value)


class RequestException(Exception):
    """Raised when the request itself can't be read"""
    def __init__(self, status):
        super().__init__(status)
        self.status = status

# Status codes for RequestException
REQUEST_TOO_LARGE = 413
BAD_REQUEST = 400
INTERNAL_ERROR = 500
HTTP_CODES = {i[0]: "{} {}".format(*i) for i in http.client.responses.items()}
MEMFILE_MAX = 102400

# WSGI puts these in environ without the HTTP_ prefix
UNPREFIXED_HEADERS = ("CONTENT_TYPE", "CONTENT_LENGTH")


class Request(object):
    """
    Read-only view of a WSGI environ, plus a place for handlers to share
    per-request state.

    Handlers further down the chain can read whatever earlier handlers
    stored on `request.context`:

        def auth(response, request, next):
            request.context.user = lookup(request.headers.get("Authorization"))
            next(response, request)

    The body is read at most once, on first access.
    """
    def __init__(self, environ):
        self.environ = environ
        self.context = common.Container()
        self._body = None
        self._headers = None

    @property
    def method(self):
        return self.environ.get("REQUEST_METHOD", "GET").upper()

    @property
    def path(self):
        return self.environ.get("PATH_INFO", "") or "/"

    @property
    def query(self):
        return self.environ.get("QUERY_STRING", "")

    @property
    def headers(self):
        if self._headers is None:
            self._headers = parse_headers(self.environ)
        return self._headers

    @property
    def body(self):
        if self._body is None:
            self._body = load_body(self.environ)
        return self._body

    @property
    def json(self):
        ''' Empty body loads as an empty dict; malformed json is a 400 '''
        try:
            return ujson.loads(self.body or "{}")
        except ValueError:
            raise RequestException(BAD_REQUEST)


def parse_headers(environ):
    """ 'HTTP_X_FORWARDED_FOR' -> 'X-Forwarded-For' """
    headers = {}
    for key, value in environ.items():
        if key.startswith("HTTP_"):
            key = key[5:]
        elif key not in UNPREFIXED_HEADERS:
            continue
        headers[key.replace("_", "-").title()] = value
    return headers


class Response(object):
    """
    Collects status, headers and body written by handlers.

    Nothing is sent until `send` is called, so any handler in the chain can
    still change the status or headers after the handlers below it return.

    Example:

        def wsgi_application(environ, start_response):
            response = Response(start_response)
            response.write("Hello, World!")
            return response.send()

    """
    def __init__(self, start_response):
        self.start_response = start_response
        self.headers = Headers([])
        self.status = 200
        self._body = []

    @property
    def status(self):
        return self._status

    @status.setter
    def status(self, value):
        if value not in HTTP_CODES:
            raise KeyError("Unknown status code {}".format(value))
        self._status = value

    @property
    def status_line(self):
        return HTTP_CODES[self._status]

    @property
    def written(self):
        return bool(self._body)

    def write(self, data):
        ''' Unicode is encoded as UTF-8 '''
        if isinstance(data, str):
            data = data.encode('UTF-8')
        self._body.append(data)

    @setter
    def body(self, value):
        ''' Replaces anything already written '''
        self._body = []
        if value:
            self.write(value)

    @setter
    def json(self, value):
        self.headers["Content-Type"] = "application/json"
        self.body = ujson.dumps(value)

    def exception(self, exc):
        '''Set appropriate status and body for a RequestException'''
        self.status = exc.status
        self.body = ''

    def send(self):
        ''' Start the response and return the raw body '''
        if "Content-Length" not in self.headers:
            length = sum(len(chunk) for chunk in self._body)
            self.headers["Content-Length"] = str(length)
        self.start_response(self.status_line, self.headers.items())
        return self._body


"""
request body parsing logic derived from bottle.py
(https://github.com/defnull/bottle)

Copyright (c) 2014, Marcel Hellkamp.

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""


def content_length(environ):
    """ Returns the content length, or -1 if none is provided """
    return int(environ.get('CONTENT_LENGTH') or -1)


def chunked_body(environ):
    """ Returns True if the transfer encoding contains the word 'chunked' """
    return "chunked" in environ.get('HTTP_TRANSFER_ENCODING', '').lower()


def load_body(environ):
    clen = content_length(environ)
    if clen > MEMFILE_MAX:
        raise RequestException(REQUEST_TOO_LARGE)
    if clen < 0:
        clen = MEMFILE_MAX + 1
    data = _body(environ).read(clen)
    if len(data) > MEMFILE_MAX:
        raise RequestException(REQUEST_TOO_LARGE)
    return data.decode("UTF-8")


def _body(environ):
    try:
        read_func = environ['wsgi.input'].read
    except KeyError:
        # If there's no input we don't need to do any chunking, etc
        environ['wsgi.input'] = io.BytesIO()
        return environ['wsgi.input']
    chunked = chunked_body(environ)
    body_iter = _iter_chunked if chunked else _iter_body
    body, body_size = io.BytesIO(), 0
    try:
        for part in body_iter(read_func, MEMFILE_MAX, environ):
            body_size += len(part)
            # Stop reading as soon as the limit is passed
            if body_size > MEMFILE_MAX:
                raise RequestException(REQUEST_TOO_LARGE)
            body.write(part)
        environ['wsgi.input'] = body
        body.seek(0)
        return body
    except RequestException:
        body.close()
        raise


def _iter_body(read, bufsize, environ):
    clen = content_length(environ)
    maxread = max(0, clen)
    while maxread:
        part = read(min(maxread, bufsize))
        if not part:
            break
        yield part
        maxread -= len(part)


def _iter_chunked(read, bufsize, environ):
    rn, sem, bs = b'\r\n', b';', b''
    while True:
        header = read(1)
        while header[-2:] != rn:
            c = read(1)
            header += c
            if not c:
                raise RequestException(BAD_REQUEST)
            if len(header) > bufsize:
                raise RequestException(BAD_REQUEST)
        size, _, _ = header.partition(sem)
        try:
            maxread = int(size.strip(), 16)
        except ValueError:
            raise RequestException(BAD_REQUEST)
        if maxread == 0:
            break
        buff = bs
        while maxread > 0:
            if not buff:
                buff = read(min(maxread, bufsize))
            part, buff = buff[:maxread], buff[maxread:]
            if not part:
                raise RequestException(BAD_REQUEST)
            yield part
            maxread -= len(part)
        if read(2) != rn:
            raise RequestException(BAD_REQUEST)
