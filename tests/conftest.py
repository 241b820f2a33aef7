import io
import pytest
import pychain


@pytest.fixture
def start_response():
    ''' Function that stores status, headers on itself '''
    def func(status, headers):
        self.status = status
        self.headers = headers
    self = func
    return func


@pytest.fixture
def environment():
    '''
    Function that returns an environ with the given input and content length

    Usage:

    def test_foo(environment):
        environ = environment("Hello, World", 12)
        assert environ["CONTENT_LENGTH"] == "12"
    '''
    return lambda body, length: {
        'CONTENT_LENGTH': str(length),
        'wsgi.input': io.BytesIO(bytes(body, 'utf8'))
    }


@pytest.fixture
def request_(environment):
    ''' GET / with no body '''
    environ = environment("", 0)
    environ.update({"REQUEST_METHOD": "GET", "PATH_INFO": "/"})
    return pychain.Request(environ)


@pytest.fixture
def response(start_response):
    return pychain.Response(start_response)


@pytest.fixture
def calls():
    ''' Shared log that `recorder` handlers append their names to '''
    return []


@pytest.fixture
def recorder(calls):
    """
    Build handlers that log their name to `calls` when invoked.

    Usage:

    def test_foo(recorder, calls):
        stack = Stack(recorder("a"), recorder("b", stop=True))
        stack.dispatch(response, request)
        assert calls == ["a", "b"]
    """
    class Recorder(pychain.Handler):
        def __init__(self, name, stop=False):
            self.name = name
            self.stop = stop

        def handle(self, response, request, next):
            calls.append(self.name)
            if not self.stop:
                next(response, request)
    return Recorder
