from .common import DEFAULT_ADDRESS, detect_address
from .handlers import Handler, HandlerFunc, wrap, wrap_func
from .stack import Stack
from .wsgi import Request, RequestException, Response

__all__ = [
    "DEFAULT_ADDRESS", "detect_address",
    "Handler", "HandlerFunc", "wrap", "wrap_func",
    "Stack",
    "Request", "RequestException", "Response"
]
