import os

DEFAULT_ADDRESS = ":8080"


def detect_address(*addr, environ=None):
    """
    Pick the address a server should listen on.

    An explicit address always wins, then $PORT, then DEFAULT_ADDRESS.

    >>> detect_address(":7000")
    ':7000'
    >>> detect_address(environ={"PORT": "9090"})
    ':9090'
    >>> detect_address(environ={})
    ':8080'
    """
    if addr:
        return addr[0]
    if environ is None:
        environ = os.environ
    port = environ.get("PORT", "")
    if port:
        return ":" + port
    return DEFAULT_ADDRESS


def split_address(address):
    """
    Split "host:port" into a (host, port) pair for socket servers.

    An empty host (":8080") binds every interface.
    """
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError("address must specify a port: '{}'".format(address))
    try:
        port = int(port)
    except ValueError:
        raise ValueError("invalid port in address: '{}'".format(address))
    return host, port


class Container(dict):
    """
    Enable attribute access to dict keys.

    Missing keys return None, and are not persisted.
    dict methods can be overwritten (container.keys = "foo" is fine)

    >>> o = object()
    >>> c = Container()
    >>> c.keys = o
    >>> assert c["keys"] is c.keys
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # For more info on this magic: http://stackoverflow.com/a/14620633
        self.__dict__ = self

    def __getattr__(self, key):
        # We can't use __missing__ here because the `__dict__ = self`
        # above will cause KeyErrors and never call __missing__.
        return None
