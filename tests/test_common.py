import pytest
from pychain import common


def test_default_address(monkeypatch):
    ''' No argument and no $PORT uses the default '''
    monkeypatch.delenv("PORT", raising=False)
    assert common.detect_address() == ":8080"
    assert common.detect_address() == common.DEFAULT_ADDRESS


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    assert common.detect_address() == ":9090"


def test_empty_port_ignored(monkeypatch):
    monkeypatch.setenv("PORT", "")
    assert common.detect_address() == ":8080"


def test_explicit_address_wins(monkeypatch):
    ''' An explicit address ignores $PORT '''
    monkeypatch.setenv("PORT", "9090")
    assert common.detect_address(":7000") == ":7000"
    assert common.detect_address(":7000", ":7001") == ":7000"


def test_explicit_environ():
    ''' environ can be passed in instead of reading os.environ '''
    assert common.detect_address(environ={"PORT": "5000"}) == ":5000"
    assert common.detect_address(environ={}) == ":8080"


@pytest.mark.parametrize("address, expected", [
    (":8080", ("", 8080)),
    ("localhost:9000", ("localhost", 9000)),
    ("127.0.0.1:0", ("127.0.0.1", 0)),
])
def test_split_address(address, expected):
    assert common.split_address(address) == expected


@pytest.mark.parametrize("address", ["8080", "localhost:", "host:http"])
def test_split_bad_address(address):
    with pytest.raises(ValueError):
        common.split_address(address)


def test_container_attribute_access():
    ''' Container exposes keys as attributes; missing keys are None '''
    container = common.Container(foo="bar")
    assert container.foo == "bar"
    assert container.missing is None
    assert "missing" not in container

    container.keys = "overwritten"
    assert container["keys"] == "overwritten"
