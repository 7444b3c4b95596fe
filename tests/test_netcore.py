import socket
import threading

import pytest

from timeping.netcore import NetCore


def test_binds_loopback():
    with NetCore(0) as net:
        host, port = net.address
        assert host == "127.0.0.1"
        assert port > 0


def test_port_in_use_raises(capsys):
    with NetCore(0) as net:
        _, port = net.address
        with pytest.raises(OSError):
            NetCore(port)
    assert "Listen error" in capsys.readouterr().out


def test_accepts_and_stops():
    stop = threading.Event()
    with NetCore(0) as net:
        worker = threading.Thread(target=net.run, args=(stop,))
        worker.start()
        with socket.create_connection(net.address, timeout=5) as client:
            assert client.recv(16) == b""
        stop.set()
        worker.join(5)
        assert not worker.is_alive()


def test_close_ends_run():
    net = NetCore(0)
    worker = threading.Thread(target=net.run)
    worker.start()
    net.close()
    worker.join(5)
    assert not worker.is_alive()