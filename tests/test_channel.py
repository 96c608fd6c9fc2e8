import threading
import time

import pytest

from notifyflow.channel import Channel, ChannelClosed


def test_items_come_out_in_order():
    ch = Channel()
    for value in ["a", "b", "c"]:
        ch.send(value)
    ch.close()
    assert list(ch) == ["a", "b", "c"]


def test_receive_after_close_drains_then_raises():
    ch = Channel()
    ch.send(1)
    ch.close()
    assert ch.receive() == 1
    with pytest.raises(ChannelClosed):
        ch.receive()


def test_send_after_close_raises():
    ch = Channel()
    ch.close()
    with pytest.raises(ChannelClosed):
        ch.send("x")


def test_double_close_raises():
    ch = Channel()
    ch.close()
    with pytest.raises(ChannelClosed):
        ch.close()


def test_receive_timeout():
    ch = Channel()
    with pytest.raises(TimeoutError):
        ch.receive(timeout=0.01)


def test_negative_maxsize_rejected():
    with pytest.raises(ValueError):
        Channel(-1)


def test_bounded_send_waits_for_room():
    ch = Channel(1)
    ch.send("first")
    done = threading.Event()

    def sender():
        ch.send("second")
        done.set()

    worker = threading.Thread(target=sender)
    worker.start()
    time.sleep(0.05)
    assert not done.is_set()
    assert ch.receive(timeout=1) == "first"
    worker.join(timeout=1)
    assert done.is_set()
    assert ch.receive(timeout=1) == "second"


def test_iteration_across_threads():
    ch = Channel()

    def producer():
        for i in range(20):
            ch.send(i)
        ch.close()

    threading.Thread(target=producer).start()
    assert list(ch) == list(range(20))