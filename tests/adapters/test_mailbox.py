from __future__ import annotations

import queue
import socket
import threading

import pytest

from process_log_sink.adapters.mailbox import Mailbox


def test_messages_are_received_in_send_order() -> None:
    inbox = Mailbox()

    for index in range(3):
        assert inbox.send(index) is True

    assert [inbox.receive(timeout=0) for _ in range(3)] == [0, 1, 2]


def test_receive_raises_empty_when_nothing_arrives() -> None:
    inbox = Mailbox()

    with pytest.raises(queue.Empty):
        inbox.receive(timeout=0)
    with pytest.raises(queue.Empty):
        inbox.receive(timeout=0.01)


def test_receive_waits_for_a_message_sent_from_another_thread() -> None:
    inbox = Mailbox()
    sender = threading.Timer(0.01, inbox.send, args=("late",))
    sender.start()

    try:
        assert inbox.receive(timeout=2.0) == "late"
    finally:
        sender.cancel()


def test_closed_mailbox_is_dead_and_discards_sends() -> None:
    inbox = Mailbox()
    inbox.send("before")

    inbox.close()

    assert inbox.is_alive() is False
    assert inbox.send("after") is False
    assert inbox.drain() == ["before"]


def test_full_mailbox_discards_new_messages() -> None:
    inbox = Mailbox(maxsize=2)

    assert inbox.send("a") is True
    assert inbox.send("b") is True
    assert inbox.send("c") is False
    assert len(inbox) == 2
    assert inbox.drain() == ["a", "b"]
    assert len(inbox) == 0


def test_node_defaults_to_host_name() -> None:
    assert Mailbox().node == socket.gethostname()
    assert Mailbox(node="edge-1").node == "edge-1"
