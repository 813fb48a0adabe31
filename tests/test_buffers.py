import threading

import pytest

from netdrills.buffers import BufferEmpty, BufferFull, CircularBuffer, MessageQueue


def test_circular_buffer_default_capacity_is_ten():
    buf = CircularBuffer()
    for n in range(10):
        buf.push(f"m{n}")
    assert len(buf) == 10
    with pytest.raises(BufferFull):
        buf.push("overflow")


def test_circular_buffer_is_fifo():
    buf = CircularBuffer(3)
    for message in ("a", "b", "c"):
        buf.push(message)
    assert [buf.pop(), buf.pop(), buf.pop()] == ["a", "b", "c"]
    assert len(buf) == 0


def test_circular_buffer_pop_empty_raises():
    buf = CircularBuffer(2)
    with pytest.raises(BufferEmpty):
        buf.pop()


def test_circular_buffer_wraps_around():
    buf = CircularBuffer(2)
    received = []
    for n in range(7):
        buf.push(str(n))
        if len(buf) == 2:
            received.append(buf.pop())
    while len(buf):
        received.append(buf.pop())
    assert received == [str(n) for n in range(7)]


def test_full_buffer_keeps_its_contents():
    buf = CircularBuffer(1)
    buf.push("kept")
    with pytest.raises(BufferFull):
        buf.push("dropped")
    assert buf.pop() == "kept"


@pytest.mark.parametrize("capacity", [0, -1])
def test_circular_buffer_rejects_bad_capacity(capacity):
    with pytest.raises(ValueError):
        CircularBuffer(capacity)


def test_message_queue_is_fifo():
    queue = MessageQueue()
    for message in ("x", "y", "z"):
        queue.enqueue(message)
    assert len(queue) == 3
    assert [queue.dequeue() for _ in range(3)] == ["x", "y", "z"]


def test_message_queue_empty_raises():
    queue = MessageQueue()
    with pytest.raises(BufferEmpty):
        queue.dequeue()
    queue.enqueue("one")
    queue.dequeue()
    with pytest.raises(BufferEmpty):
        queue.dequeue()


def test_message_queue_concurrent_enqueue():
    queue = MessageQueue()

    def worker(tag):
        for n in range(100):
            queue.enqueue(f"{tag}-{n}")

    threads = [threading.Thread(target=worker, args=(t,)) for t in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    drained = []
    while len(queue):
        drained.append(queue.dequeue())
    assert len(drained) == 400
    assert len(set(drained)) == 400