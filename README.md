# netdrills

A handful of small, self-contained tools for practising data structures and
UDP networking. No third-party dependencies.

## What is inside

- `netdrills.linked_list`: a singly linked list (`LinkedList`, `Node`) with
  insertion at either end (`insert_at_beginning`, `insert_at_end`) or after a
  given node (`insert_after`), lookup (`find_node`, `search`), deletion of the
  first matching value (`delete`, which raises `ValueError` if the value is
  absent), in-place `reverse` and `clear`. It supports `len()`, iteration and
  `str()`.
- `netdrills.list_demo`: `run_demo(output)` walks through the list operations
  and narrates each step and the list after it.
- `netdrills.buffers`: a thread-safe fixed-size `CircularBuffer` (10 slots by
  default) and an unbounded `MessageQueue`. Pushing into a full buffer raises
  `BufferFull`; taking from an empty buffer or queue raises `BufferEmpty`.
- `netdrills.chat`: a UDP chat peer (`ChatPeer`) driven by a small state
  machine (`ChatState`: `IDLE`, `RECEIVING`, `SENDING`). Incoming datagrams go
  into a `CircularBuffer`, lines you type go into a `MessageQueue`, and each
  `step` either prints one received message as `[Peer]: ...` or sends one
  queued line. `ChatPeer` is a context manager; `close()` stops its loops.
- `netdrills.udp_chat`: a simpler two-way chat that labels each incoming
  message with the sender's address (`format_peer_message`).
- `netdrills.udp_client`: `send_lines` sends each line as a datagram.
- `netdrills.udp_server`: `serve` prints every datagram it receives
  (`format_datagram`) until receiving fails.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Run the linked-list walkthrough:

```
netdrills-list-demo
```

Chat between two terminals on one machine:

```
netdrills-chat 5000 127.0.0.1 5001
netdrills-chat 5001 127.0.0.1 5000
```

`netdrills-udp-chat` takes the same three arguments, `<your_port> <peer_ip>
<peer_port>`, and labels each incoming line with the sender's address. With
the wrong number of arguments both commands print a usage line and exit with
status 1.

Start a listener on UDP port 8888 and send it lines from standard input
(the client always sends to `127.0.0.1:8888`):

```
netdrills-udp-server
netdrills-udp-client
```

## Using the library

```python
from netdrills.linked_list import LinkedList

items = LinkedList([2, 5, 10, 20])
items.insert_after(items.find_node(5), 15)
items.delete(10)
items.reverse()
print(items)        # 20 -> 15 -> 5 -> 2 -> NULL
print(len(items))   # 4
```

```python
from netdrills.buffers import CircularBuffer, BufferFull

buf = CircularBuffer(2)
buf.push("hello")
buf.push("world")
try:
    buf.push("overflow")
except BufferFull:
    pass
print(buf.pop())    # hello
```

## What it does not do

The chat tools send plain UDP datagrams: there is no delivery guarantee,
no ordering beyond what the network gives, no encryption and no
authentication. `ChatPeer` silently drops incoming messages while its receive
buffer is full. The server and client use a fixed port and address and take
no options.