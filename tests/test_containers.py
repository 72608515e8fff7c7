import io

import pytest

from algo.containers import Queue, Stack


def test_queue():
    q = Queue()
    assert len(q) == 0

    q.push(1)
    q.push(2)
    q.push(3)
    assert len(q) == 3

    assert q.front() == 1
    assert q.back() == 3

    assert q.pop() == 1
    assert q.pop() == 2
    assert q.pop() == 3
    assert len(q) == 0


def test_stack():
    s = Stack()
    assert len(s) == 0

    s.push(1)
    s.push(2)
    s.push(3)
    assert len(s) == 3

    assert s.top() == 3
    assert s.pop() == 3
    assert s.pop() == 2
    assert s.pop() == 1
    assert len(s) == 0


def test_queue_iteration_order():
    q = Queue()
    for v in [1, 2, 3]:
        q.push(v)
    assert list(q) == [1, 2, 3]


def test_stack_iteration_is_bottom_to_top():
    s = Stack()
    for v in [1, 2, 3]:
        s.push(v)
    assert list(s) == [1, 2, 3]


def test_queue_print_all():
    q = Queue()
    for v in [1, 2, 3]:
        q.push(v)
    buf = io.StringIO()
    q.print_all(buf)
    assert buf.getvalue() == "1\n2\n3\n"


def test_stack_print_all():
    s = Stack()
    for v in ["a", "b"]:
        s.push(v)
    buf = io.StringIO()
    s.print_all(file=buf)
    assert buf.getvalue() == "a\nb\n"


@pytest.mark.parametrize("method", ["pop", "front", "back"])
def test_empty_queue_raises(method):
    with pytest.raises(IndexError):
        getattr(Queue(), method)()


@pytest.mark.parametrize("method", ["pop", "top"])
def test_empty_stack_raises(method):
    with pytest.raises(IndexError):
        getattr(Stack(), method)()