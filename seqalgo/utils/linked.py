"""
  Linked lists usable as sequences by the algorithms
    ForwardList: offers the Forward capability only
    LinkedList:  offers the Bidirectional capability
  Positions are the nodes themselves, `end` is `None`
"""
from ..exception import SeqAlgoUsageError
from ..sequence import Forward, Bidirectional


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value):
        self.value = value
        self.next = None
        self.prev = None  # only linked by LinkedList


class ForwardList(Forward):
    def __init__(self, values=()):
        self._head = None
        self._tail = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value):
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    @property
    def start(self):
        return self._head

    @property
    def end(self):
        return None

    def after(self, node):
        if node is None:
            raise SeqAlgoUsageError('the end of a linked list has no successor')
        return node.next

    def __getitem__(self, node):
        return node.value

    def __setitem__(self, node, value):
        node.value = value

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self):
        return f'{type(self).__name__}({list(self)!r})'


class LinkedList(ForwardList, Bidirectional):
    def append(self, value):
        prev = self._tail
        node = super().append(value)
        node.prev = prev
        return node

    def before(self, node):
        prev = self._tail if node is None else node.prev
        if prev is None:
            raise SeqAlgoUsageError('the start of a linked list has no predecessor')
        return prev
