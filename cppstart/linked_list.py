"""Bounded singly and doubly linked lists of integers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


class ListFullError(OverflowError):
    """Raised when adding to a list that has reached its capacity."""


class ListEmptyError(LookupError):
    """Raised when removing from an empty list."""


@dataclass(slots=True, eq=False)
class _SingleNode:
    data: int
    next: Optional[_SingleNode] = None


@dataclass(slots=True, eq=False)
class _DoubleNode:
    data: int
    prev: Optional[_DoubleNode] = None
    next: Optional[_DoubleNode] = None


def _check_capacity(capacity: int) -> int:
    if capacity <= 0:
        raise ValueError("容量必须为正数")
    return capacity


def _full_error(where: str) -> ListFullError:
    return ListFullError(f"无法从{where}添加：链表已满。")


def _empty_error() -> ListEmptyError:
    return ListEmptyError("无法删除：链表为空。")


def _missing_error(data: int) -> ValueError:
    return ValueError(f"未找到值为 {data} 的节点。")


def _position(values: Iterable[int], data: int) -> Optional[int]:
    return next((index for index, value in enumerate(values) if value == data), None)


def _summary(values: Iterable[int], size: int) -> str:
    if size == 0:
        return "链表为空。"
    items = "".join(f"{value} " for value in values)
    return f"链表内容：[ {items}] 长度：{size}"


class SingleLinkedList:
    """A singly linked list holding at most ``capacity`` integers."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._head: Optional[_SingleNode] = None
        self._tail: Optional[_SingleNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def add_first(self, data: int) -> None:
        if self.is_full():
            raise _full_error("头部")
        node = _SingleNode(data, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_last(self, data: int) -> None:
        if self.is_full():
            raise _full_error("尾部")
        node = _SingleNode(data)
        if self._head is None or self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, data: int) -> None:
        """Remove the first element equal to data."""
        if self.is_empty():
            raise _empty_error()
        prev, node = None, self._head
        while node is not None and node.data != data:
            prev, node = node, node.next
        if node is None:
            raise _missing_error(data)
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1

    def find(self, data: int) -> Optional[int]:
        """Position of the first element equal to data, or None."""
        return _position(self, data)

    def describe(self) -> str:
        """One-line summary of the contents and length."""
        return _summary(self, self._size)

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0


class DoubleLinkedList:
    """A doubly linked list holding at most ``capacity`` integers."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def add_first(self, data: int) -> None:
        if self.is_full():
            raise _full_error("头部")
        node = _DoubleNode(data, next=self._head)
        if self._head is not None:
            self._head.prev = node
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_last(self, data: int) -> None:
        if self.is_full():
            raise _full_error("尾部")
        node = _DoubleNode(data, prev=self._tail)
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1

    def remove(self, data: int) -> None:
        """Remove the first element equal to data."""
        if self.is_empty():
            raise _empty_error()
        node = self._head
        while node is not None and node.data != data:
            node = node.next
        if node is None:
            raise _missing_error(data)
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        self._size -= 1

    def find(self, data: int) -> Optional[int]:
        """Position of the first element equal to data, or None."""
        return _position(self, data)

    def describe(self) -> str:
        """One-line summary of the contents and length."""
        return _summary(self, self._size)

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a short demonstration of a bounded linked list."""
    parser = argparse.ArgumentParser(description="Bounded linked list demonstration.")
    parser.add_argument("kind", nargs="?", choices=("single", "double"), default="single")
    args = parser.parse_args(argv)
    items = SingleLinkedList(5) if args.kind == "single" else DoubleLinkedList(5)

    print("--- 从尾部依次添加 1,2,3,4,5,6 共 6 个元素 ---")
    for value in range(1, 7):
        try:
            items.add_last(value)
        except ListFullError as exc:
            print(exc)
    print(items.describe())

    print("--- 删除节点 3,4,5 ---")
    for value in (3, 4, 5):
        try:
            items.remove(value)
        except (ListEmptyError, ValueError) as exc:
            print(exc)
    print(items.describe())

    print("--- 从头部依次添加 6,7 共 2 个元素 ---")
    for value in (6, 7):
        try:
            items.add_first(value)
        except ListFullError as exc:
            print(exc)
    print(items.describe())
    return 0