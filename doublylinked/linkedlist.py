"""A doubly-linked list whose entries stay valid handles across edits."""

from __future__ import annotations

import operator
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, Optional

EqualFunc = Callable[[Any, Any], Any]
CompareFunc = Callable[[Any, Any], int]


class ListEntry:
    """One entry of a :class:`LinkedList`, holding a value and its neighbours."""

    __slots__ = ("data", "_prev", "_next", "_owner")

    def __init__(self, data: Any) -> None:
        self.data = data
        self._prev: Optional[ListEntry] = None
        self._next: Optional[ListEntry] = None
        self._owner: Optional[LinkedList] = None

    @property
    def prev(self) -> Optional["ListEntry"]:
        """The previous entry, or None for the first entry."""
        return self._prev

    @property
    def next(self) -> Optional["ListEntry"]:
        """The next entry, or None for the last entry."""
        return self._next

    def __repr__(self) -> str:
        return f"ListEntry({self.data!r})"


def _link(holder: "LinkedList | ListEntry") -> Optional[ListEntry]:
    """Read the forward link stored in a list head or an entry."""
    if isinstance(holder, LinkedList):
        return holder._head
    return holder._next


class LinkedList:
    """A doubly-linked list of arbitrary values."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[ListEntry] = None
        self._tail: Optional[ListEntry] = None
        self._length = 0
        if iterable is not None:
            for item in iterable:
                self.append(item)

    def _adopt(self, data: Any) -> ListEntry:
        entry = ListEntry(data)
        entry._owner = self
        self._length += 1
        return entry

    def prepend(self, data: Any) -> ListEntry:
        """Add a value at the start of the list and return its entry."""
        entry = self._adopt(data)
        entry._next = self._head
        if self._head is not None:
            self._head._prev = entry
        else:
            self._tail = entry
        self._head = entry
        return entry

    def append(self, data: Any) -> ListEntry:
        """Add a value at the end of the list and return its entry."""
        entry = self._adopt(data)
        entry._prev = self._tail
        if self._tail is not None:
            self._tail._next = entry
        else:
            self._head = entry
        self._tail = entry
        return entry

    def first(self) -> Optional[ListEntry]:
        """The first entry, or None if the list is empty."""
        return self._head

    def nth_entry(self, n: int) -> Optional[ListEntry]:
        """The entry at index ``n``, or None if out of range."""
        if n < 0:
            raise ValueError("index must be non-negative")
        for index, entry in enumerate(self.entries()):
            if index == n:
                return entry
        return None

    def nth_data(self, n: int) -> Any:
        """The value at index ``n``, or None if out of range."""
        entry = self.nth_entry(n)
        return None if entry is None else entry.data

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._head is not None

    def to_list(self) -> list:
        """A new Python list holding every value in order."""
        return list(self)

    def _unlink(self, entry: ListEntry) -> None:
        if entry._prev is None:
            self._head = entry._next
        else:
            entry._prev._next = entry._next
        if entry._next is None:
            self._tail = entry._prev
        else:
            entry._next._prev = entry._prev
        entry._prev = entry._next = None
        entry._owner = None
        self._length -= 1

    def remove_entry(self, entry: Optional[ListEntry]) -> bool:
        """Remove an entry; False if it is None or not in this list."""
        if entry is None or entry._owner is not self:
            return False
        self._unlink(entry)
        return True

    def remove_data(self, data: Any, equal: Optional[EqualFunc] = None) -> int:
        """Remove every value equal to ``data``; return how many were removed."""
        equal = equal or operator.eq
        matches = [entry for entry in self.entries() if equal(entry.data, data)]
        for entry in matches:
            self._unlink(entry)
        return len(matches)

    def sort(self, compare: Optional[CompareFunc] = None) -> None:
        """Sort in place; ``compare`` returns <0, 0 or >0 like a C comparator.

        Entries keep their identity; only their order changes.
        """
        if compare is None:
            key = operator.attrgetter("data")
        else:
            data_key = cmp_to_key(compare)

            def key(entry: ListEntry) -> Any:
                return data_key(entry.data)

        ordered = sorted(self.entries(), key=key)
        self._head = self._tail = None
        previous: Optional[ListEntry] = None
        for entry in ordered:
            entry._prev = previous
            entry._next = None
            if previous is None:
                self._head = entry
            else:
                previous._next = entry
            previous = entry
        self._tail = previous

    def find_data(
        self, data: Any, equal: Optional[EqualFunc] = None
    ) -> Optional[ListEntry]:
        """The first entry whose value equals ``data``, or None."""
        equal = equal or operator.eq
        return next(
            (entry for entry in self.entries() if equal(entry.data, data)), None
        )

    def entries(self) -> Iterator[ListEntry]:
        """Yield each entry in order; the yielded entry may be removed."""
        entry = self._head
        while entry is not None:
            following = entry._next
            yield entry
            entry = entry._next if entry._owner is self else following

    def __iter__(self) -> "ListIterator":
        return ListIterator(self)

    def iterate(self) -> "ListIterator":
        """An iterator over values that can remove the current value."""
        return ListIterator(self)

    def clear(self) -> None:
        """Remove every entry."""
        for entry in list(self.entries()):
            entry._prev = entry._next = None
            entry._owner = None
        self._head = self._tail = None
        self._length = 0

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"


class ListIterator:
    """Iterates over a list's values and survives removal of the current one."""

    def __init__(self, linked_list: LinkedList) -> None:
        self._list = linked_list
        self._holder: LinkedList | ListEntry = linked_list
        self._current: Optional[ListEntry] = None

    def _current_is_live(self) -> bool:
        return self._current is not None and self._current is _link(self._holder)

    def __iter__(self) -> "ListIterator":
        return self

    def has_more(self) -> bool:
        """True if another value remains to be read."""
        if self._current_is_live():
            return self._current._next is not None
        return _link(self._holder) is not None

    def __next__(self) -> Any:
        if self._current_is_live():
            self._holder = self._current
            self._current = self._current._next
        else:
            self._current = _link(self._holder)
        if self._current is None:
            raise StopIteration
        return self._current.data

    def remove(self) -> None:
        """Remove the value last returned; does nothing if there is none."""
        if self._current_is_live():
            self._list._unlink(self._current)
            self._current = None