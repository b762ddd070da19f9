# doublylinked

A doubly-linked list for Python. Each value is stored in a `ListEntry` that
knows its neighbours. You can keep a handle to an entry and later remove it
or change its value without searching for it. The list can be sorted with a
three-way comparison function and searched with an equality function. Its
iterator lets you remove the current value safely while you walk the list.

Everything is in the module `doublylinked.linkedlist`. It has three classes:
`LinkedList`, `ListEntry` and `ListIterator`.

## Installation

```
pip install doublylinked
```

To run the test suite, install the test extra:

```
pip install "doublylinked[test]"
pytest
```

## Usage

```python
from doublylinked.linkedlist import LinkedList

items = LinkedList([3, 1, 2])
items.append(4)
items.prepend(0)

print(len(items))        # 5
print(bool(items))       # True
print(items.to_list())   # [0, 3, 1, 2, 4]
print(items.nth_data(1)) # 3
```

### Entries

`append` and `prepend` return the new `ListEntry`. You can keep it and use it
later:

```python
entry = items.append(10)
entry.data = 11            # change the stored value in place
items.remove_entry(entry)  # True

first = items.first()      # None if the list is empty
second = items.nth_entry(1)
print(second.prev is first)  # True
```

Each entry has a writable `data` attribute. Its read-only `prev` and `next`
properties give the neighbouring entries, or `None` at either end of the list.

`remove_entry` returns `False` when the entry is `None` or is not in this list.
This covers an entry that was already removed.

`nth_entry` and `nth_data` return `None` when the index is past the end of the
list. A negative index raises `ValueError`.

### Searching and removing by value

`find_data` returns the first entry whose value matches, or `None`.
`remove_data` removes every matching value and returns how many it removed.
Both take an optional equality function. Without one, they use `==`:

```python
import operator

items = LinkedList([4, 8, 4, 15])
found = items.find_data(8)                   # the ListEntry holding 8
removed = items.remove_data(4, operator.eq)  # 2
```

### Sorting

`sort` sorts in place. You can pass it a three-way comparison function. The
function returns a negative number when the first value comes first, a
positive number when the second comes first, and zero when the two are equal.
Without a function, `sort` uses the values' natural ordering. The sort keeps
entries that compare equal in their original order. Entries keep their
identity, so handles you hold stay valid:

```python
items = LinkedList([89, 4, 23, 42, 4, 16])
items.sort(lambda a, b: (a > b) - (a < b))
print(items.to_list())  # [4, 4, 16, 23, 42, 89]
```

### Iterating

A `LinkedList` is iterable. `iter(items)` and `items.iterate()` both return a
`ListIterator`. Its `remove()` method drops the value that was returned last.
It does nothing if there is no such value or if that value was already
removed:

```python
items = LinkedList(range(10))
walker = items.iterate()
for value in walker:
    if value % 2 == 0:
        walker.remove()
print(items.to_list())  # [1, 3, 5, 7, 9]
```

You can also step through the list by hand with `has_more()` and
`next(walker)`. The iterator keeps working when the current entry is removed
some other way, for example with `remove_data` or `remove_entry`.

`entries()` yields the `ListEntry` objects rather than their values. You may
remove the entry it has just yielded. `clear()` empties the list and detaches
all of its entries.