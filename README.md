# lazybuf

`lazybuf` provides `LazyBuffer`, which wraps any iterable and reads items from
it only when asked to. Items it has read are kept in order and can be read back
by index. It suits code that needs to look at earlier items of an input again
without reading the whole input up front.

## Installation

```
pip install lazybuf
```

To install with the test dependencies:

```
pip install "lazybuf[test]"
```

## Usage

```python
from lazybuf.lazy_buffer import LazyBuffer

buf = LazyBuffer(range(10))
len(buf)              # 0: nothing has been read yet
buf.prefill(3)        # reads items until 3 are buffered
buf[0], buf[2]        # (0, 2)
buf.get_next()        # True: one more item was read
len(buf)              # 4
buf.get_at([3, 0])    # [3, 0]
buf.get_array((1, 2)) # (1, 2)
buf.size_hint()       # (10, 10)
buf.count()           # 10: items buffered plus items still to come
```

## Methods

- `len(buf)` is the number of items buffered so far.
- `buf[index]` reads a buffered item; slices work as on a list. An index past
  the buffered items raises `IndexError`.
- `get_next()` reads one more item into the buffer and returns `True`, or
  returns `False` once the source is exhausted. After that the source is never
  read again.
- `prefill(length)` reads items until `length` are buffered, or until the
  source runs out.
- `get_at(indices)` returns a list of the buffered items at the given positions,
  in the order given.
- `get_array(indices)` does the same but returns a tuple.
- `size_hint()` returns a `(lower, upper)` pair bounding the number of items
  buffered plus those still to come. The remaining count comes from the source
  iterator's length hint; `upper` is `None` when the iterator gives no length
  hint. Once the source is known to be exhausted, both bounds equal the number
  of buffered items.
- `count()` uses up the rest of the source and returns the buffered count plus
  the number of items that were left. The items it uses up are not added to the
  buffer.

## What it does not do

`lazybuf` holds only the buffer itself. It does not provide combinations,
permutations or other iterator adaptors built on top of it, and it has no
command-line interface.