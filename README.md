# utilkit

Four small, independent building blocks. The package has no dependencies beyond the
standard library.

## `utilkit.colortable`

`ColorTable` maps colour names to 32-bit unsigned values. The values are read from a
text file of whitespace-separated `name hexvalue` pairs, such as `red ff0000`. A value may
have a `0x` prefix.

- `load(path)` reads the file. It raises `OSError` if the file cannot be opened. A table
  is filled only once: after a successful load, later calls do nothing.
- `get(name)` returns the stored value, or `0` for an unknown name.
- `name in table` and `len(table)` also work.

Reading stops at the first value that is not hexadecimal. The name before that value is
stored as `0`. Values larger than `0xFFFFFFFF` are clamped to `0xFFFFFFFF`, and reading
stops there too.

## `utilkit.fileslice`

- `plus(lhs, rhs)` returns the two strings joined together.
- `file_size(f)` takes an open binary file and returns its length plus one. It leaves the
  file positioned at its end.
- `FileSlice(filename, start=-1, stop=-1, from_file=True)` holds a range of bytes from a
  file. A bound of `-1` stands for the start or the end of the file.
  - `read_file()` opens the file and reads the range into `buffer`. It then updates
    `start`, `stop`, `length`, `file_length` and `source_active`, and returns the bytes.
    It raises `FileNotFoundError` if the file cannot be opened, and `ValueError` if `stop`
    lies before `start`.
  - `read()` calls `read_file()` when `from_file` is true. Otherwise it returns the
    current `buffer` unchanged.

## `utilkit.screen`

`Screen(x, y)` is a buffer of `x * y` 32-bit pixels, held in the array `mem` and set to
zero.

- Width and height are treated as signed 16-bit values.
- `resize(x, y)` and calling the screen as `screen(x, y)` both set new dimensions and
  allocate a fresh zeroed buffer.
- `resize_packed(value)` does the same from one integer: the width in its low 16 bits and
  the height in its high 16 bits.
- Sizes that give a negative pixel count raise `ValueError`.
- `x`, `y` (also `width`, `height`) and `memsize` describe the current size.

`WindowStyle` and `WindowExStyle` are `IntEnum`s of window style bit positions. Each member's
`flag` property gives the bit mask, for example `WindowStyle.VISIBLE.flag == 1 << 28`.

## `utilkit.systems`

A small message dispatcher.

- `Message(code, data=None)` is a message.
- `Call(target, message)` addresses a message to an element.
- `System` keeps the shared state in `state`, a `SystemGlobals` that holds the call queue,
  the error and exit-code queues, per-element data and `global_data`.
- `add_proc(name, proc)` registers a procedure and returns its id. A procedure is a
  callable that takes the `SystemGlobals`.
- `add_element(name, proc_id)` registers an element handled by that procedure and returns
  the element's id.
- `set_element_data(element_id, data)` stores data for an element in `state.data`.
- `add_call(call)`, `add_tcall(target, msg)` and `broadcast_call(targets, msg)` queue
  calls.
- `run_next()` runs the procedure for the call at the head of the queue, then removes that
  call. While the procedure runs, the call is still at the head of the queue. It returns
  `False` if the queue was empty and `True` otherwise.

```python
from utilkit.systems import Message, System

system = System()
proc_id = system.add_proc("echo", lambda state: 0)
element = system.add_element("first", proc_id)
system.add_tcall(element, Message(1, "hello"))
system.run_next()  # True
system.run_next()  # False, the queue is empty
```

## What it does not do

- `Screen` only holds pixels in memory. It does not open windows or draw anywhere.
- The window style enums are just numbers and are not applied to anything.
- `System.run_next` ignores the value a procedure returns. Nothing is added to the
  exit-code or error queues for you.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```