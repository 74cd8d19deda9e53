# xorcism

A small library that XORs data with a repeating key.

The munger is stateful. It remembers its position in the key between calls,
so two calls with the same input usually give different output until the key
has wrapped around. If you munge some data with one munger and then munge the
result with a copy that started at the same key position, you get the
original data back.

XOR with a repeating key is not secure encryption. Use it for obfuscation,
puzzles and tests. Do not use it to protect secrets.

## Install

```
pip install .
```

## Usage

Everything lives in `xorcism.munger`.

```python
import copy
from xorcism.munger import Xorcism

xs = Xorcism("abcde")
twin = copy.copy(xs)           # same key, same position

cipher = bytes(xs.munge(b"123455"))
assert cipher == bytes([80, 80, 80, 80, 80, 84])
assert bytes(twin.munge(cipher)) == b"123455"
```

- `Xorcism(key)` takes the key as `bytes`, a `bytearray`, a `memoryview`, an
  iterable of ints, or a `str`. A `str` is encoded as UTF-8. An empty key
  raises `ValueError`.
- `munge(data)` is a generator. It takes any iterable of byte values, such as
  `bytes`, a list of ints, or the output of another `munge`. It also takes a
  `str`, which it encodes as UTF-8. For each byte it yields the byte XORed
  with the next key byte. The key advances only as you consume values.
- `munge_in_place(data)` rewrites a writable buffer, such as a `bytearray`, in
  place. It raises `TypeError` if the buffer is read-only.
- `copy.copy(munger)` gives an independent munger with the same key and the
  same position.

### Streams

`reader(stream)` wraps a binary stream you read from and returns an
`XorcismReader`. `writer(stream)` wraps one you write to and returns an
`XorcismWriter`. Both classes are `io.RawIOBase` streams.

The wrapper uses the munger itself, not a copy. Data passing through it
advances that munger's key position. Pass a copy if you want to keep the
original munger's position unchanged.

```python
import copy
import io
from xorcism.munger import Xorcism

key = Xorcism("abcde")
reader = copy.copy(key).reader(io.BytesIO(b"123455"))
assert reader.read() == bytes([80, 80, 80, 80, 80, 84])

dest = io.BytesIO()
writer = copy.copy(key).writer(dest)
writer.write(b"123455")
writer.flush()
assert dest.getvalue() == bytes([80, 80, 80, 80, 80, 84])
```

How the stream wrappers behave:

- `XorcismReader.readinto` reads from the wrapped stream. It uses the stream's
  own `readinto` if it has one, and otherwise its `read`. It then munges the
  bytes it got.
- `XorcismWriter.write` munges a bytes-like object and hands the result to the
  wrapped stream. A `str` raises `TypeError`.
- `XorcismWriter.flush` flushes the wrapped stream.

Wrappers can be stacked. A reader around a reader, or a writer around a
writer, built from copies at the same position gives back the original bytes.

## What it does not do

This is a library only. It installs no command-line tool and has no key
management or key derivation.

## Tests

```
pip install ".[test]"
pytest
```