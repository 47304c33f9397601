# stilib

A small set of container types in plain Python, with no dependencies outside
the standard library.

- `stilib.dynarray.DynArray`: a growable array that tracks its own capacity
  (doubling it when full), with an optional deleter called on every element
  that leaves the array, search by comparator (`find`), `erase_if`,
  in-place `swap` and `batch_push` writes at an offset.
- `stilib.hashmap.HashMap`: a hash map with a fixed number of buckets and
  either integer or string keys (`KeyType.INT`, `KeyType.STRING`). The hash
  function and key comparator can be supplied; when left out, the defaults
  for the key type are used. An optional deleter is called on values that are
  replaced, erased or dropped by `destroy`. Ready-made helpers:
  `fnv1a_hash` (64-bit FNV-1a), `int_hash`, `string_cmp` and `int_cmp`.
- `stilib.stistring.StiString` and `StringView`: an owned string with a
  recorded length, and a read-only view of plain text or of a `StiString`.
- `stilib.utility`: the `Finder` search result (`is_found`, `index`, and true
  when found) and a `swap` helper for any mutable sequence.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from stilib.dynarray import DynArray

array = DynArray(0, None)
for i in range(10):
    array.push(i)
print(len(array), array.capacity)   # 10 16

found = array.find(5, lambda a, b: a == b)
if found.is_found:
    print(found.index)              # 5

array.swap(0, 4)
array.erase_if(3, lambda a, b: a == b)
print(list(array))
```

```python
from stilib.hashmap import HashMap, KeyType, fnv1a_hash, string_cmp

ages = HashMap(KeyType.STRING, 64, fnv1a_hash, string_cmp, None)
ages.insert("John", 10)
ages.insert("Henry", 50)
print(ages.get("John"))             # 10
ages.erase("John")
print("John" in ages)               # False
print(dict(ages.items()))           # {'Henry': 50}
```

```python
from stilib.stistring import StiString, StringView

name = StiString("hello")
view = StringView.from_sti_string(name)
print(len(view), str(view))         # 5 hello
```

## What it does not do

`HashMap` never grows or rehashes: the bucket count given at construction is
kept for the life of the map. `None` cannot be stored as a value, since
`get` returns `None` for a missing key. `DynArray.batch_push` never grows the
capacity; writes past it raise `IndexError`.