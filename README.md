# stringplus

A small library for trimming text. Its one function, `trim` in the
`stringplus.trim` module, removes every leading and trailing character that
appears in a given set of characters. Characters in the middle of the string
are left alone.

## Installation

```
pip install .
```

## Usage

```python
from stringplus.trim import trim

trim(" test ", " ")           # "test"
trim("testc", "c")            # "test"
trim("*te*st*", "*")          # "te*st"
trim("School-21", "Sch")      # "ool-21"
trim(" /*()", ")(/ *")        # ""
trim("School-21", "")         # "School-21"
```

The second argument is a set of characters, not a prefix or suffix. Order and
repetition inside it make no difference. An empty set returns the input
unchanged.

## Errors

`trim` raises `TypeError` if either argument is `None` or is not a `str`.

## What it does not do

The package holds only `trim`. It has no other string functions, no
formatting or parsing helpers, and no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```