# ymlescape

Prepare text for embedding in a YAML document by making every run of
backslashes even in length. A YAML parser then reads back exactly the
backslashes that were intended.

## Installation

```
pip install ymlescape
```

## Usage

```python
from ymlescape.escape import YmlEscapeHandlers, escape_backslashes

handler = YmlEscapeHandlers()

handler.escape("abrakadabra")             # None: nothing needs escaping
handler.escape("hello\\world\\")          # b"hello\\\\world\\\\"
handler.escape("[value] needs escaping")  # b"[value] needs escaping"

escape_backslashes(b"a\\\\\\b")           # b"a\\\\\\\\b"
```

`YmlEscapeHandlers.escape(content)` takes a string. It returns `None` when
the string holds neither a backslash nor a regular-expression meta character
(`. + * ? ( ) | [ ] { } ^ $`). In every other case it returns the text
encoded as UTF-8 bytes, with each run of an odd number of backslashes
lengthened by one. Runs of even length are left as they are.

`escape_backslashes(content)` applies the same rule to any `bytes`. It
always makes the change and never returns `None`.

## What it does not do

This package only escapes backslashes. It does not parse or write YAML, and
it does not change quotes or any other characters.

## Running the tests

```
pip install ymlescape[test]
pytest
```