# mdforge

Building blocks for writing Markdown parsers and their plugins. Pure Python,
no dependencies outside the standard library.

## Installation

```
pip install mdforge
```

## Modules

### `mdforge.ruler`

`Ruler` is an ordered registry of values with dependency resolution.
`Ruler.add(mark, value)` returns a `RuleItem` whose chainable methods place it:

- `before(mark)` / `after(mark)` — order relative to rules with that mark
  (ignored if no such rule exists);
- `before_all()` / `after_all()` — place as early / late as dependencies allow;
- `alias(mark)` — give the rule another mark, so several rules can be
  targeted together;
- `require(mark)` — demand that a rule with that mark exists.

Iterating a `Ruler` yields the values in resolved order; `compile()` returns
them as a list. `remove(mark)` drops every rule with that mark, and
`contains(mark)` (or `mark in ruler`) checks for one. The order is computed
once and recomputed after any change. A cycle raises `CyclicDependencyError`
with the path in its message (for example
`cyclic dependency: "A" < "B" < "C" < "A"`); a missing required rule raises
`MissingDependencyError` (`missing dependency: "C" requires "Z"`).

```python
from mdforge.ruler import Ruler

chain = Ruler()
chain.add("hello", lambda s: s.append("hello"))
chain.add("world", lambda s: s.append("world"))
chain.add("open", lambda s: s.append("[ ")).before("hello")
chain.add("close", lambda s: s.append(" ]")).after("world")
chain.add("comma", lambda s: s.append(", ")).after("hello").before("world")
chain.add("bang", lambda s: s.append("!")).require("world").after("world").before_all()

parts = []
for rule in chain:
    rule(parts)
assert "".join(parts) == "[ hello, world! ]"
```

### `mdforge.sourcemap`

`SourceWithLineStarts(src)` maps UTF-8 byte offsets in `src` to
`(line, column)` pairs through `get_position(byte_offset)`. Lines start at 1;
`\n`, `\r` and `\r\n` each count as one line break. `SourcePos(start, end)`
holds the byte offsets of a node (end exclusive); `get_byte_offsets()` returns
them and `get_positions(source_map)` returns
`((line_start, column_start), (line_end, column_end))`.

```python
from mdforge.sourcemap import SourcePos, SourceWithLineStarts

source_map = SourceWithLineStarts("123\n456")
assert SourcePos(100, 0).get_positions(source_map)[0] == (2, 3)
```

### `mdforge.utils`

- `unescape_all(text)` — decode HTML entities and backslash escapes;
- `replace_entity_pattern(text)`, `get_entity_from_str(text)`,
  `is_valid_entity_code(code)` — entity lookup and validation;
- `escape_html(text)` — escape `& " < >`;
- `normalize_reference(text)` — case-fold and collapse whitespace in
  reference labels;
- `rfind_and_count`, `find_indent_of`, `calc_right_whitespace_with_tabstops`,
  `cut_right_whitespace_with_tabstops` — tab-aware indentation helpers
  (tabstop 4);
- `is_punct_char(ch)` — Unicode punctuation check.

```python
from mdforge.utils import cut_right_whitespace_with_tabstops, normalize_reference, unescape_all

assert unescape_all("&amp; \\*") == "& *"
assert normalize_reference("Foo   Bar") == normalize_reference("foo bar")
assert cut_right_whitespace_with_tabstops("\t\t", 6) == "  \t"
```

### `mdforge.typekey`

`TypeKey` is compared and hashed by its `id` and shown by its `name`.
`type_key(kind)` builds one for a class, named `module.QualName`.

### `mdforge.links`

`parse_link_destination(text, start, maximum)` parses a `<href>` or bare
`href` at `start`; `parse_link_title(text, start, maximum)` parses a
`"title"`, `'title'` or `(title)`. Both look only at `text[start:maximum]` and
return a `ParseLinkFragmentResult` (`pos` just past the fragment, `lines`
crossed, unescaped `text`) or `None`.

```python
from mdforge.links import parse_link_title

result = parse_link_title('"a\\"b" rest', 0, 11)
assert (result.pos, result.text) == (6, 'a"b')
```

## What it does not do

mdforge is a set of parts, not a Markdown processor: it has no block or inline
parser, no syntax tree, no HTML renderer and no command-line tool. It does not
resolve link references or parse the label part of links.

## Running the tests

```
pip install -e ".[test]"
pytest
```