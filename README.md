# reqdepgraph

`reqdepgraph` reads a Markdown requirements document, finds the requirement
definitions inside its ` ```yaml ` blocks and writes a plain-text report of
how the requirements depend on each other.

## Input format

Requirement tags look like `REQ-XX-YYYY-DDDD`: two upper-case letters, four
upper-case letters and four digits, not followed directly by another letter
or digit. Inside a block opened by a line containing ` ```yaml `, the parser
looks at three kinds of line:

```yaml
ID: REQ-AB-CDEF-0002
Parents: REQ-AB-CDEF-0001
Children: REQ-AB-CDEF-0003, REQ-AB-CDEF-0004
```

- `ID:` sets the current requirement. If the word after it is a valid tag,
  the requirement is added to the map.
- `Parents:` and `Children:` list IDs separated by commas; each entry is
  linked to the current requirement if it is a valid tag. `--` means "none".
  These lines are ignored while the current ID is not a valid tag.

The block ends at the next line containing ` ``` `, and the current ID ends
with it. Lines outside such blocks are ignored.

## Running

```
pip install .
reqdepgraph [PATH] [-o OUTPUT] [--no-pause]
```

- `PATH` is the document to read. If it is left out, the command asks for a
  path and keeps asking until it gets a file that can be opened, then shows
  that file's first three lines.
- `-o`, `--output` names the report file; it defaults to
  `rdgg-report-57045714.md` in the current directory.
- `--no-pause` skips waiting for Enter before the command exits.

While parsing, each requirement and link found is printed with its line
number. The report starts with the first three lines of the input and a blank
line, followed by one entry per requirement, then its parents, then its
children:

```
Line 12: REQ-AB-CDEF-0002 --
Line 13: REQ-AB-CDEF-0001 -> REQ-AB-CDEF-0002
Line 14: REQ-AB-CDEF-0002 -> REQ-AB-CDEF-0003
```

Each line number is the line of the document where that ID or link was found.
After writing the report, the command prints the contents of the map. It
exits with status 1 if the input or the report file cannot be opened, or if
input ends while asking for a path.

## Using it as a library

```python
from reqdepgraph.dependency_map import DependencyMap
from reqdepgraph.parse import parse_file
from reqdepgraph.draw_diagram import diagram_lines

deps = DependencyMap()
parse_file("requirements.md", deps, print)
for line in diagram_lines(deps):
    print(line)
```

- `reqdepgraph.dependency_map`: `DependencyMap` keeps `Requirement` objects in
  the order they were added; it supports `len()`, iteration, `in`, `find()`,
  `is_empty()`, `add_requirement()`, `add_parent()`, `add_child()` and
  `describe()`. Each `Requirement` holds `parents` and `children` lists of
  `Link` objects. Adding a duplicate requirement or link, or linking a
  requirement that is not in the map, raises `DependencyError`.
- `reqdepgraph.parse`: `is_req_tag()`, `parse_lines()` and `parse_file()`.
  The optional `log` callable receives progress messages; duplicates found
  while parsing are reported through it rather than raised.
- `reqdepgraph.draw_diagram`: `diagram_lines()` yields the report entries;
  `draw_diagram()` writes the full report to an open text stream.
- `reqdepgraph.io`: `head_lines()`, `prompt_for_file()` and
  `create_output_file()`.

## Limits

The report is plain text only; the package does not render a graphical
diagram or image of the dependencies, and it does not check that linked IDs
are themselves defined in the document.