# yamlstream

Character sources and character classification for a YAML 1.2 scanner,
together with two command-line tools for producing large YAML inputs and for
timing YAML parsers against them.

## Character classes

`yamlstream.char_traits` holds predicates on single characters: `is_z`
(`"\0"`), `is_break`, `is_breakz`, `is_blank`, `is_blank_or_breakz`,
`is_digit`, `is_alpha`, `is_hex`, `is_flow`, `is_bom`, `is_yaml_non_break`,
`is_yaml_non_space`, `is_anchor_char`, `is_word_char`, `is_uri_char` and
`is_tag_char`. `as_hex` returns the value of a hexadecimal digit and raises
`ValueError` for any other character.

## Inputs

`yamlstream.input.Input` is the base class a scanner reads characters from.
It offers lookahead (`lookahead`, `peek`, `peek_nth`, `look_ch`), consumption
(`skip`, `skip_n`, `raw_read_ch`, `raw_read_non_breakz_ch`), tests on the next
characters (`next_is_blank`, `next_is_flow`, `next_can_be_plain_scalar`, …),
document-marker detection (`next_is_document_start` for `---`,
`next_is_document_end` for `...`, `next_is_document_indicator` for either) and
skipping helpers (`skip_while_blank`, `skip_while_non_breakz`,
`fetch_while_is_alpha`).

`skip_ws_to_eol(SkipTabs.YES | SkipTabs.NO)` skips spaces (and tabs, with
`SkipTabs.YES`) and a trailing comment, up to but not including the end of the
line. It returns the number of characters consumed and a `WhitespaceSkip`
telling whether tabs and spaces were found. A `#` that directly follows a
token raises `CommentSeparationError`, whose `consumed` attribute holds the
number of characters skipped before it.

Two inputs are provided:

- `yamlstream.str_input.StrInput` reads from a string held in memory. Every
  character is available at once; past the end, `"\0"` is returned.
- `yamlstream.buffered.BufferedInput` reads from any iterable of characters
  through a lookahead buffer of 16 characters. Characters must be looked ahead
  before they are peeked; once the iterable is exhausted the buffer is padded
  with `"\0"`. Looking ahead past the capacity raises `OverflowError`.

```python
from yamlstream.buffered import BufferedInput
from yamlstream.char_traits import is_flow
from yamlstream.input import SkipTabs
from yamlstream.str_input import StrInput

src = StrInput("---\nkey: value\n")
src.lookahead(4)
assert src.next_is_document_start()
assert src.next_is_document_indicator()

line = StrInput("   # a comment\nnext")
consumed, found = line.skip_ws_to_eol(SkipTabs.YES)
assert consumed == 13 and found.has_valid_yaml_ws
assert line.next_is_break()

stream = BufferedInput("[a, b]")
stream.lookahead(2)
assert stream.peek() == "["
assert is_flow(stream.peek())
stream.skip()
assert stream.peek() == "a"
```

## Generating large YAML files

`yamlstream.generators` holds random helpers that take a `random.Random`:
`hex_string`, `email` (addresses at `example.com`), `url`, `integer`,
`alnum_string`, `string_from_set`, `name`, `full_name`, `lipsum_words`,
`words`, `paragraph` and `text`.

`yamlstream.nested` builds a random tree (`Tree`) and writes it as a deeply
nested mapping whose leaves are `a: 1`; `create_deep_object` does both:

```python
import io
from yamlstream.nested import create_deep_object

out = io.StringIO()
create_deep_object(out, 100)
print(out.getvalue())
```

`yamlstream.gen_large.Generator` writes block sequences of records
(`gen_record_array`), of authors (`gen_authors_array`) and of one-line strings
(`gen_strings_array`). The whole benchmark corpus is written by:

```sh
yamlstream-gen-large [OUTPUT_DIR]
```

It creates `OUTPUT_DIR` (by default `bench_yaml`) with `big.yaml`,
`nested.yaml`, `small_objects.yaml` and `strings_array.yaml`. The generators
use a fixed seed, so the output is the same from run to run. The files are
large and take a while to write.

## Comparing parsers

`yamlstream-bench-compare` runs the `run_bench` program of several YAML
parsers against every `.yaml` file (extension in any case) of a directory and
collects their average times. It reads `bench_compare.toml` from the current
directory:

```toml
yaml_input_dir = "bench_yaml"
iterations = 10
yaml_output_dir = "bench_results"
csv_output = "bench_results.csv"

[[parsers]]
name = "first"
path = "/path/to/first/bin"

[[parsers]]
name = "second"
path = "/path/to/second/bin"
```

Then run:

```sh
yamlstream-bench-compare run_bench
```

Each parser's program is started as
`<path>/run_bench <input> <iterations> --output-yaml` and must print a YAML
report with the fields `parser`, `input`, `average`, `min`, `max`,
`percentile95`, `iterations` and `times`. Each report is saved to
`yaml_output_dir` as `<parser>-<input>`, and a CSV with one row per input file
and one column per parser is written to `csv_output`. A program that exits
non-zero or prints invalid YAML is recorded with a time of `0`.

With no parsers configured, the command only asks for one to be added; with
any argument other than `run_bench` or `time_parse`, it prints its usage. A
missing or invalid configuration file is reported and the command exits
with status 1.

## What this package does not do

The package provides the character inputs a YAML scanner reads from, not the
scanner itself: it does not tokenize YAML, produce parse events or load
documents. The `time_parse` mode of `yamlstream-bench-compare` is accepted but
not available; it reports so and exits with status 1.

## Tests

```sh
pip install -e ".[test]"
pytest
```