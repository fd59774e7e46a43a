# cobfield

Helpers for working with COBOL-style fixed-width, blank-padded text fields
from Python. It has no dependencies outside the standard library.

## Modules

- `cobfield.misc`: small helpers for blank-padded text and pathnames:
  `trim_trailing`, `is_blank`, `center`, `charset_violation`,
  `delimited_length`, `double_blank_length`, `eat_tail`, `append_truncated`,
  `switchchar`, `dirname_length` and `mkdir_p` (creates missing parent
  directories).
- `cobfield.numconv`: strict conversion of text fields to numbers
  (`to_long`, `to_ulong`, `to_double`, `to_float`), which raise `ValueError`
  on bad or out-of-range text and allow trailing blanks, plus `pic9` and
  `picx` to take a leading fixed-width field from a string.
- `cobfield.codegen`: `has_special_chars`, `special_chars_hex` (upper-case
  hex of text holding control or non-ASCII bytes, blank padded to a width)
  and `hex_to_ascii` (decode hex digit pairs back into bytes).
- `cobfield.csv`: delimited record handling.
  - `CsvOptions` sets the delimiter, whether runs of delimiters count as
    one, and the escape convention (doubled quotes or backslashes);
    `CsvOptions.from_code` builds it from a three-character code such as
    `',N"'`.
  - `extract_field` returns one 1-based field blank padded to a width;
    `count_fields` counts the fields of a record.
  - `ColumnRegistry` maps headings (matched ignoring trailing blanks and
    ASCII case) or column numbers to fixed-width values. It loads headings
    from a record, unpacks records into its columns (`extract_record`) and
    writes columns back out as a record or a heading line (`emit_record`,
    `emit_headings`).
  - `CsvTruncated` is raised when a result does not fit its width; its
    `value` holds the truncated result.
- `cobfield.scinote`: `ecvt` returns a sign and significant digits with the
  decimal point position (`EcvtResult`); `scinotation` formats a value as
  `±d.dddE±nn` filling exactly a given width, optionally with engineering
  exponents, and returns a `SciNotation` with the text, the exponent and the
  offset of the `E`.
- `cobfield.numparse`: `parse_number` splits text such as
  `"-1,234.5E-3 kohms"` into a `ParsedNumber` with the number's digits, its
  exponent and the unit word that follows it, optionally checking the
  exponent against limits.
- `cobfield.trace`: `Tracer` writes level-filtered messages to the file named
  by `COBCURSES_TRACE`, with the level taken from `COBCURSES_TRACE_LEVEL`
  (5 when unset or invalid). It is also a context manager.
- `cobfield.environment`: `Environment` looks up variables, supplying
  defaults for `COBCURSES_TOPDIR`, `COBCURSES_DATADIR` and
  `COBCURSES_SHAREDIR`, and expands `${NAME}` references in pathnames
  (`substitute`, `expand_pathname`). `PathnameTruncated` is raised when an
  expanded pathname does not fit its width.
- `cobfield.files`: `check_path`, `make_path`, `make_directories`,
  `remove_file` and `set_variable`, all taking blank-padded fields.

## Installation

```
pip install cobfield
```

## Examples

```python
from cobfield.csv import CsvOptions, ColumnRegistry, extract_field

opts = CsvOptions.from_code(',N"')
print(repr(extract_field('a,"b, c",d', 2, 10, opts)))   # 'b, c      '

reg = ColumnRegistry()
reg.load_headings("NAME,CITY", opts)
reg.register_column("NAME", 8)
reg.register_column("CITY", 8)
reg.extract_record("Smith,Ottawa", opts)
print(repr(reg.value("CITY")))                          # 'Ottawa  '
```

```python
from cobfield.scinote import scinotation

print(scinotation(12345.0, 12, engineering=True).text)  # +12.3450E+03
```

```python
from cobfield.environment import Environment

env = Environment({"HOME": "/home/me"}, create_dirs=False)
print(env.substitute("${COBCURSES_DATADIR}/orders.dat"))
# /home/me/cobcurses/data/orders.dat
```

## What it does not do

cobfield is a library of field helpers only. It does not drive a terminal:
there is no screen, keyboard, colour or menu handling. `parse_number` reports
the unit word after a number but nothing here converts unit prefixes into
exponents or formats values with units.

## Tests

Install the `test` extra and run `pytest`.