# bidikit

Pure-Python building blocks for bidirectional text. It covers:

- the bidi character types and paragraph directions of the Unicode
  Bidirectional Algorithm;
- Arabic joining types and the cursive joining algorithm;
- the run lists used while resolving levels;
- removal of explicit bidi marks from a text.

It has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `bidikit.types`

- `BidiType`: an enum of the bidi character types (`LTR`, `RTL`, `AL`, `EN`,
  ... `PDI`, `SENTINEL`). It has the aliases `L`, `R`, `B` and `S`. Each
  member has a one-character `symbol`.
- `ParType`: the paragraph directions `LTR`, `RTL`, `ON`, `WLTR` and `WRTL`.
- `Flags`: an `IntFlag` of option bits. It includes the combinations
  `DEFAULT` and `ARABIC`.
- `level_is_rtl(level)`: true for odd embedding levels.
- `is_isolate(bidi_type)`: true for LRI, RLI, FSI and PDI.
- `is_explicit_or_bn(bidi_type)`: true for LRE, RLE, LRO, RLO, PDF and BN.
- `bidi_type_symbol(bidi_type)`: returns the one-character symbol of a type.
- `set_debug(state)` and `debug_status()`: switch debug messages on the
  `bidikit` logger on or off. When debugging is on, messages are written to
  standard error.
- Constants: `NO_BRACKET`, `SENTINEL`, `LEVEL_INVALID` and the algorithm
  limits `BIDI_MAX_EXPLICIT_LEVEL`, `BIDI_MAX_RESOLVED_LEVELS` and
  `BIDI_MAX_NESTED_BRACKET_PAIRS`. The module also has code points such as
  `CHAR_LRM`, `CHAR_RLM` and `CHAR_ZWJ`.

### `bidikit.joining_types`

- `JoiningType`: an `IntEnum` of the joining classes `U`, `R`, `D`, `C`, `T`,
  `L` and `G`. Each member has a `symbol`. Its `matches(prop)` method tests
  whether an Arabic property falls into that class.
- An Arabic property is a plain integer built from the masks
  `MASK_JOINS_RIGHT`, `MASK_JOINS_LEFT`, `MASK_ARAB_SHAPES`,
  `MASK_TRANSPARENT`, `MASK_IGNORED` and `MASK_LIGATURED`.
- `joining_type_name(value)`: returns the class name, or `"?"` for any other
  value.
- `classify(prop)`: returns the `JoiningType` a property falls into, or
  `None`.
- Bit-level queries on a property:
  - `joins_right`, `joins_left` and `arab_shapes`;
  - `is_join_skipped` and `is_join_base_shapes`;
  - `joins_preceding_mask(level)` and `joins_following_mask(level)`;
  - `join_shape`;
  - `char_from_joining_type(prop, visual)`. In a visual run it swaps the
    left and right sides.

### `bidikit.joining`

- `join_arabic(bidi_types, embedding_levels, ar_props)`: applies the Arabic
  cursive joining rules and returns a new list of refined properties. Joins
  are broken across level changes. Explicit codes and BN are treated as
  having no level of their own. Transparent characters between two joined
  letters receive the joining bits as well. It raises `ValueError` if the
  three sequences differ in length. The inputs are not modified.

### `bidikit.runs`

- `encode_bidi_types(bidi_types, bracket_types=None)`: groups consecutive
  equal types into a `RunList`. Brackets and isolate codes always get runs
  of their own. It raises `ValueError` for an empty sequence or mismatched
  lengths.
- `Run`: a run with `type`, `pos`, `length`, `level`, `isolate_level` and
  `bracket_type`, links to its neighbours, and an `end` property.
- `RunList`: a circular list anchored by a sentinel run.
  - It supports iteration and `len()`.
  - `validate()` raises `ValueError` if the links are broken.
  - `shadow(over, preserve_length=False)` lays the runs of another list over
    this one, replacing what they cover. It leaves `over` empty.

### `bidikit.marks`

- `remove_bidi_marks(text, positions_to_this=None, positions_from_this=None,
  embedding_levels=None)`: removes explicit embedding, override and isolate
  controls, boundary neutrals, LRM and RLM.
  - `text` may be a `str` or a sequence of code points. Character classes
    come from Python's `unicodedata`.
  - The embedding levels and the position maps that come with the text are
    kept in step. Each list is returned only if it was given.
  - It returns a frozen `MarkRemoval` with `text`, `positions_to_this`,
    `positions_from_this` and `embedding_levels`.
  - `positions_to_this` keeps the input length and holds `-1` for every
    removed character.
  - Mismatched lengths or out-of-range positions raise `ValueError`.

## Example

```python
from bidikit.types import BidiType
from bidikit.joining_types import JoiningType, classify
from bidikit.joining import join_arabic
from bidikit.marks import remove_bidi_marks

types = [BidiType.AL, BidiType.AL, BidiType.AL]
levels = [1, 1, 1]
props = [JoiningType.D, JoiningType.D, JoiningType.D]
joined = join_arabic(types, levels, props)
print(joined)                          # [6, 7, 5]
print([classify(p).name for p in joined])

result = remove_bidi_marks("a\u200eb")
print(result.text)                     # "ab"
```

## What it does not do

bidikit does not provide a complete bidi implementation. The following are
not included:

- looking up the bidi type of characters, beyond what `remove_bidi_marks`
  needs internally;
- bracket pairing;
- resolving paragraph embedding levels;
- reordering lines;
- mirroring;
- Arabic presentation-form shaping;
- character-set conversion;
- a one-call logical-to-visual conversion.

There is no command-line tool. The caller supplies bidi types, embedding
levels and joining types.