# wordgridgen

Generate word search puzzles from two word lists: one of horizontal
words and one of vertical words. The generator looks for shared letters
so that the words cross. It tries to keep the grid as small and as
close to square as it can.

Each word is placed by the cell that holds its last letter. A
horizontal word reads left to right and ends at that cell. A vertical
word reads top to bottom and ends at that cell.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input

The input is a YAML file that maps `horizontal` and `vertical` to lists
of strings:

```yaml
horizontal:
  - PYTHON
  - GRID
  - SEARCH
vertical:
  - PUZZLE
  - WORD
  - LETTER
```

Both keys must be present. Either list may be empty, but not both. The
words are used exactly as written; they are not upper-cased. Empty
words are not accepted.

## Generating a puzzle

```
wordgridgen --input words.yaml
```

Options:

- `-i`, `--input PATH`: the YAML file with the word lists (required).
- `-s`, `--silent`: print only the final grid, with no progress messages.
- `--max-attempts N`: the attempt budget (default 1000).
- `-V`, `--version`: print the version and exit.

### How the search works

The generator first estimates a grid size from the word lengths and
word counts. It then tries several strategies in turn, on grids from
0.6 to 1.2 times that size. Each strategy gets a fifth of
`--max-attempts`.

The first strategy that places every word wins. Its layout is then:

1. improved by a short simulated-annealing pass;
2. cropped to its used area;
3. cleared of any empty rows and columns.

### Output

Without `--silent`, the program prints:

- its progress;
- the final grid size, as height×width;
- each placed word, with its direction and its starting (top-left)
  cell as `(row, col)`;
- the grid.

Empty cells are shown as `.`.

### Errors and exit status

The program prints an error and exits with status 1 when:

- the input file cannot be read;
- the input is not valid YAML, or lacks either list;
- the input holds no words;
- no layout could be found.

If no layout is found, raising `--max-attempts` or shortening the words
usually helps.

The search is randomised, so two runs on the same input can give
different grids.

## Limitations

Empty cells are left as `.`; the package does not fill them with random
letters. It does not print a separate answer key, only the list of
placed words shown without `--silent`. There is no option for other
word directions such as diagonals.

## Smaller tools

### `wordgridgen-simple`

```
wordgridgen-simple words.yaml
```

This command reads a plain list file with `horizontal:` and `vertical:`
section lines, followed by lines of the form `- "WORD"`. Quotes are
stripped, words are upper-cased and lines starting with `#` are
ignored.

It places up to three words at fixed anchors on a 20×20 grid, then
prints the whole grid:

- the first horizontal word ends at row 5, column 15;
- the first vertical word ends at row 15, column 8;
- the second horizontal word ends at row 10, column 12.

A word that does not fit or clashes with another is left out. The
program still reports it as placed.

### `wordgridgen-minimal`

```
wordgridgen-minimal HELLO WORLD
```

This command takes words on the command line and prints a 10×10 grid:

- The first word is written backwards along row 2, starting at
  column 8. At most 9 letters are used.
- The second word is written upwards in column 5, starting at row 7.
  At most 8 letters are used.

## Using it from Python

The building blocks live in these modules:

- `wordgridgen.grid`: `Grid`, `Direction` and `PlacedWord`. `Grid` has
  `can_place_word`, `place_word`, `remove_word`, `calculate_used_area`,
  `get_used_dimensions`, `compact`, `try_remove_empty_rows_cols` and
  `render`.
- `wordgridgen.generator`: `WordSearchGenerator`. It sorts the word
  lists longest first and scores intersections, placements and whole
  layouts. It takes an optional `random.Random` for reproducible runs.
  The module also defines `Intersection` and `PlacementCandidate`.
- `wordgridgen.search`: `generate`, together with the individual
  strategies `generate_optimized`, `generate_intersection_first`,
  `generate_with_size` and `simulated_annealing`.
- `wordgridgen.cli`: `load_word_lists` and `main`.
- `wordgridgen.simple`: `parse_simple_input`, `build_demo_grid` and
  `main`.
- `wordgridgen.minimal`: `build_minimal_grid`, `render_minimal_grid`
  and `main`.

```python
import random

from wordgridgen.generator import WordSearchGenerator
from wordgridgen.search import generate

gen = WordSearchGenerator(["PYTHON", "GRID"], ["PUZZLE", "WORD"],
                          silent=True, rng=random.Random(1))
result = generate(gen, 200)
if result is not None:
    grid, placed = result
    print(grid.render(), end="")
```