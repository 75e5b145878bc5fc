# curvepass

`curvepass` derives a password from a master key and an application name.
It stores nothing. The same two inputs always give the same password.

## How it works

1. The master key is hashed with SHA3-512. The 512 bits are split into eight
   64-bit chunks. The low 52 bits of each chunk become a number in `[0, 1)`.
2. Six of those numbers define a tangent curve
   `g * ((c * tan(a*x + b) + d) / f)`. The other two define a straight line
   `k*x + h`. The first eight intersection points are found by bisection
   between neighbouring asymptotes. Digits from the fractional part of their
   coordinates give sixteen two-digit codes, one for each hexadecimal digit
   `0`–`F`.
3. The application name is also hashed with SHA3-512. The lower 256 bits
   choose a character class for each of the 16 positions: upper-case letter,
   lower-case letter, digit or special character. The upper 256 bits are read
   as hexadecimal and passed through the digit map from step 2. The result
   picks the character within that class.

The special characters are `-_+=.@#^&*~` and the backtick.

## Installation

```
pip install .
```

The package uses only the Python standard library. It needs Python 3.10 or
later.

## Command line

```
curvepass [MASTER] [APP_NAME]
```

The command prints the master key, then the application name, then the derived
password in a bold cyan box. If you leave out the arguments, the master key
defaults to `Master` and the application name to `Google`.

## Library use

```python
from curvepass.generator import derive_password

master = "password"
print(derive_password(master, "example"))
```

Both arguments can be `str`, which is encoded as UTF-8, or `bytes`.

You can also use the parts on their own. Bit sequences are plain `int`s, and
bit `i` of the integer is position `i` of the sequence.

- `curvepass.hashing.sha3_512_bits`: the SHA3-512 digest as a 512-bit `int`.
- `curvepass.bits`:
  - `bits_from_bytes`, `bits_to_double`, `bits_to_uniform` and `split_to_doubles` convert between bytes, bits and floats.
  - `format_bits` and `bits_to_string` render bit sequences as text.
- `curvepass.numconv`:
  - `map_to_range` maps a number onto a range.
  - `extract_fraction_digits` takes digits from the fractional part of a number.
  - `to_base` and `from_base` convert integers to and from text in bases 2 to 16. Helpers such as `bin_to_hex`, `bin_to_tern`, `to_hex` and `from_bin` cover common bases.
- `curvepass.functions`: the two curves.
  - `TangentialFunction` and `LinearFunction` can be called like functions. `TangentialFunction.asymptote(n)` gives the n-th asymptote. Each curve has a `describe()` method that returns its parameters as text.
  - `Point` is a frozen `(x, y)` pair.
- `curvepass.intersection.IntersectionFinder`: finds the intersections of the two curves. It raises `NoSignChangeError` when the difference between the curves has the same sign at both ends of an interval.
- `curvepass.hexmap`:
  - `params_from_master` derives the curve parameters from a master key.
  - `row_numbers_for_map` gives the sixteen codes.
  - `hex_digit_map` maps each hexadecimal digit to its code.
- `curvepass.mask.password_mask`: the character class of each of the 16 positions, as `CharClass` members (`UPPER`, `LOWER`, `DIGIT`, `SPECIAL`).
- `curvepass.generator`:
  - `generate_password` and `apply_password_mask` assemble the final password.
  - `format_password_box` returns the boxed output that the command prints.

Intermediate values are written to the standard `logging` module at `DEBUG`
level: hash bits, chunks, intersection points, codes and the mask. To see
them, turn on debug logging for the `curvepass` loggers.

## Limitations

- `derive_password` raises `NoSignChangeError` when the curves for a master
  key have no sign change on one of the intervals between asymptotes. The
  package does not try another interval.
- Nothing is saved. The package has no vault, no clipboard support and no
  interactive prompt. On the command line the master key is an ordinary
  argument, so it can end up in shell history and process listings.
- Passwords are always 16 characters long. The length and the character sets
  cannot be configured.

## Running the tests

```
pip install .[test]
pytest
```