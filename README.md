# eposuser

These are the user-space pieces of a small teaching operating system, written
in pure Python. Each module stands on its own, and the package depends on
nothing outside the standard library.

## Modules

### `eposuser.fixedpt`

Signed 24.8 fixed-point arithmetic on plain integers. A value is the number
multiplied by 256. Results wrap like 32-bit signed integers.

- `from_float(r)` rounds half away from zero. `from_int(i)` converts an integer.
- `to_int(f)` returns the whole part and rounds toward minus infinity.
  `frac_part(a)` returns the low 8 bits.
- `mul(a, b)` multiplies. `div(a, b)` divides and truncates toward zero; it
  raises `ZeroDivisionError` for a zero divisor.
- `to_str(a, max_dec=-1)` formats a value as a decimal string. A `max_dec` of
  -1 gives 2 digits and -2 gives 15. One trailing zero is cut off.
- The module also provides the constants `ONE`, `ONE_HALF`, `TWO`, `PI`,
  `TWO_PI`, `HALF_PI` and `E`.

### `eposuser.charclass`

ASCII classification: `islower`, `isupper`, `isalpha`, `isdigit`, `isalnum`,
`isxdigit`, `isspace`, `isblank`, `isgraph`, `isprint`, `iscntrl`, `isascii`
and `ispunct`. The case mappings are `tolower` and `toupper`. Each function
accepts an integer code or a one-character string. The case mappings return
the same kind of value they were given.

### `eposuser.mathlib`

- `fabs` returns the absolute value.
- `floor`: a negative value that is already whole still drops by one.
- `ceil` rounds up.
- `sin`, `cos`, `tan` and `cot`. `sin` and `cos` return their argument
  unchanged when `|x| >= 2**63`.
- `sqrt`, `atan2`, `exp` and `log`.
- The two-argument `log2(x, y)` computes `y * log2(x)`.
- `pow(x, y)` is computed as `2 ** (y * log2(x))`. A negative base gives NaN.
- `atan` uses argument reduction and a polynomial approximation.

Invalid inputs give NaN rather than raising an exception.

### `eposuser.stdlib`

Integer helpers for a 32-bit machine, plus the `limits.h`-style constants
such as `INT_MAX`, `LONG_MIN` and `ULONG_MAX`.

- **Division.** `div(numer, denom)` and `ldiv(numer, denom)` truncate toward
  zero and return a `DivResult(quot, rem)`.
- **Random numbers.**
  - `ParkMillerRandom` is the minimal standard generator. Its default seed is
    1. Use `seed(seed)` to restart it and `rand()` to get the next value, in
    `0..RAND_MAX`.
  - `rand_r(seed)` returns `(value, new_seed)`.
- **Parsing.**
  - `strtol(text, base=10)` returns `(value, end_index)`. The end index is 0
    when no digits were found. Base 0 recognises the `0x`, `0b` and octal
    prefixes. Values that overflow saturate.
  - `strtoul(text, base=10)` is the unsigned version.
  - `atol(text)` parses a decimal value.
- **Configuration.** `sysconf(SC_PAGESIZE)` returns 4096. Any other name
  raises `ValueError`.

### `eposuser.qsort`

`qsort(items, cmp)` sorts a list in place using a three-way comparison
function. It uses median-of-three pivots, a ninther for large inputs and
three-way partitioning. The sort is not stable.

### `eposuser.heap`

`ChunkHeap(size)` is a thread-safe first-fit allocator over a `bytearray`
(`heap.memory`).

- Addresses are byte offsets into that array. Each chunk has a 16-byte header
  (`HEADER_SIZE`).
- `malloc(size)` returns an address, or `None` when nothing fits or the size
  is zero.
- `free(address)` releases a chunk. It ignores `None` and addresses that the
  heap did not hand out. Neighbouring free chunks are merged.
- `calloc(num, size)` returns zeroed memory.
- `realloc(address, size)` moves the data to a new block.
- `chunks()` returns a snapshot of `Chunk(offset, size, used)` entries.

### `eposuser.graphics`

- **Colours.** `rgb` and `rgba` pack colour values. `red`, `green`, `blue` and
  `alpha` unpack them.
- **VESA blocks.** `parse_vbe_info(data)` decodes a 512-byte controller block
  into a `VBEInfo`. `parse_mode_info(data)` decodes a 256-byte mode block into
  a `ModeInfo`.
- **Devices.** `create_device(mode_info, vbe_version)` builds a
  `GraphicDevice`. The device is linear when the mode has a linear frame
  buffer. Otherwise it is banked, and each bank is a separate window buffer.
- **Drawing.**
  - `GraphicDevice.set_pixel(x, y, cr)` writes pixels at 2, 8, 15, 16, 24 or
    32 bits per pixel. It ignores points that are off screen. Depths of 1 and
    4 bits are not drawn.
  - `line(x1, y1, x2, y2, cr)` draws with the midpoint algorithm.
  - `switch_bank(bank)` selects a window of a banked mode.

### `eposuser.drawing`

`Painter(canvas, sleep=time.sleep, delay_seconds=50e-6)` draws bar charts on
any object that has `set_pixel` and `line`, such as a `GraphicDevice`. Its
methods are:

- `draw_bar`, `draw_arr`, `highlight_bar` and `draw_swap`. `draw_swap` also
  swaps the two elements.
- `draw_boundary` and `draw_process`.
- `clear` and `delay`.

The painter pauses briefly after each bar.

### `eposuser.sorting`

- `create_array(size, rng=None)` returns values in `0..999`.
- `insertion_sort(arr, painter=None, l_edge=0)` and `bubble_sort(...)` sort in
  place. When a painter is given, they animate every swap.
- `selection_sort(arr)` sorts in place.
- `quick_sort(arr, low=0, high=None, on_swap=None)` sorts in place and calls
  `on_swap(arr, i, j)` after every exchange.

### `eposuser.control`

`PriorityControl(producer, consumer, set_priority, *, self_tid=None,
get_priority=None, painter=None)` sets both tasks to priority 20.
`handle_key(key)` then applies one arrow key:

- Up and Down change the producer's priority.
- Left and Right change the consumer's priority.

Priorities stay within `0..39`. The method returns `True` when a priority
changed. `Key` lists the arrow-key scan codes.

## Example

```python
from eposuser import fixedpt
from eposuser.heap import ChunkHeap
from eposuser.stdlib import strtol

print(fixedpt.to_str(fixedpt.from_float(3.14159), -1))   # 3.14

heap = ChunkHeap(1024 * 1024)
block = heap.malloc(17)
heap.free(block)

value, end = strtol("0x1f tail", 0)                       # (31, 4)
```

## What this package does not do

This is a library only. It has no command to run, and it does not run tasks or
schedule anything. `PriorityControl` only calls the functions you pass it.
`graphics` never talks to a real video BIOS or sets a display mode. It parses
information blocks you supply and draws into frame buffers held in memory.
Nothing is shown on a screen unless you display those buffers yourself.

## Tests

```
pip install -e .[test]
pytest
```