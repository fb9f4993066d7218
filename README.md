# mudutils

Small, dependable helpers for everyday Python code: sequence operations,
byte-size formatting and parsing, structured exceptions, value checks,
random picks, debouncing/throttling/polling/retrying of async callables,
platform and environment probing, and a compact leveled logger.

## Installation

```
pip install mudutils
```

The package depends on `psutil` (physical CPU count) and `platformdirs`
(user config, cache and data directories).

To run the test suite from a checkout:

```
pip install -e ".[test]"
pytest
```

## Modules

Several modules define functions whose names match Python built-ins
(`array.range`, `array.max`, `array.min`, `array.sum`, `array.filter`,
`array.map`, `array.slice`, `bytes.bytes`). Import the module and call them
through it, or import the names deliberately.

### `mudutils.array`

Functions over lists and other sequences, each returning a new value:

- `range(start, end=None, step=None)`: integers from `start` up to `end`
  (exclusive); with no `end` the range is `[0, start)`. A step of zero raises
  `ArrayError`.
- `chunk(items, size)`: lists of at most `size` items; empty for a size of
  zero or less.
- `first(items, default)`, `last(items, default)`.
- `count_by(items, key_fn)`: a dict of counts per key.
- `diff(root, other, key_fn=None)`: items of `root` whose key is not among
  the keys of `other`.
- `fork(items, condition)`: a pair `(matching, rest)`.
- `max(items, getter=None)`, `min(items, getter=None)`: `None` when empty;
  on ties `max` returns the last and `min` the first of the equal items.
- `sum(items, getter)`, `sum_direct(items)`.
- `unique(items, key_fn=None)`: first occurrences only.
- `shuffle(items)`: a new list in random order.
- `find_index`, `find`, `some`, `every`, `filter`, `map`, `reduce(items,
  initial, reducer)`, `includes`, `index_of` (returns `None` when absent),
  `join(items, separator)`, `reverse`, `slice(items, start, end=None)`
  (bounds clamped to the length), `concat(arrays)`, `flat(nested)`.

### `mudutils.bytes`

- `ByteUnit`: `B`, `KB`, `MB`, `GB`, `TB`, `PB` (powers of 1024);
  `multiplier()` and `ByteUnit.from_str(text)` (case-insensitive).
- `BytesOptions`: `unit` (chosen automatically when `None`),
  `decimal_places` (2), `fixed_decimals` (`False`: trailing zeros are
  trimmed), `thousands_separator` (`""`), `unit_separator` (`""`).
- `Bytes`: `format(value, options=None)`, `parse(val)`, and the aliases
  `convert_number` and `convert_string`.
- `bytes(value)` and `parse_bytes(value)` use a shared `Bytes` instance.

Parsing accepts plain numbers (`"100"`) and numbers with a unit, with or
without a space, in any case (`"1.5 mb"`). Negative values and unknown
formats raise `BytesError`, a `ValueError`; so does formatting a negative
count.

### `mudutils.error`

`UtilsError` is the base of:

- `ArgumentError(message)`
- `ValidationError(field, message, value=None)`, also
  `ValidationError.with_value(...)`
- `ConfigError(key, message)`
- `NetworkError(operation, message, status_code=None)`, also
  `NetworkError.with_status(...)`
- `ParseError(text, expected, position=None)`, also
  `ParseError.with_position(...)`; the text is kept as `.input`

Each keeps its arguments as attributes and has a readable message, e.g.
`str(ArgumentError("test")) == "Argument error: test"`. The helpers
`argument_error`, `validation_error`, `config_error`, `network_error` and
`parse_error` build them.

### `mudutils.lang`

`is_empty` (`None` or an empty sized value), `is_zero`, `is_some`,
`is_none`, `get_type_name` (qualified with its module unless built in),
`is_equal`, and the string checks `is_numeric` (ASCII digits only),
`is_alphabetic`, `is_alphanumeric` and `is_identifier`. All string checks
return `False` for the empty string.

### `mudutils.async_utils`

`await sleep_async(ms)` suspends for `ms` milliseconds; a negative delay
raises `ValueError`.

### `mudutils.math`

`random_int(start, end)` (in `[start, end)`), `random_int_max(max_value)`
and `get_random_item_from_array(items)`. Invalid arguments raise
`MathError`, a `ValueError`.

### `mudutils.function`

Control over async callables that take no arguments. Times are in seconds.
Whenever a call is not run or does not succeed, `FunctionError` is raised;
its `kind` is `"timeout"`, `"retry_exhausted"`, `"polling"` or `"general"`.

- `Debouncer(wait, options=None)`: `execute(func)` waits `wait` seconds and
  then runs `func` (with `DebounceOptions(leading=True)` it runs at once);
  `cancel()`, `is_pending()`.
- `Throttler(wait, options=None)`: `execute(func)` runs `func` at most once
  per `wait`. With the default `ThrottleOptions(leading=False)` the very
  first call is refused; `cancel()` refuses all further calls.
- `Poller(options=None)`: `start(task, stop_condition)` runs `task` every
  `PollingOptions.interval` seconds until a result satisfies
  `stop_condition`, the task has failed `max_retries` times (with
  `quit_on_error`), `max_executions` is reached, or `stop()` is called.
  `status()` returns a `PollingStatus`.
- `with_retry(func, options=None)`: calls `func` up to
  `RetryOptions.max_retries + 1` times, waiting `delay` seconds between
  attempts.

### `mudutils.env`

`get_environment_info()` returns an `EnvironmentInfo` (os, arch, family,
executable and library suffixes/prefix, debug/release). Also: `is_windows`,
`is_macos`, `is_linux`, `is_unix`, `is_debug` (true unless Python runs with
`-O`), `is_release`, `is_64bit`, `is_32bit`, `get_current_dir`,
`get_env_var`, `get_env_var_or_default`, `get_all_env_vars`, `has_env_var`,
`get_cpu_count`, `get_physical_cpu_count`, `is_ci`, `get_home_dir`,
`get_config_dir`, `get_cache_dir`, `get_data_dir`, `get_temp_dir`, and
`run_on_os(os_name, func)`, `run_on_windows(func)`, `run_on_unix(func)`,
which call `func` only on the matching platform and otherwise return `None`.
OS names are `"windows"`, `"macos"` and `"linux"`.

### `mudutils.logger`

- `LogLevel`: `TRACE < DEBUG < INFO < WARN < ERROR`; `LogLevel.from_str`.
- `LogEntry` with `with_metadata(key, value)` and `with_metadata_map(dict)`,
  both returning copies.
- Formatters: `SimpleFormatter` (timestamp, `[LEVEL]`, `(name)`, message,
  metadata as JSON) and `JsonFormatter` (one JSON object, metadata keys at
  the top level). Subclass `LogFormatter` for others.
- Outputs: `ConsoleOutput` prints to standard output. Subclass `LogOutput`
  to send lines elsewhere.
- `LoggerConfig(name, level=INFO, ...)` with `with_level`, `with_formatter`
  and `with_output`, each returning a copy.
- `Logger`: `log`, `log_with_metadata`, `trace`, `debug`, `info`, `warn`,
  `error`, `is_enabled`, `Logger.with_name(name)`.
- A registry: `get_logger(name)`, `create_logger(config)` and
  `set_global_level(level)`.

## Examples

```python
from mudutils import array
from mudutils.bytes import BytesOptions, ByteUnit, Bytes, bytes, parse_bytes

array.range(5)                            # [0, 1, 2, 3, 4]
array.chunk([1, 2, 3, 4, 5, 6, 7], 3)     # [[1, 2, 3], [4, 5, 6], [7]]

bytes(1536)                               # "1.5KB"
parse_bytes("1.5MB")                      # 1572864
Bytes().format(1048576, BytesOptions(unit=ByteUnit.MB, decimal_places=3,
                                     fixed_decimals=True))   # "1.000MB"
```

```python
import asyncio
from mudutils.function import RetryOptions, with_retry

async def fetch():
    return 42

print(asyncio.run(with_retry(fetch, RetryOptions(max_retries=3, delay=0.5))))
```

```python
from mudutils.logger import JsonFormatter, LogLevel, Logger, LoggerConfig

logger = Logger(LoggerConfig("app").with_level(LogLevel.DEBUG).with_formatter(JsonFormatter()))
logger.info("started")
logger.log_with_metadata(LogLevel.WARN, "slow request", {"ms": 950})
```

## What it does not do

`mudutils` is a library only: it has no command-line program. The logger
writes only to standard output out of the box; file, network or rotating
outputs are left to your own `LogOutput` subclasses.