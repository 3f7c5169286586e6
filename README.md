# skalog

A small logging library built around output patterns. A logger accepts
messages in a fixed range of levels and drops messages below a level set at
run time. It formats each message with a pattern chosen by the message's
level and writes it to any number of text streams. Each stream has its own
filter. Messages are written straight away or handed to a background worker
thread.

The package has no dependencies outside the standard library.

## Writing a log line

```python
import io

from skalog.entry import LogLevel
from skalog.logger import Logger

buffer = io.StringIO()
logger = Logger()
logger.add_output_target(buffer)
logger.set_pattern(LogLevel.INFO, "%v")

logger.log(LogLevel.INFO, "test", " with ", 4, " entries ?")
assert buffer.getvalue() == "test with 4 entries ?\n"
```

`Logger.log(level, *args, wrapped=None, function=None, file=None, line=None)`
turns each argument into text with `str` and writes them, one after another,
as a single log line. If `function`, `file` or `line` is not given, it is taken
from the caller's frame.

`Logger.entry(level, wrapped, function, file, line)` returns a `LogEntry` for
building a message in parts. You add text to it with `<<` or
`write(*args)`. The entry goes to the logger when you call `close()` or when
its `with` block ends:

```python
with logger.entry(LogLevel.INFO) as entry:
    entry << "value: " << 42
```

An entry is handed over at most once. Closing it a second time does nothing.

## Levels

`LogLevel` has the levels `DEBUG`, `INFO`, `WARN` and `ERROR`, in that order,
and a `DISABLED` level above them all.

* `Logger(min_level, max_level, method, output, log_filter)` fixes a range of
  levels. Messages outside that range are never written.
  `Logger.accepts(level)` tells whether a level is in range. A `min_level`
  above `max_level` raises `ValueError`.
* `Logger.configure_log_level(level)` sets the lowest level written at run
  time. Setting it to `DISABLED` silences the logger. The current value is
  `Logger.log_level`.
* Logging at `DISABLED` raises `ValueError`.

### Levels per class

The `wrapped` argument of `log` and `entry` names the object a message is
logged for, usually a class.

* `configure_class_level(wrapped, level)` sets the lowest level kept for it.
  `class_level(wrapped)` reads that level back and defaults to `DEBUG`.
* `class_name(wrapped)` is the text shown by the `%C` placeholder. It is the
  object's `log_class_name` attribute, or an empty string.

## Outputs and filters

`Logger.add_output_target(output, log_filter)` adds a text stream. A constructor
`output` argument does the same.

The filter takes a `LogEntry` and returns whether the entry goes to that
stream. A filter can look at:

* `entry.message`
* `entry.context`, which has `log_level`, `class_name`, `function`, `file` and
  `line`
* `entry.date`

Without a filter, `identity_filter` accepts every entry. A log line goes to
every stream whose filter accepts it, in the order the streams were added.

Colour placeholders write ANSI escape sequences only when the stream is
`sys.stdout`. On any other stream they write nothing.

## Patterns

Every logger starts with one pattern per level. Each default pattern shows:

* the time, as hour, minute, second and millisecond
* the level name
* the file name and line number
* the message

`Logger.set_pattern(level, pattern)` replaces the pattern for a level.

A pattern is literal text mixed with placeholders of the form `%[width]X`:

| Placeholder | Writes |
|-------------|--------|
| `%v` | the message |
| `%y` | year |
| `%M` | month, two digits |
| `%d` | day, two digits |
| `%h` | hour, two digits |
| `%m` | minute, two digits |
| `%s` | second, two digits |
| `%T` | milliseconds, three digits |
| `%NC` | class name, cut to N characters and right-aligned in N |
| `%NF` | file name without its directory, cut to N characters and right-aligned in N |
| `%Nf` | function name, cut to N characters and right-aligned in N |
| `%Nl` | line number, zero-padded to at least N digits |
| `%i` | an identifier of the entry object |
| `%Nc` | switch the terminal colour to colour number N (see `skalog.colors.Color`) |

`%C`, `%F` and `%f` without a width write nothing.

A pattern raises `PatternError`, a subclass of `ValueError`, when it has:

* an unknown placeholder letter
* a digit-only placeholder
* a trailing `%`

`tokenize(pattern)` returns the parsed `Token` list. `Tokenizer(pattern)` is the
same list as an immutable, indexable sequence. Both are in `skalog.tokenizer`.

### Patterns inside messages

After `Logger.enable_complex_logging()`, the message itself is read as a
pattern. This applies to present and future streams. With the pattern `%v`, a
message `test %6F` writes `test ` followed by the file name, fitted to six
characters.

A `%v` inside a message writes nothing, so a message cannot expand itself
without end. Because the message is parsed as a pattern, a stray `%` in it
raises `PatternError`.

## Several loggers at once

`MultiLogger(*loggers)` groups loggers, each with its own level range, streams
and patterns. A call to `MultiLogger.log(...)` or a closed
`MultiLogger.entry(...)` goes to every logger whose range accepts the level.
Per-class levels are checked once for the group.

`multi[index]` gives access to one of the loggers for configuration.
`len(multi)` and iteration work over the loggers. `MultiLogger.terminate()`
terminates each of them.

## Asynchronous writing

How a finished entry is written depends on the logger's `method`. The methods
are in `skalog.dispatch`:

* `LogSync`, the default, writes the entry on the calling thread.
* `LogAsync` copies the entry and queues the copy for a worker thread.

```python
from skalog.dispatch import LogAsync

logger = Logger(method=LogAsync())
```

`Logger.terminate()` (or `MultiLogger.terminate()`) waits until the worker has
written every queued entry, then stops it. Call it before reading the output.

The worker is an `ActiveObject` from `skalog.fifo`. It runs queued callables in
order on a daemon thread, and takes them from a blocking, thread-safe
`SharedFifo`.

## Periodic tracing

`PeriodicTracer(logger, level)` writes `str(target)` at `level` through a
`Logger` or `MultiLogger`, but only on some calls of
`trace(target, frequency, function, file, line)`.

* Calls are counted separately for each target type and line.
* A count starts at the line number and goes up by one per call.
* When the count is a multiple of `frequency + 1`, the target is logged and the
  count goes back to the line number.
* The target's type is passed as `wrapped`, so per-class levels apply.
* `trace` returns whether the call was logged.

## What the package does not do

* It has no command-line program.
* It does not rotate or manage log files. Any text stream you open yourself can
  be added as an output.
* It does not hook into the standard `logging` module.
* Colours are plain ANSI escape sequences; no console API is used.