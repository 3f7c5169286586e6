"""Pattern-based logging with level ranges, per-class levels, filtered outputs, multi-loggers, asynchronous writing and periodic tracing."""

__version__ = "0.1.0"