"""A threaded notification pipeline: produce, process, rate-limit, route, simulate sending and record history."""

__version__ = "0.1.0"