import sys
import inspect
import datetime

from simple_tcp.errors import SetupError

# Levels written by log(). INFO traces (peer address, byte counts) stay
# silent until a caller opts in, e.g. SHOWN_LEVELS.add("INFO").
SHOWN_LEVELS = {"Error", "Warning"}


def log(*args, level="INFO", **kwargs):
    """
    Custom logging function that shows timestamp, level,
    caller function, filename, and line number.
    Only levels listed in SHOWN_LEVELS are written (to stderr).
    """
    if level not in SHOWN_LEVELS:
        return

    # Get caller info
    frame = inspect.stack()[1]
    caller_func = frame.function
    line_no = frame.lineno
    filename = frame.filename.split("/")[-1]  # only filename, not full path

    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    prefix = f"{timestamp} {level} [{filename}:{caller_func}|{line_no}]"
    print(prefix, "-", *args, file=sys.stderr, **kwargs)


def report(err: SetupError):
    """Print a perror-style diagnostic, e.g. 'Bind failed: Address already in use'."""
    cause = err.cause
    if cause is None:
        print(err.step, file=sys.stderr)
        return
    detail = getattr(cause, "strerror", None) or str(cause)
    print(f"{err.step}: {detail}", file=sys.stderr)
