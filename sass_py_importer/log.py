"""
Diagnostic output for the importer.

Everything goes to stderr so that stdout stays free for compiled CSS.
"""
import sys

# Global verbose flag
_VERBOSE = False


def set_verbose(value):
    """Set the global verbose flag."""
    global _VERBOSE
    _VERBOSE = bool(value)


def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)
