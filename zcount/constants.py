"""zcount constants module - shared limits and exit codes."""

# Width of the counters the tool was designed around (C `unsigned long`).
# Counts and limits saturate here; an upper limit of 0 means "count up to this".
ULONG_MAX = 2**64 - 1

# Verbosity and the exit tally saturate at C `int` max.
INT_MAX = 2**31 - 1

DEFAULT_UPPER = 0  # unlimited
DEFAULT_LOWER = 1

EXIT_CLEAN = 0  # No suspicious inputs
EXIT_USAGE = 64  # Malformed command line (sysexits EX_USAGE)

PROGRAM_NAME = "zcount"
PROGRAM_VERSION = "1.0"
