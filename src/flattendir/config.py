# src/flattendir/config.py

DEFAULT_IGNORE_TOKENS = [
    "node_modules",
    ".git",
    ".hg",
    ".svn",
    "dist",
    "build",
    "out",
    ".next",
    ".cache",
    ".turbo",
    ".vercel",
    "coverage",
    "__pycache__",
    "venv",
    ".venv",
]

# Per-file safety cap, in bytes
DEFAULT_MAX_FILE_BYTES = 2_000_000

# How many leading bytes the binary heuristic looks at
PROBE_BYTES = 4096

# Fraction of non-text bytes above which a sample counts as binary
BINARY_RATIO_THRESHOLD = 0.2
