"""
Defaults and host limits for passmint.
"""

# Length range accepted by the command line (matches the reference slider)
MIN_LENGTH = 6
MAX_LENGTH = 60
DEFAULT_LENGTH = 16

# Batch defaults
DEFAULT_COUNT = 5
DEFAULT_MAX_ATTEMPTS = 1000

# Options may also be given as PASSMINT_<COMMAND>_<OPTION> environment variables
ENV_PREFIX = "PASSMINT"
