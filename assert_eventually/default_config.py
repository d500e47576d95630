"""Default polling settings for ``assert_eventually``."""

# Seconds to keep polling before the final evaluation.
# default: 30.0
DEFAULT_TIMEOUT = 30.0

# Seconds to sleep after the first failed poll.
# default: 0.001
INITIAL_INTERVAL = 0.001

# Upper bound for the sleep between polls, in seconds.
# default: 1.0
MAX_INTERVAL = 1.0
