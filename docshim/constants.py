"""Shared constants for docshim dot-directories and connection defaults."""

DOCSHIM_HOME_EXT = ".docshim"  # user-level config directory suffix

# Bound on the initial connection handshake
DEFAULT_CONNECT_TIMEOUT_SECS = 30.0

# Server bootstrap waits this long for the listener to come up
DEFAULT_STARTUP_TIMEOUT_SECS = 10.0
