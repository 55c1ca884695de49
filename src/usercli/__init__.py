"""usercli - fetch and display user records from a JSON API."""

# Overwritten by the release build.
__version__ = "1.0.0"
__build_time__ = "unknown"
