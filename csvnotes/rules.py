"""
Fixed transformation rules.

This file exists to make the recognized fields and marker values explicit.
None of it is user-configurable.
"""

NOTE_FIELD = "Note"
URL_FIELD = "URL"
NOTABLE_FIELD = "Notable"
PAYWALL_FIELD = "Paywall"

NOTABLE_MARKERS = frozenset({"TRUE", "checked"})
CHECKED_MARKER = "checked"  # what a ticked checkbox column exports as

NOTABLE_SEPARATOR = "."
PLAIN_SEPARATOR = ","

# Substring tokens tested against the whole URL, not the parsed host.
SOCIAL_DOMAINS = ("threads.net", "threads.com", "//x.com")
PROFILE_DOMAIN = "bsky.app"

ERROR_PREFIX = "Error processing file:"
