"""
Library identity.

The user agent sent with every request is derived from these values.
"""

LIBRARY_NAME = "engage-python"

VERSION = "0.1.0"

USER_AGENT = f"{LIBRARY_NAME}:{VERSION}"
