"""
Version constants for the message parser and its service surfaces.
"""

# Package / API version
__version__ = "1.0.0"
API_VERSION = __version__

# Bump when parse output changes for the same input
PARSER_VERSION = "emlx-parser-1.0.0"
