"""Build metadata.

Release builds overwrite the ``unknown`` values with the commit, build date
and builder of the published artifact.
"""

VERSION = "0.1.0"
COMMIT = "unknown"
DATE = "unknown"
BUILT_BY = "unknown"
