# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "uttermatch",
# ]
#
# [tool.uv.sources]
# uttermatch = { path = "." }
# ///
"""Standalone, offline utterance-to-intent resolution."""

from uttermatch.apps.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
