"""Root conftest: loaded before any test module imports the CLI."""

import os

# Rich decides on colour when its Console is created at import time. CI
# runners that export FORCE_COLOR would otherwise put ANSI codes into the
# output the CLI tests match against.
os.environ.pop("FORCE_COLOR", None)
os.environ["NO_COLOR"] = "1"
