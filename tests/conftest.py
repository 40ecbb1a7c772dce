"""Shared setup for burstkit tests."""

import os
import sys
import tempfile

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Keep the rotating log file out of the user's home while testing.
os.environ.setdefault("BURSTKIT_HOME", tempfile.mkdtemp(prefix="burstkit-tests-"))
