import os

# Keep tracing local to the process during tests.
os.environ.setdefault("OPIK_TRACK_DISABLE", "true")
