"""
Package marker for the student union website backend.
It groups the HTTP layer and shared infrastructure under a stable import path.
Most functionality lives in the `api` and `common` subpackages; this file stays lightweight.
"""
