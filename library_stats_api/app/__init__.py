"""
Application package initializer.

The query layer lives in ``services`` (accounts, books, statistics),
the record models in ``schemas``, and the read‑only HTTP surface that
serves the catalog statistics pages in ``api/v1``.  The services do not
depend on FastAPI and can be imported on their own.
"""
