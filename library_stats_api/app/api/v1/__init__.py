"""
Version 1 of the API.

Read‑only JSON endpoints backing the home, account and book statistics
pages of the library catalog.
"""
