"""
Pydantic schema definitions for catalog records.

Accounts, authors and books are the input records loaded from the
catalog files; the remaining models describe the derived results the
services return for the home, account and book pages.
"""
