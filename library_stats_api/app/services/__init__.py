"""
Service layer abstraction.

Each service groups the queries for one catalog page.  All of them are
pure: they take the collections as arguments, never mutate them, and
return freshly built results.  Dependencies run one way only:
``statistics_service`` uses ``book_service``, which uses
``account_service``.
"""
