"""Infrastructure Layer - database engine, repositories and logging setup.

Invariants:
    - SQLAlchemy is imported only here and in models/ and db/
    - Store failures leave this layer as StoreError subclasses
"""
