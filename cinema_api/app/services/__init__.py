"""
Service layer abstraction.

Services wrap a ``DocumentStore`` and carry the rules for creating,
merging and removing records, so API handlers stay one call deep.
``dependencies`` builds one service per collection for FastAPI.
"""
