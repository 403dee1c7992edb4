"""
Test package for campus_backend.

- test_cache.py: expiring cache
- test_repository.py: cache-aside reads and write-through writes
- test_population.py: relation population and dehydration
- test_rules.py: rule matching
- test_validation.py: model validation at the repository boundary
- test_entity_helpers.py: message, approval and membership operations
- test_sql_store.py: SQLAlchemy document store
- test_exceptions.py: error registry, exceptions and interface registry
"""
