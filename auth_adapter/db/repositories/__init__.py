"""
Per-entity repository modules for database access.

`base.EntityRepository` holds the create/read/update/delete shape shared by
every entity; the entity modules configure it and add their own lookups.
"""
