"""SQLAlchemy declarative base for folio_identity models.

Uses the same metadata as the content models so one create_all() builds
the whole schema.
"""

from folio.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
