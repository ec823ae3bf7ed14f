"""
Base Model Class
Provides common fields and functionality for all database models.

All application models should inherit from BaseModel instead of Base directly.
This ensures consistent ID format (UUID) and automatic timestamp tracking.
"""

import uuid

from sqlalchemy import Column, DateTime, Uuid, func

from fitness_tracker.db.base import Base


class BaseModel(Base):
    """
    Abstract base model with common fields for all tables.

    Provides:
    - UUID primary key (assigned on insert)
    - created_at timestamp (automatically set on insert)
    - updated_at timestamp (automatically updated on modification)

    Entities loaded from the database are rebuilt by the ORM without
    calling __init__ or attribute validators, so values that were
    validated once when first created are not checked again on load.
    """

    # Make this an abstract base class (no table created for BaseModel itself)
    __abstract__ = True

    # Primary Key: UUID
    # Generic Uuid type: native UUID on PostgreSQL, CHAR(32) on SQLite
    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,  # Auto-generate UUID v4 on insert
        nullable=False
    )

    # Timestamp: Record Creation
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    # Timestamp: Last Update
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),  # Update on every modification
        nullable=False
    )

    def __repr__(self):
        """
        String representation of model instance.
        Useful for debugging and logging.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"
