"""
WeightEntry Model
Stores a user's weight measurements for health tracking.

Entries are kept in insertion order on the owning user; the last entry is
the user's current weight and drives BMI, BMR and the calorie target.

Rules:
    - entry_date cannot be in the future and never changes after creation
    - weight (lb) must be > 0, checked on every assignment
    - body_fat_percentage must be within 0-100, checked on every assignment
"""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, Uuid
from sqlalchemy.orm import validates

from fitness_tracker.core.constants import MAX_BODY_FAT_PERCENTAGE, MIN_BODY_FAT_PERCENTAGE
from fitness_tracker.models.base import BaseModel
from fitness_tracker.models.validation import (
    as_date,
    reject_reassignment,
    require_not_future,
    require_positive,
    require_range,
)


class WeightEntry(BaseModel):
    """
    Weight measurement tracking model.

    Example:
        entry = WeightEntry(date(2024, 1, 8), weight=180.5, body_fat_percentage=18.0)
        user.add_weight_entry(entry)
        entry.weight = 179.0        # validated
        entry.weight = 0            # raises ValidationError
    """

    __tablename__ = "weight_entries"

    # Owning user (lookup only, the user holds the collection)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),  # Delete entries if user is deleted
        nullable=False,
        index=True,
        comment="User who recorded this weight"
    )

    # Position in the user's weight history (maintained by ordering_list)
    position = Column(Integer, nullable=False, default=0)

    entry_date = Column(
        Date,
        nullable=False,
        index=True,
        comment="Day the weight was measured"
    )

    weight = Column(
        Float,
        nullable=False,
        comment="Weight in pounds"
    )

    body_fat_percentage = Column(
        Float,
        nullable=False,
        default=0.0,
        comment="Body fat percentage (0-100)"
    )

    def __init__(self, entry_date, weight, body_fat_percentage=0.0):
        require_not_future(entry_date, "entry_date")
        require_positive(weight, "weight")
        require_range(body_fat_percentage, MIN_BODY_FAT_PERCENTAGE, MAX_BODY_FAT_PERCENTAGE,
                      "body_fat_percentage")

        self.entry_date = as_date(entry_date, "entry_date")
        self.weight = weight
        self.body_fat_percentage = body_fat_percentage

    @validates("entry_date")
    def _validate_entry_date(self, key, value):
        return reject_reassignment(self, key, value)

    @validates("weight")
    def _validate_weight(self, key, value):
        return require_positive(value, key)

    @validates("body_fat_percentage")
    def _validate_body_fat_percentage(self, key, value):
        return require_range(value, MIN_BODY_FAT_PERCENTAGE, MAX_BODY_FAT_PERCENTAGE, key)

    def __repr__(self):
        return (
            f"<WeightEntry(user_id={self.user_id}, weight={self.weight}, "
            f"entry_date={self.entry_date})>"
        )
