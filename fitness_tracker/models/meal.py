"""
Meal Models
Represents consumed meals and the food portions they contain.

Each Meal owns an ordered list of FoodItem rows. A FoodItem points at a
Food from the catalog and stores the nutrition of the portion eaten:

    food_item.calories = food.calories_per_serving * servings_consumed

Those values are computed once, when the item is created, so editing a
Food later does not rewrite meal history. Call
FoodItem.calculate_nutrition() to refresh an item on purpose.

Meal totals are summed on demand from the items.
"""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship, validates

from fitness_tracker.core.constants import UNKNOWN_FOOD_NAME
from fitness_tracker.models.base import BaseModel
from fitness_tracker.models.validation import (
    as_datetime,
    reject_reassignment,
    require_not_blank,
    require_not_future,
    require_present,
)


class Meal(BaseModel):
    """
    Meal model for tracking consumed food.

    Fields:
        id (UUID): Primary key, inherited from BaseModel
        user_id (UUID): User who consumed this meal
        name (str): Meal name, never blank
        meal_date (datetime): When the meal was eaten, fixed after creation
        food_items (list[FoodItem]): Portions eaten, in the order added

    Example usage:
        breakfast = Meal("Breakfast", datetime.now())
        breakfast.add_food_item(FoodItem(oats, servings_consumed=1.5))
        breakfast.calculate_total_calories()
        print(breakfast.get_meal_summary())
    """

    __tablename__ = "meals"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who consumed this meal"
    )

    position = Column(Integer, nullable=False, default=0)

    name = Column(
        String(255),
        nullable=False,
        comment="Meal name (e.g., 'Breakfast')"
    )

    meal_date = Column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="When the meal was consumed"
    )

    food_items = relationship(
        "FoodItem",
        order_by="FoodItem.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    def __init__(self, name: str, meal_date, items=None):
        require_not_blank(name, "name")
        require_not_future(meal_date, "meal_date")
        items = list(items or [])
        for item in items:
            require_present(item, "item")

        self.name = name
        self.meal_date = as_datetime(meal_date, "meal_date")
        for item in items:
            self.food_items.append(item)

    @validates("name")
    def _validate_name(self, key, value):
        return require_not_blank(value, key)

    @validates("meal_date")
    def _validate_meal_date(self, key, value):
        return reject_reassignment(self, key, value)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def add_food_item(self, item: "FoodItem") -> None:
        """Append a food item. Raises NullReferenceError for None."""
        self.food_items.append(require_present(item, "item"))

    def remove_food_item(self, item: "FoodItem") -> None:
        """Remove a food item; items not in this meal are ignored."""
        require_present(item, "item")
        if item in self.food_items:
            self.food_items.remove(item)

    # ------------------------------------------------------------------
    # Totals
    # ------------------------------------------------------------------

    def _total(self, attribute: str) -> float:
        return sum(
            (getattr(item, attribute) or 0 for item in self.food_items if item is not None),
            0.0,
        )

    def calculate_total_calories(self) -> float:
        return self._total("calories")

    def calculate_total_protein(self) -> float:
        return self._total("protein")

    def calculate_total_carbohydrates(self) -> float:
        return self._total("carbohydrates")

    def calculate_total_fats(self) -> float:
        return self._total("fats")

    def get_meal_summary(self) -> str:
        """
        Build a printable report of the meal.

        Layout:
            Meal: <name> on <date>
            Food Items:
            - <food>: <kcal> kcal, <p>g protein, <c>g carbs, <f>g fats
            Total Calories / Protein / Carbohydrates / Fats
        """
        lines = [
            f"Meal: {self.name} on {self.meal_date.date().isoformat()}",
            "Food Items:",
        ]
        for item in self.food_items:
            if item is None:
                continue
            food_name = item.food.name if item.food is not None else UNKNOWN_FOOD_NAME
            lines.append(
                f"- {food_name}: {item.calories:.1f} kcal, {item.protein:.1f}g protein, "
                f"{item.carbohydrates:.1f}g carbs, {item.fats:.1f}g fats"
            )
        lines.extend([
            f"Total Calories: {self.calculate_total_calories():.1f} kcal",
            f"Total Protein: {self.calculate_total_protein():.1f} g",
            f"Total Carbohydrates: {self.calculate_total_carbohydrates():.1f} g",
            f"Total Fats: {self.calculate_total_fats():.1f} g",
        ])
        return "\n".join(lines) + "\n"

    def __repr__(self):
        return f"<Meal(id={self.id}, name='{self.name}', meal_date={self.meal_date})>"


class FoodItem(BaseModel):
    """
    A portion of a Food eaten as part of a Meal.

    The referenced food is fixed after creation. servings_consumed is not
    range-checked; nutrition values are whatever the multiplication gives.
    """

    __tablename__ = "food_items"

    meal_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("meals.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Catalog foods in use cannot be deleted out from under meal history
    food_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("foods.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )

    position = Column(Integer, nullable=False, default=0)

    servings_consumed = Column(Float, nullable=False)

    # Nutrition of this portion (per-serving value x servings)
    calories = Column(Float, nullable=False, default=0.0)
    protein = Column(Float, nullable=False, default=0.0)
    carbohydrates = Column(Float, nullable=False, default=0.0)
    fats = Column(Float, nullable=False, default=0.0)

    food = relationship("Food")

    def __init__(self, food, servings_consumed: float):
        require_present(food, "food")
        self.food = food
        self.servings_consumed = servings_consumed
        self.calculate_nutrition()

    @validates("food")
    def _validate_food(self, key, value):
        require_present(value, key)
        return reject_reassignment(self, key, value)

    def calculate_nutrition(self) -> None:
        """Recompute the four nutrition values from the food's per-serving values."""
        if self.food is None:
            return

        self.calories = self.food.calories_per_serving * self.servings_consumed
        self.protein = self.food.protein_per_serving * self.servings_consumed
        self.carbohydrates = self.food.carbohydrates_per_serving * self.servings_consumed
        self.fats = self.food.fats_per_serving * self.servings_consumed

    def __repr__(self):
        return f"<FoodItem(food_id={self.food_id}, servings_consumed={self.servings_consumed})>"
