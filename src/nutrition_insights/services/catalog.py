"""Static nutrient reference table."""

from dataclasses import dataclass

from nutrition_insights.domain.nutrients import NutrientCategory, NutrientDefinition
from nutrition_insights.domain.profile import Gender

_VITAMIN = NutrientCategory.VITAMIN
_MINERAL = NutrientCategory.MINERAL
_OTHER = NutrientCategory.OTHER

# Female adult RDA is the default target; male values are set where they differ.
# serving_contribution is the fixed amount credited per keyword-matched entry.
_NUTRIENTS: tuple[NutrientDefinition, ...] = (
    NutrientDefinition(
        id="vitamin_a",
        name="Vitamin A",
        unit="mcg",
        daily_target=700,
        male_daily_target=900,
        category=_VITAMIN,
        keywords=(
            "carrot",
            "sweet potato",
            "spinach",
            "kale",
            "pumpkin",
            "mango",
            "egg",
            "milk",
            "cheese",
            "bell pepper",
        ),
        serving_contribution=250,
        suggested_foods=("sweet potatoes", "carrots", "spinach"),
    ),
    NutrientDefinition(
        id="vitamin_c",
        name="Vitamin C",
        unit="mg",
        daily_target=75,
        male_daily_target=90,
        category=_VITAMIN,
        keywords=(
            "orange",
            "citrus",
            "lemon",
            "kiwi",
            "strawberr",
            "berries",
            "bell pepper",
            "broccoli",
            "tomato",
            "potato",
            "kale",
            "spinach",
        ),
        serving_contribution=30,
        suggested_foods=("oranges", "bell peppers", "strawberries"),
    ),
    NutrientDefinition(
        id="vitamin_d",
        name="Vitamin D",
        unit="mcg",
        daily_target=15,
        category=_VITAMIN,
        keywords=("salmon", "tuna", "sardine", "mackerel", "egg", "milk", "mushroom"),
        serving_contribution=3,
        suggested_foods=("salmon", "egg yolks", "fortified milk"),
    ),
    NutrientDefinition(
        id="vitamin_e",
        name="Vitamin E",
        unit="mg",
        daily_target=15,
        category=_VITAMIN,
        keywords=(
            "almond",
            "sunflower",
            "hazelnut",
            "avocado",
            "peanut",
            "olive oil",
            "spinach",
        ),
        serving_contribution=3,
        suggested_foods=("almonds", "sunflower seeds", "avocado"),
    ),
    NutrientDefinition(
        id="vitamin_k",
        name="Vitamin K",
        unit="mcg",
        daily_target=90,
        male_daily_target=120,
        category=_VITAMIN,
        keywords=(
            "kale",
            "spinach",
            "broccoli",
            "brussels",
            "cabbage",
            "lettuce",
            "asparagus",
            "avocado",
            "blueberr",
        ),
        serving_contribution=60,
        suggested_foods=("kale", "spinach", "broccoli"),
    ),
    NutrientDefinition(
        id="thiamin",
        name="Thiamin (B1)",
        unit="mg",
        daily_target=1.1,
        male_daily_target=1.2,
        category=_VITAMIN,
        keywords=(
            "pork",
            "ham",
            "bacon",
            "brown rice",
            "lentil",
            "bean",
            "oat",
            "bread",
            "pasta",
            "cereal",
        ),
        serving_contribution=0.2,
        suggested_foods=("pork", "brown rice", "lentils"),
    ),
    NutrientDefinition(
        id="riboflavin",
        name="Riboflavin (B2)",
        unit="mg",
        daily_target=1.1,
        male_daily_target=1.3,
        category=_VITAMIN,
        keywords=(
            "milk",
            "yogurt",
            "cheese",
            "egg",
            "mushroom",
            "almond",
            "beef",
            "cereal",
        ),
        serving_contribution=0.25,
        suggested_foods=("milk", "eggs", "mushrooms"),
    ),
    NutrientDefinition(
        id="niacin",
        name="Niacin (B3)",
        unit="mg",
        daily_target=14,
        male_daily_target=16,
        category=_VITAMIN,
        keywords=(
            "chicken",
            "turkey",
            "tuna",
            "salmon",
            "beef",
            "pork",
            "peanut",
            "mushroom",
            "rice",
            "cereal",
        ),
        serving_contribution=4,
        suggested_foods=("chicken", "tuna", "peanuts"),
    ),
    NutrientDefinition(
        id="vitamin_b6",
        name="Vitamin B6",
        unit="mg",
        daily_target=1.3,
        category=_VITAMIN,
        keywords=(
            "chickpea",
            "banana",
            "potato",
            "chicken",
            "turkey",
            "salmon",
            "tuna",
            "avocado",
            "pork",
        ),
        serving_contribution=0.3,
        suggested_foods=("chickpeas", "bananas", "potatoes"),
    ),
    NutrientDefinition(
        id="vitamin_b12",
        name="Vitamin B12",
        unit="mcg",
        daily_target=2.4,
        category=_VITAMIN,
        keywords=(
            "beef",
            "steak",
            "salmon",
            "tuna",
            "shrimp",
            "clam",
            "egg",
            "milk",
            "yogurt",
            "cheese",
            "turkey",
        ),
        serving_contribution=0.8,
        suggested_foods=("eggs", "salmon", "fortified cereals"),
    ),
    NutrientDefinition(
        id="folate",
        name="Folate",
        unit="mcg",
        daily_target=400,
        category=_VITAMIN,
        keywords=(
            "spinach",
            "kale",
            "lentil",
            "bean",
            "chickpea",
            "asparagus",
            "broccoli",
            "avocado",
            "orange",
            "pasta",
            "cereal",
        ),
        serving_contribution=80,
        suggested_foods=("leafy greens", "beans", "citrus fruits"),
    ),
    NutrientDefinition(
        id="calcium",
        name="Calcium",
        unit="mg",
        daily_target=1000,
        category=_MINERAL,
        keywords=(
            "milk",
            "yogurt",
            "cheese",
            "tofu",
            "sardine",
            "kale",
            "almond",
            "whey",
            "latte",
        ),
        serving_contribution=150,
        suggested_foods=("yogurt", "cheese", "fortified milk"),
    ),
    NutrientDefinition(
        id="iron",
        name="Iron",
        unit="mg",
        daily_target=18,
        male_daily_target=8,
        category=_MINERAL,
        keywords=(
            "beef",
            "steak",
            "spinach",
            "lentil",
            "bean",
            "chickpea",
            "tofu",
            "quinoa",
            "oat",
            "cereal",
            "dark chocolate",
        ),
        serving_contribution=2,
        suggested_foods=("spinach", "red meat", "lentils"),
    ),
    NutrientDefinition(
        id="magnesium",
        name="Magnesium",
        unit="mg",
        daily_target=320,
        male_daily_target=420,
        category=_MINERAL,
        keywords=(
            "almond",
            "cashew",
            "pumpkin seed",
            "spinach",
            "dark chocolate",
            "banana",
            "avocado",
            "quinoa",
            "oat",
            "brown rice",
            "bean",
            "lentil",
        ),
        serving_contribution=40,
        suggested_foods=("dark chocolate", "almonds", "bananas"),
    ),
    NutrientDefinition(
        id="zinc",
        name="Zinc",
        unit="mg",
        daily_target=8,
        male_daily_target=11,
        category=_MINERAL,
        keywords=(
            "beef",
            "steak",
            "oyster",
            "pumpkin seed",
            "chickpea",
            "lentil",
            "cheese",
            "turkey",
            "pork",
            "cashew",
        ),
        serving_contribution=1.5,
        suggested_foods=("beef", "pumpkin seeds", "chickpeas"),
    ),
    NutrientDefinition(
        id="potassium",
        name="Potassium",
        unit="mg",
        daily_target=2600,
        male_daily_target=3400,
        category=_MINERAL,
        keywords=(
            "banana",
            "potato",
            "avocado",
            "spinach",
            "bean",
            "lentil",
            "salmon",
            "tomato",
            "orange",
            "yogurt",
            "milk",
        ),
        serving_contribution=350,
        suggested_foods=("bananas", "potatoes", "avocado"),
    ),
    NutrientDefinition(
        id="sodium",
        name="Sodium",
        unit="mg",
        daily_target=2300,
        category=_MINERAL,
        keywords=(
            "salt",
            "bacon",
            "ham",
            "sausage",
            "pizza",
            "soup",
            "soy sauce",
            "pickle",
            "chips",
            "fries",
            "burger",
            "cheese",
            "bread",
        ),
        serving_contribution=400,
        is_upper_limit=True,
    ),
    NutrientDefinition(
        id="phosphorus",
        name="Phosphorus",
        unit="mg",
        daily_target=700,
        category=_MINERAL,
        keywords=(
            "milk",
            "yogurt",
            "cheese",
            "chicken",
            "fish",
            "salmon",
            "tuna",
            "beef",
            "egg",
            "lentil",
            "quinoa",
        ),
        serving_contribution=120,
        suggested_foods=("milk", "chicken", "fish"),
    ),
    NutrientDefinition(
        id="selenium",
        name="Selenium",
        unit="mcg",
        daily_target=55,
        category=_MINERAL,
        keywords=(
            "brazil nut",
            "tuna",
            "salmon",
            "shrimp",
            "egg",
            "turkey",
            "chicken",
            "pork",
            "pasta",
        ),
        serving_contribution=15,
        suggested_foods=("brazil nuts", "tuna", "eggs"),
    ),
    NutrientDefinition(
        id="copper",
        name="Copper",
        unit="mg",
        daily_target=0.9,
        category=_MINERAL,
        keywords=(
            "cashew",
            "liver",
            "lentil",
            "dark chocolate",
            "mushroom",
            "avocado",
            "quinoa",
            "shrimp",
        ),
        serving_contribution=0.2,
        suggested_foods=("liver", "cashews", "lentils"),
    ),
    NutrientDefinition(
        id="fiber",
        name="Fiber",
        unit="g",
        daily_target=25,
        male_daily_target=38,
        category=_OTHER,
        keywords=(
            "oat",
            "bean",
            "lentil",
            "chickpea",
            "broccoli",
            "berries",
            "apple",
            "pear",
            "avocado",
            "whole wheat",
            "brown rice",
            "quinoa",
            "chia",
        ),
        serving_contribution=3,
        suggested_foods=("lentils", "oats", "broccoli"),
    ),
    NutrientDefinition(
        id="sugar",
        name="Sugar",
        unit="g",
        daily_target=50,
        category=_OTHER,
        keywords=(
            "soda",
            "cola",
            "candy",
            "cake",
            "cookie",
            "donut",
            "ice cream",
            "juice",
            "syrup",
            "pastry",
            "chocolate",
        ),
        serving_contribution=12,
        is_upper_limit=True,
    ),
    NutrientDefinition(
        id="omega3",
        name="Omega-3",
        unit="g",
        daily_target=1.1,
        male_daily_target=1.6,
        category=_OTHER,
        keywords=("salmon", "tuna", "sardine", "mackerel", "walnut", "flax", "chia"),
        serving_contribution=0.5,
        suggested_foods=("salmon", "walnuts", "flaxseed"),
    ),
    NutrientDefinition(
        id="cholesterol",
        name="Cholesterol",
        unit="mg",
        daily_target=300,
        category=_OTHER,
        keywords=("egg", "shrimp", "liver", "bacon", "butter", "cheese"),
        serving_contribution=90,
        is_upper_limit=True,
    ),
)


@dataclass(frozen=True)
class NutrientCatalog:
    """Read-only table of nutrient definitions."""

    nutrients: tuple[NutrientDefinition, ...] = _NUTRIENTS

    def list_nutrients(self) -> tuple[NutrientDefinition, ...]:
        """Return every tracked nutrient in display order."""
        return self.nutrients

    def get(self, nutrient_id: str) -> NutrientDefinition | None:
        """Return a nutrient definition by id, if tracked."""
        for nutrient in self.nutrients:
            if nutrient.id == nutrient_id:
                return nutrient
        return None

    def target_for(self, nutrient_id: str, gender: Gender) -> float:
        """Return the daily target for a nutrient, or zero if unknown."""
        nutrient = self.get(nutrient_id)
        if nutrient is None:
            return 0.0
        return nutrient.target_for(gender)

    def ids(self) -> frozenset[str]:
        return frozenset(nutrient.id for nutrient in self.nutrients)


DEFAULT_CATALOG = NutrientCatalog()
