"""
Static emission factor tables.

Coefficients are kg CO2e per unit of quantity (kg, km, kWh, meal, item).
The tables are read-only; stored factors may override individual keys at
calculation time (see EmissionCalculationService).
"""
from types import MappingProxyType

from app.utils.constants import AustralianStateEnum

# Regional grid intensity, kg CO2e per kWh
_STATE_ELECTRICITY_FACTORS = {
    AustralianStateEnum.ACT.value: 2.56053,
    AustralianStateEnum.NSW.value: 2.56053,
    AustralianStateEnum.NT.value: 2.9931,
    AustralianStateEnum.QLD.value: 2.57974,
    AustralianStateEnum.SA.value: 2.37285,
    AustralianStateEnum.TAS.value: 1.58247,
    AustralianStateEnum.VIC.value: 2.07292,
    AustralianStateEnum.WA.value: 2.89386,
}

ELECTRICITY_FACTOR_KEY = "energy.electricity.kwh"

EMISSION_FACTORS = MappingProxyType(
    {
        # Food, per kg
        "food.red_meat.kg": 23.59467,
        "food.white_meat.kg": 6.92667,
        "food.dairy.kg": 6.769,
        "food.baked_goods.kg": 2.472,
        "food.fruit_veg.kg": 2.54667,
        "food.grain.kg": 2.472,
        "food.grain_alternative.kg": 3.3,
        "food.dairy_alternative.kg": 0.568,
        # Transport, per km
        "transport.car.km.petrol": 0.192,
        "transport.car.km.electric": 0.053,
        "transport.walk_ride.km": 0.002,
        "transport.bike.km": 0.005,
        "transport.bus.km": 0.105,
        "transport.train.km": 0.041,
        "transport.tram.km": 0.029,
        "transport.plane.km": 0.255,
        # Energy, per kWh (national default is the mean of the state factors)
        ELECTRICITY_FACTOR_KEY: 2.452,
        **{
            f"{ELECTRICITY_FACTOR_KEY}.{state}": factor
            for state, factor in _STATE_ELECTRICITY_FACTORS.items()
        },
        # Waste, per kg
        "waste.mixed.kg": 0.587,
        # Savings
        "diet.meal.meatless": 1.2,
        "recycling.plastic.item": 0.04,
    }
)

FACTOR_UNITS = MappingProxyType(
    {
        "food": "kg",
        "transport": "km",
        "energy": "kWh",
        "waste": "kg",
        "diet": "meal",
        "recycling": "item",
    }
)

AVERAGE_SPEED_KMH = MappingProxyType(
    {
        "Car (Petrol)": 50,
        "Car (Electric)": 50,
        "Walk/Ride": 5,
        "Bike": 15,
        "Bus": 30,
        "Train": 60,
        "Tram": 25,
        "Plane": 800,
    }
)

FOOD_FACTOR_KEYS = MappingProxyType(
    {
        # Activity form labels
        "Red Meat": "food.red_meat.kg",
        "White Meat": "food.white_meat.kg",
        "Dairy": "food.dairy.kg",
        "Baked Goods": "food.baked_goods.kg",
        "Fruit/Veg.": "food.fruit_veg.kg",
        # Food category slugs
        "red_meat": "food.red_meat.kg",
        "white_meat": "food.white_meat.kg",
        "grain": "food.grain.kg",
        "grain_alternative": "food.grain_alternative.kg",
        "fruit_vegetable": "food.fruit_veg.kg",
        "dairy": "food.dairy.kg",
        "dairy_alternative": "food.dairy_alternative.kg",
    }
)

TRANSPORT_FACTOR_KEYS = MappingProxyType(
    {
        "Car (Petrol)": "transport.car.km.petrol",
        "Car (Electric)": "transport.car.km.electric",
        "Walk/Ride": "transport.walk_ride.km",
        "Bike": "transport.bike.km",
        "Bus": "transport.bus.km",
        "Train": "transport.train.km",
        "Tram": "transport.tram.km",
        "Plane": "transport.plane.km",
    }
)

WASTE_FACTOR_KEY = "waste.mixed.kg"
DIET_FACTOR_KEY = "diet.meal.meatless"
RECYCLING_FACTOR_KEY = "recycling.plastic.item"

# Upper bounds on a single logged quantity
MAX_QUANTITY = MappingProxyType(
    {
        "food": 1000,
        "energy": 10000,
    }
)


def unit_for_key(factor_key: str) -> str:
    """Return the quantity unit of a factor key from its namespace."""
    return FACTOR_UNITS.get(factor_key.split(".", 1)[0], "unit")
