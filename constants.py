LB_TO_KG = 0.45359237
INCH_TO_CM = 2.54
FL_OZ_TO_LITER = 0.0295735

# Ideal weight formulas are anchored at 5 ft
BASE_HEIGHT_IN = 60

# (base_lb, slope_lb_per_inch) per gender
IDEAL_WEIGHT_COEFFICIENTS = {
    "devine": {"woman": (100.1, 5.06), "man": (110, 5.06)},
    "robinson": {"woman": (107.8, 3.74), "man": (114.4, 4.18)},
    "miller": {"woman": (116.82, 2.99), "man": (123.64, 3.10)},
}

# Mifflin-St Jeor gender constant
BMR_OFFSET = {"woman": -161, "man": 5}

# ~0.5 kg/week at 3500 kcal per lb
CALORIE_STEP = 551
KCAL_PER_LB = 3500
DEFICIT_SHARE = 0.2

# US fl oz of water per lb of body weight
WATER_OZ_PER_LB = 0.67

MONTHS = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)
