# 28/36 qualifying rule, in percent of gross monthly income
FRONT_END_LIMIT = 28.0
BACK_END_LIMIT = 36.0
NON_HOUSING_DTI_LIMIT = 15.0
PMI_THRESHOLD_PCT = 20.0

AFFORDABILITY_DEFAULTS = {"property_tax_rate": 1.2, "homeowners_insurance_rate": 0.35, "pmi_rate": 0.5}
SEARCH_ITERATIONS = 50
SEARCH_HORIZON_YEARS = 30

READINESS_WEIGHTS = {"down_payment": 25, "emergency_fund": 20, "debt_to_income": 25, "cash_flow": 20, "can_afford": 10}
READINESS_THRESHOLD = 60

REFINANCE_WORTH_MAX_MONTHS = 120
REFINANCE_INTEREST_WEIGHT = 0.5

PAYOFF_SAFETY_CAP_MONTHS = 600
FIRE_MAX_YEARS = 100
FIRE_MAX_PROJECTION_YEARS = 50

# mean inter-payment interval windows in days, checked in order
DIVIDEND_INTERVAL_WINDOWS = [
    ("monthly", 25, 35),
    ("quarterly", 80, 100),
    ("semi-annual", 170, 195),
    ("annual", 350, 380),
]
PAYMENTS_PER_YEAR = {"monthly": 12, "quarterly": 4, "semi-annual": 2, "annual": 1}
GROWTH_RATE_BOUNDS = (-0.9, 2.0)

DCF_DEFAULTS = {"discount_rate": 0.10, "terminal_growth_rate": 0.025, "projection_years": 10}

BMI_CATEGORIES = [
    {"name": "Severely Underweight", "min": 0, "max": 16, "risk": "Health risk: Severe malnutrition"},
    {"name": "Underweight", "min": 16, "max": 18.5, "risk": "Health risk: Malnutrition risk"},
    {"name": "Normal", "min": 18.5, "max": 25, "risk": "Health risk: Low risk (healthy range)"},
    {"name": "Overweight", "min": 25, "max": 30, "risk": "Health risk: Moderate risk"},
    {"name": "Obese Class I", "min": 30, "max": 35, "risk": "Health risk: High risk"},
    {"name": "Obese Class II", "min": 35, "max": 40, "risk": "Health risk: Very high risk"},
    {"name": "Obese Class III", "min": 40, "max": 100, "risk": "Health risk: Extremely high risk"},
]

ACTIVITY_MULTIPLIERS = {
    "sedentary": (1.2, "Little or no exercise, desk job"),
    "light": (1.375, "Light exercise 1-3 days/week"),
    "moderate": (1.55, "Moderate exercise 3-5 days/week"),
    "active": (1.725, "Hard exercise 6-7 days/week"),
    "very_active": (1.9, "Very hard exercise & physical job"),
    "extra_active": (2.1, "Competitive athlete, extreme training"),
}
CALORIES_PER_KG = 7700
MIN_GOAL_CALORIES = 1200

BODY_FAT_CATEGORIES = {
    "male": [
        {"name": "Essential Fat", "min": 2, "max": 5, "risk": "Minimum for survival"},
        {"name": "Athletes", "min": 6, "max": 13, "risk": "Athletic performance level"},
        {"name": "Fitness", "min": 14, "max": 17, "risk": "Good fitness level"},
        {"name": "Average", "min": 18, "max": 24, "risk": "Acceptable for health"},
        {"name": "Obese", "min": 25, "max": 100, "risk": "Increased health risk"},
    ],
    "female": [
        {"name": "Essential Fat", "min": 10, "max": 13, "risk": "Minimum for survival"},
        {"name": "Athletes", "min": 14, "max": 20, "risk": "Athletic performance level"},
        {"name": "Fitness", "min": 21, "max": 24, "risk": "Good fitness level"},
        {"name": "Average", "min": 25, "max": 31, "risk": "Acceptable for health"},
        {"name": "Obese", "min": 32, "max": 100, "risk": "Increased health risk"},
    ],
}
IDEAL_BODY_FAT = {"male": (10, 20), "female": (18, 28)}
BODY_FAT_BOUNDS = (2.0, 60.0)

HEART_RATE_ZONES = [
    ("Zone 1: Recovery", 50, 60, "Very light effort, easy pace"),
    ("Zone 2: Endurance", 60, 70, "Comfortable pace, can hold conversation"),
    ("Zone 3: Aerobic", 70, 80, "Moderate effort, breathing harder"),
    ("Zone 4: Threshold", 80, 90, "Hard effort, difficult to talk"),
    ("Zone 5: Maximum", 90, 100, "Maximum effort, very hard"),
]

# (male base kg, male kg/inch, female base kg, female kg/inch) above 5 feet
IDEAL_WEIGHT_FORMULAS = {
    "devine": ("Devine (1974)", 50.0, 2.3, 45.5, 2.3),
    "robinson": ("Robinson (1983)", 52.0, 1.9, 49.0, 1.7),
    "miller": ("Miller (1983)", 56.2, 1.41, 53.1, 1.36),
    "hamwi": ("Hamwi (1964)", 48.0, 2.7, 45.5, 2.2),
}
FRAME_SIZE_FACTORS = {"small": 0.9, "medium": 1.0, "large": 1.1}

PROTEIN_REQUIREMENTS = {
    "maintenance": (0.8, 1.2),
    "muscle_gain": (1.6, 2.2),
    "weight_loss": (1.2, 1.6),
    "endurance": (1.2, 1.6),
    "strength": (1.4, 2.0),
}
ATHLETE_MAINTENANCE_PROTEIN = (1.2, 1.6)

# conversion factors to each category's base unit
UNIT_FACTORS = {
    "length": {
        "meters": 1.0,
        "kilometers": 1000.0,
        "centimeters": 0.01,
        "millimeters": 0.001,
        "miles": 1609.344,
        "yards": 0.9144,
        "feet": 0.3048,
        "inches": 0.0254,
    },
    "weight": {
        "kilograms": 1.0,
        "grams": 0.001,
        "milligrams": 0.000001,
        "pounds": 0.45359237,
        "ounces": 0.028349523125,
        "stones": 6.35029318,
        "metric_tons": 1000.0,
        "short_tons": 907.18474,
    },
    "volume": {
        "liters": 1.0,
        "milliliters": 0.001,
        "cubic_meters": 1000.0,
        "gallons": 3.785411784,
        "quarts": 0.946352946,
        "pints": 0.473176473,
        "cups": 0.2365882365,
        "fluid_ounces": 0.0295735295625,
        "tablespoons": 0.01478676478125,
        "teaspoons": 0.00492892159375,
    },
    "speed": {
        "mps": 1.0,
        "kmph": 0.277778,
        "mph": 0.44704,
        "knots": 0.514444,
        "fps": 0.3048,
        "mach": 340.29,
    },
    "area": {
        "sq_meters": 1.0,
        "sq_kilometers": 1000000.0,
        "sq_centimeters": 0.0001,
        "sq_millimeters": 0.000001,
        "sq_miles": 2589988.110336,
        "sq_yards": 0.83612736,
        "sq_feet": 0.09290304,
        "sq_inches": 0.00064516,
        "hectares": 10000.0,
        "acres": 4046.8564224,
    },
}

# percent of calories from (protein, carbs, fat)
DIET_CONFIGS = {
    "balanced": (25, 45, 30, "A balanced approach suitable for most people"),
    "high_protein": (35, 35, 30, "Higher protein for muscle building and satiety"),
    "low_carb": (30, 25, 45, "Reduced carbs for weight loss and blood sugar control"),
    "keto": (20, 5, 75, "Very low carb ketogenic diet for fat adaptation"),
    "low_fat": (25, 55, 20, "Lower fat approach for heart health"),
    "mediterranean": (20, 45, 35, "Heart-healthy Mediterranean-style eating"),
}
CALORIES_PER_GRAM = {"protein": 4, "carbs": 4, "fat": 9}
MIN_PROTEIN_G_PER_KG = 1.6
MEAL_DISTRIBUTION = [("Breakfast", 0.25), ("Lunch", 0.30), ("Dinner", 0.30), ("Snacks", 0.15)]

DIET_TIPS = {
    "keto": [
        "Keep net carbs under 20-30g per day to maintain ketosis.",
        "Focus on healthy fats like avocado, olive oil, and nuts.",
        "Consider MCT oil for quick energy.",
    ],
    "low_carb": [
        "Choose complex carbs from vegetables and limited fruits.",
        "Time carbs around workouts for better energy.",
    ],
    "high_protein": [
        "Space protein intake throughout the day for optimal absorption.",
        "Include a variety of protein sources for complete amino acid profile.",
    ],
    "mediterranean": [
        "Emphasize olive oil, fish, nuts, and plenty of vegetables.",
        "Choose whole grains over refined carbohydrates.",
    ],
}
DEFAULT_DIET_TIPS = ["Focus on whole, unprocessed foods."]
GOAL_MACRO_TIPS = {
    "lose": [
        "Prioritize protein to preserve muscle mass during weight loss.",
        "Consider cycling carbs higher on workout days.",
    ],
    "gain": [
        "Increase calories gradually to minimize fat gain.",
        "Time carb intake around training for optimal performance.",
    ],
}

SOMATOTYPES = ("ectomorph", "mesomorph", "endomorph")
# answer -> points per somatotype, for each questionnaire item
BODY_TYPE_SCORING = {
    "frame_size": {"small": {"ectomorph": 2}, "medium": {"mesomorph": 1}, "large": {"endomorph": 2}},
    "weight_gain": {"difficult": {"ectomorph": 2}, "moderate": {"mesomorph": 1}, "easy": {"endomorph": 2}},
    "weight_loss": {"easy": {"ectomorph": 2}, "moderate": {"mesomorph": 1}, "difficult": {"endomorph": 2}},
    "muscle_definition": {"difficult": {"ectomorph": 1}, "moderate": {"mesomorph": 1}, "easy": {"mesomorph": 2}},
    "metabolism": {"fast": {"ectomorph": 2}, "average": {"mesomorph": 1}, "slow": {"endomorph": 2}},
    "shoulders": {"narrow": {"ectomorph": 1}, "average": {"mesomorph": 1, "endomorph": 1}, "broad": {"mesomorph": 2}},
    "wrists": {"small": {"ectomorph": 1}, "average": {"mesomorph": 1}, "large": {"endomorph": 1}},
    "body_fat": {"low": {"ectomorph": 2}, "average": {"mesomorph": 1}, "high": {"endomorph": 2}},
}
SECONDARY_TYPE_MARGIN = 2

BODY_TYPE_INFO = {
    "ectomorph": {
        "name": "Ectomorph",
        "description": "Naturally lean and thin, with a fast metabolism and difficulty gaining weight.",
        "traits": [
            "Naturally thin and lean",
            "Fast metabolism",
            "Difficulty gaining weight and muscle",
            "Narrow shoulders and hips",
            "Small bone structure",
            "Low body fat percentage",
        ],
        "train_tips": [
            "Focus on compound movements and heavy lifting",
            "Limit cardio to preserve calories",
            "Train with moderate volume (3-4 days/week)",
            "Allow adequate rest between workouts",
            "Keep workouts under 60 minutes",
        ],
        "nutrition_tips": [
            "Eat in a calorie surplus (500+ calories above TDEE)",
            "Consume high carbohydrate intake (50-60% of calories)",
            "Include moderate protein (1.6-2g per kg)",
            "Eat frequently (5-6 meals per day)",
            "Don't skip meals",
            "Consider mass gainer shakes",
        ],
        "exercise_recommendations": [
            "Squats, deadlifts, and bench press for compound strength",
            "Lower rep ranges (6-8) with heavier weights",
            "Focus on progressive overload",
            "Minimize isolation exercises initially",
        ],
    },
    "mesomorph": {
        "name": "Mesomorph",
        "description": "Naturally athletic build, with good muscle definition and balanced metabolism.",
        "traits": [
            "Naturally athletic build",
            "Gains muscle easily",
            "Can lose or gain weight relatively easily",
            "Broad shoulders with narrow waist",
            "Efficient metabolism",
            "Good muscle definition",
        ],
        "train_tips": [
            "Responds well to varied training styles",
            "Can handle higher training volume",
            "Mix of strength and hypertrophy training",
            "Include both compound and isolation exercises",
            "Can benefit from periodization",
        ],
        "nutrition_tips": [
            "Maintain balanced macronutrients",
            "Adjust calories based on goals",
            "Protein intake around 1.8-2.2g per kg",
            "Time carbs around workouts",
            "Monitor portion sizes to avoid unwanted weight gain",
        ],
        "exercise_recommendations": [
            "Mix of heavy lifting and higher rep work",
            "Include athletic training and sports",
            "Regular cardio for heart health",
            "Variety in training keeps progress steady",
        ],
    },
    "endomorph": {
        "name": "Endomorph",
        "description": "Naturally stocky build, with tendency to store body fat and gain weight easily.",
        "traits": [
            "Naturally stocky build",
            "Gains weight easily (fat and muscle)",
            "Slower metabolism",
            "Wider hips and narrower shoulders",
            "Larger bone structure",
            "Difficulty losing body fat",
        ],
        "train_tips": [
            "Include regular cardio (3-4 sessions/week)",
            "Focus on resistance training to build metabolism",
            "Higher volume training works well",
            "Keep rest periods shorter",
            "Stay active throughout the day",
        ],
        "nutrition_tips": [
            "Slight calorie deficit for weight loss",
            "Higher protein intake (2-2.2g per kg)",
            "Lower carbohydrate intake (25-40% of calories)",
            "Focus on complex carbs",
            "Monitor portion sizes carefully",
            "Avoid processed foods and sugars",
        ],
        "exercise_recommendations": [
            "HIIT cardio for fat burning",
            "Circuit training for metabolic boost",
            "Compound movements for efficiency",
            "Steady-state cardio on rest days",
        ],
    },
}

# 12-week Hatch squat cycle: (week, session, back squat sets, front squat sets),
# each set written as (sets, reps, fraction of 1RM)
HATCH_PROGRAM = [
    (1, 1, [(1, 10, 0.60), (1, 8, 0.70), (1, 6, 0.75), (1, 4, 0.80)],
           [(1, 5, 0.60), (1, 5, 0.70), (1, 5, 0.70), (1, 5, 0.70)]),
    (1, 2, [(1, 10, 0.60), (1, 8, 0.65), (1, 8, 0.70), (1, 8, 0.75)],
           [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.70)]),
    (2, 1, [(1, 10, 0.60), (1, 8, 0.65), (1, 6, 0.70), (1, 6, 0.75), (1, 6, 0.80)],
           [(1, 5, 0.60), (1, 5, 0.70), (1, 5, 0.75), (1, 5, 0.75)]),
    (2, 2, [(1, 10, 0.60), (1, 8, 0.70), (1, 8, 0.75), (1, 8, 0.80)],
           [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.70)]),
    (3, 1, [(1, 8, 0.65), (1, 8, 0.70), (1, 6, 0.80), (1, 6, 0.85)],
           [(1, 5, 0.60), (1, 5, 0.70), (1, 5, 0.75), (1, 5, 0.80)]),
    (3, 2, [(1, 10, 0.60), (1, 10, 0.65), (1, 8, 0.70), (1, 8, 0.75)],
           [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.70)]),
    (4, 1, [(1, 8, 0.65), (1, 8, 0.70), (1, 6, 0.80), (1, 6, 0.85)],
           [(1, 5, 0.70), (1, 5, 0.75), (1, 5, 0.80), (1, 5, 0.85)]),
    (4, 2, [(1, 8, 0.65), (1, 8, 0.70), (1, 8, 0.75), (1, 8, 0.80)],
           [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.70)]),
    (5, 1, [(1, 8, 0.65), (1, 6, 0.75), (1, 4, 0.85), (1, 4, 0.90)],
           [(1, 5, 0.70), (1, 4, 0.80), (1, 3, 0.85), (1, 3, 0.90)]),
    (5, 2, [(1, 6, 0.65), (1, 6, 0.75), (1, 6, 0.80), (1, 6, 0.80)],
           [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.70)]),
    (6, 1, [(1, 6, 0.70), (1, 6, 0.80), (1, 3, 0.90), (1, 2, 0.95)],
           [(1, 5, 0.65), (1, 4, 0.75), (1, 4, 0.80), (1, 4, 0.80)]),
    (6, 2, [(1, 4, 0.75), (1, 4, 0.80), (1, 4, 0.80), (1, 4, 0.80)],
           [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.70)]),
    (7, 1, [(1, 5, 0.70), (1, 5, 0.80), (1, 2, 0.85), (1, 3, 0.90), (1, 1, 1.00)],
           [(1, 5, 0.65), (1, 4, 0.75), (1, 4, 0.80), (1, 4, 0.85)]),
    (7, 2, [(1, 4, 0.70), (1, 4, 0.75), (1, 4, 0.80), (1, 4, 0.85)],
           [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.70)]),
    (8, 1, [(1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.75), (1, 5, 0.80)],
           [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.65), (1, 5, 0.65)]),
    (8, 2, [(2, 5, 0.65), (3, 5, 0.70)],
           [(4, 5, 0.60)]),
    (9, 1, [(1, 5, 0.60), (1, 3, 0.70), (1, 2, 0.80), (1, 2, 0.90), (1, 1, 0.95)],
           [(1, 5, 0.65), (1, 4, 0.75), (1, 4, 0.80), (1, 4, 0.85)]),
    (9, 2, [(1, 5, 0.65), (3, 5, 0.75)],
           [(4, 5, 0.65)]),
    (10, 1, [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.75)],
            [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.70)]),
    (10, 2, [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.75)],
            [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.70)]),
    # peak week with a 103% single
    (11, 1, [(1, 5, 0.60), (1, 3, 0.70), (1, 2, 0.80), (1, 2, 0.90), (1, 1, 0.95), (1, 1, 1.03)],
            [(1, 5, 0.60), (1, 5, 0.70), (1, 5, 0.75), (1, 5, 0.75)]),
    (11, 2, [(1, 5, 0.60), (1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.70)],
            [(1, 5, 0.60), (1, 5, 0.70), (1, 5, 0.75), (1, 5, 0.80)]),
    (12, 1, [(1, 5, 0.60), (1, 5, 0.70), (1, 5, 0.75), (1, 5, 0.75)],
            [(1, 5, 0.65), (1, 5, 0.70), (1, 5, 0.75)]),
    (12, 2, [(1, 5, 0.60), (1, 5, 0.70), (1, 5, 0.75), (1, 5, 0.75)],
            [(1, 5, 0.60), (1, 5, 0.70), (1, 5, 0.75), (1, 5, 0.75)]),
]
HATCH_PROJECTED_GAIN = 1.03
PLATE_INCREMENT = 5
