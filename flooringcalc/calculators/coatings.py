"""
Coating systems laid over concrete: epoxy, garage floor coatings and
decorative concrete finishes.

Material is in gallons from per-product coverage tables; costs are
priced per gallon or per sq ft as the trade quotes them.
"""

from typing import Literal

from .base import BaseCalculator
from .inputs import InputSchema, Toggle, choice, measure


# ============================================================
# Epoxy
# ============================================================

EpoxyType = Literal["standard-epoxy", "high-performance", "polyaspartic", "polyurea"]

# sq ft per gallon for (primer, base, topcoat)
EPOXY_COVERAGE = {
    "standard-epoxy": (400, 250, 350),
    "high-performance": (350, 200, 300),
    "polyaspartic": (300, 180, 250),
    "polyurea": (350, 200, 280),
}

# $ per gallon for (primer, base, topcoat)
EPOXY_PRICES = {
    "standard-epoxy": (45, 85, 65),
    "high-performance": (55, 120, 95),
    "polyaspartic": (75, 180, 150),
    "polyurea": (65, 160, 130),
}

# coat layers -> (base coats, topcoats)
EPOXY_LAYERS = {
    "single-coat": (1, 0),
    "two-coat": (1, 1),
    "three-coat": (2, 1),
}

# condition -> (labor factor, prep $/sq ft)
EPOXY_CONDITIONS = {
    "new-concrete": (1.0, 0.50),
    "existing-good": (1.2, 2.00),
    "existing-poor": (1.8, 5.00),
    "painted": (2.5, 8.00),
}

# broadcast -> (lb per sq ft, $ per lb)
EPOXY_DECORATIVE = {
    "none": (0, 0),
    "color-flakes": (0.05, 3.50),
    "metallic": (0.02, 12.00),
    "quartz-sand": (0.1, 2.25),
}

EPOXY_ENVIRONMENTS = {
    "residential": 1.0,
    "light-commercial": 1.2,
    "heavy-commercial": 1.5,
    "industrial": 2.0,
}

EPOXY_DURABILITY = {
    "standard-epoxy": "5-10 years residential",
    "high-performance": "10-15 years commercial",
    "polyaspartic": "15-20 years high-traffic",
    "polyurea": "20+ years industrial",
}

EPOXY_CURE_TIMES = {
    "standard-epoxy": "7-14 days full cure",
    "high-performance": "5-7 days full cure",
    "polyaspartic": "24-48 hours full cure",
    "polyurea": "24 hours full cure",
}

EPOXY_HOURS_PER_SQ_FT = 0.3


class EpoxyInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    epoxy_type: EpoxyType = choice("standard-epoxy")
    coat_layers: Literal["single-coat", "two-coat", "three-coat"] = choice("two-coat")
    floor_condition: Literal["new-concrete", "existing-good", "existing-poor",
                             "painted"] = choice("existing-good")
    decorative_options: Literal["none", "color-flakes", "metallic",
                                "quartz-sand"] = choice("color-flakes")
    environment: Literal["residential", "light-commercial", "heavy-commercial",
                         "industrial"] = choice("residential")
    include_prep: Toggle = True
    include_primer: Toggle = True
    include_topcoat: Toggle = True


class EpoxyCalculator(BaseCalculator):

    kind = "epoxy"
    schema = EpoxyInputs

    def calculate(self, inputs: EpoxyInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        primer_rate, base_rate, topcoat_rate = EPOXY_COVERAGE[inputs.epoxy_type]
        primer_price, base_price, topcoat_price = EPOXY_PRICES[inputs.epoxy_type]
        base_coats, topcoats = EPOXY_LAYERS[inputs.coat_layers]
        labor_factor, prep_rate = EPOXY_CONDITIONS[inputs.floor_condition]
        flake_rate, flake_price = EPOXY_DECORATIVE[inputs.decorative_options]

        primer = room_area / primer_rate if inputs.include_primer else 0
        base_coat = (room_area / base_rate) * base_coats
        topcoat = (room_area / topcoat_rate) * topcoats if inputs.include_topcoat else 0
        decorative = room_area * flake_rate

        total = self.sum_costs(
            primer * primer_price,
            base_coat * base_price,
            topcoat * topcoat_price,
            decorative * flake_price,
        )

        steps = ["Surface preparation and cleaning"]
        if inputs.include_primer:
            steps.append("Apply primer coat and allow to cure")
        steps.append("Apply base epoxy coat with roller or squeegee")
        if inputs.decorative_options != "none":
            steps.append("Broadcast %s while base is tacky" % inputs.decorative_options)
        if base_coats > 1:
            steps.append("Apply second base coat if specified")
        if inputs.include_topcoat:
            steps.append("Apply clear topcoat for protection and gloss")
        steps.append("Allow full cure time before heavy use")

        return {
            "room_area": room_area,
            "primer_needed": primer,
            "base_coat_needed": base_coat,
            "topcoat_needed": topcoat,
            "decorative_material": decorative,
            "total_material_cost": total,
            "prep_cost": room_area * prep_rate if inputs.include_prep else 0,
            "labor_hours": (room_area * EPOXY_HOURS_PER_SQ_FT * labor_factor
                            * EPOXY_ENVIRONMENTS[inputs.environment]),
            "durability_rating": EPOXY_DURABILITY[inputs.epoxy_type],
            "application_steps": steps,
            "cure_time": EPOXY_CURE_TIMES[inputs.epoxy_type],
        }


# ============================================================
# Garage floor
# ============================================================

GarageCoating = Literal["epoxy", "polyurea", "polyaspartic", "acrylic"]

# sq ft per gallon for (primer, base, topcoat)
GARAGE_COVERAGE = {
    "epoxy": (400, 250, 400),
    "polyurea": (350, 200, 350),
    "polyaspartic": (400, 300, 400),
    "acrylic": (450, 350, 450),
}

# $ per gallon for (primer, base, topcoat)
GARAGE_PRICES = {
    "epoxy": (45, 85, 65),
    "polyurea": (55, 120, 85),
    "polyaspartic": (50, 95, 75),
    "acrylic": (35, 55, 45),
}

GARAGE_PREP_RATES = {
    "basic": 0.50,
    "diamond-grind": 1.25,
    "shot-blast": 2.00,
}

# coating -> (cure time, durability)
GARAGE_PROPERTIES = {
    "epoxy": ("24-48 hours foot traffic, 7 days full cure",
              "Good - 5-10 years with proper maintenance"),
    "polyurea": ("4-6 hours foot traffic, 24 hours full cure",
                 "Excellent - 15-20 years, highly durable"),
    "polyaspartic": ("2-4 hours foot traffic, 24 hours full cure",
                     "Excellent - 10-15 years, UV stable"),
    "acrylic": ("2-4 hours foot traffic, 24 hours full cure",
                "Fair - 3-5 years, budget option"),
}

FLAKE_SQ_FT_PER_LB = 100
FLAKE_PRICE = 25

GARAGE_MAINTENANCE = [
    "Sweep regularly to prevent abrasive dirt accumulation",
    "Clean with mild detergent and water as needed",
    "Avoid harsh chemicals and de-icing salts",
    "Use furniture pads to prevent scratching",
    "Reapply topcoat every 3-5 years in high-traffic areas",
    "Address any chips or wear spots promptly to prevent spreading",
]


class GarageFloorInputs(InputSchema):
    garage_length: float = measure(ge=1, message="Garage length must be greater than 0")
    garage_width: float = measure(ge=1, message="Garage width must be greater than 0")
    coating_type: GarageCoating = choice("epoxy")
    surface_prep: Literal["basic", "diamond-grind", "shot-blast"] = choice("diamond-grind")
    decorative_flakes: Toggle = False
    topcoat: Toggle = True


class GarageFloorCalculator(BaseCalculator):

    kind = "garage-floor"
    schema = GarageFloorInputs

    def calculate(self, inputs: GarageFloorInputs) -> dict:
        garage_area = self.rectangle_area(inputs.garage_length, inputs.garage_width)
        primer_rate, base_rate, topcoat_rate = GARAGE_COVERAGE[inputs.coating_type]
        primer_price, base_price, topcoat_price = GARAGE_PRICES[inputs.coating_type]

        primer = self.units_for(garage_area, primer_rate)
        base_coat = self.units_for(garage_area, base_rate)
        topcoat = self.units_for(garage_area, topcoat_rate) if inputs.topcoat else 0
        flakes = self.units_for(garage_area, FLAKE_SQ_FT_PER_LB) if inputs.decorative_flakes else None

        prep_cost = garage_area * GARAGE_PREP_RATES[inputs.surface_prep]
        material_cost = self.sum_costs(
            primer * primer_price,
            base_coat * base_price,
            topcoat * topcoat_price,
            (flakes or 0) * FLAKE_PRICE,
        )
        total = prep_cost + material_cost
        cure_time, durability = GARAGE_PROPERTIES[inputs.coating_type]

        steps = [
            "Clean and degrease the concrete surface thoroughly",
            "Perform %s surface preparation" % inputs.surface_prep.replace("-", " ", 1),
            "Repair any cracks or holes with appropriate filler",
            "Apply primer coat and allow to cure per manufacturer specs",
            "Apply base coat in thin, even layers",
        ]
        if inputs.decorative_flakes:
            steps.append("Broadcast decorative flakes while base coat is tacky")
        if inputs.topcoat:
            steps.append("Apply protective topcoat for enhanced durability")
        steps.append("Allow full cure time before heavy use")

        return {
            "garage_area": garage_area,
            "primer_needed": primer,
            "base_coat_needed": base_coat,
            "topcoat_needed": topcoat,
            "flakes_needed": flakes,
            "prep_cost": prep_cost,
            "material_cost": material_cost,
            "total_cost": total,
            "cost_per_sq_ft": self.cost_per_sq_ft(total, garage_area),
            "cure_time": cure_time,
            "durability_rating": durability,
            "application_steps": steps,
            "maintenance_tips": list(GARAGE_MAINTENANCE),
        }


# ============================================================
# Decorative concrete
# ============================================================

ConcreteFloor = Literal["polished-concrete", "stained-concrete", "overlay", "microtopping"]

CONCRETE_PREP_RATES = {
    "new": 2.50,
    "existing-good": 4.00,
    "existing-poor": 8.50,
    "needs-repair": 15.00,
}

# floor type -> (material $/sq ft, labor $/sq ft)
CONCRETE_RATES = {
    "polished-concrete": (3.50, 6.00),
    "stained-concrete": (5.50, 8.50),
    "overlay": (8.00, 12.00),
    "microtopping": (12.00, 18.00),
}

CONCRETE_FINISH_FACTORS = {
    "basic": 1.0,
    "standard": 1.4,
    "premium": 1.8,
    "decorative": 2.5,
}

CONCRETE_COLOR_RATES = {
    "natural": 0,
    "integral-color": 1.50,
    "acid-stain": 3.00,
    "water-stain": 2.50,
    "dye": 4.50,
}

CONCRETE_SEALER_RATES = {
    "none": 0,
    "penetrating": 1.25,
    "topical-acrylic": 2.00,
    "urethane": 3.50,
    "epoxy": 4.50,
}

POLISHING_RATES = {
    "none": 0,
    "light": 2.50,
    "medium": 4.00,
    "heavy": 6.50,
}

# floor type -> (durability, maintenance, lifespan)
CONCRETE_OUTLOOK = {
    "polished-concrete": ("Excellent - 25+ years", "Very Low - Occasional dust mopping",
                          "25-50 years with proper care"),
    "stained-concrete": ("Very Good - 15-20 years", "Low - Periodic resealing",
                         "15-25 years with resealing"),
    "overlay": ("Good - 10-15 years", "Medium - Regular maintenance",
                "10-20 years depending on traffic"),
    "microtopping": ("Good - 8-12 years", "Medium - Careful maintenance",
                     "8-15 years with maintenance"),
}

OVERLAY_FLOORS = ("overlay", "microtopping")


class ConcreteInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    floor_type: ConcreteFloor = choice("polished-concrete")
    concrete_condition: Literal["new", "existing-good", "existing-poor",
                                "needs-repair"] = choice("existing-good")
    finish_level: Literal["basic", "standard", "premium", "decorative"] = choice("standard")
    color_options: Literal["natural", "integral-color", "acid-stain", "water-stain",
                           "dye"] = choice("natural")
    sealer_type: Literal["none", "penetrating", "topical-acrylic", "urethane",
                         "epoxy"] = choice("penetrating")
    aggregate_exposure: Literal["none", "light", "medium", "heavy"] = choice("light")
    include_prep: Toggle = True
    include_sealer: Toggle = True
    include_polishing: Toggle = True


class ConcreteCalculator(BaseCalculator):

    kind = "concrete"
    schema = ConcreteInputs

    def calculate(self, inputs: ConcreteInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        material_rate, labor_rate = CONCRETE_RATES[inputs.floor_type]
        finish = CONCRETE_FINISH_FACTORS[inputs.finish_level]

        prep_cost = 0
        if inputs.include_prep:
            prep_cost = room_area * CONCRETE_PREP_RATES[inputs.concrete_condition]
        material_cost = (room_area * material_rate * finish
                         + room_area * CONCRETE_COLOR_RATES[inputs.color_options])
        labor_cost = room_area * labor_rate * finish
        sealer_cost = 0
        if inputs.include_sealer:
            sealer_cost = room_area * CONCRETE_SEALER_RATES[inputs.sealer_type]
        polishing_cost = 0
        if inputs.include_polishing:
            polishing_cost = room_area * POLISHING_RATES[inputs.aggregate_exposure]

        total = self.sum_costs(prep_cost, material_cost, labor_cost, sealer_cost, polishing_cost)
        durability, maintenance, lifespan = CONCRETE_OUTLOOK[inputs.floor_type]

        steps = []
        if inputs.include_prep:
            steps.append("Surface preparation and repair")
        steps.append("Clean and profile concrete surface")
        if inputs.floor_type in OVERLAY_FLOORS:
            steps.append("Apply base overlay material")
        if inputs.color_options != "natural":
            steps.append("Apply %s" % inputs.color_options.replace("-", " ", 1))
        if inputs.include_polishing and inputs.aggregate_exposure != "none":
            steps.append("Polish to %s aggregate exposure" % inputs.aggregate_exposure)
        if inputs.include_sealer:
            steps.append("Apply %s sealer" % inputs.sealer_type.replace("-", " ", 1))
        steps.append("Final inspection and curing")

        return {
            "room_area": room_area,
            "prep_cost": prep_cost,
            "material_cost": material_cost,
            "labor_cost": labor_cost,
            "sealer_cost": sealer_cost,
            "polishing_cost": polishing_cost,
            "total_cost": total,
            "cost_per_sq_ft": self.cost_per_sq_ft(total, room_area),
            "durability_rating": durability,
            "maintenance_level": maintenance,
            "process_steps": steps,
            "expected_lifespan": lifespan,
        }
