# Implant sizing constants: "golden rule" margins + standard manufacturer sizes

# Safety margins (mm)
SAFETY_MARGIN_NERVE = 1.5   # Minimum distance from nerve canal to box bottom
CREST_MARGIN = 1.0          # Distance from bone crest down to box top
LINGUAL_OFFSET = 0.5        # Shift toward lingual side to protect buccal bone
LENGTH_SAFETY_BUFFER = 1.0  # Extra clearance on top of the nerve margin when picking a length

# Diameter as a fraction of the mesio-distal gap
DIAMETER_RATIO_MIN = 0.60
DIAMETER_RATIO_MAX = 0.70
DIAMETER_RATIO_DEFAULT = 0.65

# Weight of bone slope when blending into the implant angle
BONE_SLOPE_FACTOR = 0.5

# Standard implant sizes (mm), ascending
STANDARD_LENGTHS = (6.0, 7.0, 8.0, 8.5, 10.0, 11.5, 13.0, 15.0)
STANDARD_DIAMETERS = (3.0, 3.5, 4.0, 4.5, 5.0, 5.5, 6.0)

# Coordinate system (mm)
# X: mesial-distal (positive = distal)
# Y: vertical (positive = occlusal/up)
# Z: buccal-lingual (positive = buccal, negative = lingual)
VERTICAL_AXIS = (0.0, 1.0, 0.0)
DEFAULT_LINGUAL_VECTOR = (0.0, 0.0, -1.0)

# Decimal places kept by every geometry operation
PRECISION = 3


def smallest_length() -> float:
    """Shortest implant in the standard range."""
    return STANDARD_LENGTHS[0]


def lengths_up_to(max_length: float) -> list:
    """Standard lengths that fit in max_length (ascending)."""
    return [length for length in STANDARD_LENGTHS if length <= max_length]


def standard_sizes() -> dict:
    """All sizing constants, for the /standards endpoint."""
    return {
        "lengths": list(STANDARD_LENGTHS),
        "diameters": list(STANDARD_DIAMETERS),
        "nerve_margin": SAFETY_MARGIN_NERVE,
        "crest_margin": CREST_MARGIN,
        "lingual_offset": LINGUAL_OFFSET,
        "length_safety_buffer": LENGTH_SAFETY_BUFFER,
        "diameter_ratio_min": DIAMETER_RATIO_MIN,
        "diameter_ratio_max": DIAMETER_RATIO_MAX,
        "diameter_ratio_default": DIAMETER_RATIO_DEFAULT,
        "bone_slope_factor": BONE_SLOPE_FACTOR,
        "precision": PRECISION,
    }
