"""Default preference criteria, used when no criteria file is configured.

Pattern syntax:
    "natural light"              literal phrase (case-insensitive)
    "balcony|patio"              any of the phrases
    "/separate\\s+office/i"      full regular expression with flags
"""

DEFAULT_CRITERIA: list[dict] = [
    # Property features
    {
        "id": "cl_natural_light",
        "key": "Natural Light",
        "weight": 100,
        "must": True,
        "pattern": "natural light",
        "synonyms": [
            "sun-drenched", "bright interiors", "abundant sunlight",
            "sunlit", "well-lit", "lots of light",
        ],
    },
    {
        "id": "cl_in_unit_laundry",
        "key": "In-Unit Laundry",
        "weight": 90,
        "must": True,
        "pattern": r"/in[-\s]?unit laundry/i",
        "synonyms": ["washer/dryer in unit", "laundry hookups in unit", "in-home laundry"],
    },
    {
        "id": "cl_dishwasher",
        "key": "Dishwasher",
        "weight": 80,
        "must": True,
        "pattern": "dishwasher",
        "synonyms": ["dish washer"],
    },
    {
        "id": "cl_high_ceilings",
        "key": "High Ceilings",
        "weight": 70,
        "pattern": "high ceilings",
        "synonyms": ["tall ceilings", "vaulted ceilings", "lofty ceilings"],
    },
    {
        "id": "cl_modern_appliances",
        "key": "Modern Appliances",
        "weight": 60,
        "pattern": "modern appliances",
        "synonyms": [
            "updated appliances", "new appliances",
            "stainless steel appliances", "high-end appliances",
        ],
    },
    {
        "id": "cl_open_floor_plan",
        "key": "Open Floor Plan",
        "weight": 65,
        "pattern": "open floor plan",
        "synonyms": ["open concept", "open layout", "great room"],
    },
    {
        "id": "cl_separate_office",
        "key": "Separate Office Space",
        "weight": 55,
        "pattern": r"/separate\s+(office|study)/i",
        "synonyms": ["home office", "den", "dedicated workspace", "study nook"],
    },
    {
        "id": "cl_ac",
        "key": "Air Conditioning",
        "weight": 40,
        "pattern": "air conditioning|A/C",
        "synonyms": ["central air", "AC unit", "climate control"],
    },
    # Outdoor and natural elements
    {
        "id": "cl_outdoor_space",
        "key": "Outdoor Space",
        "weight": 50,
        "pattern": "balcony|patio|outdoor space",
        "synonyms": ["deck", "yard", "garden", "terrace", "private outdoor"],
    },
    {
        "id": "cl_proximity_nature",
        "key": "Proximity to Nature",
        "weight": 60,
        "pattern": "near park|green space|close to nature",
        "synonyms": ["park access", "adjacent to trails", "nature views"],
    },
    # Pets and accessibility
    {
        "id": "cl_pet_friendly",
        "key": "Pet-Friendly",
        "weight": 80,
        "must": True,
        "pattern": r"/pet[-\s]?friendly|allows cats/i",
        "synonyms": ["pets allowed", "dogs welcome", "cat friendly"],
    },
    {
        "id": "cl_elevator_access",
        "key": "Elevator Access",
        "weight": 50,
        "pattern": "elevator access|has elevator",
        "synonyms": ["lift access"],
    },
    {
        "id": "cl_minimal_stairs",
        "key": "Minimal Stairs",
        "weight": 45,
        "pattern": "minimal stairs|no stairs|ground floor",
        "synonyms": ["single-level living", "step-free access", "first floor unit"],
    },
    # Parking and transportation
    {
        "id": "cl_parking",
        "key": "Parking Availability",
        "weight": 70,
        "pattern": r"/parking\s+(spot|available)|garage/i",
        "synonyms": ["dedicated parking", "off-street parking", "parking included"],
    },
    {
        "id": "cl_public_transport",
        "key": "Proximity to Public Transport",
        "weight": 50,
        "pattern": r"/near\s+(Muni|BART|public transport)/i",
        "synonyms": ["transit-friendly", "easy commute", "close to bus lines"],
    },
    # Neighborhoods
    {"id": "cl_dolores_heights", "key": "Located in Dolores Heights", "weight": 90, "pattern": "Dolores Heights"},
    {"id": "cl_potrero_hill", "key": "Located in Potrero Hill", "weight": 85, "pattern": "Potrero Hill"},
    {"id": "cl_noe_valley", "key": "Located in Noe Valley", "weight": 80, "pattern": "Noe Valley"},
    {"id": "cl_marina", "key": "Located in Marina District", "weight": 75, "pattern": "Marina District"},
    {
        "id": "cl_pacific_heights",
        "key": "Located in Pacific Heights",
        "weight": 70,
        "pattern": "Pacific Heights",
        "synonyms": ["Pac Heights"],
    },
    {"id": "cl_north_beach", "key": "Located in North Beach", "weight": 65, "pattern": "North Beach"},
    # Noise
    {
        "id": "cl_quiet_street",
        "key": "Quiet Street",
        "weight": 60,
        "pattern": "quiet street|low noise",
        "synonyms": ["peaceful location", "tranquil setting", "away from traffic"],
    },
]
