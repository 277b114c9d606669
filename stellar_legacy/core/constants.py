"""Game balance constants for the Stellar Legacy economy engine."""

from .enums import ResourceType, CrewRole, PlanetType


# Action Costs
CREW_TRAINING_COST = {ResourceType.CREDITS: 100}
MORALE_BOOST_COST = {ResourceType.CREDITS: 50}
CREW_RECRUITMENT_COST = {ResourceType.CREDITS: 200}
EXPLORATION_COST = {ResourceType.ENERGY: 50}
COLONY_COST = {ResourceType.CREDITS: 200, ResourceType.MINERALS: 100}

# Crew Limits
MAX_SKILL_LEVEL = 10
MIN_SKILL_LEVEL = 0
MAX_MORALE = 100
MIN_MORALE = 0
MORALE_BOOST_AMOUNT = 10
HEIR_MAX_AGE = 50  # Heirs must be strictly younger

# Recruitment Ranges (inclusive)
RECRUIT_SKILL_RANGE = (2, 10)
RECRUIT_MORALE_RANGE = (60, 90)
RECRUIT_AGE_RANGE = (25, 45)

# World Generation Ranges (inclusive)
PLANETS_PER_SYSTEM_RANGE = (1, 3)
RESOURCES_PER_PLANET_RANGE = (1, 2)

# Economy
TRADE_AMOUNT = 10
COLONY_GENERATION_BOOST = 0.5

# Resource bounds, inclusive on both ends
RESOURCE_BOUNDS = {
    ResourceType.CREDITS: (0, 1_000_000),
    ResourceType.ENERGY: (0, 100_000),
    ResourceType.MINERALS: (0, 100_000),
    ResourceType.FOOD: (0, 100_000),
    ResourceType.INFLUENCE: (0, 10_000),
}

# Passive generation per tick
BASE_GENERATION_RATES = {
    ResourceType.CREDITS: 2,
    ResourceType.ENERGY: 1,
    ResourceType.MINERALS: 1,
    ResourceType.FOOD: 1,
    ResourceType.INFLUENCE: 0.2,
}

# Timing (milliseconds)
TICK_INTERVAL_MS = 3000
NOTIFICATION_TIMEOUT_MS = 3000
AUTOSAVE_INTERVAL_MS = 30000

# Notifications
MAX_NOTIFICATIONS = 5

# Action history kept by the store
ACTION_LOG_LIMIT = 100

# Generator Pools
RECRUITABLE_ROLES = [
    CrewRole.ENGINEER,
    CrewRole.PILOT,
    CrewRole.GUNNER,
    CrewRole.SCIENTIST,
    CrewRole.MEDIC,
]

CREW_FIRST_NAMES = [
    "Alex", "Sam", "Taylor", "Jordan", "Casey", "Elena", "Marcus",
    "Zara", "Kex", "Rivera", "Johnson", "Kim", "Smith", "Wu", "Chen", "Thorne",
]

CREW_LAST_NAMES = [
    "Rivera", "Johnson", "Kim", "Smith", "Wu", "Voss", "Cole", "Chen", "Thorne",
]

CREW_BACKGROUNDS = [
    "Academy graduate seeking adventure",
    "Veteran spacer with mysterious past",
    "Talented rookie with natural abilities",
    "Former corporate employee turned explorer",
    "Former military officer turned explorer",
    "Shipyard veteran with decades of experience",
    "Ace pilot from the outer colonies",
    "Smooth-talking merchant with connections",
]

GENERATED_PLANET_TYPES = [
    PlanetType.ROCKY,
    PlanetType.GAS_GIANT,
    PlanetType.ICE,
    PlanetType.DESERT,
]

# Tags a generated planet can carry; each matches a tracked resource
PLANET_RESOURCE_TAGS = ["minerals", "energy", "food"]

# Placeholder shown for systems nobody has explored yet
UNKNOWN_PLANET_NAME = "Unknown"
UNKNOWN_RESOURCE_TAG = "unknown"

# Persistence
SAVE_FORMAT_VERSION = 1
