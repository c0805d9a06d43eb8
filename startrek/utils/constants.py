"""Game configuration constants."""

# Grid dimensions
GALAXY_SIZE = 8  # Quadrants per side
QUADRANT_SIZE = 8  # Sectors per side

# Galaxy generation
MIN_HOSTILES = 10
MAX_HOSTILES_PER_QUADRANT = 3
HOSTILE_QUADRANT_PROB = 0.3  # Chance a quadrant rolls 1-3 hostiles
RESUPPLY_QUADRANT_PROB = 0.1
OBSTACLE_RANGE = (1, 8)  # Obstacles per quadrant
START_QUADRANT_ATTEMPTS = 100
SECTOR_PLACEMENT_ATTEMPTS = 1000

# Hostile ships
HOSTILE_ENERGY_RANGE = (200, 299)
HOSTILE_SHIELD_RANGE = (100, 199)
HOSTILE_REFERENCE_ENERGY = 300  # Divisor for hit probability
HOSTILE_ATTACK_FACTOR = 0.3
WEAPON_RANGE = 10.0  # Distance at which attacks become ineffective

# Ship
INITIAL_ENERGY = 3000
INITIAL_TORPEDOES = 10
LOW_ENERGY_THRESHOLD = 500  # Condition YELLOW below this

# Navigation
COURSE_RANGE = (1.0, 9.0)
WARP_RANGE = (0.1, 8.0)
ENERGY_PER_WARP = 10

# Weapons
PHASER_SHIELD_ABSORPTION = 0.1  # Fraction of hostile shields subtracted from a hit
PHASER_SHIELD_DRAIN = 0.3  # Fraction of damage dealt that also drains shields
TORPEDO_MAX_STEPS = 12  # Covers the full sector grid diagonal

# Damage model
SYSTEM_OPERATIONAL_THRESHOLD = 0.5
PASSIVE_REPAIR_PER_TURN = 0.1
SYSTEM_DAMAGE_CHANCE = 0.3
SYSTEM_DAMAGE_RANGE = (0.3, 0.7)

# Mission clock
INITIAL_STARDATE_RANGE = (2250, 2299)
STARDATE_LIMIT = 30
STARDATE_INCREMENT = 1

# Scoring
SCORE_PER_HOSTILE = 100
SCORE_PER_STARDATE_REMAINING = 10
ENERGY_PER_SCORE_POINT = 100
SCORE_PER_TORPEDO = 50
SPEED_BONUS_STARDATES = 20
SPEED_BONUS_PER_STARDATE = 100
NO_DAMAGE_BONUS = 1000
PERFECTION_BONUS_STARDATES = 15
PERFECTION_BONUS = 500
LIVE_SCORE_HEALTHY_BONUS = 500

# Grade thresholds, highest first
GRADE_THRESHOLDS = (
    (3000, "S", "Legendary Captain"),
    (2000, "A", "Excellent Command"),
    (1500, "B", "Good Performance"),
    (1000, "C", "Adequate Mission"),
    (500, "D", "Barely Passing"),
)
FAILING_GRADE = ("F", "Needs Improvement")
DEFEAT_GRADE = ("F", "Mission Failed")

# Leaderboard
LEADERBOARD_SIZE = 10
PLAYER_NAME_LENGTH = 3
DEFAULT_PLAYER_NAME = "AAA"
