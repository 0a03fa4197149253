"""Game configuration constants."""

# Play area (pixels)
PLAY_WIDTH = 1200
PLAY_HEIGHT = 800
PLACEMENT_MARGIN = 20  # Modules must sit at least this far inside the edges
MIN_MODULE_SPACING = 50  # Minimum distance between module centres

# Economy
STARTING_RESOURCES = 1000
MODULE_COSTS = {
    "energy": 150,
    "recruitment": 200,
    "production": 250,
    "defense": 300,
}
CONNECTION_COST = 50
# Indexed by current level (index 0 unused)
UPGRADE_COSTS = {
    "energy": (0, 225, 300),
    "recruitment": (0, 300, 400),
    "production": (0, 375, 500),
    "defense": (0, 450, 600),
}
MAX_LEVEL = 3

# Modules
MAX_DROIDS = 10
MAX_HEALTH = 100
ENERGY_MODULE_CAPACITY = {1: 3, 2: 7, 3: 12}  # Modules energized per source
TYPE_PRIORITY = {"defense": 3, "production": 2, "recruitment": 1}
BASE_CAPACITY = {
    "recruitment": 1,  # Droids per attempt, never scaled
    "production": 5,  # Resources per second per droid
    "defense": 1,  # Shots per volley per droid
}
LEVEL_MULTIPLIER_STEP = 0.5  # +50% per level above 1

# Behaviour timers (game-clock ms)
PRODUCTION_INTERVAL = 1000
DEFENSE_INTERVAL = 2000
RECRUITMENT_INTERVALS = (0, 20000, 17000, 15000, 13000, 11000, 9000, 8000, 7000, 6000, 5000)

# Combat
DEFENSE_RANGE = 150
ENEMY_RANGE = 100
ENEMY_ATTACK_INTERVAL = 1000
ENEMY_BASE_HEALTH = 50
ENEMY_BASE_SPEED = 100  # Pixels per second
ENEMY_SCALING = 1.1  # Per wave number
ENEMY_SPAWN_OFFSET = 20  # Spawn this far outside the play area
ENEMY_EDGE_CLAMP = 10
ENEMY_JITTER_MIN_MS = 1000
ENEMY_JITTER_SPREAD_MS = 2000
ENEMY_HEADING_WEIGHT = 0.7  # Share of current heading kept when steering

PROJECTILE_SPEED = 400  # Pixels per second
PROJECTILE_LIFE = 3000
ENEMY_PROJECTILE_DAMAGE = 10
DEFENSE_PROJECTILE_DAMAGE = 25
MODULE_HIT_RADIUS = 20
ENEMY_HIT_RADIUS = 10

# Waves
FIRST_WAVE_TIME = 300000  # 5 minutes
WAVE_INTERVAL = 180000  # 3 minutes
MAX_WAVES = 10
WAVE_BASE_ENEMIES = 3
WAVE_ENEMY_INCREMENT = 2

# Simulation
SPEED_CYCLE = (1, 2, 4)
MAX_STEP_MS = 20  # Longest sub-step a tick is cut into; projectiles move 8 px per step
CAMERA_ZOOM_RANGE = (0.5, 2.0)

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing
