"""
settings.py - Game constants, colors, and tuning values
Ball Blast
"""

# ── Display ──────────────────────────────────────────────
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
MIN_WIDTH = 200
MIN_HEIGHT = 200
FPS = 60
TITLE = "BALL BLAST // Ultimate Edition"

# Distance from the bottom of the screen to the ground line
GROUND_OFFSET = 100

# ── Color Palette ────────────────────────────────────────
BG_COLOR     = (26, 26, 46)
GROUND_COLOR = (42, 42, 78)
WHITE        = (255, 255, 255)
BLACK        = (0, 0, 0)
GRAY         = (100, 100, 120)
DARK_GRAY    = (40, 40, 60)
GOLD         = (255, 215, 0)

CANNON_BODY   = (85, 85, 85)
CANNON_BARREL = (119, 119, 119)
CANNON_WHEEL  = (51, 51, 51)

UI_BG     = (15, 15, 35, 220)
UI_BORDER = (78, 205, 196)

# Block color bands: (hp upper bound, color). Last band has no upper bound.
BLOCK_COLOR_BANDS = [
    (30,   (78, 205, 196)),    # #4ecdc4
    (80,   (69, 183, 209)),    # #45b7d1
    (150,  (150, 201, 61)),    # #96c93d
    (300,  (249, 202, 36)),    # #f9ca24
    (600,  (255, 159, 67)),    # #ff9f43
    (1000, (238, 90, 36)),     # #ee5a24
]
BLOCK_COLOR_MAX = (183, 21, 64)   # #b71540

# ── Cannon (emitter) ────────────────────────────────────
CANNON_WIDTH = 60
CANNON_HEIGHT = 50
CANNON_GROUND_OFFSET = 30       # cannon sits this far below the ground line
CANNON_MUZZLE_OFFSET = 30       # balls spawn this far above the cannon
CANNON_BASE_SPEED = 0.1         # pursuit fraction per tick
CANNON_SPEED_PER_TIER = 0.03

# ── Balls (projectiles) ─────────────────────────────────
BALL_RADIUS = 8
BALL_SPEED = 12
BALL_SPREAD = 0.4               # total horizontal spread factor
BALL_COLOR = WHITE
BASE_MAX_BALLS = 2
BASE_FIRE_INTERVAL = 10         # ticks between shots before upgrades
MIN_FIRE_INTERVAL = 3           # floor from upgrades
BALL_BOUNCE_NUDGE = 2           # ball is pushed this many velocity steps off a block

# ── Blocks (obstacles) ──────────────────────────────────
BLOCK_SIZE = 70
BLOCK_COLUMN_WIDTH = 80
BLOCK_SPAWN_THRESHOLD = 0.35    # a column is filled when random() > this
BLOCK_BASE_HP = 15
BLOCK_HP_PER_LEVEL = 8
BLOCK_HP_RANDOM_PER_LEVEL = 15
BLOCK_SPAWN_JITTER = 100        # max extra height above the screen
BLOCK_KILL_SCORE = 10
BLOCK_KILL_COINS = 1

# ── Waves / Difficulty ──────────────────────────────────
BASE_FALL_SPEED = 0.3
FALL_SPEED_PER_LEVEL = 0.08
MAX_FALL_SPEED = 2.5
SPEED_MULT_PER_LEVEL = 0.08
WAVE_CLEAR_ROW = 150            # all blocks below this row may trigger a wave
WAVE_EARLY_CHANCE = 0.025

# ── Particles ────────────────────────────────────────────
PARTICLE_LIFETIME = 30          # ticks
PARTICLE_GRAVITY = 0.3
PARTICLE_SPEED = 8
PARTICLE_MIN_SIZE = 2
PARTICLE_SIZE_RANGE = 4
MAX_PARTICLES = 500
HIT_PARTICLES = 3
BREAK_PARTICLES = 15
PICKUP_PARTICLES = 20

# ── Power-Ups ────────────────────────────────────────────
POWERUP_RADIUS = 15
POWERUP_FALL_SPEED = 2
POWERUP_DROP_CHANCE = 0.12
POWERUP_PICKUP_RANGE = 40
MAX_BALLS_CAP = 20
MULTIBALL_BONUS = 3
SPEED_FIRE_BONUS = 2
SPEED_FIRE_FLOOR = 2
POWER_LIVE_BONUS = 2
POWER_BASE_BONUS = 1
COINS_BONUS = 10

POWERUP_TYPES = {
    "multiball": {"color": (78, 205, 196), "icon": "+"},
    "speed":     {"color": (255, 107, 107), "icon": ">"},
    "power":     {"color": GOLD, "icon": "!"},
    "coins":     {"color": GOLD, "icon": "$"},
}

# ── Coin popups ─────────────────────────────────────────
COIN_POPUP_MARGIN_X = 80
COIN_POPUP_Y = 60
COIN_POPUP_RISE = 1
COIN_POPUP_FADE = 0.03

# ── Upgrades (shop) ─────────────────────────────────────
UPGRADES = {
    "fire_rate": {
        "name": "FIRE RATE",
        "desc": "Shoot faster",
        "base_price": 100,
        "max_level": 10,
    },
    "ball_count": {
        "name": "BALL COUNT",
        "desc": "+1 max balls",
        "base_price": 150,
        "max_level": 8,
    },
    "ball_power": {
        "name": "BALL POWER",
        "desc": "+1 damage",
        "base_price": 200,
        "max_level": 10,
    },
    "cannon_speed": {
        "name": "CANNON SPEED",
        "desc": "Move faster",
        "base_price": 80,
        "max_level": 5,
    },
}

# ── Achievements: (id, stat, threshold, reward) ─────────
ACHIEVEMENTS = [
    ("first_game",  "total_games", 1,     30),
    ("score_500",   "high_score",  500,   50),
    ("score_2000",  "high_score",  2000,  150),
    ("score_10000", "high_score",  10000, 500),
    ("level_10",    "best_level",  10,    100),
    ("level_25",    "best_level",  25,    250),
    ("games_25",    "total_games", 25,    100),
    ("games_100",   "total_games", 100,   300),
]

# ── Daily reward ────────────────────────────────────────
DAILY_REWARDS = [40, 60, 80, 120, 160, 250, 400]

# ── Notifications ───────────────────────────────────────
NOTICE_DURATION = 2.0           # seconds on screen
