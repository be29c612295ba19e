# Board geometry
NUM_COLS = 8
NUM_ROWS = 6
TILE_WIDTH = 101
TILE_HEIGHT = 101
OFFSET_X = 101
OFFSET_Y = 83
# Lifts sprites so their feet sit on the tile face
SPRITE_FOOT_CORRECTION = 25
START_COL = 3
START_ROW = 4

WIDTH = NUM_COLS * TILE_WIDTH
HEIGHT = (NUM_ROWS + 1) * TILE_HEIGHT
FPS = 60
VSYNC = True
CAPTION = "Gem Runner"

# Gameplay tuning
PLAYER_START_LIVES = 4
DEATH_PAUSE_MS = 1000
COLLISION_DISTANCE = 0.7
SCROLL_SPEED = 150.0  # pixels/sec while the next level scrolls in
LEVEL_SPEEDUP = 0.5  # extra enemy speed per level above the first
ENEMY_COUNT = 3
GEM_COUNT = 3
ENEMY_RESPAWN_MIN = -3
ENEMY_RESPAWN_MAX = 0
# Enlarges the player sprite while the hit pause runs
DEAD_SPRITE_GROWTH = 20

INITIAL_ROW_TERRAIN = ["grass", "stone", "stone", "stone", "grass", "grass"]

# HUD look
HUD_ORANGE = "#F67841"
HUD_BROWN = "#67200A"
HUD_FONT = "50px Georgia"
BANNER_FONT = "80px Georgia"
INSTRUCTIONS_FONT = "30px Georgia"
BANNER_BLINK_MS = 500
