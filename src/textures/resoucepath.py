IMAGES_PATH: str = "images/"

# Terrain blocks ("<terrain>-block.png")
STONE_BLOCK_PATH: str = IMAGES_PATH + "stone-block.png"
GRASS_BLOCK_PATH: str = IMAGES_PATH + "grass-block.png"
WATER_BLOCK_PATH: str = IMAGES_PATH + "water-block.png"

# Characters
ENEMY_BUG_PATH: str = IMAGES_PATH + "enemy-bug.png"
CHAR_BOY_PATH: str = IMAGES_PATH + "char-boy.png"

# Items
GEM_BLUE_PATH: str = IMAGES_PATH + "Gem Blue.png"
GEM_GREEN_PATH: str = IMAGES_PATH + "Gem Green.png"
GEM_ORANGE_PATH: str = IMAGES_PATH + "Gem Orange.png"
KEY_PATH: str = IMAGES_PATH + "Key.png"
HEART_PATH: str = IMAGES_PATH + "Heart.png"

GEM_PATHS: list[str] = [GEM_BLUE_PATH, GEM_GREEN_PATH, GEM_ORANGE_PATH]

ALL_IMAGE_PATHS: list[str] = [
    GEM_BLUE_PATH,
    GEM_GREEN_PATH,
    GEM_ORANGE_PATH,
    HEART_PATH,
    STONE_BLOCK_PATH,
    WATER_BLOCK_PATH,
    GRASS_BLOCK_PATH,
    ENEMY_BUG_PATH,
    CHAR_BOY_PATH,
    KEY_PATH,
]


def terrain_block_path(terrain: str) -> str:
    return IMAGES_PATH + terrain + "-block.png"
