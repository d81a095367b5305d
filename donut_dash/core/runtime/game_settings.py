"""
game_settings.py
----------------
Centralized configuration for all game systems.

All values are per-tick (one tick per displayed frame) unless noted.
Sections can be overridden at startup through
config_manager.apply_settings_overrides().
"""


# ===========================================================
# Display & Performance
# ===========================================================
class Display:
    WIDTH = 800
    HEIGHT = 450
    FPS = 60
    CAPTION = "Donut Dash"


# ===========================================================
# World
# ===========================================================
class World:
    GROUND_Y = 380       # Top edge of the running surface
    GRAVITY = 0.6        # units / tick^2


# ===========================================================
# Entities
# ===========================================================
class PlayerSettings:
    WIDTH = 64
    HEIGHT = 64
    START_X = 100
    SPEED = 5
    JUMP_POWER = -15
    MAX_HEALTH = 100
    SHOT_SPEED = 10
    COLOR = (0, 0, 255)


class ProjectileSettings:
    RADIUS = 6
    PLAYER_COLOR = (255, 255, 255)
    ENEMY_COLOR = (255, 0, 0)


class EnemySettings:
    WIDTH = 50
    HEIGHT = 50
    SPAWN_OFFSET_RANGE = 200  # x = Display.WIDTH + U[0, range)
    MIN_SPEED = 3
    SPEED_RANGE = 2           # speed = MIN_SPEED + U[0, range)
    SPIN = 0.1                # radians / tick
    SPAWN_INTERVAL = 60       # ticks
    SPAWN_CHANCE = 0.7
    COLOR = (255, 192, 203)


class BossSettings:
    WIDTH = 150
    HEIGHT = 150
    MAX_HEALTH = 800
    SPAWN_OFFSET = 100        # starts this far past the right edge
    TARGET_OFFSET = 200       # settles this far left of the right edge
    HOVER_LIFT = 20           # gap between boss bottom and ground
    ENTRY_SPEED = 2
    HOVER_AMPLITUDE = 50
    HOVER_FREQUENCY = 0.05    # radians per frame
    ATTACK_COOLDOWN = 100     # ticks
    SHOT_SPEED = 7
    COLOR = (128, 0, 128)


class BackgroundSettings:
    SCROLL_SPEED = 2
    FALLBACK_COLOR = (34, 34, 34)


# ===========================================================
# Progression & Combat
# ===========================================================
class Progression:
    BOSS_DISTANCE = 2000      # boss triggers once distance exceeds this
    SCORE_PER_TICK = 0.1


class Combat:
    ENEMY_CONTACT_DAMAGE = 20
    ENEMY_SHOT_DAMAGE = 10
    PLAYER_SHOT_DAMAGE = 10
    ENEMY_KILL_SCORE = 100


# ===========================================================
# Rendering
# ===========================================================
class Layers:
    BACKGROUND = 0
    ENEMIES = 1
    BULLETS = 2
    PLAYER = 3
    BOSS = 4
    UI = 10


class Assets:
    RUNNER = "assets/runner.png"
    DONUT = "assets/donut.png"
    BOSS = "assets/boss.png"
    BACKGROUND = "assets/bg.png"
    ICON = "assets/icon.png"


# ===========================================================
# Debug (Visual)
# ===========================================================
class Debug:
    """Visual debug toggles, not related to logging."""

    FRAME_TIME_WARNING = 16.67  # ms
    HITBOX_VISIBLE = False
    HITBOX_COLOR = (255, 255, 0)


# Sections addressable from override files
SETTINGS_SECTIONS = {
    "display": Display,
    "world": World,
    "player": PlayerSettings,
    "projectile": ProjectileSettings,
    "enemy": EnemySettings,
    "boss": BossSettings,
    "background": BackgroundSettings,
    "progression": Progression,
    "combat": Combat,
    "assets": Assets,
    "debug": Debug,
}
