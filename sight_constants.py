SCREEN_X = 1536
SCREEN_Y = 768

FPS = 60
FPS_X = 10
FPS_Y = FPS_X
STATS_Y = 40

PLAYER_X = 20
PLAYER_Y = 30

RUN = 4.0
FRICTION = 0.75

FOV = 0.5  # half-angle of the view cone, radians

EPSILON = 0.00001

WALL_DISTANCE = 500
WALL_WIDTH = 10

DOOR_GAP = 150

NODE_RADIUS = 10
DOOR_RADIUS = NODE_RADIUS

BACKGROUND = (0x40, 0x40, 0xB0)
WALL_COLOR = (200, 200, 200, 0x80)
FAN_COLOR = (0xFF, 0xFF, 0xFF, 0x40)
DOOR_LINK_COLOR = (0xFF, 0xFF, 0xFF, 0x40)
NODE_COLOR = (102, 191, 255)
DOOR_COLOR = (255, 109, 194)
PLAYER_COLOR = (255, 161, 0)
TEXT_COLOR = (0, 228, 48)
