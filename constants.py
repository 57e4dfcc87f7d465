import numpy as np


# Below this, a ray direction is treated as parallel to a plane (or as zero length)
EPSILON = 1e-10

NO_HIT = np.inf

# Scene file limits
MAX_STRING_LENGTH = 128
MAX_OBJECTS = 1000

# Characters skipped between tokens (C locale isspace)
WHITESPACE = " \t\n\v\f\r"
NUMBER_CHARS = "+-.0123456789eE"

MIN_PRINTABLE = 32
MAX_PRINTABLE = 126

COLOR_MIN = 0.0
COLOR_MAX = 255.0
MIN_DIMENSION = 1.0
MIN_RADIUS = 1.0
MAX_THETA = 180.0
