# Module-level configuration shared by the color classes and the conversion engine.
import numpy as np

ALPHA_MAX = 255
HUE_MAX = 360.0
PERCENT_MAX = 100.0

# Linear sRGB -> CIE XYZ (D65), rows are X, Y, Z.
SRGB_TO_XYZ = np.array([
    [0.41239079926595, 0.35758433938387, 0.18048078840183],
    [0.21263900587151, 0.71516867876775, 0.072192315360733],
    [0.019330818715591, 0.11919477979462, 0.95053215224966],
])
XYZ_TO_SRGB = np.linalg.inv(SRGB_TO_XYZ)

# Tristimulus values of the D65 reference white on a 0-1 scale (Y = 1).
# XyzColor channels are stored as percentages of these.
REFERENCE_WHITE = SRGB_TO_XYZ.sum(axis=1)

SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_ENCODED_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

CIE_EPSILON = 0.008856
CIE_KAPPA = 903.3

# Perceived brightness weights for red, green and blue (HSP).
HSP_WEIGHTS = (0.2989, 0.587, 0.114)

# Hue poles used by warmer()/cooler().
WARM_HUE = 90.0
COOL_HUE = 270.0
