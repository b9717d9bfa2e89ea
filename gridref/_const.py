"""
Constants declarations for gridref
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 0.0033528106647474805  # Flattening, 1 / 298.257223563
UTM_K0 = 0.9996  # Central scale factor

# Order of the Krüger series
MAXPOW = 6

# Krüger series coefficient tables for WGS84, grouped per order as polynomials in n
# (highest power first) followed by their common denominator
WGS84_ALPHA_COEFFS = (
    31564.0, -66675.0, 34440.0, 47250.0, -100800.0, 75600.0, 151200.0,
    -1983433.0, 863232.0, 748608.0, -1161216.0, 524160.0, 1935360.0,
    670412.0, 406647.0, -533952.0, 184464.0, 725760.0,
    6601661.0, -7732800.0, 2230245.0, 7257600.0,
    -13675556.0, 3438171.0, 7983360.0,
    212378941.0, 319334400.0,
)
WGS84_BETA_COEFFS = (
    384796.0, -382725.0, -6720.0, 932400.0, -1612800.0, 1209600.0, 2419200.0,
    -1118711.0, 1695744.0, -1174656.0, 258048.0, 80640.0, 3870720.0,
    22276.0, -16929.0, -15984.0, 12852.0, 362880.0,
    -830251.0, -158400.0, 197865.0, 7257600.0,
    -435388.0, 453717.0, 15966720.0,
    20648693.0, 638668800.0,
)
WGS84_B1_COEFFS = (1.0, 4.0, 64.0, 256.0, 256.0)

# False origins, indexed by (0 if ups else 2) + (1 if north else 0)
FALSE_EASTING = (2_000_000.0, 2_000_000.0, 500_000.0, 500_000.0)
FALSE_NORTHING = (2_000_000.0, 2_000_000.0, 10_000_000.0, 0.0)

# UTM limits
MIN_UTM_ZONE = 1
MAX_UTM_ZONE = 60
MIN_UTM_LAT = -80.0
MAX_UTM_LAT = 84.0

# Latitude bands, C through X (I and O omitted), 8 degrees each from -80 (X is 12)
LATITUDE_BANDS = 'CDEFGHJKLMNPQRSTUVWX'

# MGRS 100km grid square letters
MGRS_COLUMN_LETTERS = ('ABCDEFGH', 'JKLMNPQR', 'STUVWXYZ')
MGRS_ROW_LETTERS = 'ABCDEFGHJKLMNPQRSTUV'
MGRS_SET_ORIGIN_COLUMNS = 'AJSAJS'
MGRS_SET_ORIGIN_ROWS = 'AFAFAF'
MGRS_ROW_PERIOD = 20
MGRS_EVEN_ROW_SHIFT = 5
MGRS_MAX_SROW = 100
MGRS_TILE = 100_000  # meters
MGRS_NORTHING_CYCLE = 2_000_000  # meters

# Minimum northing (meters) reachable in each latitude band
MGRS_BAND_MIN_NORTHING = {
    'C': 1_100_000.0, 'D': 2_000_000.0, 'E': 2_800_000.0, 'F': 3_700_000.0,
    'G': 4_600_000.0, 'H': 5_500_000.0, 'J': 6_400_000.0, 'K': 7_300_000.0,
    'L': 8_200_000.0, 'M': 9_100_000.0, 'N': 0.0, 'P': 800_000.0,
    'Q': 1_700_000.0, 'R': 2_600_000.0, 'S': 3_500_000.0, 'T': 4_400_000.0,
    'U': 5_300_000.0, 'V': 6_200_000.0, 'W': 7_000_000.0, 'X': 7_900_000.0,
}

# MGRS digit precision
DEFAULT_MGRS_PRECISION = 5
MAX_MGRS_PRECISION = 11
MGRS_MULT = 1_000_000  # meters -> micrometers

# Latitudes within this distance of the equator take their band from the hemisphere
ANGEPS = 2.0 ** -46
