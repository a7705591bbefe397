"""BlurHash format constants."""

# Order is part of the wire format.
BASE83_ALPHABET = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "#$%*+,-.:;=?@[]^_{|}~"
)

MIN_COMPONENTS = 1
MAX_COMPONENTS = 9

# Hash layout: size flag, quantized max, DC, then AC pairs
SIZE_FLAG_LENGTH = 1
MAX_LENGTH = 1
DC_LENGTH = 4
AC_LENGTH = 2
HEADER_LENGTH = SIZE_FLAG_LENGTH + MAX_LENGTH + DC_LENGTH

# AC quantization
AC_LEVELS = 19
AC_MAX_SCALE = 166.0
QUANTIZED_MAX_LIMIT = 82
