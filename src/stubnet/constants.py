"""Fixed values shared by the interceptors."""

# Substitution
RESERVED_PATTERN = "Yale"
RESERVED_REPLACEMENT = "Fale"
SENTINEL_PHRASE = "no Yale references"

CASE_MAP = {
    "YALE": "FALE",
    "Yale": "Fale",
    "yale": "fale",
}

# Network
LOOPBACK_ALIAS = "localhost"
LOOPBACK_ADDRESS = "127.0.0.1"

# Installation
WRAPPED_MARKER = "_stubnet_wrapped"
