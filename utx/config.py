import os

# Package signature shared by every Unreal Engine 1 package
PACKAGE_SIGNATURE = 0x9E2A83C1

# Unreal uses 61-63, Unreal Tournament uses 67-69
MIN_VERSION = 61
MAX_VERSION = 69

# From this version on, names carry a length byte instead of being scanned
LENGTH_PREFIXED_NAME_VERSION = 64

# Scratch capacity for old-style (zero terminated) names
NAME_MAX_LEN = 256

# 4+2+2+4 bytes of id/version/flags, then three (count, offset) pairs
HEADER_SIZE = 36

# Object name that marks an export as a texture
TEXTURE_OBJECT_NAME = os.environ.get("UTX_TEXTURE_OBJECT_NAME", "Texture")
