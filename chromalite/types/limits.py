# No dependencies
MAX_CHANNEL = 255
MAX_PERCENT = 100
HUE_360 = 360
HUE_SECTOR = 60

HEX_LENGTH = 6
SHORT_HEX_LENGTH = 3
