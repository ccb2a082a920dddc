# Shared constants for all test types

DAY = 24 * 60 * 60
THIRTY_DAYS = 30 * DAY
FIFTY_DAYS = 50 * DAY

START_TIME = 1_700_000_000
ENGINE_ADDRESS = "0xb111100000000000000000000000000000000001"
TOKEN = "0x70ce000000000000000000000000000000000001"
ADMIN = "0xad00000000000000000000000000000000000001"
MERCHANT = "0x3e00000000000000000000000000000000000002"
SUBSCRIBER = "0x5b00000000000000000000000000000000000003"
EXTERNAL_ACTOR = "0xea00000000000000000000000000000000000004"
