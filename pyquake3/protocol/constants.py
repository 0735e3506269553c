"""
Quake III connectionless protocol constants
"""

# Prefix of every out-of-band (connectionless) packet
OOB_MARKER = b"\xff\xff\xff\xff"

GETSTATUS_COMMAND = b"getstatus"
GETSTATUS_PROBE = OOB_MARKER + GETSTATUS_COMMAND

STATUS_RESPONSE_COMMAND = "statusResponse"

# Largest status reply observed from real servers
STATUS_BUFFER_SIZE = 1024

VARIABLE_DELIMITER = "\\"
LINE_DELIMITER = "\n"
PLAYER_TERMINATOR = "\0"

# Player field limits: score is an unsigned 32-bit value, ping unsigned 16-bit
MAX_SCORE = 0xFFFFFFFF
MAX_PING = 0xFFFF
