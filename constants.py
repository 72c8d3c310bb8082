import os

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8376))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", None)

ROOM_ID_PREFIX = "rm_"

# draw in [0, RTC_DRAW_RANGE); draws below TRTC_THRESHOLD go to TRTC
RTC_DRAW_RANGE = 10
TRTC_THRESHOLD = 6
