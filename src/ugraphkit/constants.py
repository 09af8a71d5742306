from os import getenv

LOG_LEVEL = getenv("UGRAPHKIT_LOG_LEVEL", "WARNING").upper()
SUMMARY_WIDTH = int(getenv("UGRAPHKIT_SUMMARY_WIDTH", "60"))
NO_GRAPH_ID = -1
