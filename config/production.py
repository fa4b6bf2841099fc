import os

from config.base import *  # noqa: F401,F403

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
