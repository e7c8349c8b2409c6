"""Runtime configuration, read once from the environment."""

import os
from typing import Final

HOST: Final = os.environ.get("COLOR_CONVERTER_HOST", "0.0.0.0")
PORT: Final = int(os.environ.get("COLOR_CONVERTER_PORT", "8973"))
LOG_LEVEL: Final = os.environ.get("COLOR_CONVERTER_LOG_LEVEL", "INFO").upper()
