# Example configuration for the Planning Poker bot. `config.py` reads the
# same names from the environment (or a `.env` file); export them in
# production instead of editing code.

import os

# Telegram bot token from @BotFather (required)
BOT_TOKEN = os.getenv("BOT_TOKEN", "YOUR_TELEGRAM_BOT_TOKEN")

# Logging: DEBUG shows ignored transitions too
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# Optional file to duplicate logs into
LOG_FILE = os.getenv("LOG_FILE", "")

# Only the facilitator may create, reveal, reset and select tasks
FACILITATOR_ONLY = os.getenv("FACILITATOR_ONLY", "true")

# Vote is flagged when |vote - average| > average * OUTLIER_THRESHOLD
OUTLIER_THRESHOLD = os.getenv("OUTLIER_THRESHOLD", "0.5")

# Number of previous tasks listed in the facilitator panel
TASK_HISTORY_LIMIT = os.getenv("TASK_HISTORY_LIMIT", "10")
