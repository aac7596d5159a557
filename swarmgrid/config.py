import os

# Echo run logs to stderr as they are recorded.
PRINT_LOGS = os.environ.get("SWARMGRID_PRINT_LOGS", "0").lower() in ("1", "true", "yes")
