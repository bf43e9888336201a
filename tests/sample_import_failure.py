# Importing this module always fails.
raise RuntimeError("configuration missing at import time")
