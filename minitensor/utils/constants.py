import numpy as np

# Element type used when converting Python payloads into tensor storage.
# Fixed-width, so products wrap around on overflow.
DEFAULT_DTYPE = np.int64

LOG_FORMAT = "%(levelname)s:%(message)s"
