"""Transport layer: the only part of the SDK that performs I/O.

No retries here; a failed call comes back as Err(NetworkError).
"""
from .api import Api
from .networker import Networker
