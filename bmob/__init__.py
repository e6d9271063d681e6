#!/usr/bin/env python
import logging

__version__ = "0.1.0"

from . import protocol
from .protocol import codec
from .protocol import constants
from .protocol import uri

# Silence notification of no default logging handler
log = logging.getLogger("bmob")
log.addHandler(logging.NullHandler())

__all__ = ["__version__", "codec", "constants", "protocol", "uri"]
