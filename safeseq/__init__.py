r"""
'  ____    __    ____  ____  ____  ____  _____
' / ___)  /__\  ( ___)( ___)/ ___)( ___)(  _  )
' \___ \ /(__)\  )__)  )__) \___ \ )__)  )(_)(
' (____/(__)(__)(__)  (____)(____/(____)(___/\
"""

import logging

# expose the main class
from .sequence import Sequence

# expose the factory functions
from .factories import (
    from_iterable,
    of,
    from_range,
    empty,
    S
)

# expose supporting types
from .types import (
    Maybe,
    ABSENT,
    Atom
)

# library stays quiet unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Sequence",
    "from_iterable",
    "of",
    "from_range",
    "empty",
    "S",
    "Maybe",
    "ABSENT",
    "Atom"
]
