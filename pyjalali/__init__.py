"""Persian (Solar Hijri) calendar dates and times for Python.

(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__version__ = '1.0.0'

from .calendar import *    # pylint: disable=wildcard-import
from .names import *       # pylint: disable=wildcard-import
from .zone import *        # pylint: disable=wildcard-import
from .instant import *     # pylint: disable=wildcard-import
from .exception import *   # pylint: disable=wildcard-import
