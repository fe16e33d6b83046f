# -*- coding: utf-8 -*-
from ._core import *
from ._sample import *
from ._validate import *

from ._core import __all__ as core_all
from ._sample import __all__ as sample_all
from ._validate import __all__ as validate_all

__all__ = core_all + sample_all + validate_all
