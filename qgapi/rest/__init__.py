""" This module contains the implementation of the guild bot REST
API as specified by its documentation: the client, the lazily built
resources and the helpers they share.
"""

from .builders import *
from .casing import *
from .client import *
from .errors import *
from .plurals import *
from .request import *
from .resource import *
from .response import *
from .route import *
