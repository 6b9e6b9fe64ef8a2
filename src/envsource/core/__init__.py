"""
Core - What every configuration source agrees on.

Values and their kinds live in domain/, the SourcePort contract in
ports/, and the errors a source may raise in exceptions. Nothing here
reads the environment or any other origin.
"""

from .domain import *
from .ports import *
from .exceptions import *
