#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

from .main import gitstream, main

__all__ = ("gitstream", "main")
