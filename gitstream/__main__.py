#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

from gitstream.cli import main

if __name__ == "__main__":
    main()
