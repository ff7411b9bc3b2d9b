"""This file contains constants."""

import string

############
# Alphabet #
############
LETTERS = string.ascii_lowercase

MODULUS = len(LETTERS)

##########
# Blocks #
##########
BLOCK_SIZE = 2

FILLER = 'x'

#################
# Miscellaneous #
#################
SECTION_PREFERENCES = 'PREFERENCES'

ENV_CONF = 'HILL_CONF'

CONF_NAME = 'hill.conf'
