# -*- coding: utf-8 -*-
# Configuration for the grect rectangle type
# Change these at runtime with e.g. `grect.settings.DEBUG = True`

# Template for str(rect); receives the four fields as floats
STR_FORMAT = '[{x}, {y}, {width}x{height}]'

# Emit debug messages on the 'grect' logger
DEBUG = False
