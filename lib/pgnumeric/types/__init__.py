##
# types. - Package for I/O and the NUMERIC record type.
##
"""
PostgreSQL NUMERIC type identifiers and the record type.
"""
NUMERICOID = 1700

from .numeric import Numeric
