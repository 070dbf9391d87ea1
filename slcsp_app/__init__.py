"""
SLCSP App - Second Lowest Cost Silver Plan report

Maps zip codes to rate areas, tracks the two lowest silver plan rates of every
rate area and writes the second lowest rate for each zip code of a template
list, reporting ambiguous zip codes, unmapped rate areas and zip codes with
insufficient plan data along the way.
"""

__version__ = "0.1.0"
__author__ = "SLCSP Team"
