"""
Makernote tag definitions, one module per vendor.
"""

from . import apple, canon, casio, fujifilm, kyocera, nikon, olympus, pentax, ricoh, sanyo, sigma
