"""
Romanian personal numeric code (CNP) validation and decoding
"""
from .validators import Cnp, CnpRecord, CnpValidator, CnpInvalidFilter, validate
from .utils.constants import COUNTY_CODES, RULES_VERSION

__version__ = "1.0.0"

__all__ = [
    'Cnp',
    'CnpRecord',
    'CnpValidator',
    'CnpInvalidFilter',
    'validate',
    'COUNTY_CODES',
    'RULES_VERSION',
]
