"""
Validator package

[Usage]
    from romanian_cnp.validators import Cnp, CnpValidator

    # decode once, query many times
    cnp = Cnp(value)
    cnp.is_valid()

    # stateless checks
    validator = CnpValidator()
    is_valid, info_type = validator.validate_full(value)
"""
from .base_validator import BaseValidator
from .cnp_validator import Cnp, CnpRecord, CnpValidator, CnpInvalidFilter, validate

__all__ = [
    'BaseValidator',
    'Cnp',
    'CnpRecord',
    'CnpValidator',
    'CnpInvalidFilter',
    'validate',
]
