"""
CNP rule tables

[Format]
|S|YY|MM|DD|CC|XXX|C|
- S   : sex / century code (1-9)
- YY  : year of birth
- MM  : month of birth
- DD  : day of birth
- CC  : county code (see COUNTY_CODES)
- XXX : serial number
- C   : check digit
"""
from datetime import date
from types import MappingProxyType

# Bumped whenever a validation rule changes (2: defunct sector date gate)
RULES_VERSION = "2"

# =========================================================
# Checksum
# =========================================================

# weight[i] multiplies digit[i] of the first 12 digits
CHECKSUM_WEIGHTS = (2, 7, 9, 1, 4, 6, 3, 5, 8, 2, 7, 9)

CNP_LENGTH = 13

# =========================================================
# Sex / century code
# =========================================================

# 1/2: 1900-1999, 3/4: 1800-1899, 5/6: 2000-2099
SEX_CODE_CENTURY = MappingProxyType({
    1: 1900, 2: 1900,
    3: 1800, 4: 1800,
    5: 2000, 6: 2000,
})

# residents (7/8) and foreign citizens (9): century inferred from today
INFERRED_CENTURY_SEX_CODES = frozenset({7, 8, 9})

MALE_SEX_CODES = frozenset({1, 3, 5, 7})
FEMALE_SEX_CODES = frozenset({2, 4, 6, 8})
RESIDENT_SEX_CODES = frozenset({7, 8})
FOREIGN_CITIZEN_SEX_CODE = 9

MIN_BIRTH_YEAR = 1800
MAX_BIRTH_YEAR = 2099

# =========================================================
# Ages
# =========================================================

# identity card is issued at 14
IDENTITY_CARD_AGE = 14
ADULT_AGE = 18

DEFAULT_DATE_FORMAT = '%Y-%m-%d'

# =========================================================
# Counties
# =========================================================

COUNTY_CODES = MappingProxyType({
    '01': 'Alba',
    '02': 'Arad',
    '03': 'Arges',
    '04': 'Bacau',
    '05': 'Bihor',
    '06': 'Bistrita-Nasaud',
    '07': 'Botosani',
    '08': 'Brasov',
    '09': 'Braila',
    '10': 'Buzau',
    '11': 'Caras-Severin',
    '12': 'Cluj',
    '13': 'Constanta',
    '14': 'Covasna',
    '15': 'Dambovita',
    '16': 'Dolj',
    '17': 'Galati',
    '18': 'Gorj',
    '19': 'Harghita',
    '20': 'Hunedoara',
    '21': 'Ialomita',
    '22': 'Iasi',
    '23': 'Ilfov',
    '24': 'Maramures',
    '25': 'Mehedinti',
    '26': 'Mures',
    '27': 'Neamt',
    '28': 'Olt',
    '29': 'Prahova',
    '30': 'Satu Mare',
    '31': 'Salaj',
    '32': 'Sibiu',
    '33': 'Suceava',
    '34': 'Teleorman',
    '35': 'Timis',
    '36': 'Tulcea',
    '37': 'Vaslui',
    '38': 'Valcea',
    '39': 'Vrancea',
    '40': 'Bucuresti',
    '41': 'Bucuresti Sector 1',
    '42': 'Bucuresti Sector 2',
    '43': 'Bucuresti Sector 3',
    '44': 'Bucuresti Sector 4',
    '45': 'Bucuresti Sector 5',
    '46': 'Bucuresti Sector 6',
    '47': 'Bucuresti Sector 7 (now defunct)',
    '48': 'Bucuresti Sector 8 (now defunct)',
    '51': 'Calarasi',
    '52': 'Giurgiu',
})

# Sectors 7 and 8 were merged into the other sectors on 1979-12-19
DEFUNCT_SECTOR_CODES = frozenset({'47', '48'})
DEFUNCT_SECTOR_CUTOFF_DATE = date(1979, 12, 19)

# validate_full() result types
INFO_TYPE_CITIZEN = "CNP"
INFO_TYPE_RESIDENT = "CNP(resident)"
INFO_TYPE_FOREIGN_CITIZEN = "CNP(foreign citizen)"
