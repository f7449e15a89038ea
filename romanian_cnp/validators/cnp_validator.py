"""
Romanian personal numeric code (CNP) validator

[Validation strategy]
- Format: |S|YY|MM|DD|CC|XXX|C| (13 digits)
- Steps run in order and stop at the first failure:
  1. length / digits  2. sex code  3. year  4. month  5. day
  6. county (sectors 7/8 only up to 1979-12-19)  7. check digit
- Sex codes 7, 8, 9 carry no century: YY + 2000, or YY + 1900 when that
  would make the holder younger than 14 today
- A code that fails any step has no decoded record; queries return the
  default supplied by the caller

[Usage]
    from romanian_cnp import Cnp

    cnp = Cnp('5110102441483')
    if cnp.is_valid():
        cnp.birth_date('%Y/%m/%d')      # '2011/01/02'
        cnp.birth_county()              # 'Bucuresti Sector 4'
        cnp.sex('male', 'female')       # 'male'
"""
import calendar
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from romanian_cnp.utils.constants import (
    CHECKSUM_WEIGHTS, CNP_LENGTH, COUNTY_CODES, SEX_CODE_CENTURY,
    INFERRED_CENTURY_SEX_CODES, MALE_SEX_CODES, FEMALE_SEX_CODES,
    RESIDENT_SEX_CODES, MIN_BIRTH_YEAR, MAX_BIRTH_YEAR, IDENTITY_CARD_AGE,
    ADULT_AGE, DEFAULT_DATE_FORMAT, DEFUNCT_SECTOR_CODES,
    DEFUNCT_SECTOR_CUTOFF_DATE, INFO_TYPE_CITIZEN, INFO_TYPE_RESIDENT,
    INFO_TYPE_FOREIGN_CITIZEN,
)
from romanian_cnp.utils.logger import logger
from .base_validator import BaseValidator


def _today() -> date:
    """Current calendar date"""
    return date.today()


@dataclass(frozen=True)
class CnpRecord:
    """Fields decoded from a valid CNP"""

    sex_code: int
    birth_year: int
    birth_month: int
    birth_day: int
    county_code: str
    serial_number: str
    check_digit: int

    @property
    def birth_date(self) -> date:
        return date(self.birth_year, self.birth_month, self.birth_day)

    @property
    def county_name(self) -> str:
        return COUNTY_CODES[self.county_code]

    @property
    def is_male(self) -> bool:
        return self.sex_code in MALE_SEX_CODES

    @property
    def is_female(self) -> bool:
        return self.sex_code in FEMALE_SEX_CODES

    @property
    def category(self) -> str:
        if self.sex_code in RESIDENT_SEX_CODES:
            return INFO_TYPE_RESIDENT
        if self.sex_code in INFERRED_CENTURY_SEX_CODES:
            return INFO_TYPE_FOREIGN_CITIZEN
        return INFO_TYPE_CITIZEN

    def age_on(self, reference: date) -> int:
        """Whole years between the birth date and `reference`"""
        born = self.birth_date
        years = reference.year - born.year
        if (reference.month, reference.day) < (born.month, born.day):
            years -= 1
        return years


class CnpInvalidFilter:
    """
    Structural filter (steps 1-2)
    - runs before any field is decoded
    """

    @classmethod
    def check(cls, digits: str) -> Tuple[bool, Optional[str]]:
        """
        Check whether the normalised value can be a CNP at all

        Args:
            digits: normalised candidate

        Returns:
            (is_invalid, reason): (invalid flag, reason for rejection)
        """
        if not digits:
            return True, "empty value"

        if len(digits) != CNP_LENGTH:
            return True, f"length mismatch: {len(digits)} characters"

        if BaseValidator.DIGITS_PATTERN.fullmatch(digits) is None:
            return True, "contains non-digit characters"

        if digits[0] == '0':
            return True, "invalid sex code: 0"

        return False, None


class CnpValidator(BaseValidator):
    """Romanian CNP validator"""

    CHECKSUM_WEIGHTS = CHECKSUM_WEIGHTS
    COUNTY_CODES = COUNTY_CODES

    def validate(self, value, context: str = "") -> bool:
        """CNP validation (all seven steps)"""
        record, _ = self.decode(value)
        return record is not None

    def decode(self, value, today: Optional[date] = None) -> Tuple[Optional[CnpRecord], Optional[str]]:
        """
        Decode and validate a CNP

        Args:
            value: candidate (str, int, ...)
            today: reference date for the century rule of sex codes 7-9
                   (defaults to the current date)

        Returns:
            (record, reason)
            - (CnpRecord, None): every step passed
            - (None, "..."): reason of the first failed step
        """
        digits = self.normalize(value)

        is_invalid, reason = CnpInvalidFilter.check(digits)
        if is_invalid:
            return self._reject(reason)

        if today is None:
            try:
                today = _today()
            except (OSError, OverflowError, ValueError) as e:
                logger.error(f"Current date unavailable: {e}")
                return None, "current date unavailable"

        sex_code = int(digits[0])

        year = self.decode_year(sex_code, int(digits[1:3]), today.year)
        if year < MIN_BIRTH_YEAR or year > MAX_BIRTH_YEAR:
            return self._reject(f"birth year out of range: {year}")

        month = int(digits[3:5])
        if month < 1 or month > 12:
            return self._reject(f"invalid month: {month:02d}")

        day = int(digits[5:7])
        if day < 1 or day > 31:
            return self._reject(f"invalid day: {day:02d}")

        # 29, 30, 31 must exist in that month (leap years included)
        if day > 28 and day > calendar.monthrange(year, month)[1]:
            return self._reject(f"invalid date: {year}-{month:02d}-{day:02d}")

        county_code = digits[7:9]
        if county_code not in self.COUNTY_CODES:
            return self._reject(f"unknown county code: {county_code}")

        if county_code in DEFUNCT_SECTOR_CODES:
            if date(year, month, day) > DEFUNCT_SECTOR_CUTOFF_DATE:
                return self._reject(
                    f"county code {county_code} not assigned after "
                    f"{DEFUNCT_SECTOR_CUTOFF_DATE.isoformat()}"
                )

        check_digit = int(digits[12])
        expected = self.calculate_check_digit(digits)
        if check_digit != expected:
            return self._reject(f"check digit mismatch: expected {expected}, got {check_digit}")

        record = CnpRecord(
            sex_code=sex_code,
            birth_year=year,
            birth_month=month,
            birth_day=day,
            county_code=county_code,
            serial_number=digits[9:12],
            check_digit=check_digit,
        )
        return record, None

    @staticmethod
    def decode_year(sex_code: int, two_digit_year: int, current_year: int) -> int:
        """
        Full birth year from the sex code and YY

        Sex codes 7, 8, 9: YY + 2000, minus 100 when the result is later
        than (current year - 14).
        """
        if sex_code in SEX_CODE_CENTURY:
            return SEX_CODE_CENTURY[sex_code] + two_digit_year

        if sex_code in INFERRED_CENTURY_SEX_CODES:
            year = 2000 + two_digit_year
            if year > current_year - IDENTITY_CARD_AGE:
                year -= 100
            return year

        return 0

    def calculate_check_digit(self, digits: str) -> int:
        """
        Check digit of the first 12 digits

        Formula: Σ(digit × weight) % 11, and 10 becomes 1
        """
        total = sum(int(d) * w for d, w in zip(digits[:12], self.CHECKSUM_WEIGHTS))

        remainder = total % 11
        if remainder == 10:
            return 1
        return remainder

    def verify_checksum(self, value) -> bool:
        """Check digit verification only (13th digit)"""
        digits = self.normalize(value)

        if not self.is_digits(digits, CNP_LENGTH):
            return False

        return self.calculate_check_digit(digits) == int(digits[12])

    def get_county_name(self, code: str, default: str = '') -> str:
        """County name for a two-digit code"""
        return self.COUNTY_CODES.get(code, default)

    def validate_full(self, value) -> tuple:
        """
        Full validation with the holder category

        Returns:
            (is_valid, info_type)
            - (True, "CNP"): Romanian citizen
            - (True, "CNP(resident)"): resident (sex code 7/8)
            - (True, "CNP(foreign citizen)"): foreign citizen (sex code 9)
            - (False, ""): invalid
        """
        record, _ = self.decode(value)
        if record is None:
            return False, ""
        return True, record.category

    def _reject(self, reason: str) -> Tuple[None, str]:
        logger.debug(f"CNP rejected: {reason}")
        return None, reason


class Cnp:
    """
    Decoded CNP

    The code is validated once, in the constructor. Every query returns the
    caller's default when the code is invalid.
    """

    _validator = CnpValidator()

    def __init__(self, value, today: Optional[date] = None):
        """
        Args:
            value: candidate CNP
            today: pinned reference date for the century rule and age
                   queries (defaults to the current date at each use)
        """
        self._today = today
        try:
            self._record, self._reason = self._validator.decode(value, today)
        except Exception as e:
            logger.exception(f"Unexpected error while decoding CNP: {e}")
            self._record, self._reason = None, "unexpected error"

    @classmethod
    def validate(cls, value) -> bool:
        return cls(value).is_valid()

    def is_valid(self) -> bool:
        return self._record is not None

    @property
    def record(self) -> Optional[CnpRecord]:
        return self._record

    @property
    def rejection_reason(self) -> Optional[str]:
        return self._reason

    def birth_date(self, fmt: str = DEFAULT_DATE_FORMAT, default=''):
        """Birth date formatted with strftime `fmt`"""
        if self._record is None:
            return default
        return self._record.birth_date.strftime(fmt)

    def sex(self, male='M', female='F', default=''):
        """`male` / `female` label; foreign citizens (9) get `default`"""
        if self._record is None:
            return default
        if self._record.is_male:
            return male
        if self._record.is_female:
            return female
        return default

    def birth_county(self, default=''):
        if self._record is None:
            return default
        return self._record.county_name

    def serial_number(self, default=''):
        if self._record is None:
            return default
        return self._record.serial_number

    def check_digit(self, default=None):
        if self._record is None:
            return default
        return self._record.check_digit

    def category(self, default=''):
        if self._record is None:
            return default
        return self._record.category

    def age_in_years(self, default=None):
        """Whole years of age today"""
        if self._record is None:
            return default

        reference = self._reference_date()
        if reference is None:
            return default
        return self._record.age_on(reference)

    def is_adult(self) -> bool:
        """Holder is 18 or older"""
        age = self.age_in_years()
        return age is not None and age >= ADULT_AGE

    def has_identity_card(self) -> bool:
        """Holder is old enough to have an identity card (14+)"""
        age = self.age_in_years()
        return age is not None and age >= IDENTITY_CARD_AGE

    def _reference_date(self) -> Optional[date]:
        if self._today is not None:
            return self._today
        try:
            return _today()
        except (OSError, OverflowError, ValueError) as e:
            logger.error(f"Current date unavailable: {e}")
            return None

    def __repr__(self) -> str:
        if self._record is None:
            return f"Cnp(invalid: {self._reason})"
        return f"Cnp({self._record.birth_date.isoformat()}, {self._record.county_code})"


def validate(value) -> bool:
    """True when `value` is a valid CNP"""
    return Cnp.validate(value)
