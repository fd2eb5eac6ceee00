"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # Range errors

    @staticmethod
    def value_too_wide(field_name: str, value: int, width: int) -> Diagnostic:
        """Value has more digits than a fixed-width pattern field allows."""
        return ErrorTemplate.value_out_of_range(field_name, value, f"{width} digits")

    @staticmethod
    def value_out_of_range(field_name: str, value: int, valid: str) -> Diagnostic:
        """Field value outside its valid range.

        Args:
            field_name: Field tag (e.g., "month-of-year")
            value: Rejected value
            valid: Rendered valid range (e.g., "1 - 12")

        Returns:
            Diagnostic for VALUE_OUT_OF_RANGE
        """
        msg = f"Invalid value for {field_name} (valid values {valid}): {value}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_OUT_OF_RANGE,
            message=msg,
            hint=f"Use a value in {valid}",
            field_name=field_name,
            input_value=str(value),
        )

    @staticmethod
    def invalid_int_value(field_name: str, value: int) -> Diagnostic:
        """Field value does not fit a 32-bit int.

        Args:
            field_name: Field tag
            value: Rejected value

        Returns:
            Diagnostic for INVALID_INT_VALUE
        """
        msg = f"Invalid int value for {field_name}: {value}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INT_VALUE,
            message=msg,
            field_name=field_name,
            input_value=str(value),
        )

    @staticmethod
    def invalid_date(month_name: str, day: int, year: int, max_day: int) -> Diagnostic:
        """Day-of-month exceeds the month length.

        ESFAND 30 in a common year gets a leap-year specific message.

        Args:
            month_name: Month identifier (e.g., "ESFAND")
            day: Rejected day-of-month
            year: Proleptic year
            max_day: Length of the month in that year

        Returns:
            Diagnostic for INVALID_DATE
        """
        if month_name == "ESFAND" and day == 30:
            msg = f"Invalid date '{month_name} {day}' as '{year}' is not a leap year"
        else:
            msg = f"Invalid date '{month_name} {day}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE,
            message=msg,
            hint=f"Use a day between 1 and {max_day}",
            field_name="day-of-month",
            input_value=str(day),
        )

    @staticmethod
    def invalid_day_of_year(year: int, day_of_year: int) -> Diagnostic:
        """Day 366 requested in a common year.

        Args:
            year: Proleptic year
            day_of_year: Rejected day-of-year

        Returns:
            Diagnostic for INVALID_DAY_OF_YEAR
        """
        msg = f"Invalid date 'DayOfYear {day_of_year}' as '{year}' is not a leap year"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DAY_OF_YEAR,
            message=msg,
            hint="Use a day between 1 and 365",
            field_name="day-of-year",
            input_value=str(day_of_year),
        )

    @staticmethod
    def gregorian_out_of_range(epoch_day: int) -> Diagnostic:
        """Epoch day outside the datetime.date range (years 1-9999).

        Args:
            epoch_day: Epoch day that could not be represented

        Returns:
            Diagnostic for GREGORIAN_OUT_OF_RANGE
        """
        msg = f"Epoch day {epoch_day} is outside the datetime.date range"
        return Diagnostic(
            code=DiagnosticCode.GREGORIAN_OUT_OF_RANGE,
            message=msg,
            hint="Use to_iso() for Gregorian dates outside years 1-9999",
            field_name="epoch-day",
            input_value=str(epoch_day),
        )

    # Unsupported errors

    @staticmethod
    def unsupported_field(field_name: str) -> Diagnostic:
        """Field not supported by the value type.

        Args:
            field_name: Field tag or repr of the rejected object

        Returns:
            Diagnostic for UNSUPPORTED_FIELD
        """
        msg = f"Unsupported field: {field_name}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_FIELD,
            message=msg,
            hint="Check is_supported(field) before accessing the field",
            field_name=field_name,
        )

    @staticmethod
    def unsupported_unit(unit_name: str) -> Diagnostic:
        """Unit not supported by the value type.

        Args:
            unit_name: Unit tag or repr of the rejected object

        Returns:
            Diagnostic for UNSUPPORTED_UNIT
        """
        msg = f"Unsupported unit: {unit_name}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_UNIT,
            message=msg,
            hint="Check is_supported_unit(unit) before using the unit",
            field_name=unit_name,
        )

    @staticmethod
    def field_too_large_for_int(field_name: str) -> Diagnostic:
        """Field range does not fit a 32-bit int, so get() refuses it.

        Args:
            field_name: Field tag

        Returns:
            Diagnostic for FIELD_TOO_LARGE_FOR_INT
        """
        msg = f"Invalid field {field_name} for get() method, use get_long() instead"
        return Diagnostic(
            code=DiagnosticCode.FIELD_TOO_LARGE_FOR_INT,
            message=msg,
            hint="Call get_long(field) for fields with a 64-bit range",
            field_name=field_name,
        )

    @staticmethod
    def unsupported_pattern_letter(letter: str, count: int, pattern: str) -> Diagnostic:
        """Pattern letter (or letter count) not supported by the pattern compiler.

        Args:
            letter: Pattern letter
            count: Repetition count of the letter
            pattern: Full pattern text

        Returns:
            Diagnostic for UNSUPPORTED_PATTERN_LETTER
        """
        msg = f"Unsupported pattern letter '{letter * count}' in pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_PATTERN_LETTER,
            message=msg,
            hint="Supported letters: G, u, y, M, d, D; quote literal text with '...'",
            input_value=pattern,
        )

    # Parse errors

    @staticmethod
    def parse_text_mismatch(text: str, index: int, expected: str) -> Diagnostic:
        """Text does not match the expected layout.

        Args:
            text: Input text
            index: Character offset of the first mismatch
            expected: Description of the expected layout

        Returns:
            Diagnostic for PARSE_TEXT_MISMATCH
        """
        msg = f"Text '{text}' could not be parsed at index {index}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TEXT_MISMATCH,
            message=msg,
            hint=f"Expected {expected}",
            input_value=text,
        )

    @staticmethod
    def parse_pattern_mismatch(text: str, index: int, pattern: str) -> Diagnostic:
        """Text does not match a compiled date pattern.

        Args:
            text: Input text
            index: Character offset of the first mismatch
            pattern: Source pattern (e.g., "uuuu/MM/dd")

        Returns:
            Diagnostic for PARSE_TEXT_MISMATCH
        """
        return ErrorTemplate.parse_text_mismatch(text, index, f"pattern '{pattern}'")

    @staticmethod
    def parse_plus_sign_too_short(text: str, pad_width: int) -> Diagnostic:
        """'+' used on a year that fits the pad width."""
        return ErrorTemplate._sign_invalid(
            text, f"'+' requires more than {pad_width} year digits"
        )

    @staticmethod
    def parse_sign_missing(text: str, pad_width: int) -> Diagnostic:
        """Year wider than the pad width written without a sign."""
        return ErrorTemplate._sign_invalid(
            text, f"years wider than {pad_width} digits require a sign"
        )

    @staticmethod
    def parse_leading_zeros(text: str, pad_width: int) -> Diagnostic:
        """Year padded with zeros beyond the pad width."""
        return ErrorTemplate._sign_invalid(text, f"leading zeros beyond {pad_width} digits")

    @staticmethod
    def parse_negative_zero_year(text: str) -> Diagnostic:
        """'-0000' and friends."""
        return ErrorTemplate._sign_invalid(text, "year zero cannot be negative")

    @staticmethod
    def _sign_invalid(text: str, reason: str) -> Diagnostic:
        # Sign errors always point at the start of the year.
        msg = f"Text '{text}' could not be parsed at index 0: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_SIGN_INVALID,
            message=msg,
            hint="Use '+' only for years above 9999 and '-' for negative years",
            input_value=text,
        )

    @staticmethod
    def parse_conflicting_values(
        text: str, field_name: str, first: int, second: int
    ) -> Diagnostic:
        """Pattern field parsed twice with different values.

        Args:
            text: Input text
            field_name: Field tag (e.g., "year")
            first: Value from the first occurrence
            second: Value from the later occurrence

        Returns:
            Diagnostic for PARSE_VALUE_INVALID
        """
        return ErrorTemplate.parse_value_invalid(
            text, f"conflicting values for {field_name}: {first}, {second}"
        )

    @staticmethod
    def parse_value_invalid(text: str, reason: str) -> Diagnostic:
        """Text matched the layout but decodes to an invalid value.

        Args:
            text: Input text
            reason: Message of the underlying validation error

        Returns:
            Diagnostic for PARSE_VALUE_INVALID
        """
        msg = f"Text '{text}' could not be parsed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_VALUE_INVALID,
            message=msg,
            input_value=text,
        )

    @staticmethod
    def parse_fields_unresolved(text: str, target: str) -> Diagnostic:
        """Parsed fields are not enough to build the target type.

        Args:
            text: Input text
            target: Name of the target type

        Returns:
            Diagnostic for PARSE_FIELDS_UNRESOLVED
        """
        msg = f"Text '{text}' could not be parsed: unable to obtain {target} from parsed fields"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FIELDS_UNRESOLVED,
            message=msg,
            hint=f"Include every field {target} needs in the pattern",
            input_value=text,
        )

    # Arithmetic errors

    @staticmethod
    def arithmetic_overflow(operation: str, left: int, right: int) -> Diagnostic:
        """Checked arithmetic overflow.

        Args:
            operation: Operation name ("add", "subtract", "multiply", "int", "long")
            left: Left operand
            right: Right operand

        Returns:
            Diagnostic for ARITHMETIC_OVERFLOW
        """
        msg = f"Arithmetic overflow: {operation}({left}, {right}) exceeds the 64-bit range"
        if operation == "int":
            msg = f"Arithmetic overflow: {left} exceeds the 32-bit range"
        elif operation == "long":
            msg = f"Arithmetic overflow: {left} exceeds the 64-bit range"
        return Diagnostic(
            code=DiagnosticCode.ARITHMETIC_OVERFLOW,
            message=msg,
            input_value=str(left),
        )

    # Chronology errors

    @staticmethod
    def chronology_mismatch(expected: str, actual: str) -> Diagnostic:
        """Adjustment target belongs to another calendar system.

        Args:
            expected: Chronology id required by the adjuster
            actual: Chronology id of the target

        Returns:
            Diagnostic for CHRONOLOGY_MISMATCH
        """
        msg = f"Adjustment only supported on {expected} temporals, got {actual}"
        return Diagnostic(
            code=DiagnosticCode.CHRONOLOGY_MISMATCH,
            message=msg,
            hint=f"Convert the target to {expected} first",
        )

    @staticmethod
    def conversion_failed(target: str, source: object) -> Diagnostic:
        """Value type could not be obtained from a temporal.

        Args:
            target: Name of the requested type
            source: Object that was offered

        Returns:
            Diagnostic for CONVERSION_FAILED
        """
        msg = (
            f"Unable to obtain {target} from temporal: {source!r} "
            f"of type {type(source).__name__}"
        )
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_FAILED,
            message=msg,
            hint="Pass a temporal that exposes year and month-of-year or epoch-day",
        )
