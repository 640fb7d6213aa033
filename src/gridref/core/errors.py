"""
Custom exception hierarchy for gridref.

This module defines the exceptions raised by coordinate validation,
grid reference decoding and projection operations.
"""

from typing import Any, Dict, List, Optional


class GridRefException(Exception):
    """
    Base exception for all gridref-specific errors.

    All custom exceptions inherit from this base class so callers can
    handle every conversion failure in one place.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GridRefException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class ValidationError(GridRefException):
    """
    Raised when input validation fails.

    Used for NaN coordinates, non-integer accuracies and other malformed
    numeric input.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ValidationError.

        Args:
            message: User-friendly error message
            field: Name of the field that failed validation
            details: Technical details about the validation failure
            suggestions: List of suggestions for fixing the validation error
        """
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=error_details,
            suggestions=suggestions or ["Check the input values and try again"],
        )


class CRSError(GridRefException):
    """
    Raised when coordinate reference system operations fail.

    Used for invalid CRS definitions, unknown ellipsoids and projection
    failures.
    """

    def __init__(
        self,
        message: str,
        crs: Optional[str] = None,
        error_code: str = "CRS_ERROR",
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize CRSError.

        Args:
            message: User-friendly error message
            crs: Coordinate reference system involved
            error_code: Specific CRS error code
            details: Technical details about the CRS error
            suggestions: List of suggestions for fixing the CRS issue
        """
        error_details = details or {}
        if crs:
            error_details["crs"] = crs

        default_suggestions = [
            "Verify the coordinate reference system is supported",
            "Check EPSG codes are valid",
            "Ensure coordinates are in the expected format",
        ]

        super().__init__(
            message=message,
            error_code=error_code,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class InvalidZoneError(CRSError):
    """
    Raised when a UTM zone number is outside the supported range.
    """

    def __init__(
        self,
        message: str,
        zone_number: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize InvalidZoneError.

        Args:
            message: User-friendly error message
            zone_number: The rejected zone number
            details: Technical details about the failure
        """
        error_details = details or {}
        if zone_number is not None:
            error_details["zone_number"] = zone_number

        super().__init__(
            message=message,
            error_code="INVALID_ZONE",
            details=error_details,
            suggestions=["UTM zone numbers run from 1 to 60"],
        )


class MGRSError(GridRefException):
    """
    Base class for MGRS grid reference decoding failures.

    Decoding never returns a partial result; any of the subclasses below
    is raised as soon as the reference is found to be unusable.
    """

    default_suggestions = [
        "MGRS references look like 4QFJ12345678",
        "Use an even number of digits after the 100km square letters",
    ]

    def __init__(
        self,
        message: str,
        error_code: str,
        reference: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize MGRSError.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            reference: The grid reference being decoded
            details: Technical details about the decoding failure
            suggestions: List of suggestions for fixing the reference
        """
        error_details = details or {}
        if reference is not None:
            error_details["reference"] = reference

        super().__init__(
            message=message,
            error_code=error_code,
            details=error_details,
            suggestions=suggestions or list(self.default_suggestions),
        )


class MalformedReferenceError(MGRSError):
    """
    Raised when an MGRS reference has no usable structure.

    Empty strings, references without a zone number or zone letter, and
    references too short to hold a 100km square id end up here.
    """

    def __init__(
        self,
        message: str,
        reference: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="MALFORMED_REFERENCE",
            reference=reference,
            details=details,
        )


class InvalidZoneLetterError(MGRSError):
    """
    Raised for zone letters outside the C-X latitude bands.

    A, B, Y and Z are polar (UPS) letters; I and O are never used.
    """

    def __init__(
        self,
        message: str,
        zone_letter: Optional[str] = None,
        reference: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if zone_letter is not None:
            error_details["zone_letter"] = zone_letter

        super().__init__(
            message=message,
            error_code="INVALID_ZONE_LETTER",
            reference=reference,
            details=error_details,
            suggestions=["Zone letters run from C to X, skipping I and O"],
        )


class OddDigitCountError(MGRSError):
    """
    Raised when the numeric part of a reference cannot be split evenly.
    """

    def __init__(
        self,
        message: str,
        digit_count: Optional[int] = None,
        reference: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if digit_count is not None:
            error_details["digit_count"] = digit_count

        super().__init__(
            message=message,
            error_code="ODD_DIGIT_COUNT",
            reference=reference,
            details=error_details,
        )


class BadCharacterError(MGRSError):
    """
    Raised when a 100km square letter does not belong to the grid alphabet.
    """

    def __init__(
        self,
        message: str,
        character: Optional[str] = None,
        reference: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if character is not None:
            error_details["character"] = character

        super().__init__(
            message=message,
            error_code="BAD_CHARACTER",
            reference=reference,
            details=error_details,
        )


class ConfigurationError(GridRefException):
    """
    Raised when library configuration is invalid.

    Used for invalid environment variables or settings validation
    failures.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-friendly error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        default_suggestions = [
            "Check GRIDREF_* environment variables are set correctly",
            "Verify .env file syntax",
        ]

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
