"""
Tests for the failures domain layer.

Covers the status-code table, message and code resolution, the domain
error hierarchy and response-date formatting. Pure functions only.
"""

from datetime import datetime, timedelta, timezone

import pytest

from fault_responder.domain.failures.dates import format_date, validate_pattern
from fault_responder.domain.failures.entities import (
    ErrorCategory,
    FailureContext,
    ResponderConfig,
    ResponseSlot,
)
from fault_responder.domain.failures.errors import (
    AuthorizationFailedError,
    FailureError,
    IrrecoverableError,
    RecoverableError,
    RequestValidationFailedError,
    TransformationError,
)
from fault_responder.domain.failures.policy import (
    extract_message,
    resolve_code,
    resolve_message,
    status_for,
)


class TestStatusCodes:
    """Tests for the category to HTTP status mapping."""

    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            (ErrorCategory.RECOVERABLE, 500),
            (ErrorCategory.IRRECOVERABLE, 500),
            (ErrorCategory.TRANSFORMATION, 500),
            (ErrorCategory.VALIDATION, 400),
            (ErrorCategory.AUTHORIZATION, 401),
        ],
    )
    def test_status_for_category(self, category: ErrorCategory, expected: int) -> None:
        """Each category maps to its fixed HTTP status."""
        assert status_for(category) == expected

    def test_every_category_is_mapped(self) -> None:
        """No category is missing from the status table."""
        for category in ErrorCategory:
            assert status_for(category) in (400, 401, 500)


class TestMessageResolution:
    """Tests for message extraction and fallback."""

    def test_plain_exception_message(self) -> None:
        """A plain exception reports its string form."""
        assert extract_message(RuntimeError("boom")) == "boom"

    def test_message_attribute_preferred(self) -> None:
        """A domain error reports its message attribute."""
        exc = TransformationError("bad payload")
        assert extract_message(exc) == "bad payload"

    def test_missing_message_is_empty(self) -> None:
        """A cause without a message yields an empty string."""
        assert extract_message(RuntimeError()) == ""
        assert extract_message(None) == ""

    def test_empty_message_falls_back_to_default(self) -> None:
        """An empty message resolves to the configured default."""
        context = FailureContext(exception=RuntimeError())
        message = resolve_message(context, ErrorCategory.VALIDATION, ResponderConfig())
        assert message == "Internal Exception Occurred"

    def test_category_override_wins_over_default(self) -> None:
        """A per-category message replaces the default for that category only."""
        config = ResponderConfig(
            category_messages={ErrorCategory.AUTHORIZATION: "Not allowed"}
        )
        context = FailureContext(exception=RuntimeError(""))
        assert resolve_message(context, ErrorCategory.AUTHORIZATION, config) == "Not allowed"
        assert (
            resolve_message(context, ErrorCategory.VALIDATION, config)
            == "Internal Exception Occurred"
        )

    def test_present_message_is_kept(self) -> None:
        """A non-empty cause message is reported unchanged."""
        context = FailureContext(exception=ValueError("timeout after 3 retries"))
        message = resolve_message(context, ErrorCategory.RECOVERABLE, ResponderConfig())
        assert message == "timeout after 3 retries"


class TestCodeResolution:
    """Tests for error code fallback."""

    def test_default_code_when_absent(self) -> None:
        """Without a caller code the configured default is used."""
        context = FailureContext(exception=RuntimeError())
        assert resolve_code(context, ResponderConfig(default_error_code="E9999")) == "E9999"

    def test_caller_code_used_verbatim(self) -> None:
        """A caller-supplied code is returned exactly as given."""
        context = FailureContext(exception=RuntimeError(), error_code=" V-042 ")
        assert resolve_code(context, ResponderConfig()) == " V-042 "


class TestDomainErrors:
    """Tests for domain error classes."""

    @pytest.mark.parametrize(
        ("error_cls", "category"),
        [
            (RecoverableError, ErrorCategory.RECOVERABLE),
            (IrrecoverableError, ErrorCategory.IRRECOVERABLE),
            (RequestValidationFailedError, ErrorCategory.VALIDATION),
            (AuthorizationFailedError, ErrorCategory.AUTHORIZATION),
            (TransformationError, ErrorCategory.TRANSFORMATION),
        ],
    )
    def test_category(self, error_cls: type[FailureError], category: ErrorCategory) -> None:
        """Each domain error declares its failure category."""
        assert error_cls("x").category is category

    def test_recoverable_error_keeps_attempts(self) -> None:
        """RecoverableError carries its attempt count and error code."""
        exc = RecoverableError("timeout", attempts=3, error_code="R001")
        assert exc.attempts == 3
        assert exc.error_code == "R001"
        assert str(exc) == "timeout"


class TestResponseSlot:
    """Tests for the response slot."""

    def test_content_type_lookup_is_case_insensitive(self) -> None:
        """Content type is found regardless of header name casing."""
        slot = ResponseSlot(headers={"content-type": "text/plain"})
        assert slot.content_type == "text/plain"

    def test_content_type_absent(self) -> None:
        """An empty slot has no content type."""
        assert ResponseSlot().content_type is None


class TestDateFormatting:
    """Tests for response-date patterns."""

    moment = datetime(2024, 3, 7, 14, 5, 9, 123000, tzinfo=timezone(timedelta(hours=1)))

    def test_java_style_date(self) -> None:
        """yyyy-MM-dd renders a zero-padded calendar date."""
        assert format_date(self.moment, "yyyy-MM-dd") == "2024-03-07"

    def test_java_style_with_quoted_literal(self) -> None:
        """Quoted text is copied and milliseconds and offset are rendered."""
        assert (
            format_date(self.moment, "yyyy-MM-dd'T'HH:mm:ss.SSSZ")
            == "2024-03-07T14:05:09.123+0100"
        )

    def test_twelve_hour_clock_and_names(self) -> None:
        """Day and month names, two-digit year and AM/PM marker render."""
        assert format_date(self.moment, "EEE, d MMM yy h:mm a") == "Thu, 7 Mar 24 2:05 PM"

    def test_escaped_quote(self) -> None:
        """Two single quotes produce one literal quote."""
        assert format_date(self.moment, "HH 'o''clock'") == "14 o'clock"

    def test_iso_offset(self) -> None:
        """XXX renders the UTC offset with a colon."""
        assert format_date(self.moment, "XXX") == "+01:00"

    def test_strftime_pattern(self) -> None:
        """Patterns containing % are passed to strftime."""
        assert format_date(self.moment, "%Y/%m/%d") == "2024/03/07"

    def test_illegal_letter_rejected(self) -> None:
        """An unquoted unsupported letter is rejected."""
        with pytest.raises(ValueError, match="Illegal pattern character"):
            validate_pattern("yyyy-MM-dd T")

    @pytest.mark.parametrize("pattern", ["yyyy 'T", "'it''s", "HH:mm'"])
    def test_unterminated_quote_rejected(self, pattern: str) -> None:
        """A quote that is never closed is rejected."""
        with pytest.raises(ValueError, match="Unterminated quote"):
            validate_pattern(pattern)
