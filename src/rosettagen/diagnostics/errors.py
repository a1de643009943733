"""rosettagen exception hierarchy with structured diagnostics.

Every failure of the generation pipeline is raised as a RosettaError
subclass. Instances carry a Diagnostic with the language, key and offset
needed to locate the problem without re-parsing the sources.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from rosettagen.enums import FormatViolation

from .codes import Diagnostic


class RosettaError(Exception):
    """Base exception for all rosettagen errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize RosettaError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


# ============================================================================
# CONFIGURATION
# ============================================================================


class RosettaConfigError(RosettaError):
    """Builder configuration is invalid.

    Raised by RosettaBuilder.build() before any source is read.
    """


class InvalidLanguageError(RosettaConfigError):
    """Language identifier is not a two-letter ASCII code."""


class MissingSourceError(RosettaConfigError):
    """No translation source was registered."""


class DuplicateLanguageError(RosettaConfigError):
    """The same language was registered more than once.

    Attributes:
        language: The duplicated language identifier
    """

    def __init__(self, message: str | Diagnostic, *, language: str = "") -> None:
        super().__init__(message)
        self.language = language


class MissingFallbackError(RosettaConfigError):
    """No fallback configured, or the fallback has no registered source.

    Attributes:
        language: The configured fallback ("" when none was set)
    """

    def __init__(self, message: str | Diagnostic, *, language: str = "") -> None:
        super().__init__(message)
        self.language = language


class InvalidTypeNameError(RosettaConfigError):
    """Configured selector type name cannot be used in generated code."""


# ============================================================================
# SOURCES
# ============================================================================


class SourceIOError(RosettaError):
    """Translation source is unreachable or unreadable.

    The underlying OSError is chained as __cause__.

    Attributes:
        language: Language whose source failed
        origin: Location that failed
    """

    def __init__(
        self, message: str | Diagnostic, *, language: str = "", origin: str = ""
    ) -> None:
        super().__init__(message)
        self.language = language
        self.origin = origin


class SourceFormatError(RosettaError):
    """Decoded source content is not a flat mapping of strings to strings.

    Attributes:
        language: Language whose source is malformed
        violation: Nature of the violation
        key: Offending key ("" for root-level violations)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        language: str = "",
        violation: FormatViolation,
        key: str = "",
    ) -> None:
        super().__init__(message)
        self.language = language
        self.violation = violation
        self.key = key


# ============================================================================
# TEMPLATES AND MODEL
# ============================================================================


class TemplateSyntaxError(RosettaError):
    """Malformed placeholder syntax in a template string.

    When several templates fail, the model builder raises the error for the
    first language then key, and attaches every collected error to ``errors``.

    Attributes:
        language: Language of the template
        key: Key owning the template
        offset: 0-indexed character offset of the offending character
        errors: All syntax errors collected in the same run (self included)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        language: str = "",
        key: str = "",
        offset: int = 0,
    ) -> None:
        super().__init__(message)
        self.language = language
        self.key = key
        self.offset = offset
        self.errors: tuple[TemplateSyntaxError, ...] = (self,)

    def with_errors(self, errors: Sequence["TemplateSyntaxError"]) -> "TemplateSyntaxError":
        """Attach the full list of collected errors and return self."""
        self.errors = tuple(errors)
        return self


class ParameterMismatchError(RosettaError):
    """Override template parameters differ from the fallback's.

    Attributes:
        key: The translation key
        language: Language defining the mismatching override
        expected: Canonical parameter names (sorted)
        actual: Parameter names of the override (sorted)
        missing: Expected names absent from the override
        unknown: Override names absent from the fallback
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        key: str,
        language: str,
        expected: Sequence[str],
        actual: Sequence[str],
    ) -> None:
        super().__init__(message)
        self.key = key
        self.language = language
        self.expected = tuple(sorted(expected))
        self.actual = tuple(sorted(actual))
        self.missing = tuple(n for n in self.expected if n not in self.actual)
        self.unknown = tuple(n for n in self.actual if n not in self.expected)


class InvalidIdentifierError(RosettaError):
    """Key or placeholder name cannot be used in generated code.

    Attributes:
        language: Language whose source defines the name
        key: Key involved
    """

    def __init__(
        self, message: str | Diagnostic, *, language: str = "", key: str = ""
    ) -> None:
        super().__init__(message)
        self.language = language
        self.key = key


class UnknownKeyError(RosettaError):
    """Key defined by a non-fallback language only (strict mode).

    Attributes:
        language: Language defining the key
        key: The unknown key
    """

    def __init__(
        self, message: str | Diagnostic, *, language: str = "", key: str = ""
    ) -> None:
        super().__init__(message)
        self.language = language
        self.key = key


# ============================================================================
# OUTPUT
# ============================================================================


class OutputWriteError(RosettaError):
    """Generated module could not be written by the output sink."""
