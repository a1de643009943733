"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode, SourceSpan


def _format_parameters(names: Iterable[str]) -> str:
    """Render a parameter set as {a, b} in sorted order."""
    return "{" + ", ".join(sorted(names)) + "}"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_language(value: str) -> Diagnostic:
        """Language identifier is not a two-letter ASCII code.

        Args:
            value: The rejected identifier as supplied

        Returns:
            Diagnostic for INVALID_LANGUAGE
        """
        msg = f"'{value}' is not a valid language identifier"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE,
            message=msg,
            hint="Use an ISO 639-1 two-letter code such as 'en' or 'fr'",
            language=value,
        )

    @staticmethod
    def missing_source() -> Diagnostic:
        """No translation source registered."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_SOURCE,
            message="At least one translation source is required",
            hint="Register sources with source(language, path)",
        )

    @staticmethod
    def duplicate_language(language: str) -> Diagnostic:
        """Same language registered twice.

        Args:
            language: The duplicated language identifier

        Returns:
            Diagnostic for DUPLICATE_LANGUAGE
        """
        msg = f"Language '{language}' is registered more than once"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_LANGUAGE,
            message=msg,
            hint="Register each language with exactly one source",
            language=language,
        )

    @staticmethod
    def fallback_not_set() -> Diagnostic:
        """No fallback language configured."""
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_NOT_SET,
            message="A fallback language must be provided",
            hint="Designate the fallback with fallback(language)",
        )

    @staticmethod
    def fallback_not_registered(language: str) -> Diagnostic:
        """Fallback language has no registered source.

        Args:
            language: The configured fallback language

        Returns:
            Diagnostic for FALLBACK_NOT_REGISTERED
        """
        msg = f"No source corresponding to the fallback language '{language}' was found"
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_NOT_REGISTERED,
            message=msg,
            hint="Register a source for the fallback language",
            language=language,
        )

    @staticmethod
    def invalid_type_name(name: str, reason: str) -> Diagnostic:
        """Selector type name unusable in generated code.

        Args:
            name: The configured type name
            reason: Why the name was rejected

        Returns:
            Diagnostic for INVALID_TYPE_NAME
        """
        msg = f"'{name}' cannot be used as the generated type name: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TYPE_NAME,
            message=msg,
            hint="Use a class name such as 'Lang'",
        )

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    @staticmethod
    def source_read_failed(language: str, origin: str, error_msg: str) -> Diagnostic:
        """Source could not be read.

        Args:
            language: Language identifier of the source
            origin: Location that failed
            error_msg: Underlying OS error message

        Returns:
            Diagnostic for SOURCE_READ_FAILED
        """
        msg = f"Failed to read source for language '{language}': {error_msg}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_READ_FAILED,
            message=msg,
            hint="Check that the file exists and is readable",
            language=language,
            origin=origin,
        )

    @staticmethod
    def source_invalid_json(
        language: str, origin: str, error_msg: str, line: int, column: int
    ) -> Diagnostic:
        """Source text is not valid JSON.

        Args:
            language: Language identifier of the source
            origin: Location of the source
            error_msg: Decoder error message
            line: 1-indexed line reported by the decoder
            column: 1-indexed column reported by the decoder

        Returns:
            Diagnostic for SOURCE_INVALID_JSON
        """
        msg = f"Source for language '{language}' is not valid JSON: {error_msg}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_INVALID_JSON,
            message=msg,
            language=language,
            origin=f"{origin}:{line}:{column}",
        )

    @staticmethod
    def source_not_an_object(language: str, origin: str, found: str) -> Diagnostic:
        """Decoded document root is not a mapping.

        Args:
            language: Language identifier of the source
            origin: Location of the source
            found: Type name of the decoded root

        Returns:
            Diagnostic for SOURCE_NOT_AN_OBJECT
        """
        msg = f"Source for language '{language}' must be an object at the root"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_NOT_AN_OBJECT,
            message=msg,
            hint='Translation files map keys to templates: {"hello": "Hello!"}',
            language=language,
            origin=origin,
            expected="object",
            received=found,
        )

    @staticmethod
    def source_nested_value(language: str, origin: str, key: str, found: str) -> Diagnostic:
        """A value is a nested object or array.

        Args:
            language: Language identifier of the source
            origin: Location of the source
            key: Key holding the nested value
            found: Type name of the value

        Returns:
            Diagnostic for SOURCE_NESTED_VALUE
        """
        msg = f"Key '{key}' in language '{language}' has a nested value"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_NESTED_VALUE,
            message=msg,
            hint="Nested keys are not supported; flatten them into distinct keys",
            language=language,
            key=key,
            origin=origin,
            expected="string",
            received=found,
        )

    @staticmethod
    def source_non_string_value(
        language: str, origin: str, key: str, found: str
    ) -> Diagnostic:
        """A value is not a string.

        Args:
            language: Language identifier of the source
            origin: Location of the source
            key: Key holding the value
            found: Type name of the value

        Returns:
            Diagnostic for SOURCE_NON_STRING_VALUE
        """
        msg = f"Key '{key}' in language '{language}' has an invalid type"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_NON_STRING_VALUE,
            message=msg,
            hint="Every value must be a template string",
            language=language,
            key=key,
            origin=origin,
            expected="string",
            received=found,
        )

    @staticmethod
    def source_too_large(language: str, origin: str, size: int, limit: int) -> Diagnostic:
        """Source exceeds the size limit.

        Args:
            language: Language identifier of the source
            origin: Location of the source
            size: Actual size in characters
            limit: Maximum accepted size

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source for language '{language}' is {size} characters (limit: {limit})"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            language=language,
            origin=origin,
        )

    # ------------------------------------------------------------------
    # Template syntax
    # ------------------------------------------------------------------

    @staticmethod
    def unmatched_open_brace(language: str, key: str, span: SourceSpan) -> Diagnostic:
        """Placeholder opened with '{' but never closed.

        Args:
            language: Language identifier of the template
            key: Key owning the template
            span: Location of the opening brace

        Returns:
            Diagnostic for UNMATCHED_OPEN_BRACE
        """
        msg = f"Unmatched '{{' at offset {span.start} in key '{key}' ({language})"
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_OPEN_BRACE,
            message=msg,
            span=span,
            hint="Close the placeholder with '}'; literal braces are not supported",
            language=language,
            key=key,
        )

    @staticmethod
    def unmatched_close_brace(language: str, key: str, span: SourceSpan) -> Diagnostic:
        """A '}' appears outside any placeholder.

        Args:
            language: Language identifier of the template
            key: Key owning the template
            span: Location of the closing brace

        Returns:
            Diagnostic for UNMATCHED_CLOSE_BRACE
        """
        msg = f"Unmatched '}}' at offset {span.start} in key '{key}' ({language})"
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_CLOSE_BRACE,
            message=msg,
            span=span,
            hint="Remove the brace; literal braces are not supported",
            language=language,
            key=key,
        )

    @staticmethod
    def empty_placeholder(language: str, key: str, span: SourceSpan) -> Diagnostic:
        """Placeholder with nothing between the braces.

        Args:
            language: Language identifier of the template
            key: Key owning the template
            span: Location of the placeholder

        Returns:
            Diagnostic for EMPTY_PLACEHOLDER
        """
        msg = f"Empty placeholder at offset {span.start} in key '{key}' ({language})"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_PLACEHOLDER,
            message=msg,
            span=span,
            hint="Name the placeholder: {name}",
            language=language,
            key=key,
        )

    @staticmethod
    def invalid_placeholder(
        language: str, key: str, name: str, span: SourceSpan
    ) -> Diagnostic:
        """Placeholder interior is not an identifier.

        Args:
            language: Language identifier of the template
            key: Key owning the template
            name: Text found between the braces
            span: Location of the offending character

        Returns:
            Diagnostic for INVALID_PLACEHOLDER
        """
        msg = (
            f"Invalid placeholder name '{name}' at offset {span.start} "
            f"in key '{key}' ({language})"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLACEHOLDER,
            message=msg,
            span=span,
            hint="Placeholder names use letters, digits and underscores, not starting with a digit",
            language=language,
            key=key,
        )

    # ------------------------------------------------------------------
    # Model validation
    # ------------------------------------------------------------------

    @staticmethod
    def parameter_mismatch(
        key: str,
        language: str,
        expected: Iterable[str],
        actual: Iterable[str],
    ) -> Diagnostic:
        """Override parameters differ from the fallback's.

        Args:
            key: The translation key
            language: Language defining the mismatching override
            expected: Canonical parameter names from the fallback
            actual: Parameter names found in the override

        Returns:
            Diagnostic for PARAMETER_MISMATCH
        """
        msg = f"Key '{key}' in language '{language}' has mismatched parameters"
        return Diagnostic(
            code=DiagnosticCode.PARAMETER_MISMATCH,
            message=msg,
            hint="Use exactly the placeholders of the fallback template",
            language=language,
            key=key,
            expected=_format_parameters(expected),
            received=_format_parameters(actual),
        )

    @staticmethod
    def invalid_key(key: str, language: str, reason: str) -> Diagnostic:
        """Key cannot become an accessor name.

        Args:
            key: The rejected key
            language: Language whose source defines the key
            reason: Why the key was rejected

        Returns:
            Diagnostic for INVALID_KEY
        """
        msg = f"Key '{key}' in language '{language}' cannot be used as an accessor: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY,
            message=msg,
            hint="Rename the key to a lowercase identifier such as 'hello_name'",
            language=language,
            key=key,
        )

    @staticmethod
    def invalid_parameter(key: str, language: str, name: str, reason: str) -> Diagnostic:
        """Placeholder cannot become an accessor parameter.

        Args:
            key: Key owning the template
            language: Language of the template
            name: The placeholder name
            reason: Why the name was rejected

        Returns:
            Diagnostic for INVALID_PARAMETER
        """
        msg = (
            f"Placeholder '{name}' of key '{key}' in language '{language}' "
            f"cannot be used as a parameter: {reason}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_PARAMETER,
            message=msg,
            hint="Rename the placeholder",
            language=language,
            key=key,
        )

    @staticmethod
    def unknown_key(key: str, language: str, fallback: str) -> Diagnostic:
        """Key missing from the fallback (strict mode).

        Args:
            key: The unknown key
            language: Language defining the key
            fallback: The fallback language

        Returns:
            Diagnostic for UNKNOWN_KEY
        """
        msg = f"Key '{key}' exists in '{language}' but not in fallback language '{fallback}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_KEY,
            message=msg,
            hint=f"Add '{key}' to the '{fallback}' source or remove it from '{language}'",
            language=language,
            key=key,
        )

    @staticmethod
    def unknown_key_dropped(key: str, language: str, fallback: str) -> Diagnostic:
        """Key missing from the fallback, dropped from the model.

        Args:
            key: The dropped key
            language: Language defining the key
            fallback: The fallback language

        Returns:
            Warning diagnostic for UNKNOWN_KEY_DROPPED
        """
        msg = f"Key '{key}' exists in '{language}' but not in fallback language '{fallback}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_KEY_DROPPED,
            message=msg,
            hint="The key is ignored; the fallback language defines the available keys",
            language=language,
            key=key,
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @staticmethod
    def output_write_failed(path: str, error_msg: str) -> Diagnostic:
        """Generated module could not be written.

        Args:
            path: Destination path
            error_msg: Underlying OS error message

        Returns:
            Diagnostic for OUTPUT_WRITE_FAILED
        """
        msg = f"Failed to write output: {error_msg}"
        return Diagnostic(
            code=DiagnosticCode.OUTPUT_WRITE_FAILED,
            message=msg,
            origin=path,
        )
