"""Errors raised when a source no longer matches the expected schema."""


class AlignmentError(Exception):
    """Base class for structural problems that abort an alignment run."""


class UnsupportedCode(AlignmentError):
    """A source code has no counterpart in a closed domain enumeration."""

    def __init__(self, vocabulary: str, code: object):
        self.vocabulary = vocabulary
        self.code = code
        super().__init__(f"Unsupported {vocabulary} code: {code!r}")


class MissingField(AlignmentError):
    """A required field is absent from a source record."""

    def __init__(self, field: str, context: str):
        self.field = field
        self.context = context
        super().__init__(f"Missing required field {field!r} in {context}")


class MalformedField(AlignmentError):
    """A field is present but cannot be decoded."""

    def __init__(self, field: str, value: object, context: str):
        self.field = field
        self.value = value
        self.context = context
        super().__init__(f"Malformed field {field!r} in {context}: {value!r}")


class DanglingReference(AlignmentError):
    """Foreign keys of the merged model that do not resolve."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        preview = "; ".join(problems[:5])
        more = f" (and {len(problems) - 5} more)" if len(problems) > 5 else ""
        super().__init__(f"{len(problems)} dangling references: {preview}{more}")


class DuplicateId(AlignmentError):
    """Primary keys that occur more than once in the merged model."""

    def __init__(self, duplicates: list[str]):
        self.duplicates = duplicates
        preview = "; ".join(duplicates[:5])
        more = f" (and {len(duplicates) - 5} more)" if len(duplicates) > 5 else ""
        super().__init__(f"{len(duplicates)} duplicate ids: {preview}{more}")
