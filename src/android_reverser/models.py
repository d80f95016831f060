import re

from pydantic import BaseModel, ConfigDict, field_validator

# R.java, r.JAVA, R$string.java; the category after "$" stays lowercase.
DEFAULT_RESOURCE_NAME_PATTERN = r"R(?:\$(?-i:[a-z]+))?\.java"
DEFAULT_SOURCE_EXTENSION = ".java"
DEFAULT_DECLARATION_KEYWORD = "package"

_FLAGS = re.IGNORECASE | re.ASCII


class SourceSetConfig(BaseModel):
    """Naming conventions used to locate and classify files in a source set.

    ``resource_name_pattern`` is matched against whole file names with
    ASCII case-insensitivity. ``exact_package`` switches the package test
    from a literal prefix match to a dot-boundary-aware equality test.
    """

    model_config = ConfigDict(frozen=True)

    extension: str = DEFAULT_SOURCE_EXTENSION
    resource_name_pattern: str = DEFAULT_RESOURCE_NAME_PATTERN
    declaration_keyword: str = DEFAULT_DECLARATION_KEYWORD
    exact_package: bool = False
    follow_symlinks: bool = False

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if len(value) < 2 or not value.startswith("."):
            raise ValueError(f"Extension must look like '.java', got {value!r}")
        return value

    @field_validator("resource_name_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value, _FLAGS)
        except re.error as exc:
            raise ValueError(f"Invalid resource name pattern {value!r}: {exc}") from None
        return value

    @field_validator("declaration_keyword")
    @classmethod
    def _check_keyword(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Declaration keyword must not be blank")
        return value.strip()

    def resource_regex(self) -> re.Pattern[str]:
        return re.compile(self.resource_name_pattern, _FLAGS)

    def declaration_regex(self, package: str) -> re.Pattern[str]:
        """Build the whole-line pattern for a declaration of *package*.

        The query is a literal. In prefix mode anything may follow it before
        the closing semicolon, so ``com.domain.alpha`` also matches
        ``com.domain.alphabet``.
        """
        tail = r"\s*;" if self.exact_package else r".*;"
        return re.compile(rf"{re.escape(self.declaration_keyword)}\s+{re.escape(package)}{tail}", _FLAGS)


DEFAULT_CONFIG = SourceSetConfig()
