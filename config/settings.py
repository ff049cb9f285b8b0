"""
Typed model of the persisted configuration document.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DOMAIN = "test"
DEFAULT_PORT = "80"


class ConfigurationDocument(BaseModel):
    """The contents of config.json.

    Known keys are typed fields. Any other top-level key is kept as an extra
    field so it survives a read/modify/write cycle untouched.
    """

    model_config = ConfigDict(
        extra="allow",
        validate_assignment=True,
        coerce_numbers_to_str=True,
    )

    domain: str = DEFAULT_DOMAIN
    paths: list[str] = Field(default_factory=list)
    port: str = DEFAULT_PORT

    def has(self, key: str) -> bool:
        """Whether the key was present in the stored document or set since."""
        return key in self.model_fields_set or key in (self.model_extra or {})

    def value(self, key: str, default: Any = None) -> Any:
        """Get the stored value for a key, or the default when absent."""
        if not self.has(key):
            return default
        if key in type(self).model_fields:
            return getattr(self, key)
        return self.model_extra[key]

    def assign(self, key: str, value: Any) -> None:
        """Set a key, validating it when it is a known field."""
        if key in type(self).model_fields:
            setattr(self, key, value)
        else:
            self.model_extra[key] = value

    def to_json(self) -> dict[str, Any]:
        """Get the document as plain JSON-compatible data."""
        return self.model_dump(mode="json")


def base_document() -> ConfigurationDocument:
    """Get the document written on a fresh install."""
    return ConfigurationDocument(domain=DEFAULT_DOMAIN, paths=[], port=DEFAULT_PORT)
