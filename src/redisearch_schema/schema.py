"""
Index schema definition for RediSearch-style engines.

A schema describes how an index treats the documents sent to it:
- FieldType: the closed set of field kinds (text, numeric, geo, tag)
- Options: index-wide flags and the stop-word list
- TextFieldOptions / TagFieldOptions / NumericFieldOptions: per-type options
- Field: one named, typed entry carrying the options of its type
- Schema: ordered fields plus index options, built incrementally

Nothing here talks to the engine. The transmission layer turns a Schema
(or its ``to_dict()`` form) into engine commands.

Example:
    schema = (
        new_schema(DEFAULT_OPTIONS)
        .add_field(new_sortable_text_field("title", 2.0))
        .add_field(new_text_field("body"))
        .add_field(new_tag_field("tags"))
        .add_field(new_sortable_numeric_field("price"))
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Any, Union


logger = logging.getLogger(__name__)


class SchemaError(ValueError):
    """Raised for structurally invalid fields or schema data."""


class FieldType(str, Enum):
    """Types of fields supported by the engine."""

    TEXT = "text"
    NUMERIC = "numeric"
    GEO = "geo"
    TAG = "tag"


@dataclass(frozen=True)
class Options:
    """
    Index-wide options, set once when the schema is created.

    Args:
        no_save: Index documents without storing their original values
        no_field_flags: Skip per-field bits (disables filtering by field)
        no_frequencies: Skip term frequencies (disables frequency ranking)
        no_offset_vectors: Skip term offsets (disables exact phrase search and highlighting)
        stopwords: Custom stop-words; None keeps the engine's default list
    """

    no_save: bool = False
    no_field_flags: bool = False
    no_frequencies: bool = False
    no_offset_vectors: bool = False
    stopwords: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.stopwords is None or isinstance(self.stopwords, tuple):
            return
        if isinstance(self.stopwords, (str, bytes)):
            msg = f"Stop-words must be a sequence of words, got {type(self.stopwords).__name__} {self.stopwords!r}"
            raise SchemaError(msg)
        object.__setattr__(self, "stopwords", tuple(self.stopwords))

    def to_dict(self) -> dict[str, Any]:
        """Serialize options to dict."""
        return {
            "no_save": self.no_save,
            "no_field_flags": self.no_field_flags,
            "no_frequencies": self.no_frequencies,
            "no_offset_vectors": self.no_offset_vectors,
            "stopwords": list(self.stopwords) if self.stopwords is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Options:
        """Deserialize options from dict."""
        if not isinstance(data, dict):
            msg = f"Schema options must be a dict, got {type(data).__name__}"
            raise SchemaError(msg)
        return cls(
            no_save=data.get("no_save", False),
            no_field_flags=data.get("no_field_flags", False),
            no_frequencies=data.get("no_frequencies", False),
            no_offset_vectors=data.get("no_offset_vectors", False),
            stopwords=data.get("stopwords"),
        )


DEFAULT_OPTIONS = Options()


@dataclass(frozen=True)
class TextFieldOptions:
    """
    Options for full-text fields.

    Args:
        weight: Field weight in scoring (default: 1.0)
        sortable: Keep a sort-optimized copy of the value
        no_stem: Disable stemming for this field
        no_index: Store the value without indexing it
    """

    weight: float = 1.0
    sortable: bool = False
    no_stem: bool = False
    no_index: bool = False

    @property
    def field_type(self) -> FieldType:
        return FieldType.TEXT


@dataclass(frozen=True)
class TagFieldOptions:
    """
    Options for tag fields.

    Args:
        separator: Character splitting the raw value into tags (default: ",")
        no_index: Store the value without indexing it
        sortable: Keep a sort-optimized copy of the value
    """

    separator: str = ","
    no_index: bool = False
    sortable: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            msg = f"Tag separator must be a single character, got {self.separator!r}"
            raise SchemaError(msg)

    @property
    def field_type(self) -> FieldType:
        return FieldType.TAG


@dataclass(frozen=True)
class NumericFieldOptions:
    """Options for numeric range fields."""

    sortable: bool = False
    no_index: bool = False

    @property
    def field_type(self) -> FieldType:
        return FieldType.NUMERIC


FieldOptions = Union[TextFieldOptions, TagFieldOptions, NumericFieldOptions]

_OPTIONS_BY_TYPE: dict[FieldType, type | None] = {
    FieldType.TEXT: TextFieldOptions,
    FieldType.NUMERIC: NumericFieldOptions,
    FieldType.TAG: TagFieldOptions,
    FieldType.GEO: None,
}


@dataclass(frozen=True)
class Field:
    """
    A single field of an index schema.

    The options variant must belong to ``type``. When ``options`` is omitted
    the default variant for the type is used; geo fields never carry options.
    """

    name: str
    type: FieldType
    options: FieldOptions | None = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "type", FieldType(self.type))
        except (TypeError, ValueError) as exc:
            msg = f"Field '{self.name}' has unknown type {self.type!r}"
            raise SchemaError(msg) from exc

        options_cls = _OPTIONS_BY_TYPE[self.type]
        if self.options is None:
            if options_cls is not None:
                object.__setattr__(self, "options", options_cls())
            return
        if options_cls is None or not isinstance(self.options, options_cls):
            msg = f"Field '{self.name}' of type {self.type.value} cannot take {type(self.options).__name__}"
            raise SchemaError(msg)

    @property
    def sortable(self) -> bool:
        """Whether the engine keeps a sort-optimized copy of this field."""
        return bool(self.options is not None and self.options.sortable)

    def to_dict(self) -> dict[str, Any]:
        """Serialize field definition to dict."""
        data: dict[str, Any] = {"name": self.name, "type": self.type.value}
        if isinstance(self.options, TextFieldOptions):
            data.update(
                weight=self.options.weight,
                sortable=self.options.sortable,
                no_stem=self.options.no_stem,
                no_index=self.options.no_index,
            )
        elif isinstance(self.options, TagFieldOptions):
            data.update(
                separator=self.options.separator,
                no_index=self.options.no_index,
                sortable=self.options.sortable,
            )
        elif isinstance(self.options, NumericFieldOptions):
            data.update(sortable=self.options.sortable, no_index=self.options.no_index)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Field:
        """Deserialize field definition from dict."""
        if not isinstance(data, dict):
            msg = f"Field definition must be a dict, got {type(data).__name__}"
            raise SchemaError(msg)
        try:
            name = data["name"]
            field_type = FieldType(data["type"])
        except KeyError as exc:
            msg = f"Field definition is missing {exc.args[0]!r}"
            raise SchemaError(msg) from exc
        except ValueError as exc:
            raise SchemaError(str(exc)) from exc

        if field_type == FieldType.TEXT:
            options: FieldOptions | None = TextFieldOptions(
                weight=data.get("weight", 1.0),
                sortable=data.get("sortable", False),
                no_stem=data.get("no_stem", False),
                no_index=data.get("no_index", False),
            )
        elif field_type == FieldType.TAG:
            options = TagFieldOptions(
                separator=data.get("separator", ","),
                no_index=data.get("no_index", False),
                sortable=data.get("sortable", False),
            )
        elif field_type == FieldType.NUMERIC:
            options = NumericFieldOptions(
                sortable=data.get("sortable", False),
                no_index=data.get("no_index", False),
            )
        else:
            options = None
        return cls(name=name, type=field_type, options=options)


@dataclass
class Schema:
    """
    Schema of a search index: how the index treats documents sent to it.

    Fields keep their declaration order, which engines use for output
    ordering. The schema only grows through ``add_field``; there is no
    removal or lookup by name, and duplicate names are left for the
    engine to reject.
    """

    fields: list[Field] = field(default_factory=list)
    options: Options = DEFAULT_OPTIONS

    def __iter__(self):
        """Iterate over fields in declaration order."""
        return iter(self.fields)

    def __len__(self) -> int:
        """Return number of fields."""
        return len(self.fields)

    def add_field(self, f: Field) -> Schema:
        """Append a field and return this schema for chaining."""
        if self.fields is None:
            self.fields = []
        self.fields.append(f)
        position = len(self.fields) - 1
        logger.debug(
            "Added %s field '%s' (position %d)",
            f.type.value,
            f.name,
            position,
            extra={"field": f.name, "field_type": f.type.value, "position": position, "sortable": f.sortable},
        )
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize schema to dict."""
        return {
            "options": self.options.to_dict(),
            "fields": [f.to_dict() for f in self.fields],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Schema:
        """Deserialize schema from dict."""
        if not isinstance(data, dict):
            msg = f"Schema definition must be a dict, got {type(data).__name__}"
            raise SchemaError(msg)
        fields = data.get("fields", [])
        if not isinstance(fields, list):
            msg = "Schema 'fields' must be a list"
            raise SchemaError(msg)
        return cls(
            fields=[Field.from_dict(f) for f in fields],
            options=Options.from_dict(data.get("options") or {}),
        )


def new_schema(options: Options = DEFAULT_OPTIONS) -> Schema:
    """Create an empty schema using the given index options."""
    return Schema(fields=[], options=options)


def new_text_field(name: str) -> Field:
    """Create a text field with default options."""
    return Field(name=name, type=FieldType.TEXT, options=TextFieldOptions())


def new_text_field_options(name: str, opts: TextFieldOptions) -> Field:
    """Create a text field with the given options (weight, sortable, ...)."""
    return Field(name=name, type=FieldType.TEXT, options=opts)


def new_sortable_text_field(name: str, weight: float) -> Field:
    """Create a sortable text field with the given weight."""
    return new_text_field_options(name, TextFieldOptions(weight=weight, sortable=True))


def new_tag_field(name: str) -> Field:
    """Create a tag field with default options (separator: ",")."""
    return Field(name=name, type=FieldType.TAG, options=TagFieldOptions(separator=",", no_index=False))


def new_tag_field_options(name: str, opts: TagFieldOptions) -> Field:
    """Create a tag field with the given options."""
    return Field(name=name, type=FieldType.TAG, options=opts)


def new_numeric_field(name: str) -> Field:
    """Create a numeric range field with default options."""
    return Field(name=name, type=FieldType.NUMERIC, options=NumericFieldOptions())


def new_numeric_field_options(name: str, opts: NumericFieldOptions) -> Field:
    """Create a numeric field with the given options."""
    return Field(name=name, type=FieldType.NUMERIC, options=opts)


def new_sortable_numeric_field(name: str) -> Field:
    """Create a numeric field with the sortable flag set."""
    return new_numeric_field_options(name, NumericFieldOptions(sortable=True))


def new_geo_field(name: str) -> Field:
    """Create a geo point field. Geo fields carry no options."""
    return Field(name=name, type=FieldType.GEO)
