"""
Client-side index schema model for RediSearch-style search engines.

- schema: field types, per-field and index options, the Schema builder
- config: default index options and logging settings from the environment
- observability: structured JSON logging
"""

from redisearch_schema.schema import (
    DEFAULT_OPTIONS,
    Field,
    FieldOptions,
    FieldType,
    NumericFieldOptions,
    Options,
    Schema,
    SchemaError,
    TagFieldOptions,
    TextFieldOptions,
    new_geo_field,
    new_numeric_field,
    new_numeric_field_options,
    new_schema,
    new_sortable_numeric_field,
    new_sortable_text_field,
    new_tag_field,
    new_tag_field_options,
    new_text_field,
    new_text_field_options,
)


__all__ = [
    "DEFAULT_OPTIONS",
    "Field",
    "FieldOptions",
    "FieldType",
    "NumericFieldOptions",
    "Options",
    "Schema",
    "SchemaError",
    "TagFieldOptions",
    "TextFieldOptions",
    "new_geo_field",
    "new_numeric_field",
    "new_numeric_field_options",
    "new_schema",
    "new_sortable_numeric_field",
    "new_sortable_text_field",
    "new_tag_field",
    "new_tag_field_options",
    "new_text_field",
    "new_text_field_options",
]
