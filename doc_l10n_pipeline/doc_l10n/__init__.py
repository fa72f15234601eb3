from .errors import RenderError, SchemaLoadError, SerializationError, UnknownTypeError
from .schema_loader import SchemaField, SchemaRegistry, SchemaType
from .serializer import BaseDocumentSerializer, SerializedDocument, serialize_document
from .serializer_table import SerializerTable

__all__ = [
    "BaseDocumentSerializer",
    "RenderError",
    "SchemaField",
    "SchemaLoadError",
    "SchemaRegistry",
    "SchemaType",
    "SerializationError",
    "SerializedDocument",
    "SerializerTable",
    "UnknownTypeError",
    "serialize_document",
]
