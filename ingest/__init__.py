# Text-to-record ingestion pipeline: parser, schema provisioner, bulk loader
from .parser import ParsedVerse, parse_verse_line
from .schema import SchemaProvisioner, ProvisioningError
from .loader import BulkLoader, LoadResult

__all__ = [
    'ParsedVerse',
    'parse_verse_line',
    'SchemaProvisioner',
    'ProvisioningError',
    'BulkLoader',
    'LoadResult',
]
