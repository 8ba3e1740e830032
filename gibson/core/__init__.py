"""GIB parsing core: grammar, extraction and the document model."""
