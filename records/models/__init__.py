"""Record types: dataclass entities and pydantic persisted schemas."""
