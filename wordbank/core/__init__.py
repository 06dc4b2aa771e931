"""Domain primitives shared by models and schemas."""
