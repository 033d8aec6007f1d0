"""Data model and execution: types, errors, configuration, table and engine."""
