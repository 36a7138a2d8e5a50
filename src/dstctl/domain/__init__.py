"""Domain layer — pure CET/CEST rules, value types, and reservation checks."""
