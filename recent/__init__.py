"""recent: list recently modified files."""
