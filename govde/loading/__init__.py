"""Loading of bundled and caller-supplied data files."""
