"""Named constants shared across Filebind modules."""
