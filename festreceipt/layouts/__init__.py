"""Receipt layouts."""
