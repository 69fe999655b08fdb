"""Service layer composing the skeleton pipeline."""
