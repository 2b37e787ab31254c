"""Template integration — attribute rendering, filters, and the method shim."""
