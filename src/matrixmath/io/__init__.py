"""
Storage adapters for matrices (SQL tables and HDF5 files).
These depend on the model; the model never depends on them.
"""
