"""Application – search, pagination and the query pipeline."""
