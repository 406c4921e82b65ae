"""Configuration, logging and error helpers shared by the description modules."""
